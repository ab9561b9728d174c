"""Logging setup for the ``quickbar`` logger tree.

Handlers are attached to the ``quickbar`` logger only, never to the root
logger, so a host application keeps control of its own logging. Every
``try_import`` call runs under a correlation ID, and each record emitted
during that call carries it.
"""
import json
import logging
import logging.handlers
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

PACKAGE_LOGGER = "quickbar"
NO_CORRELATION_ID = "no-correlation-id"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(correlation_id)s - %(message)s"

_correlation_id: ContextVar[Optional[str]] = ContextVar("quickbar_correlation_id", default=None)

# Attributes every LogRecord has; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message", "asctime", "correlation_id",
}


class CorrelationIDFilter(logging.Filter):
    """Stamp the active correlation ID onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = _correlation_id.get() or NO_CORRELATION_ID
        return True


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", NO_CORRELATION_ID),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc),
                "traceback": self.formatException(record.exc_info),
            }
        extra = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        if extra:
            entry["extra"] = extra
        return json.dumps(entry, default=str, ensure_ascii=False)


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        logging.getLogger(PACKAGE_LOGGER).warning(f"Unknown log level '{log_level}', using INFO")
        return logging.INFO
    return level


class LoggingManager:
    """Installs and removes the handlers of the ``quickbar`` logger."""

    def __init__(self):
        self._handlers: List[logging.Handler] = []
        self._configured = False

    @property
    def configured(self) -> bool:
        return self._configured

    def configure(
        self,
        log_level: str = "INFO",
        log_dir: Optional[Union[str, Path]] = None,
        enable_console_logging: bool = True,
        structured_logging: bool = False,
        max_file_size: int = 5 * 1024 * 1024,  # 5MB
        backup_count: int = 3,
    ) -> None:
        """Configure the ``quickbar`` logger.

        Calling this again replaces the handlers of the previous call.

        Args:
            log_level: Logging level name; unknown names fall back to INFO
            log_dir: Directory for a rotating ``quickbar.log``; no file logging when empty
            enable_console_logging: Log to stdout
            structured_logging: Write JSON records instead of text lines
            max_file_size: Size in bytes at which the log file rotates
            backup_count: Number of rotated files to keep
        """
        self.shutdown()

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        level = _resolve_level(log_level)
        package_logger.setLevel(level)
        formatter = StructuredFormatter() if structured_logging else logging.Formatter(LOG_FORMAT)

        if enable_console_logging:
            self._install(logging.StreamHandler(sys.stdout), level, formatter)
        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            self._install(
                logging.handlers.RotatingFileHandler(
                    log_path / f"{PACKAGE_LOGGER}.log",
                    maxBytes=max_file_size,
                    backupCount=backup_count,
                    encoding="utf-8",
                ),
                level,
                formatter,
            )

        self._configured = True
        package_logger.debug(f"Logging configured: level={logging.getLevelName(level)}, "
                             f"file={bool(log_dir)}, structured={structured_logging}")

    def _install(self, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(CorrelationIDFilter())
        logging.getLogger(PACKAGE_LOGGER).addHandler(handler)
        self._handlers.append(handler)

    def shutdown(self) -> None:
        """Detach and close every handler installed by :meth:`configure`."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in self._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        self._configured = False


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(**kwargs) -> None:
    """Configure package logging; see :meth:`LoggingManager.configure`."""
    logging_manager.configure(**kwargs)


def shutdown_logging() -> None:
    logging_manager.shutdown()


def get_correlation_id() -> Optional[str]:
    return _correlation_id.get()


class CorrelationContext:
    """Run a block under a correlation ID, restoring the previous one on exit."""

    def __init__(self, corr_id: Optional[str] = None):
        self.corr_id = corr_id or uuid.uuid4().hex[:12]
        self._token = None

    def __enter__(self) -> str:
        self._token = _correlation_id.set(self.corr_id)
        return self.corr_id

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _correlation_id.reset(self._token)
