"""Environment variable overrides for the import/export policy.

Hosts that cannot edit the settings file (CI, portable installs) can set
``QUICKBAR_*`` variables instead. Values that fail to parse are ignored with
a warning rather than aborting settings loading.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class EnvironmentConfig:
    """Immutable set of overrides read from the environment; None means unset."""

    allow_import_conditions: Optional[bool] = None
    allow_import_hotkeys: Optional[bool] = None
    allow_exporting_sensitive_condition_sets: Optional[bool] = None
    log_level: Optional[str] = None

    def overrides(self) -> dict:
        """Return only the values that were actually set."""
        return {
            key: value for key, value in (
                ("allow_import_conditions", self.allow_import_conditions),
                ("allow_import_hotkeys", self.allow_import_hotkeys),
                ("allow_exporting_sensitive_condition_sets", self.allow_exporting_sensitive_condition_sets),
                ("log_level", self.log_level),
            ) if value is not None
        }


def _parse_bool(environ: Mapping[str, str], name: str) -> Optional[bool]:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring {ENV_PREFIX + name}={raw!r}: expected a boolean")
    return None


def _parse_log_level(environ: Mapping[str, str]) -> Optional[str]:
    raw = environ.get(ENV_PREFIX + "LOG_LEVEL")
    if raw is None:
        return None
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning(f"Ignoring {ENV_PREFIX}LOG_LEVEL={raw!r}: unknown level")
        return None
    return level


def load_environment_config(environ: Optional[Mapping[str, str]] = None) -> EnvironmentConfig:
    """Read policy overrides from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ
    return EnvironmentConfig(
        allow_import_conditions=_parse_bool(environ, "ALLOW_IMPORT_CONDITIONS"),
        allow_import_hotkeys=_parse_bool(environ, "ALLOW_IMPORT_HOTKEYS"),
        allow_exporting_sensitive_condition_sets=_parse_bool(environ, "ALLOW_SENSITIVE_EXPORT"),
        log_level=_parse_log_level(environ),
    )
