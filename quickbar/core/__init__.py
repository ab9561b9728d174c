"""Core exceptions and logging."""

from .exceptions import (
    QuickBarError, ConfigError, MigrationError,
    SharingError, DecodeError, SchemaError, SensitiveExportError
)
from .logging_config import configure_logging, shutdown_logging, CorrelationContext

__all__ = [
    "QuickBarError", "ConfigError", "MigrationError",
    "SharingError", "DecodeError", "SchemaError", "SensitiveExportError",
    "configure_logging", "shutdown_logging", "CorrelationContext"
]
