"""Custom exceptions for the application."""

class QuickBarError(Exception):
    """Base application error."""
    pass

class ConfigError(QuickBarError):
    """Settings loading/saving errors."""
    pass

class MigrationError(QuickBarError):
    """Raised when a legacy patch fails to apply to an import envelope."""
    pass

class SharingError(QuickBarError):
    """Base exception for import/export errors."""
    pass

class DecodeError(SharingError):
    """Import string is not valid base64, gzip or JSON."""
    pass

class SchemaError(SharingError):
    """Payload decoded but does not match any known configuration shape."""
    pass

class SensitiveExportError(SharingError):
    """Condition set contains sensitive conditions and exporting them is not allowed."""
    pass
