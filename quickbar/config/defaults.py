"""Default settings values."""

from typing import Any, Dict

DEFAULT_SETTINGS: Dict[str, Any] = {
    # Import policy
    "allow_import_conditions": False,
    "allow_import_hotkeys": False,

    # Export policy
    "allow_exporting_sensitive_condition_sets": False,

    # Debug and Logging Settings
    "log_level": "INFO",
    "log_dir": "",
    "structured_logging": False,
}
