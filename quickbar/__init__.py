"""
QuickBar import/export: share shortcut bars as compact text strings.
"""

__version__ = "2.1.0"

from .config.settings import ImportSettings, initialize, load_settings, save_settings
from .sharing import (
    export_bar, export_shortcut, export_condition_set,
    import_bar, import_shortcut, try_import, ImportResult
)

__all__ = [
    "ImportSettings", "initialize", "load_settings", "save_settings",
    "export_bar", "export_shortcut", "export_condition_set",
    "import_bar", "import_shortcut", "try_import", "ImportResult"
]
