"""Settings and legacy patch management package."""

from .settings import (
    ImportSettings, load_settings, save_settings, get_settings, set_settings,
    apply_logging_settings, initialize
)
from .defaults import DEFAULT_SETTINGS

__all__ = ["ImportSettings", "load_settings", "save_settings", "get_settings", "set_settings",
           "apply_logging_settings", "initialize", "DEFAULT_SETTINGS"]
