"""Import/export policy settings and loading utilities.

The settings object is passed explicitly into the import and export entry
points. For hosts that prefer process-wide toggles there is a single shared
instance behind :func:`get_settings`/:func:`set_settings`; entry points read
it at call time, so it must not be replaced while an import is running.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict, fields
from typing import Any, Dict, Mapping, Optional
import json, os, logging

from .defaults import DEFAULT_SETTINGS
from .env_config import load_environment_config
from ..core.constants import SETTINGS_FILE
from ..core.exceptions import ConfigError
from ..core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ImportSettings:
    # Import policy
    allow_import_conditions: bool = DEFAULT_SETTINGS["allow_import_conditions"]
    allow_import_hotkeys: bool = DEFAULT_SETTINGS["allow_import_hotkeys"]

    # Export policy
    allow_exporting_sensitive_condition_sets: bool = DEFAULT_SETTINGS["allow_exporting_sensitive_condition_sets"]

    # Debug and Logging Settings
    log_level: str = DEFAULT_SETTINGS["log_level"]
    log_dir: str = DEFAULT_SETTINGS["log_dir"]
    structured_logging: bool = DEFAULT_SETTINGS["structured_logging"]

    # Unknown keys from the settings file, written back unchanged on save
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        # merge extra keys at top-level for saving
        extra = d.pop("extra", {})
        d.update(extra)
        return d


_FIELD_NAMES = frozenset(f.name for f in fields(ImportSettings) if f.name != "extra")


def _coerce(merged: Dict[str, Any]) -> Dict[str, Any]:
    """Replace values of the wrong type with their defaults."""
    for key, default in DEFAULT_SETTINGS.items():
        value = merged.get(key, default)
        if not isinstance(value, type(default)):
            logger.warning(f"Setting '{key}' has invalid type {type(value).__name__}. Using default.")
            merged[key] = default
    return merged


def load_settings(path: str = SETTINGS_FILE, environ: Optional[Mapping[str, str]] = None) -> ImportSettings:
    """Load settings from a JSON file, then apply environment overrides.

    Missing or unreadable files fall back to defaults; this never raises.
    """
    data: Dict[str, Any] = {}

    if os.path.isfile(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded_data = json.load(f)
            if not isinstance(loaded_data, dict):
                logger.error(f"Settings file '{path}' does not contain a JSON object, using defaults")
            else:
                data = loaded_data
                logger.info(f"Loaded settings from '{path}'")
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file '{path}': {e}. Using defaults.")
        except OSError as e:
            logger.error(f"Could not read settings file '{path}': {e}. Using defaults.")
    else:
        logger.info(f"Settings file '{path}' does not exist. Using defaults.")

    merged = _coerce({**DEFAULT_SETTINGS, **data})

    env_overrides = load_environment_config(environ).overrides()
    if env_overrides:
        logger.info(f"Applying environment overrides: {sorted(env_overrides)}")
        merged.update(env_overrides)

    extra = {k: v for k, v in merged.items() if k not in _FIELD_NAMES}
    if extra:
        logger.info(f"Found extra settings keys: {list(extra.keys())}")

    return ImportSettings(**{k: merged[k] for k in _FIELD_NAMES}, extra=extra)


def save_settings(settings: ImportSettings, path: str = SETTINGS_FILE) -> None:
    """Save settings to a JSON file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2, ensure_ascii=False)
    except (OSError, TypeError) as e:
        raise ConfigError(f"Failed to save settings to '{path}': {e}") from e
    logger.info(f"Settings saved to '{path}'")


_settings_instance: Optional[ImportSettings] = None


def get_settings() -> ImportSettings:
    """Get the process-wide settings, creating defaults on first use."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = ImportSettings()
    return _settings_instance


def set_settings(settings: Optional[ImportSettings]) -> None:
    """Replace the process-wide settings; None restores defaults on next access."""
    global _settings_instance
    _settings_instance = settings


def apply_logging_settings(settings: ImportSettings) -> None:
    """Configure the ``quickbar`` logger from the logging fields of ``settings``."""
    configure_logging(
        log_level=settings.log_level,
        log_dir=settings.log_dir or None,
        structured_logging=settings.structured_logging,
    )


def initialize(path: str = SETTINGS_FILE, environ: Optional[Mapping[str, str]] = None) -> ImportSettings:
    """Host start-up: load settings, install them process-wide and configure logging.

    Calling it again (after the user edits the settings) reapplies everything.
    """
    settings = load_settings(path, environ)
    set_settings(settings)
    apply_logging_settings(settings)
    return settings
