"""Application-wide constants."""

APP_NAME = "QuickBar"

# Written into every export envelope; informational only.
VERSION = "2.1.0.0"

# Version stamped onto payloads recovered through the legacy fallback decoder.
LEGACY_FORMAT_VERSION = "1.3.2.0"

SETTINGS_FILE = "quickbar.json"
ENV_PREFIX = "QUICKBAR_"
