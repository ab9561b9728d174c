"""User-facing messages produced while importing."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.exceptions import DecodeError, SchemaError


class Severity(Enum):
    ERROR = "error"
    ADVISORY = "advisory"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    severity: Severity
    message: str


_REMOVED_TEMPLATE = (
    'This import contained {0} automatically removed, please enable "{1}" '
    'in the settings and then try importing again if you did not intend to do this.'
)

CONDITION_ADVISORY = _REMOVED_TEMPLATE.format("a condition set that was", "Allow importing conditions")
HOTKEY_ADVISORY = _REMOVED_TEMPLATE.format("one or more hotkeys that were", "Allow importing hotkeys")
PIE_ADVISORY = (
    "It appears that this bar was meant to be used as a pie. You should add a hotkey to it "
    "by right clicking on the bar and clicking the \"Pie Hotkey\" input box."
)


def describe_import_error(error: Exception) -> str:
    """Map an import failure to the message shown to the user."""
    if isinstance(error, DecodeError):
        return "Failed to import! Import string is invalid or incomplete."
    if isinstance(error, SchemaError):
        return "Failed to import! Import string does not contain an importable object."
    return f"Failed to import!\n{error}"
