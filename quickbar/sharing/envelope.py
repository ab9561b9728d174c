"""Export envelope and import result containers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.constants import VERSION
from ..models.bar import BarConfig
from ..models.conditions import ConditionSet
from ..models.legacy import LegacyBar, LegacyShortcut
from ..models.shortcut import ShortcutConfig
from .diagnostics import Diagnostic


@dataclass(slots=True)
class ExportEnvelope:
    """Versioned wrapper around exactly one exported object.

    The legacy slots are only filled while importing old payloads; exports
    always use the current ones. ``format_version`` is always written, even
    in compact mode.
    """
    legacy_bar: Optional[LegacyBar] = field(default=None, metadata={"wire": "b1"})
    bar: Optional[BarConfig] = field(default=None, metadata={"wire": "b2"})
    legacy_shortcut: Optional[LegacyShortcut] = field(default=None, metadata={"wire": "s1"})
    shortcut: Optional[ShortcutConfig] = field(default=None, metadata={"wire": "s2"})
    condition_set: Optional[ConditionSet] = field(default=None, metadata={"wire": "cs"})
    format_version: str = field(default=VERSION, metadata={"wire": "v", "keep": True})

    def has_payload(self) -> bool:
        return any(slot is not None for slot in (
            self.legacy_bar, self.bar, self.legacy_shortcut, self.shortcut, self.condition_set
        ))


@dataclass(slots=True)
class ImportResult:
    """Normalized outcome of :func:`try_import`.

    On failure every payload slot is None and ``success`` is False. The
    ``*_removed`` flags report what the policy gates stripped.
    """
    bar: Optional[BarConfig] = None
    shortcut: Optional[ShortcutConfig] = None
    condition_set: Optional[ConditionSet] = None
    success: bool = False
    condition_removed: bool = False
    hotkey_removed: bool = False
    pie_removed: bool = False
    messages: List[Diagnostic] = field(default_factory=list)
