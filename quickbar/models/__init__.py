"""Closed configuration model shared by bars, shortcuts and condition sets."""

from .base import default_of, is_default, reset_to_default
from .bar import BarAlign, BarConfig, BarDock, BarVisibility
from .conditions import Condition, ConditionOperator, ConditionSet, SENSITIVE_CONDITION_IDS
from .legacy import (
    LegacyBar, LegacyBarAlign, LegacyBarDock, LegacyShortcut, LegacyShortcutType, LegacyVisibility
)
from .shortcut import ShortcutConfig, ShortcutMode, ShortcutType
from .tree import walk_shortcuts
from .vectors import Vector2, Vector4

__all__ = [
    "default_of", "is_default", "reset_to_default", "walk_shortcuts",
    "BarConfig", "BarAlign", "BarDock", "BarVisibility",
    "Condition", "ConditionOperator", "ConditionSet", "SENSITIVE_CONDITION_IDS",
    "LegacyBar", "LegacyBarAlign", "LegacyBarDock", "LegacyShortcut", "LegacyShortcutType",
    "LegacyVisibility",
    "ShortcutConfig", "ShortcutMode", "ShortcutType",
    "Vector2", "Vector4",
]
