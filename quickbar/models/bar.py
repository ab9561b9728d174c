"""Current-generation bar configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from .shortcut import ShortcutConfig
from .vectors import Vector2


class BarVisibility(IntEnum):
    SLIDE = 0
    IMMEDIATE = 1
    ALWAYS = 2


class BarDock(IntEnum):
    TOP = 0
    LEFT = 1
    BOTTOM = 2
    RIGHT = 3
    UNDOCKED = 4


class BarAlign(IntEnum):
    LEFT_OR_TOP = 0
    CENTER = 1
    RIGHT_OR_BOTTOM = 2


@dataclass(slots=True)
class BarConfig:
    name: str = ""
    hidden: bool = False
    visibility: BarVisibility = BarVisibility.ALWAYS
    hint: bool = False
    button_width: int = 100
    editing: bool = True
    # Set only when the bar is used as a pie menu.
    hotkey: int = 0
    shortcut_list: List[ShortcutConfig] = field(default_factory=list)
    dock_side: BarDock = BarDock.UNDOCKED
    alignment: BarAlign = BarAlign.CENTER
    reveal_area_scale: float = 1.0
    condition_set: int = -1
    position: Vector2 = Vector2()
    locked_position: bool = False
    scale: float = 1.0
    font_scale: float = 1.0
    spacing: Vector2 = Vector2(8, 4)
    no_background: bool = False
    columns: int = 0
