"""Current-generation shortcut configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from .vectors import Vector2


class ShortcutType(IntEnum):
    ACTION = 0
    CATEGORY = 1
    SPACER = 2


class ShortcutMode(IntEnum):
    DEFAULT = 0
    INCREMENTAL = 1
    RANDOM = 2


@dataclass(slots=True)
class ShortcutConfig:
    """One entry of a bar.

    Category entries own ``sub_list``; the ``category_*`` fields only matter
    for them. Icon fields only matter when the name carries the ``::`` icon
    marker. ``hotkey`` is a packed key code with modifier bits, 0 when unset.
    """
    name: str = ""
    type: ShortcutType = ShortcutType.ACTION
    command: str = ""
    hotkey: int = 0
    key_passthrough: bool = False
    sub_list: List[ShortcutConfig] = field(default_factory=list)
    hidden: bool = False
    mode: ShortcutMode = ShortcutMode.DEFAULT
    color: int = 0xFFFFFFFF
    color_bg: int = 0
    color_animation: int = 0
    icon_zoom: float = 1.0
    icon_offset: Vector2 = Vector2()
    icon_rotation: float = 0.0
    cooldown_action: int = 0
    cooldown_style: int = 0
    category_columns: int = 0
    category_stays_open: bool = False
    category_width: int = 140
    category_spacing: Vector2 = Vector2(8, 4)
    category_scale: float = 1.0
    category_font_scale: float = 1.0
    category_no_background: bool = False
    category_on_hover: bool = False
    category_hover_close: bool = False
    # Runtime cursor for incremental mode, never meaningful once exported.
    _i: int = 0
