"""First-generation bar and shortcut shapes.

Kept only so that old import strings can still be read. Each shape knows
how to ``upgrade()`` itself into the current configuration model; the two
generations are never mixed inside one tree.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from .bar import BarAlign, BarConfig, BarDock, BarVisibility
from .shortcut import ShortcutConfig, ShortcutMode, ShortcutType
from .vectors import Vector2, Vector4


class LegacyShortcutType(IntEnum):
    SINGLE = 0
    MULTILINE_DEPRECATED = 1
    CATEGORY = 2
    SPACER = 3


class LegacyBarDock(IntEnum):
    TOP = 0
    LEFT = 1
    BOTTOM = 2
    RIGHT = 3
    UNDOCKED_H = 4
    UNDOCKED_V = 5


class LegacyVisibility(IntEnum):
    SLIDE = 0
    IMMEDIATE = 1
    ALWAYS = 2


class LegacyBarAlign(IntEnum):
    LEFT_OR_TOP = 0
    CENTER = 1
    RIGHT_OR_BOTTOM = 2


_SHORTCUT_TYPES = {
    LegacyShortcutType.SINGLE: ShortcutType.ACTION,
    LegacyShortcutType.MULTILINE_DEPRECATED: ShortcutType.ACTION,
    LegacyShortcutType.CATEGORY: ShortcutType.CATEGORY,
    LegacyShortcutType.SPACER: ShortcutType.SPACER,
}

_DOCK_SIDES = {
    LegacyBarDock.TOP: BarDock.TOP,
    LegacyBarDock.LEFT: BarDock.LEFT,
    LegacyBarDock.BOTTOM: BarDock.BOTTOM,
    LegacyBarDock.RIGHT: BarDock.RIGHT,
    LegacyBarDock.UNDOCKED_H: BarDock.UNDOCKED,
    LegacyBarDock.UNDOCKED_V: BarDock.UNDOCKED,
}


def _spacing(value: int) -> Vector2:
    # Legacy spacing was a single number; vertical spacing was always half of it.
    return Vector2(value, value / 2)


@dataclass(slots=True)
class LegacyShortcut:
    name: str = ""
    type: LegacyShortcutType = LegacyShortcutType.SINGLE
    command: str = ""
    hotkey: int = 0
    key_passthrough: bool = False
    sub_list: List[LegacyShortcut] = field(default_factory=list)
    hide_add: bool = False
    mode: ShortcutMode = ShortcutMode.DEFAULT
    color: Vector4 = Vector4(1, 1, 1, 1)
    icon_zoom: float = 1.0
    icon_offset: Vector2 = Vector2()
    category_columns: int = 0
    category_width: int = 140
    category_stays_open: bool = False
    category_spacing: int = 8
    category_scale: float = 1.0
    category_font_scale: float = 1.0
    category_no_background: bool = False
    category_on_hover: bool = False

    def upgrade(self) -> ShortcutConfig:
        """Convert into the current shortcut shape, children included."""
        root = self._upgrade_node()
        pending = [(self, root)]
        while pending:
            legacy, current = pending.pop()
            for sub in legacy.sub_list:
                child = sub._upgrade_node()
                current.sub_list.append(child)
                pending.append((sub, child))
        return root

    def _upgrade_node(self) -> ShortcutConfig:
        return ShortcutConfig(
            name=self.name,
            type=_SHORTCUT_TYPES[self.type],
            command=self.command,
            hotkey=self.hotkey,
            key_passthrough=self.key_passthrough,
            mode=self.mode,
            color=self.color.to_abgr(),
            icon_zoom=self.icon_zoom,
            icon_offset=self.icon_offset,
            category_columns=self.category_columns,
            category_stays_open=self.category_stays_open,
            category_width=self.category_width,
            category_spacing=_spacing(self.category_spacing),
            category_scale=self.category_scale,
            category_font_scale=self.category_font_scale,
            category_no_background=self.category_no_background,
            category_on_hover=self.category_on_hover,
        )


@dataclass(slots=True)
class LegacyBar:
    title: str = ""
    shortcut_list: List[LegacyShortcut] = field(default_factory=list)
    hidden: bool = False
    visibility: LegacyVisibility = LegacyVisibility.ALWAYS
    alignment: LegacyBarAlign = LegacyBarAlign.CENTER
    dock_side: LegacyBarDock = LegacyBarDock.UNDOCKED_H
    hint: bool = False
    button_width: int = 100
    hide_add: bool = False
    position: Vector2 = Vector2()
    lock_position: bool = False
    condition_set: int = -1
    scale: float = 1.0
    reveal_area_scale: float = 1.0
    font_scale: float = 1.0
    spacing: int = 8
    no_background: bool = False

    def upgrade(self) -> BarConfig:
        """Convert into the current bar shape, shortcuts included."""
        return BarConfig(
            name=self.title,
            hidden=self.hidden,
            visibility=BarVisibility(self.visibility.value),
            hint=self.hint,
            button_width=self.button_width,
            editing=not self.hide_add,
            shortcut_list=[sh.upgrade() for sh in self.shortcut_list],
            dock_side=_DOCK_SIDES[self.dock_side],
            alignment=BarAlign(self.alignment.value),
            reveal_area_scale=self.reveal_area_scale,
            condition_set=self.condition_set,
            position=self.position,
            locked_position=self.lock_position,
            scale=self.scale,
            font_scale=self.font_scale,
            spacing=_spacing(self.spacing),
            no_background=self.no_background,
            columns=1 if self.dock_side == LegacyBarDock.UNDOCKED_V else 0,
        )
