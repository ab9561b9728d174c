"""Default-value pruning for compact exports.

Cleaning resets fields that have no effect in the node's current state
(category options on a plain action, icon options on a name without the
icon marker, and so on) so they are elided from compact export strings and
cannot resurface if the discriminant is edited later. Cleaning mutates its
argument; callers clone first.
"""
from __future__ import annotations

from typing import Iterable

from ..models.bar import BarConfig, BarDock, BarVisibility
from ..models.base import reset_to_default
from ..models.shortcut import ShortcutConfig, ShortcutMode, ShortcutType
from ..models.tree import walk_shortcuts

ICON_MARKER = "::"

CATEGORY_FIELDS = (
    "sub_list",
    "category_columns",
    "category_stays_open",
    "category_width",
    "category_spacing",
    "category_scale",
    "category_font_scale",
    "category_no_background",
    "category_on_hover",
    "category_hover_close",
)

ICON_FIELDS = ("icon_zoom", "icon_offset", "cooldown_action", "cooldown_style")


def _clean_node(sh: ShortcutConfig) -> None:
    if sh.type != ShortcutType.CATEGORY:
        reset_to_default(sh, *CATEGORY_FIELDS)
    elif sh.mode != ShortcutMode.DEFAULT:
        # Non-default categories pick a child instead of running a command.
        reset_to_default(sh, "command")

    if sh.type == ShortcutType.SPACER:
        reset_to_default(sh, "command", "mode")

    if ICON_MARKER not in sh.name:
        reset_to_default(sh, *ICON_FIELDS)

    reset_to_default(sh, "_i")


def clean_shortcuts(shortcuts: Iterable[ShortcutConfig]) -> None:
    walk_shortcuts(shortcuts, _clean_node)


def clean_shortcut(sh: ShortcutConfig) -> ShortcutConfig:
    """Clean ``sh`` and its whole subtree in place."""
    clean_shortcuts([sh])
    return sh


def clean_bar(bar: BarConfig) -> BarConfig:
    """Clean ``bar`` and every shortcut it owns in place."""
    if bar.dock_side == BarDock.UNDOCKED:
        reset_to_default(bar, "alignment", "reveal_area_scale", "hint")
    else:
        reset_to_default(bar, "reveal_area_scale")
        if bar.visibility == BarVisibility.ALWAYS:
            reset_to_default(bar, "hint")

    clean_shortcuts(bar.shortcut_list)
    return bar
