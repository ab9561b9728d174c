"""Shared walk over shortcut trees."""
from __future__ import annotations

from typing import Any, Callable, Iterable


def walk_shortcuts(shortcuts: Iterable[Any], visit: Callable[[Any], None]) -> None:
    """Visit every shortcut in pre-order.

    ``visit`` runs before a node's ``sub_list`` is read, so a visitor that
    empties the list prunes that subtree. Works for current and legacy
    shortcuts alike and does not recurse, so depth is only bounded by memory.
    """
    stack = list(reversed(list(shortcuts)))
    while stack:
        node = stack.pop()
        visit(node)
        stack.extend(reversed(node.sub_list))
