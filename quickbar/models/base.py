"""Declared-default lookup for configuration dataclasses.

Every configuration field declares its default on the dataclass itself,
either as a plain ``default`` or a ``default_factory``. These helpers read
those declarations so the cleaner and the import gates can reset a field
without knowing its value.
"""
from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import Any, Dict


@lru_cache(maxsize=None)
def _field_map(cls: type) -> Dict[str, dataclasses.Field]:
    return {f.name: f for f in dataclasses.fields(cls)}


def default_of(node_or_type: Any, field_name: str) -> Any:
    """Return the declared default of ``field_name``.

    Factory defaults are invoked on every call, so mutable defaults are never
    shared between nodes.

    Raises:
        AttributeError: If the type has no such field or it declares no default.
    """
    cls = node_or_type if isinstance(node_or_type, type) else type(node_or_type)
    try:
        f = _field_map(cls)[field_name]
    except KeyError:
        raise AttributeError(f"{cls.__name__} has no field '{field_name}'") from None

    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    raise AttributeError(f"{cls.__name__}.{field_name} has no declared default")


def is_default(node: Any, field_name: str) -> bool:
    """Check whether a field currently holds its declared default."""
    return getattr(node, field_name) == default_of(node, field_name)


def reset_to_default(node: Any, *field_names: str) -> None:
    """Reset each named field of ``node`` to its declared default."""
    for name in field_names:
        setattr(node, name, default_of(node, name))
