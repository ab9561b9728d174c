"""Type registry mapping configuration types to wire tags.

Every registered type is reachable both by its short alias and by its full
dotted name, so strings written in either mode decode the same way. Aliases
are part of the wire format and must never be reassigned; renaming a class
only changes its full name.
"""
from __future__ import annotations

import dataclasses
import importlib
import logging
from typing import Dict, Optional

from ..core.exceptions import SchemaError
from ..models.bar import BarConfig
from ..models.conditions import Condition, ConditionSet
from ..models.legacy import LegacyBar, LegacyShortcut
from ..models.shortcut import ShortcutConfig
from ..models.vectors import Vector2, Vector4
from .envelope import ExportEnvelope

logger = logging.getLogger(__name__)

PACKAGE_ROOT = __name__.split(".")[0]


def full_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class TypeRegistry:
    """Bidirectional alias table with a generic fallback resolver."""

    def __init__(self):
        self._types: Dict[str, type] = {}
        self._aliases: Dict[type, str] = {}

    def register(self, cls: type, alias: str) -> None:
        """Register ``cls`` under ``alias`` and under its full name."""
        if alias in self._types and self._types[alias] is not cls:
            raise ValueError(f"Alias '{alias}' is already bound to {self._types[alias].__name__}")
        if cls in self._aliases and self._aliases[cls] != alias:
            raise ValueError(f"{cls.__name__} is already registered as '{self._aliases[cls]}'")
        self._types[alias] = cls
        self._types[full_name(cls)] = cls
        self._aliases[cls] = alias

    def alias_of(self, cls: type) -> str:
        """Short tag for ``cls``; unregistered types use their full name."""
        return self._aliases.get(cls, full_name(cls))

    def name_of(self, cls: type, aliased: bool = True) -> str:
        return self.alias_of(cls) if aliased else full_name(cls)

    def type_of(self, name: str) -> type:
        """Resolve an alias or full name to a type.

        Raises:
            SchemaError: If the name resolves to nothing usable.
        """
        cls = self._types.get(name)
        if cls is not None:
            return cls
        return self._resolve_generic(name)

    def _resolve_generic(self, name: str) -> type:
        # Only dataclasses from this package may be named on the wire.
        module_name, _, qualname = name.rpartition(".")
        if not module_name or not (module_name == PACKAGE_ROOT or module_name.startswith(PACKAGE_ROOT + ".")):
            raise SchemaError(f"Unknown type tag '{name}'")
        try:
            target = importlib.import_module(module_name)
            for part in qualname.split("."):
                target = getattr(target, part)
        except (ImportError, AttributeError) as e:
            raise SchemaError(f"Unknown type tag '{name}'") from e
        if not (isinstance(target, type) and dataclasses.is_dataclass(target)):
            raise SchemaError(f"Type tag '{name}' does not name a configuration type")
        logger.debug(f"Resolved unregistered type tag '{name}'")
        return target


def build_default_registry() -> TypeRegistry:
    registry = TypeRegistry()
    registry.register(ExportEnvelope, "e")
    registry.register(LegacyBar, "b")
    registry.register(LegacyShortcut, "s")
    registry.register(BarConfig, "b2")
    registry.register(ShortcutConfig, "s2")
    registry.register(ConditionSet, "cs")
    registry.register(Condition, "c")
    registry.register(Vector2, "2")
    registry.register(Vector4, "4")
    return registry


_registry_instance: Optional[TypeRegistry] = None


def get_type_registry() -> TypeRegistry:
    """Get the global registry of the closed configuration type set."""
    global _registry_instance
    if _registry_instance is None:
        _registry_instance = build_default_registry()
    return _registry_instance
