"""Type-tagged JSON codec for configuration trees.

Every object is written as a JSON object carrying a ``$type`` tag. In
compact mode the tag is the registry alias and fields holding None or their
declared default are left out; in full mode the tag is the full dotted type
name and every field is written.

Decoding is driven by the declared type of each slot. A tag may name the
slot's type or a subclass of it; anything else is a :class:`SchemaError`.
Keys the target type does not know are ignored.

Shortcut trees have no depth limit, so neither direction recurses on the
call stack: each nested value is handled by its own generator, and
:func:`_drive` runs them from an explicit stack.
"""
from __future__ import annotations

import dataclasses
import json
import logging
from enum import Enum
from functools import lru_cache
from typing import (
    Any, Callable, Dict, Generator, List, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints
)

from ..core.exceptions import DecodeError, SchemaError
from ..models.base import default_of
from .registry import TypeRegistry, get_type_registry

logger = logging.getLogger(__name__)

TYPE_KEY = "$type"

T = TypeVar("T")

# A step yields requests for nested values and returns its own result.
Step = Generator[Any, Any, Any]


def wire_key(f: dataclasses.Field) -> str:
    return f.metadata.get("wire", f.name)


@lru_cache(maxsize=None)
def _type_hints(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _optional_inner(hint: Any) -> Optional[Any]:
    """Return X for ``Optional[X]``, None for anything else."""
    if get_origin(hint) is Union:
        args = get_args(hint)
        if type(None) in args:
            rest = [a for a in args if a is not type(None)]
            if len(rest) == 1:
                return rest[0]
    return None


def _is_omittable(value: Any, default: Any) -> bool:
    # False == 0 == 0.0 in Python; an untyped slot must keep the value it was given.
    return value is None or (type(value) is type(default) and value == default)


def _drive(root: Step, spawn: Callable[[Any], Step]) -> Any:
    """Run ``root`` to completion without growing the call stack.

    Whenever the running step yields a request, ``spawn(request)`` creates
    the step that answers it; that step's return value is sent back to the
    requester once it finishes.
    """
    stack: List[Step] = [root]
    value = None
    while stack:
        try:
            request = stack[-1].send(value)
        except StopIteration as done:
            stack.pop()
            value = done.value
        else:
            stack.append(spawn(request))
            value = None
    return value


class ConfigCodec:
    """Serializes configuration dataclasses to and from tagged JSON."""

    def __init__(self, registry: Optional[TypeRegistry] = None):
        self.registry = registry or get_type_registry()

    # -- encoding -----------------------------------------------------------

    def to_wire(self, value: Any, full: bool = False) -> Any:
        """Convert a value into JSON-compatible data."""
        return _drive(self._encode(value, full), lambda item: self._encode(item, full))

    def _encode(self, value: Any, full: bool) -> Step:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            cls = type(value)
            out: Dict[str, Any] = {TYPE_KEY: self.registry.name_of(cls, aliased=not full)}
            for f in dataclasses.fields(cls):
                item = getattr(value, f.name)
                if not full and not f.metadata.get("keep", False) and _is_omittable(item, default_of(cls, f.name)):
                    continue
                out[wire_key(f)] = yield item
            return out
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, (list, tuple)):
            items = []
            for item in value:
                items.append((yield item))
            return items
        if isinstance(value, dict):
            mapped = {}
            for k, v in value.items():
                mapped[str(k)] = yield v
            return mapped
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        raise TypeError(f"Cannot serialize value of type {type(value).__name__}")

    def serialize(self, node: Any, full: bool = False) -> str:
        return json.dumps(self.to_wire(node, full), separators=(",", ":"), ensure_ascii=False)

    # -- decoding -----------------------------------------------------------

    def from_wire(self, data: Any, hint: Any) -> Any:
        """Convert JSON data into a value of the declared type ``hint``."""
        return _drive(self._decode(data, hint), self._spawn_decode)

    def _spawn_decode(self, request: Any) -> Step:
        data, hint = request
        return self._decode(data, hint)

    def _decode(self, data: Any, hint: Any) -> Step:
        if hint is Any:
            return data

        inner = _optional_inner(hint)
        if inner is not None:
            if data is None:
                return None
            return (yield data, inner)

        if get_origin(hint) is list:
            if not isinstance(data, list):
                raise SchemaError(f"Expected a list, got {type(data).__name__}")
            args = get_args(hint)
            item_hint = args[0] if args else Any
            items = []
            for item in data:
                items.append((yield item, item_hint))
            return items

        if not isinstance(hint, type):
            raise SchemaError(f"Unsupported field type {hint!r}")
        if dataclasses.is_dataclass(hint):
            return (yield from self._decode_object(data, hint))
        if issubclass(hint, Enum):
            return self._decode_enum(data, hint)
        return self._decode_scalar(data, hint)

    def _decode_scalar(self, data: Any, hint: type) -> Any:
        if hint is bool:
            if isinstance(data, bool):
                return data
        elif hint is int:
            if isinstance(data, int) and not isinstance(data, bool):
                return data
        elif hint is float:
            if isinstance(data, (int, float)) and not isinstance(data, bool):
                return float(data)
        elif hint is str:
            if isinstance(data, str):
                return data
        else:
            raise SchemaError(f"Unsupported field type {hint.__name__}")
        raise SchemaError(f"Expected {hint.__name__}, got {type(data).__name__}")

    def _decode_enum(self, data: Any, enum_cls: Type[Enum]) -> Enum:
        try:
            if isinstance(data, str):
                return enum_cls[data]
            if isinstance(data, int) and not isinstance(data, bool):
                return enum_cls(data)
        except (KeyError, ValueError) as e:
            raise SchemaError(f"{data!r} is not a valid {enum_cls.__name__}") from e
        raise SchemaError(f"Expected {enum_cls.__name__}, got {type(data).__name__}")

    def _decode_object(self, data: Any, cls: type, require_tag: bool = False) -> Step:
        if not isinstance(data, dict):
            raise SchemaError(f"Expected an object for {cls.__name__}, got {type(data).__name__}")

        target = cls
        tag = data.get(TYPE_KEY)
        if tag is None:
            if require_tag:
                raise SchemaError(f"Object has no '{TYPE_KEY}' tag, expected {cls.__name__}")
        else:
            if not isinstance(tag, str):
                raise SchemaError(f"Invalid '{TYPE_KEY}' tag {tag!r}")
            target = self.registry.type_of(tag)
            if not issubclass(target, cls):
                raise SchemaError(f"Type '{tag}' cannot be used where {cls.__name__} is expected")

        hints = _type_hints(target)
        kwargs: Dict[str, Any] = {}
        known = {TYPE_KEY}
        for f in dataclasses.fields(target):
            key = wire_key(f)
            known.add(key)
            if key not in data:
                continue
            raw = data[key]
            hint = hints[f.name]
            # Nulls in non-optional slots fall back to the declared default.
            if raw is None and _optional_inner(hint) is None and hint is not Any:
                continue
            kwargs[f.name] = yield raw, hint

        unknown = set(data) - known
        if unknown:
            logger.debug(f"Ignoring unknown keys for {target.__name__}: {sorted(unknown)}")
        return target(**kwargs)

    def deserialize(self, text: str, expected_type: Type[T], require_tag: bool = False) -> T:
        """Parse tagged JSON into an instance of ``expected_type``.

        Args:
            text: JSON text produced by :meth:`serialize`
            expected_type: Dataclass type the root object must decode to
            require_tag: Reject a root object without a ``$type`` tag

        Raises:
            DecodeError: If ``text`` is not valid JSON.
            SchemaError: If the JSON does not match ``expected_type``.
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise DecodeError(f"Payload is not valid JSON: {e}") from e
        return _drive(self._decode_object(data, expected_type, require_tag), self._spawn_decode)

    def clone(self, node: T) -> T:
        """Deep copy through a full-mode round trip; shares no state with ``node``."""
        return self.deserialize(self.serialize(node, full=True), type(node))


_codec_instance: Optional[ConfigCodec] = None


def get_codec() -> ConfigCodec:
    """Get the codec bound to the global type registry."""
    global _codec_instance
    if _codec_instance is None:
        _codec_instance = ConfigCodec()
    return _codec_instance


def clone(node: T) -> T:
    return get_codec().clone(node)
