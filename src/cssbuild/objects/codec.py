"""JSON passthroughs: encode any value, decode onto an instance of a given type."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["from_json", "to_json"]

T = TypeVar("T")


def to_json(obj: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Serialise *obj* with :func:`json.dumps`.

    Dataclass instances are converted with :func:`dataclasses.asdict` first.
    Without *indent* the output is compact (``[1,2,3]``).
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = dataclasses.asdict(obj)
    separators = (",", ":") if indent is None else None
    return json.dumps(obj, indent=indent, sort_keys=sort_keys, separators=separators)


def _is_read_only(cls: type, name: str) -> bool:
    attr = getattr(cls, name, None)
    return isinstance(attr, property) and attr.fset is None


def from_json(cls: type[T], text: str) -> T:
    """Decode a JSON object and attach its keys to a new instance of *cls*.

    The instance is created without running ``cls.__init__``, so only the
    decoded keys are set; methods and properties of *cls* work as usual.
    Keys naming a read-only property of *cls* (such as a derived ``area``)
    are skipped, since the property computes them.
    Raises :class:`TypeError` if *text* does not decode to a JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    instance = cls.__new__(cls)
    for key, value in data.items():
        if _is_read_only(cls, key):
            continue
        # bypasses frozen dataclass __setattr__
        object.__setattr__(instance, key, value)
    return instance
