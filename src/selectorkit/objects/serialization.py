"""JSON helpers: compact encoding and positional object construction."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["from_json", "get_json"]

T = TypeVar("T")


def _encode_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(value: Any) -> str:
    """Return the compact JSON representation of *value*.

    Dataclass instances are encoded as their field mapping:
        [1, 2, 3]             -> '[1,2,3]'
        Rectangle(10, 20)     -> '{"width":10,"height":20}'
    """
    return json.dumps(value, separators=(",", ":"), default=_encode_default)


def from_json(cls: type[T], source: str) -> T:
    """Build a *cls* instance from a JSON object.

    The object's values are passed to ``cls`` positionally, in document
    order; key names are not matched against parameter names.
    """
    data = json.loads(source)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return cls(*data.values())
