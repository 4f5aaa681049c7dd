"""Compact JSON helpers for plain values and dataclass records."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# No whitespace after item or key separators: [1,2,3], {"a":1}.
_SEPARATORS = (",", ":")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are written as a mapping of their fields. Non-ASCII
    text is written as-is rather than as ``\\u`` escapes.
    """
    return json.dumps(
        obj, separators=_SEPARATORS, ensure_ascii=False, default=_default
    )


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from its JSON representation.

    A JSON object is passed as keyword arguments, an array as positional
    arguments, and any other value as the single argument.
    """
    data = json.loads(text)
    logger.debug("Building %s from JSON %s", cls.__name__, type(data).__name__)
    if isinstance(data, dict):
        return cls(**data)
    if isinstance(data, list):
        return cls(*data)
    return cls(data)
