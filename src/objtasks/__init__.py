"""objtasks: small object exercises with a fluent CSS selector builder."""
from __future__ import annotations

from objtasks.selectors import css_selector_builder, parse_selector
from objtasks.serialization import from_json, to_json
from objtasks.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "Rectangle",
    "css_selector_builder",
    "from_json",
    "parse_selector",
    "to_json",
]
