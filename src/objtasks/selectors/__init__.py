from objtasks.selectors.builder import CssSelectorBuilder, css_selector_builder
from objtasks.selectors.errors import (
    DuplicateCategoryError,
    OrderViolationError,
    SelectorError,
    SelectorParseError,
)
from objtasks.selectors.model import (
    Category,
    Combinator,
    CombinedSelector,
    SelectorNode,
    SimpleSelector,
)
from objtasks.selectors.parser import parse_selector

__all__ = [
    "Category",
    "Combinator",
    "CombinedSelector",
    "CssSelectorBuilder",
    "DuplicateCategoryError",
    "OrderViolationError",
    "SelectorError",
    "SelectorNode",
    "SelectorParseError",
    "SimpleSelector",
    "css_selector_builder",
    "parse_selector",
]
