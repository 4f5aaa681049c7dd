"""Selector error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selectors.model import Category


class SelectorError(Exception):
    """Base error for everything raised while building or parsing selectors."""


class DuplicateCategoryError(SelectorError):
    """Raised when element, id or pseudo-element is set twice on one selector."""

    def __init__(self, category: Category) -> None:
        self.category = category
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (repeated {category.label})"
        )


class OrderViolationError(SelectorError):
    """Raised when a selector part is added after a part of higher rank."""

    def __init__(self, category: Category, previous: Category) -> None:
        self.category = category
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element "
            f"(got {category.label} after {previous.label})"
        )


class SelectorParseError(SelectorError):
    """Raised when selector source text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
