"""Selector model: SimpleSelector and CombinedSelector nodes.

A simple (compound) selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

where class, attribute and pseudo-class parts may repeat. Parts must be added
in that order; element, id and pseudo-element may each appear only once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum

from objtasks.selectors.errors import DuplicateCategoryError, OrderViolationError


class Category(IntEnum):
    """Selector part kinds, valued by the rank they must appear in."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class Combinator(StrEnum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


# Rank held by a selector before any part is accepted.
_NO_RANK = -1


@dataclass
class SimpleSelector:
    """A compound selector built up part by part.

    Every mutator returns ``self`` so calls can be chained::

        SimpleSelector().element("a").attr('href$=".png"').pseudo_class("focus")

    Violations raise before any field is touched, so a failed call never
    leaves the selector half-updated.
    """

    element_name: str | None = None
    id_name: str | None = None
    class_names: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element_name: str | None = None
    last_rank: int = field(default=_NO_RANK, repr=False, compare=False)

    # --- mutators -------------------------------------------------------------

    def set_element(self, value: str) -> SimpleSelector:
        if self.element_name is not None:
            raise DuplicateCategoryError(Category.ELEMENT)
        self._accept(Category.ELEMENT)
        self.element_name = value
        return self

    def set_id(self, value: str) -> SimpleSelector:
        if self.id_name is not None:
            raise DuplicateCategoryError(Category.ID)
        self._accept(Category.ID)
        self.id_name = value
        return self

    def add_class(self, value: str) -> SimpleSelector:
        self._accept(Category.CLASS)
        self.class_names.append(value)
        return self

    def add_attribute(self, value: str) -> SimpleSelector:
        """Append an attribute test, already formatted as ``name op "value"``."""
        self._accept(Category.ATTRIBUTE)
        self.attributes.append(value)
        return self

    def add_pseudo_class(self, value: str) -> SimpleSelector:
        self._accept(Category.PSEUDO_CLASS)
        self.pseudo_classes.append(value)
        return self

    def set_pseudo_element(self, value: str) -> SimpleSelector:
        if self.pseudo_element_name is not None:
            raise DuplicateCategoryError(Category.PSEUDO_ELEMENT)
        self._accept(Category.PSEUDO_ELEMENT)
        self.pseudo_element_name = value
        return self

    # Short names matching the builder facade.
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    def add(self, category: Category, value: str) -> SimpleSelector:
        """Apply *value* through the mutator for *category*."""
        return _MUTATORS[category](self, value)

    def _accept(self, category: Category) -> None:
        if self.last_rank > category:
            raise OrderViolationError(category, Category(self.last_rank))
        self.last_rank = int(category)

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the CSS text for this selector."""
        parts: list[str] = []
        if self.element_name is not None:
            parts.append(self.element_name)
        if self.id_name is not None:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{name}" for name in self.class_names)
        parts.extend(f"[{attr}]" for attr in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    stringify = render

    def __str__(self) -> str:
        return self.render()


_MUTATORS = {
    Category.ELEMENT: SimpleSelector.set_element,
    Category.ID: SimpleSelector.set_id,
    Category.CLASS: SimpleSelector.add_class,
    Category.ATTRIBUTE: SimpleSelector.add_attribute,
    Category.PSEUDO_CLASS: SimpleSelector.add_pseudo_class,
    Category.PSEUDO_ELEMENT: SimpleSelector.set_pseudo_element,
}


@dataclass(frozen=True)
class CombinedSelector:
    """Two selector nodes joined by a combinator.

    The combinator is stored exactly as given; it is not checked against
    :class:`Combinator`.
    """

    left: SelectorNode
    combinator: str
    right: SelectorNode

    # Children are mutable SimpleSelectors, so nodes are never hashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        for side in (self.left, self.right):
            if not isinstance(side, (SimpleSelector, CombinedSelector)):
                raise TypeError(
                    f"Expected a selector node, got {type(side).__name__}"
                )

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    stringify = render

    def __str__(self) -> str:
        return self.render()


SelectorNode = SimpleSelector | CombinedSelector
