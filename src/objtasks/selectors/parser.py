"""Lark-based parser that reads selector text back into selector nodes."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from objtasks.selectors.errors import SelectorError, SelectorParseError
from objtasks.selectors.model import (
    Category,
    CombinedSelector,
    SelectorNode,
    SimpleSelector,
)

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Whitespace-only combinators collapse to a single descendant token.
_DESCENDANT = " "

_Part = tuple[Category, str]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Turn a parse tree into SimpleSelector / CombinedSelector nodes."""

    # ---- compound parts ----

    def type_part(self, items: list[Token]) -> _Part:
        return (Category.ELEMENT, str(items[0]))

    def id_part(self, items: list[Token]) -> _Part:
        return (Category.ID, str(items[0]))

    def class_part(self, items: list[Token]) -> _Part:
        return (Category.CLASS, str(items[0]))

    def attribute_part(self, items: list[Token]) -> _Part:
        return (Category.ATTRIBUTE, str(items[0]))

    def pseudo_class_part(self, items: list[Token | str]) -> _Part:
        return (Category.PSEUDO_CLASS, "".join(str(item) for item in items))

    def pseudo_args(self, items: list[Token | str]) -> str:
        # Nested argument lists arrive already joined.
        return "".join(str(item) for item in items)

    def pseudo_element_part(self, items: list[Token]) -> _Part:
        return (Category.PSEUDO_ELEMENT, str(items[0]))

    # ---- structural ----

    def compound(self, items: list[_Part]) -> SimpleSelector:
        selector = SimpleSelector()
        for category, value in items:
            selector.add(category, value)
        return selector

    def combinator(self, items: list[Token]) -> str:
        # Pure whitespace leaves no tokens behind.
        return str(items[0]) if items else _DESCENDANT

    def complex(self, items: list[object]) -> SelectorNode:
        # Fold left: A + B ~ C is (A + B) ~ C.
        node: SelectorNode = items[0]  # type: ignore[assignment]
        for i in range(1, len(items), 2):
            node = CombinedSelector(
                left=node,
                combinator=items[i],  # type: ignore[arg-type]
                right=items[i + 1],  # type: ignore[arg-type]
            )
        return node

    def start(self, items: list[SelectorNode]) -> SelectorNode:
        return items[0] if items else SimpleSelector()


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_selector(source: str) -> SelectorNode:
    """Parse CSS selector text into a selector node tree.

    Parts are applied in source order through the :class:`SimpleSelector`
    mutators, so misordered or repeated parts raise the same
    :class:`OrderViolationError` / :class:`DuplicateCategoryError` the builder
    does. Malformed text raises :class:`SelectorParseError`.

    Text rendered from a node reads back to the same rendering as long as
    every element, id, class, pseudo-class and pseudo-element value is a
    non-empty run of word characters and hyphens. Pseudo-class arguments may
    nest, e.g. ``:is(a:not(.b))``.
    """
    text = source.strip()
    try:
        tree = _parser().parse(text)
    except UnexpectedInput as e:
        raise SelectorParseError(str(e), line=e.line, column=e.column) from e

    try:
        node = SelectorTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, SelectorError):
            raise e.orig_exc from None
        raise
    logger.debug("Parsed selector %r -> %r", source, node)
    return node
