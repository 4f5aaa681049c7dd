"""Builder facade: factories that start a new selector from one part."""

from __future__ import annotations

from objtasks.selectors.model import CombinedSelector, SelectorNode, SimpleSelector


class CssSelectorBuilder:
    """Entry point for building CSS selectors.

    Each factory returns a fresh :class:`SimpleSelector` with one part applied,
    ready for further chaining::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").render()
        # '#main.container.editable'

        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("span"),
        ).render()
        # 'div#main + span'
    """

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_class(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_attribute(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_pseudo_element(value)

    def combine(
        self, left: SelectorNode, combinator: str, right: SelectorNode
    ) -> CombinedSelector:
        return CombinedSelector(left=left, combinator=combinator, right=right)

    def render(self) -> str:
        """Render a selector with no parts, which is always ``""``."""
        return SimpleSelector().render()

    stringify = render


css_selector_builder = CssSelectorBuilder()
