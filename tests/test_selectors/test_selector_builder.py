"""Tests for the css_selector_builder facade."""

import pytest

from objtasks import css_selector_builder
from objtasks.selectors import (
    CombinedSelector,
    CssSelectorBuilder,
    DuplicateCategoryError,
    OrderViolationError,
    SimpleSelector,
)


@pytest.fixture()
def builder() -> CssSelectorBuilder:
    return css_selector_builder


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


class TestFactories:
    def test_each_factory_returns_new_selector(self, builder):
        first = builder.element("a")
        second = builder.element("a")
        assert isinstance(first, SimpleSelector)
        assert first is not second

    @pytest.mark.parametrize(
        "factory,value,expected",
        [
            ("element", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "container", ".container"),
            ("attr", "target", "[target]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "before", "::before"),
        ],
    )
    def test_single_part(self, builder, factory, value, expected):
        assert getattr(builder, factory)(value).render() == expected

    def test_empty_render(self, builder):
        assert builder.render() == ""
        assert builder.stringify() == ""

    def test_separate_chains_do_not_share_state(self, builder):
        a = builder.element("a").class_("x")
        b = builder.element("b")
        assert a.render() == "a.x"
        assert b.render() == "b"


# ---------------------------------------------------------------------------
# Chaining
# ---------------------------------------------------------------------------


class TestChaining:
    def test_id_and_classes(self, builder):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.render() == "#main.container.editable"

    def test_element_attr_pseudo_class(self, builder):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.render() == 'a[href$=".png"]:focus'

    def test_full_chain(self, builder):
        sel = (
            builder.element("input")
            .id("email")
            .class_("field")
            .attr('type="email"')
            .pseudo_class("focus")
            .pseudo_element("placeholder")
        )
        assert sel.render() == 'input#email.field[type="email"]:focus::placeholder'

    def test_duplicate_element(self, builder):
        with pytest.raises(DuplicateCategoryError):
            builder.element("a").element("b")

    def test_duplicate_id(self, builder):
        with pytest.raises(DuplicateCategoryError):
            builder.id("a").id("b")

    def test_duplicate_pseudo_element(self, builder):
        with pytest.raises(DuplicateCategoryError):
            builder.pseudo_element("a").pseudo_element("b")

    def test_class_then_element(self, builder):
        with pytest.raises(OrderViolationError):
            builder.class_("x").element("a")

    def test_pseudo_class_then_attr(self, builder):
        with pytest.raises(OrderViolationError):
            builder.pseudo_class("hover").attr("href")

    def test_pseudo_element_then_id(self, builder):
        with pytest.raises(OrderViolationError):
            builder.pseudo_element("after").id("x")


# ---------------------------------------------------------------------------
# Combining
# ---------------------------------------------------------------------------


class TestCombine:
    def test_simple_pair(self, builder):
        node = builder.combine(builder.element("div").id("main"), "+", builder.element("span"))
        assert isinstance(node, CombinedSelector)
        assert node.render() == "div#main + span"

    def test_left_nested(self, builder):
        node = builder.combine(
            builder.combine(builder.element("a"), "+", builder.element("b")),
            "~",
            builder.element("c"),
        )
        assert node.render() == "a + b ~ c"

    def test_deep_right_nesting(self, builder):
        node = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert node.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_child_combinator(self, builder):
        node = builder.combine(builder.element("ul"), ">", builder.element("li").class_("item"))
        assert node.render() == "ul > li.item"

    def test_render_is_idempotent(self, builder):
        node = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert node.render() == node.render() == "a > b"

    def test_combine_rejects_plain_strings(self, builder):
        with pytest.raises(TypeError):
            builder.combine("div", ">", builder.element("p"))
