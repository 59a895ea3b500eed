"""Tests for the CSS selector builder."""

import logging

import pytest

from cascade.errors import DuplicateError, OrderError, SelectorError
from cascade.selector import (
    Category,
    CombinedSelector,
    Combinator,
    SelectorFragment,
    css_selector_builder as builder,
    stringify,
)


# ---------------------------------------------------------------------------
# Single categories
# ---------------------------------------------------------------------------


class TestSingleParts:
    @pytest.mark.parametrize(
        "method, value, expected",
        [
            ("type", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "container", ".container"),
            ("attribute", "href", "[href]"),
            ("pseudo_class", "focus", ":focus"),
            ("pseudo_element", "before", "::before"),
        ],
    )
    def test_each_category_renders(self, method, value, expected):
        assert getattr(builder, method)(value).stringify() == expected

    def test_fragment_records_last_category(self):
        assert builder.id("main").last_category is Category.ID

    def test_empty_fragment(self):
        fragment = SelectorFragment()
        assert fragment.text == ""
        assert fragment.last_category is None


# ---------------------------------------------------------------------------
# Valid chains
# ---------------------------------------------------------------------------


class TestChaining:
    def test_id_and_classes(self):
        result = builder.id("main").class_("container").class_("editable")
        assert result.stringify() == "#main.container.editable"

    def test_element_attribute_pseudo_class(self):
        result = builder.type("a").attribute('href$=".png"').pseudo_class("focus")
        assert result.stringify() == 'a[href$=".png"]:focus'

    def test_full_sequence(self):
        result = (
            builder.type("li")
            .id("first")
            .class_("item")
            .attribute("data-x")
            .pseudo_class("hover")
            .pseudo_element("after")
        )
        assert result.stringify() == "li#first.item[data-x]:hover::after"

    def test_repeatable_categories(self):
        result = (
            builder.type("input")
            .attribute("type=text")
            .attribute("required")
            .pseudo_class("focus")
            .pseudo_class("invalid")
        )
        assert result.stringify() == "input[type=text][required]:focus:invalid"

    def test_skipping_categories(self):
        assert builder.type("p").pseudo_element("first-line").stringify() == "p::first-line"

    def test_str_matches_stringify(self):
        fragment = builder.type("div").class_("x")
        assert str(fragment) == fragment.stringify() == stringify(fragment)


# ---------------------------------------------------------------------------
# Ordering errors
# ---------------------------------------------------------------------------


_RANKED = [
    ("type", "div"),
    ("id", "main"),
    ("class_", "item"),
    ("attribute", "href"),
    ("pseudo_class", "hover"),
    ("pseudo_element", "after"),
]


class TestOrdering:
    def test_class_after_id_succeeds(self):
        assert builder.id("x").class_("y").stringify() == "#x.y"

    def test_id_after_class_fails(self):
        with pytest.raises(OrderError):
            builder.class_("y").id("x")

    @pytest.mark.parametrize(
        "first, second",
        [(a, b) for i, a in enumerate(_RANKED) for b in _RANKED[:i]],
    )
    def test_lower_rank_after_higher_fails(self, first, second):
        fragment = getattr(builder, first[0])(first[1])
        with pytest.raises(OrderError) as excinfo:
            getattr(fragment, second[0])(second[1])
        assert excinfo.value.last_category is fragment.last_category

    def test_order_message(self):
        with pytest.raises(OrderError, match="element, id, class, attribute"):
            builder.pseudo_class("hover").type("a")

    def test_unique_category_after_higher_is_order_error(self):
        with pytest.raises(OrderError):
            builder.id("a").class_("b").id("c")

    def test_order_error_is_selector_error(self):
        with pytest.raises(SelectorError):
            builder.attribute("x").class_("y")


# ---------------------------------------------------------------------------
# Duplicate errors
# ---------------------------------------------------------------------------


class TestDuplicates:
    def test_duplicate_type(self):
        with pytest.raises(DuplicateError):
            builder.type("div").type("span")

    def test_duplicate_id(self):
        with pytest.raises(DuplicateError) as excinfo:
            builder.id("a").id("b")
        assert excinfo.value.category is Category.ID

    def test_duplicate_pseudo_element(self):
        with pytest.raises(DuplicateError):
            builder.pseudo_element("before").pseudo_element("after")

    def test_duplicate_message(self):
        with pytest.raises(DuplicateError, match="should not occur more than one time"):
            builder.type("div").type("span")


# ---------------------------------------------------------------------------
# Combining
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        left = builder.type("div").id("main")
        right = builder.type("table").id("data")
        combined = builder.combine(left, "+", right)
        assert isinstance(combined, CombinedSelector)
        assert combined.combinator is Combinator.ADJACENT_SIBLING
        assert builder.stringify(combined) == "div#main + table#data"

    def test_combine_equals_joined_parts(self):
        left = builder.type("ul").class_("menu")
        right = builder.type("li")
        combined = builder.combine(left, ">", right)
        assert stringify(combined) == stringify(left) + " > " + stringify(right)

    def test_descendant_combinator_spacing(self):
        combined = builder.combine(builder.type("a"), " ", builder.type("b"))
        assert combined.stringify() == "a   b"

    def test_accepts_enum_member(self):
        combined = builder.combine(
            builder.type("h1"), Combinator.GENERAL_SIBLING, builder.type("p")
        )
        assert combined.stringify() == "h1 ~ p"

    def test_nested_combine(self):
        result = builder.combine(
            builder.type("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.type("table").id("data"),
                "~",
                builder.combine(
                    builder.type("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.type("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combined_selector_is_terminal(self):
        combined = builder.combine(builder.type("a"), ">", builder.type("b"))
        assert not hasattr(combined, "class_")

    def test_unknown_combinator(self):
        with pytest.raises(SelectorError, match="Unknown combinator"):
            builder.combine(builder.type("a"), "|", builder.type("b"))

    def test_non_selector_operand(self):
        with pytest.raises(SelectorError, match="Not a selector"):
            builder.combine("div", "+", builder.type("b"))


# ---------------------------------------------------------------------------
# Immutability / isolation
# ---------------------------------------------------------------------------


class TestIsolation:
    def test_appending_does_not_mutate(self):
        base = builder.type("div")
        base.class_("a")
        base.id("b")
        assert base.stringify() == "div"

    def test_branching_from_shared_base(self):
        base = builder.type("div")
        assert base.class_("a").stringify() == "div.a"
        assert base.class_("b").stringify() == "div.b"

    def test_interleaved_sessions(self):
        first = builder.type("div")
        second = builder.type("span")
        first = first.id("one")
        second = second.class_("two")
        first = first.pseudo_class("hover")
        assert first.stringify() == "div#one:hover"
        assert second.stringify() == "span.two"

    def test_stringify_is_repeatable(self):
        fragment = builder.id("main").class_("x")
        assert fragment.stringify() == fragment.stringify() == "#main.x"

    def test_fragment_is_frozen(self):
        fragment = builder.type("div")
        with pytest.raises(AttributeError):
            fragment.text = "span"  # type: ignore[misc]

    def test_builder_calls_start_fresh(self):
        builder.type("div").id("main")
        assert builder.class_("x").stringify() == ".x"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    def test_append_logs_debug_record(self, caplog):
        caplog.set_level(logging.DEBUG, logger="cascade.selector.model")
        builder.type("div").id("main")
        messages = [r.getMessage() for r in caplog.records]
        assert "Appended ID: 'div' -> 'div#main'" in messages

    def test_combine_logs_debug_record(self, caplog):
        caplog.set_level(logging.DEBUG, logger="cascade.selector.model")
        builder.combine(builder.type("a"), ">", builder.type("b"))
        assert "Combined selector: 'a > b'" in caplog.text
