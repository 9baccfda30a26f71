"""Tests for the CSS selector builder handle."""

import pytest

from objkit.errors import (
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
)
from objkit.selector import CssSelectorBuilder, SelectorPart, SelectorState


@pytest.fixture
def builder():
    return CssSelectorBuilder()


# ---------------------------------------------------------------------------
# Single parts
# ---------------------------------------------------------------------------


class TestSingleParts:
    def test_element(self, builder):
        assert builder.element("div").stringify() == "div"

    def test_id(self, builder):
        assert builder.id("main").stringify() == "#main"

    def test_class(self, builder):
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self, builder):
        assert builder.attr("target").stringify() == "[target]"

    def test_pseudo_class(self, builder):
        assert builder.pseudo_class("hover").stringify() == ":hover"

    def test_pseudo_element(self, builder):
        assert builder.pseudo_element("before").stringify() == "::before"

    def test_empty(self, builder):
        assert builder.stringify() == ""


# ---------------------------------------------------------------------------
# Chaining and render order
# ---------------------------------------------------------------------------


class TestChaining:
    def test_calls_return_same_builder(self, builder):
        assert builder.element("a") is builder
        assert builder.id("x") is builder
        assert builder.class_("c") is builder
        assert builder.attr("href") is builder
        assert builder.pseudo_class("focus") is builder
        assert builder.pseudo_element("after") is builder

    def test_id_and_classes(self, builder):
        result = builder.id("main").class_("container").class_("editable").stringify()
        assert result == "#main.container.editable"

    def test_element_attr_pseudo_class(self, builder):
        result = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert result == 'a[href$=".png"]:focus'

    def test_all_parts(self, builder):
        result = (
            builder.element("input")
            .id("name")
            .class_("field")
            .attr("required")
            .pseudo_class("focus")
            .pseudo_element("placeholder")
            .stringify()
        )
        assert result == "input[required]#name.field:focus::placeholder"

    def test_attributes_render_before_id_and_classes(self, builder):
        result = builder.id("x").class_("y").attr("data-a").attr("data-b").stringify()
        assert result == "[data-a][data-b]#x.y"

    def test_repeated_parts_keep_order_and_duplicates(self, builder):
        result = (
            builder.class_("b")
            .class_("a")
            .class_("b")
            .pseudo_class("nth-of-type(even)")
            .pseudo_class("hover")
            .stringify()
        )
        assert result == ".b.a.b:nth-of-type(even):hover"

    def test_part_values_not_validated(self, builder):
        assert builder.element("*").class_("").stringify() == "*."


# ---------------------------------------------------------------------------
# Uniqueness
# ---------------------------------------------------------------------------


class TestDuplicateParts:
    @pytest.mark.parametrize(
        "method, part",
        [
            ("element", SelectorPart.ELEMENT),
            ("id", SelectorPart.ID),
            ("pseudo_element", SelectorPart.PSEUDO_ELEMENT),
        ],
    )
    def test_second_unique_part_raises(self, builder, method, part):
        getattr(builder, method)("first")
        with pytest.raises(DuplicateSelectorPartError) as exc_info:
            getattr(builder, method)("second")
        assert exc_info.value.part is part
        assert "more than one time" in str(exc_info.value)

    @pytest.mark.parametrize("method", ["element", "id", "pseudo_element"])
    def test_empty_value_can_be_replaced(self, builder, method):
        getattr(builder, method)("")
        getattr(builder, method)("x")
        with pytest.raises(DuplicateSelectorPartError):
            getattr(builder, method)("y")

    def test_empty_unique_parts_not_rendered(self, builder):
        assert builder.element("").id("").class_("c").stringify() == ".c"

    def test_duplicate_discards_state(self, builder):
        builder.element("a").class_("x")
        with pytest.raises(DuplicateSelectorPartError):
            builder.element("div")
        assert builder.stringify() == ""

    def test_duplicate_checked_before_order(self, builder):
        builder.id("x").class_("c")
        with pytest.raises(DuplicateSelectorPartError):
            builder.id("y")


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrder:
    def test_element_after_id(self, builder):
        builder.id("x")
        with pytest.raises(SelectorOrderError) as exc_info:
            builder.element("a")
        assert exc_info.value.part is SelectorPart.ELEMENT
        assert exc_info.value.previous is SelectorPart.ID
        assert "following order" in str(exc_info.value)

    @pytest.mark.parametrize(
        "first, second",
        [
            ("class_", "id"),
            ("attr", "class_"),
            ("pseudo_class", "attr"),
            ("pseudo_element", "pseudo_class"),
            ("pseudo_element", "element"),
        ],
    )
    def test_lower_rank_after_higher_raises(self, builder, first, second):
        getattr(builder, first)("p")
        with pytest.raises(SelectorOrderError):
            getattr(builder, second)("q")

    def test_order_error_discards_state(self, builder):
        builder.element("a").id("x").class_("c")
        with pytest.raises(SelectorOrderError):
            builder.id("y")
        assert builder.stringify() == ""

    def test_builder_usable_after_error(self, builder):
        builder.pseudo_class("hover")
        with pytest.raises(SelectorOrderError):
            builder.element("a")
        # State is gone, so an element is accepted again.
        assert builder.element("a").stringify() == "a"

    def test_errors_share_base_class(self):
        assert issubclass(DuplicateSelectorPartError, SelectorError)
        assert issubclass(SelectorOrderError, SelectorError)


# ---------------------------------------------------------------------------
# stringify / reset
# ---------------------------------------------------------------------------


class TestReset:
    def test_stringify_resets(self, builder):
        builder.element("div").id("main")
        assert builder.stringify() == "div#main"
        assert builder.stringify() == ""

    def test_reuse_after_stringify(self, builder):
        builder.id("main").class_("a").stringify()
        # Would be an order error if the previous ranks were kept.
        assert builder.element("span").stringify() == "span"

    def test_reset(self, builder):
        builder.element("a").pseudo_element("after")
        builder.reset()
        assert builder.element("b").stringify() == "b"

    def test_repr_shows_current_selector(self, builder):
        builder.element("a").class_("b")
        assert repr(builder) == "CssSelectorBuilder('a.b')"


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_combine_two_builders(self):
        left = CssSelectorBuilder().element("div").id("main")
        right = CssSelectorBuilder().element("table").id("data")
        result = CssSelectorBuilder().combine(left, "+", right).stringify()
        assert result == "div#main + table#data"

    def test_combine_resets_operands(self):
        left = CssSelectorBuilder().element("div")
        right = CssSelectorBuilder().element("p")
        CssSelectorBuilder().combine(left, ">", right)
        assert left.stringify() == ""
        assert right.stringify() == ""

    def test_combine_returns_same_builder(self, builder):
        assert builder.combine("a", "~", "b") is builder

    def test_combine_strings(self, builder):
        assert builder.combine("ul", ">", "li").stringify() == "ul > li"

    def test_descendant_combinator_spacing(self, builder):
        assert builder.combine("tr", " ", "td").stringify() == "tr   td"

    def test_nested_combine(self):
        inner = CssSelectorBuilder().combine(
            CssSelectorBuilder().element("table").id("data"),
            "~",
            CssSelectorBuilder().element("tr").pseudo_class("nth-of-type(even)"),
        )
        outer = CssSelectorBuilder().combine(
            CssSelectorBuilder().element("div").id("main").class_("container"),
            "+",
            inner,
        )
        assert outer.stringify() == (
            "div#main.container + table#data ~ tr:nth-of-type(even)"
        )

    def test_part_after_combine_replaces_pending_render(self, builder):
        builder.combine("a", "+", "b").class_("c")
        assert builder.stringify() == ".c"


# ---------------------------------------------------------------------------
# SelectorState
# ---------------------------------------------------------------------------


class TestSelectorState:
    def test_defaults(self):
        state = SelectorState()
        assert state.tag is None
        assert state.id is None
        assert state.classes == []
        assert state.attributes == []
        assert state.pseudo_classes == []
        assert state.pseudo_element is None
        assert state.rendered_selector == ""
        assert state.last_order_rank == 0

    def test_render_fixed_order(self):
        state = SelectorState(
            tag="a",
            id="i",
            classes=["c"],
            attributes=["x=1"],
            pseudo_classes=["hover"],
            pseudo_element="after",
        )
        assert state.render() == "a[x=1]#i.c:hover::after"

    def test_part_ranks(self):
        assert [p.value for p in SelectorPart] == [1, 2, 3, 4, 5, 6]
        assert SelectorPart.ATTRIBUTE > SelectorPart.CLASS > SelectorPart.ID
