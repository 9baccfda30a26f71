"""Stateless entry points that start a selector on a fresh builder."""

from __future__ import annotations

from objkit.selector.builder import CssSelectorBuilder, Renderable

__all__ = ["SelectorBuilderFacade", "css_selector_builder"]


class SelectorBuilderFacade:
    """Starts every call on a new :class:`CssSelectorBuilder`.

    Independent top-level calls never share state; the chain that follows a
    call keeps using the builder that call returned::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'
    """

    def element(self, value: str) -> CssSelectorBuilder:
        return CssSelectorBuilder().element(value)

    def id(self, value: str) -> CssSelectorBuilder:
        return CssSelectorBuilder().id(value)

    def class_(self, value: str) -> CssSelectorBuilder:
        return CssSelectorBuilder().class_(value)

    def attr(self, value: str) -> CssSelectorBuilder:
        return CssSelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> CssSelectorBuilder:
        return CssSelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> CssSelectorBuilder:
        return CssSelectorBuilder().pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CssSelectorBuilder:
        return CssSelectorBuilder().combine(left, combinator, right)

    def stringify(self) -> str:
        return CssSelectorBuilder().stringify()


# Reachable as getattr(css_selector_builder, "class") for callers that
# dispatch on CSS part names.
setattr(SelectorBuilderFacade, "class", SelectorBuilderFacade.class_)

css_selector_builder = SelectorBuilderFacade()
