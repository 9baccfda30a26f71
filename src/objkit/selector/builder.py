"""Fluent CSS compound selector builder."""

from __future__ import annotations

import logging
from typing import Protocol, Union

from objkit.errors import DuplicateSelectorPartError, SelectorOrderError
from objkit.selector.model import SelectorPart, SelectorState

__all__ = ["CssSelectorBuilder", "Renderable"]

logger = logging.getLogger(__name__)


class _Stringifiable(Protocol):
    def stringify(self) -> str: ...


# A builder handle, or a selector string that is already rendered.
Renderable = Union[_Stringifiable, str]


class CssSelectorBuilder:
    """Accumulates the parts of one selector and renders it.

    Every part method returns the builder itself, so calls chain::

        CssSelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        # 'a[href$=".png"]:focus'

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may appear
    once. Breaking either rule raises a :class:`~objkit.errors.SelectorError`
    after discarding everything added so far. ``stringify()`` also resets the
    builder, so the same instance can build an unrelated selector next.
    """

    def __init__(self) -> None:
        self._state = SelectorState()

    # --- parts -----------------------------------------------------------------

    def element(self, value: str) -> CssSelectorBuilder:
        self._check_unique(SelectorPart.ELEMENT, self._state.tag)
        self._check_order(SelectorPart.ELEMENT)
        self._state.tag = value
        self._update_selector()
        return self

    def id(self, value: str) -> CssSelectorBuilder:
        self._check_unique(SelectorPart.ID, self._state.id)
        self._check_order(SelectorPart.ID)
        self._state.id = value
        self._update_selector()
        return self

    def class_(self, value: str) -> CssSelectorBuilder:
        self._check_order(SelectorPart.CLASS)
        self._state.classes.append(value)
        self._update_selector()
        return self

    def attr(self, value: str) -> CssSelectorBuilder:
        """Add an attribute selector given without brackets, e.g. ``href$=".png"``."""
        self._check_order(SelectorPart.ATTRIBUTE)
        self._state.attributes.append(value)
        self._update_selector()
        return self

    def pseudo_class(self, value: str) -> CssSelectorBuilder:
        self._check_order(SelectorPart.PSEUDO_CLASS)
        self._state.pseudo_classes.append(value)
        self._update_selector()
        return self

    def pseudo_element(self, value: str) -> CssSelectorBuilder:
        self._check_unique(SelectorPart.PSEUDO_ELEMENT, self._state.pseudo_element)
        self._check_order(SelectorPart.PSEUDO_ELEMENT)
        self._state.pseudo_element = value
        self._update_selector()
        return self

    # --- composition -----------------------------------------------------------

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CssSelectorBuilder:
        """Join two selectors with *combinator* (``" "``, ``"+"``, ``"~"``, ``">"``).

        Builder operands are stringified, which resets them. The result
        becomes this builder's pending output; a later part call replaces
        it with a render of this builder's own parts.
        """
        self._state.rendered_selector = (
            f"{_render(left)} {combinator} {_render(right)}"
        )
        return self

    def stringify(self) -> str:
        """Return the rendered selector and reset the builder."""
        selector = self._state.rendered_selector
        self.reset()
        logger.debug("Rendered selector %r", selector)
        return selector

    def reset(self) -> None:
        """Discard every part added so far."""
        self._state = SelectorState()

    # --- internals -------------------------------------------------------------

    def _check_unique(self, part: SelectorPart, current: str | None) -> None:
        # An empty value counts as unset, so it may be replaced.
        if current:
            self.reset()
            logger.debug("Rejected second %s, selector discarded", part.name)
            raise DuplicateSelectorPartError(part)

    def _check_order(self, part: SelectorPart) -> None:
        last = self._state.last_order_rank
        if part < last:
            self.reset()
            logger.debug(
                "Rejected %s after %s, selector discarded",
                part.name,
                SelectorPart(last).name,
            )
            raise SelectorOrderError(part, SelectorPart(last))
        self._state.last_order_rank = part

    def _update_selector(self) -> None:
        self._state.rendered_selector = self._state.render()

    def __repr__(self) -> str:
        return f"CssSelectorBuilder({self._state.rendered_selector!r})"


def _render(selector: Renderable) -> str:
    if isinstance(selector, str):
        return selector
    return selector.stringify()
