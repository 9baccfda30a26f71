"""Selector model: part ranks and the mutable per-handle state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class SelectorPart(IntEnum):
    """Categories of a compound selector, valued by the order they must be added in."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


@dataclass
class SelectorState:
    """Fragments accumulated by one builder handle."""

    tag: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)  # raw, without brackets
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None
    rendered_selector: str = ""
    last_order_rank: int = 0  # 0 = nothing added yet

    def render(self) -> str:
        """Concatenate the fragments in CSS output order.

        Attributes follow the tag directly, ahead of id and classes. Empty
        tag, id and pseudo-element values are left out.
        """
        selector = ""
        if self.tag:
            selector += self.tag
        if self.attributes:
            selector += "".join(f"[{attr}]" for attr in self.attributes)
        if self.id:
            selector += f"#{self.id}"
        selector += "".join(f".{name}" for name in self.classes)
        selector += "".join(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element:
            selector += f"::{self.pseudo_element}"
        return selector
