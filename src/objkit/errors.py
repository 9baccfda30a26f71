"""Error hierarchy for objkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selector.model import SelectorPart


class ObjkitError(Exception):
    """Base error for all objkit errors."""


class ParseError(ObjkitError):
    """Raised when serialized text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


# ---------------------------------------------------------------------------
# Selector construction errors
# ---------------------------------------------------------------------------


class SelectorError(ObjkitError):
    """A selector part was added in a way the CSS grammar does not allow.

    The builder handle that raised it has already discarded its state.
    """

    def __init__(self, message: str, *, part: SelectorPart) -> None:
        super().__init__(message)
        self.part = part


class DuplicateSelectorPartError(SelectorError):
    """Element, id or pseudo-element added twice to one selector."""

    def __init__(self, part: SelectorPart) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector",
            part=part,
        )


class SelectorOrderError(SelectorError):
    """A selector part was added after a part that must follow it."""

    def __init__(self, part: SelectorPart, previous: SelectorPart) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            part=part,
        )
        self.previous = previous
