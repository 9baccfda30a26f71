"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Rectangle:
    """A width/height pair with a derived area.

    Values are not validated: whatever supports ``*`` is accepted and the
    product is computed on each call.
    """

    width: Any
    height: Any

    def get_area(self) -> Any:
        return self.width * self.height
