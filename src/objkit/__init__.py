"""objkit - value objects, JSON type re-attachment and a CSS selector builder."""

__version__ = "0.1.0"

from objkit.codec import BoundValue, bind, deserialize, serialize  # noqa: E402
from objkit.config import ObjkitConfig  # noqa: E402
from objkit.errors import (  # noqa: E402
    DuplicateSelectorPartError,
    ObjkitError,
    ParseError,
    SelectorError,
    SelectorOrderError,
)
from objkit.selector import CssSelectorBuilder, css_selector_builder  # noqa: E402
from objkit.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    # Shapes
    "Rectangle",
    # Codec
    "BoundValue",
    "bind",
    "deserialize",
    "serialize",
    # Selector builder
    "CssSelectorBuilder",
    "css_selector_builder",
    # Config
    "ObjkitConfig",
    # Errors
    "ObjkitError",
    "ParseError",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
