"""JSON serialization with runtime type re-attachment.

``serialize`` writes compact JSON. ``deserialize`` parses it back and hands
the plain result to ``bind``, which attaches a class to it so the class's
methods and properties are available on the parsed data::

    circle = deserialize(Circle, '{"radius": 10}')
    circle.radius       # 10
    circle.get_area()   # Circle.get_area, evaluated on the parsed fields
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import logging
from collections.abc import Mapping
from typing import Any, NoReturn

from objkit.config import ObjkitConfig
from objkit.errors import ParseError

__all__ = ["BoundValue", "bind", "deserialize", "serialize"]

logger = logging.getLogger(__name__)

_SEPARATORS = (",", ":")

# Parsed types that cannot be subclassed or rebuilt from an instance.
_FINAL_TYPES = (bool, type(None))


# --- adapter ----------------------------------------------------------------


class BoundValue:
    """A parsed value that cannot carry attributes, paired with a class.

    Attribute lookups go to ``descriptor``; functions and properties found
    there are bound to this adapter, so ``self.value`` is the parsed data
    inside them.
    """

    __slots__ = ("descriptor", "value")

    def __init__(self, descriptor: type, value: Any) -> None:
        object.__setattr__(self, "descriptor", descriptor)
        object.__setattr__(self, "value", value)

    def __getattr__(self, name: str) -> Any:
        descriptor = object.__getattribute__(self, "descriptor")
        try:
            raw = inspect.getattr_static(descriptor, name)
        except AttributeError:
            raise AttributeError(
                f"{descriptor.__name__!r} bound value has no attribute {name!r}"
            ) from None
        if isinstance(raw, (staticmethod, classmethod)) or not hasattr(raw, "__get__"):
            return getattr(descriptor, name)
        return raw.__get__(self, descriptor)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundValue):
            return (self.descriptor, self.value) == (other.descriptor, other.value)
        return self.value == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundValue({self.descriptor.__name__}, {self.value!r})"


# --- binding ----------------------------------------------------------------


def bind(descriptor: Any, data: Any) -> Any:
    """Attach *descriptor* (a class) to plain *data* and return the result.

    Mappings become instances of *descriptor* built without calling its
    ``__init__``; instances without a ``__dict__`` fall through to the
    adapter. Values of a type *descriptor* subclasses are passed to its
    constructor. Anything else is wrapped in a :class:`BoundValue`.
    The shape of *data* is never checked against *descriptor*.
    """
    cls = descriptor if isinstance(descriptor, type) else type(descriptor)

    if not isinstance(data, _FINAL_TYPES) and issubclass(cls, type(data)):
        logger.debug("Rebuilt %s as %s", type(data).__name__, cls.__name__)
        return cls(data)

    if isinstance(data, Mapping):
        obj = cls.__new__(cls)
        fields = getattr(obj, "__dict__", None)
        if isinstance(fields, dict):
            # Bypasses __setattr__, so frozen dataclasses and keys such as
            # "__class__" land as plain fields.
            fields.update(data)
            logger.debug("Bound %d field(s) to %s", len(data), cls.__name__)
            return obj

    logger.debug("Wrapped %s in BoundValue(%s)", type(data).__name__, cls.__name__)
    return BoundValue(cls, data)


# --- serialization ----------------------------------------------------------


def _encode_object(obj: Any) -> Any:
    """Fallback encoder for values the json module does not know."""
    if isinstance(obj, BoundValue):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    try:
        fields = vars(obj)
    except TypeError:
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        ) from None
    return {key: value for key, value in fields.items() if not callable(value)}


def serialize(value: Any, config: ObjkitConfig | None = None) -> str:
    """Return the compact JSON text for *value*.

    Keys keep insertion order unless ``config.sort_keys`` is set.
    """
    cfg = config or ObjkitConfig()
    return json.dumps(
        value,
        separators=_SEPARATORS,
        sort_keys=cfg.sort_keys,
        ensure_ascii=cfg.ensure_ascii,
        allow_nan=False,
        default=_encode_object,
    )


def _reject_constant(name: str) -> NoReturn:
    raise ParseError(f"Invalid JSON literal: {name}")


def deserialize(descriptor: Any, text: str | bytes) -> Any:
    """Parse JSON *text* and bind *descriptor* to the result.

    Raises:
        ParseError: If *text* is not valid JSON.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, line=exc.lineno, column=exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Undecodable input: {exc.reason}") from exc
    except RecursionError as exc:
        raise ParseError("Input nested too deeply") from exc
    return bind(descriptor, data)
