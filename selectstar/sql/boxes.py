"""
Tagged values ("boxes") understood by the query processor.

A box is an opaque, immutable container marking a value that was produced by
one of the constructors below (``identifier``, ``list_``, ``unsafe``,
``literal``, ``template``). It can only be created through ``box()``, which
holds a module-private key, so no data a caller passes as a parameter (a dict,
an object with a ``type`` attribute, ...) is ever mistaken for one.

Only the processor looks inside a box.
"""

from collections.abc import Iterable
from datetime import date, time
from enum import Enum
from typing import Any, NamedTuple

from selectstar.core.config import settings
from selectstar.errors import UnboxingError, UnsupportedValueType
from selectstar.sql.literals import is_literal

_BOX_KEY = object()


class BoxType(str, Enum):
    IDENTIFIER = "identifier"
    LIST = "list"
    UNSAFE = "unsafe"
    LITERAL = "literal"
    TEMPLATE = "template"


class ListPayload(NamedTuple):
    items: tuple[Any, ...]
    separator: str


class Box:
    """Opaque tagged value. Build with ``box()``, read with ``unwrap()``."""

    __slots__ = ("_box_type", "_payload")

    def __init__(self, key: object, box_type: BoxType, payload: Any) -> None:
        if key is not _BOX_KEY:
            raise TypeError("Box values can only be created with box()")
        object.__setattr__(self, "_box_type", box_type)
        object.__setattr__(self, "_payload", payload)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Box values are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Box values are immutable")

    def __repr__(self) -> str:
        return f"<{self._box_type.value} box>"

    # Immutable: copies are the same box
    def __copy__(self) -> "Box":
        return self

    def __deepcopy__(self, memo: dict) -> "Box":
        return self


def box(box_type: BoxType, payload: Any) -> Box:
    return Box(_BOX_KEY, BoxType(box_type), payload)


def is_box(value: Any) -> bool:
    return isinstance(value, Box)


def unwrap(value: Any) -> Any:
    if not is_box(value):
        raise UnboxingError(f"Unexpected non-box value: {value!r}")
    return value._payload


def _is(value: Any, expected: BoxType) -> bool:
    return is_box(value) and value._box_type is expected


def is_identifier(value: Any) -> bool:
    return _is(value, BoxType.IDENTIFIER)


def is_list(value: Any) -> bool:
    return _is(value, BoxType.LIST)


def is_unsafe(value: Any) -> bool:
    return _is(value, BoxType.UNSAFE)


def is_quoted_literal(value: Any) -> bool:
    return _is(value, BoxType.LITERAL)


def is_template(value: Any) -> bool:
    return _is(value, BoxType.TEMPLATE)


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def identifier(value: str) -> Box:
    """
    Use a dynamic table or column name in a query.

    The name is double-quoted and inlined (``"accounts"``), escaped the same
    way node-postgres escapes identifiers, so untrusted names are safe here::

        sql(("SELECT * FROM ", ""), identifier(vessel_type))
        # SqlQuery(text='SELECT * FROM "spaceships"', values=[])
    """
    if not isinstance(value, str):
        raise UnsupportedValueType(
            value, f"identifier() expects a str, got {type(value).__name__}"
        )
    return box(BoxType.IDENTIFIER, value)


def list_(items: Iterable[Any], separator: str | None = None) -> Box:
    """
    Expand a dynamic number of values in place, joined by *separator*.

    Each item is processed like any other parameter, so items may be literals,
    identifiers, templates or nested lists. The separator is inserted
    verbatim: never build it from user input.

    *separator* defaults to ``settings.LIST_SEPARATOR`` (``", "``).
    """
    if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Iterable):
        raise UnsupportedValueType(
            items, f"list_() expects an iterable of values, got {type(items).__name__}"
        )
    if separator is None:
        separator = settings.LIST_SEPARATOR
    if not isinstance(separator, str):
        raise UnsupportedValueType(
            separator, f"list separator must be a str, got {type(separator).__name__}"
        )
    return box(BoxType.LIST, ListPayload(tuple(items), separator))


# simple-postgres compatibility
items = list_


def identifiers(values: Iterable[str], separator: str | None = None) -> Box:
    """A ``list_`` of ``identifier`` boxes."""
    if separator is None:
        separator = settings.IDENTIFIER_SEPARATOR
    if isinstance(values, str):
        raise UnsupportedValueType(values, "identifiers() expects an iterable of names")
    return list_([identifier(v) for v in values], separator)


def unsafe(value: Any) -> Box:
    """
    Inline *value* as raw SQL text: no escaping, no parameter.

    Last resort only. Anything reaching this from untrusted input is an
    injection.
    """
    return box(BoxType.UNSAFE, value)


def literal(value: Any) -> Box:
    """
    Inline *value* as a quoted SQL string literal instead of a ``$n`` parameter.

    Quoting follows node-postgres ``escapeLiteral``. ``None`` inlines ``NULL``;
    dates use their ISO format; other scalars are quoted via ``str()``.

    The quoted text goes through the same dedent as the rest of the query, so
    a multi-line value loses blank lines and common indentation unless
    ``SELECTSTAR_DEDENT`` is off. Bind multi-line text as a parameter instead.
    """
    if isinstance(value, (bytes, bytearray, memoryview)) or not is_literal(value):
        raise UnsupportedValueType(
            value, f"literal() cannot quote a {type(value).__name__} value"
        )
    if isinstance(value, (date, time)):
        value = value.isoformat()
    return box(BoxType.LITERAL, value)
