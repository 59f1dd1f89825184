"""Which raw values may be bound to a ``$n`` placeholder."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

# Besides None: text, numbers, booleans, dates/times and binary data
LITERAL_TYPES: tuple[type, ...] = (
    str,
    bool,
    int,
    float,
    Decimal,
    date,
    datetime,
    time,
    bytes,
    bytearray,
    memoryview,
)


def is_literal(value: Any) -> bool:
    """
    True if *value* can be passed to the driver as-is.

    Containers (dict, list, tuple, set) are not literals: a bare list is
    rejected rather than bound, use ``list_()`` to expand one.
    """
    return value is None or isinstance(value, LITERAL_TYPES)
