"""
selectstar: compose nested, dynamic SQL into ``$n`` parameterized queries.
"""

from selectstar.errors import (
    MalformedInvocation,
    ParameterCountMismatch,
    SqlCompositionError,
    UnboxingError,
    UnsupportedValueType,
)
from selectstar.sql import (
    FragmentSequence,
    SqlQuery,
    format_sql,
    identifier,
    identifiers,
    items,
    list_,
    literal,
    sql,
    template,
    unsafe,
)

__all__ = [
    "sql",
    "template",
    "identifier",
    "identifiers",
    "list_",
    "items",
    "unsafe",
    "literal",
    "format_sql",
    "SqlQuery",
    "FragmentSequence",
    "SqlCompositionError",
    "MalformedInvocation",
    "UnboxingError",
    "UnsupportedValueType",
    "ParameterCountMismatch",
]
