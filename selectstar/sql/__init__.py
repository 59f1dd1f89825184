"""
Parameterized SQL composition.

Exports: sql, template, identifier, identifiers, list_, items, unsafe,
literal, format_sql, SqlQuery, FragmentSequence.
"""

from selectstar.sql.boxes import (
    identifier,
    identifiers,
    items,
    list_,
    literal,
    unsafe,
)
from selectstar.sql.composer import sql
from selectstar.sql.formatter import format_sql
from selectstar.sql.fragments import FragmentSequence, template
from selectstar.sql.query import SqlQuery

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
]
