"""
Quoting for values that are inlined into the query text.

Both functions reproduce node-postgres (``Client.escapeIdentifier`` and
``Client.escapeLiteral``) character for character; the identifier and literal
boxes are only safe as long as they match what the server expects.
"""

from typing import Any

# Double-quote escape for SQL identifiers
_IDENTIFIER_QUOTE_ESCAPE = str.maketrans({'"': '""'})
# Single-quote and backslash escape for SQL string literals
_LITERAL_QUOTE_ESCAPE = str.maketrans({"'": "''", "\\": "\\\\"})


def escape_identifier(value: str) -> str:
    """Double every ``"`` and wrap in double quotes: ``a"b`` -> ``"a""b"``."""
    return '"' + value.translate(_IDENTIFIER_QUOTE_ESCAPE) + '"'


def escape_literal(value: Any) -> str:
    """
    Quote *value* as a string literal. None -> 'NULL'.

    ``'`` and ``\\`` are doubled; if a backslash was present the literal is
    prefixed with `` E`` so it is read as an escape string.
    """
    if value is None:
        return "NULL"
    s = str(value)
    escaped = "'" + s.translate(_LITERAL_QUOTE_ESCAPE) + "'"
    if "\\" in s:
        escaped = " E" + escaped
    return escaped
