"""
Public entry point: compose a fragment sequence into a ``SqlQuery``.

Usage::

    sql(("SELECT * FROM accounts WHERE id = ", ""), 12345)
    # SqlQuery(text='SELECT * FROM accounts WHERE id = $1', values=[12345])

    # Python 3.14+
    sql(t"SELECT * FROM accounts WHERE id = {account_id}")
"""

import logging
from typing import Any

from selectstar.core.config import settings
from selectstar.sql.formatter import format_sql
from selectstar.sql.fragments import FragmentSequence
from selectstar.sql.processor import process
from selectstar.sql.query import SqlQuery

_log = logging.getLogger(__name__)


def sql(fragments: Any, *params: Any) -> SqlQuery:
    """
    Build a parameterized query from *fragments* and *params*.

    Literals become ``$n`` placeholders with their value appended to
    ``values``; identifiers, lists, templates, quoted literals and unsafe
    values are expanded inline. Numbering starts at ``$1`` and continues
    through every nested template and list.

    Raises ``MalformedInvocation`` if *fragments* is a plain string (calling
    ``sql("SELECT ...")`` like a regular function) or not a sequence of str.
    """
    sequence = FragmentSequence.of(fragments, params)
    text, values, _ = process(sequence.fragments, sequence.params)
    if settings.DEDENT:
        text = format_sql(text)
    _log.debug("Composed SQL with %d params: %s", len(values), text)
    return SqlQuery(text, values)
