"""
Recursive expansion of a fragment sequence into ``$n`` text plus values.

``process`` is pure: it takes the index of the next placeholder and returns
``(text, values, next_index)``. Nested templates and lists receive the running
index and hand back the advanced one, so numbering stays contiguous from
``$1`` however deeply the caller nests them.
"""

from collections.abc import Sequence
from typing import Any, NamedTuple

from selectstar.errors import ParameterCountMismatch, UnsupportedValueType
from selectstar.sql.boxes import (
    is_identifier,
    is_list,
    is_quoted_literal,
    is_template,
    is_unsafe,
    unwrap,
)
from selectstar.sql.escape import escape_identifier, escape_literal
from selectstar.sql.fragments import FragmentSequence, subsql
from selectstar.sql.literals import is_literal


class Processed(NamedTuple):
    text: str
    values: list[Any]
    next_index: int


def render_unsafe(value: Any) -> str:
    """Text for an ``unsafe()`` payload. None -> NULL, bool -> TRUE/FALSE,
    binary data is decoded as UTF-8 with U+FFFD for undecodable bytes,
    anything else goes through ``str()``."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def process(
    fragments: Sequence[str], params: Sequence[Any], index: int = 1
) -> Processed:
    """Interleave *fragments* with the processed *params*, numbering from *index*."""
    slots = len(fragments) - 1
    if len(params) > slots:
        extra = ", ".join(repr(p) for p in params[slots:])
        raise ParameterCountMismatch(f"Unexpected additional params: {extra}")
    if len(params) < slots:
        raise ParameterCountMismatch(
            f"Expected {slots} params for {len(fragments)} fragments, got {len(params)}"
        )

    parts: list[str] = []
    values: list[Any] = []
    for fragment, param in zip(fragments, params):
        parts.append(fragment)
        text, param_values, index = process_param(param, index)
        parts.append(text)
        values.extend(param_values)
    parts.append(fragments[-1])
    return Processed("".join(parts), values, index)


def _process_template(sequence: FragmentSequence, index: int) -> Processed:
    return process(sequence.fragments, sequence.params, index)


def process_param(param: Any, index: int) -> Processed:
    """Expand a single parameter. Order matters: boxes are checked before
    ``is_literal`` so none of them is ever bound as an opaque value."""
    if callable(param):
        result = param(subsql)
        if is_template(result):
            return _process_template(unwrap(result), index)
        # Lazy value producer rather than a fragment builder
        return process_param(result, index)

    if is_identifier(param):
        return Processed(escape_identifier(unwrap(param)), [], index)

    if is_list(param):
        payload = unwrap(param)
        parts: list[str] = []
        values: list[Any] = []
        for i, item in enumerate(payload.items):
            if i:
                parts.append(payload.separator)
            text, item_values, index = process_param(item, index)
            parts.append(text)
            values.extend(item_values)
        return Processed("".join(parts), values, index)

    if is_unsafe(param):
        return Processed(render_unsafe(unwrap(param)), [], index)

    if is_quoted_literal(param):
        return Processed(escape_literal(unwrap(param)), [], index)

    if is_template(param):
        return _process_template(unwrap(param), index)

    if is_literal(param):
        return Processed(f"${index}", [param], index + 1)

    raise UnsupportedValueType(param)
