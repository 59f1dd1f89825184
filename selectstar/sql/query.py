"""The composed query handed to a driver."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SqlQuery:
    """
    Query text with ``$1``, ``$2``, ... placeholders and the values to bind.

    ``values[i]`` binds to ``$(i + 1)``. Unpacks as ``text, values = query``.
    """

    text: str
    values: list[Any] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        yield self.text
        yield self.values

    def as_args(self) -> tuple[Any, ...]:
        """``(text, *values)`` for ``conn.execute(query, *args)`` style drivers."""
        return (self.text, *self.values)
