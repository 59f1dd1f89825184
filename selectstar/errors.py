"""
Errors raised while composing a parameterized query.

All of them are raised synchronously at the point of misuse; nothing is
retried and no partial query is returned.
"""

from typing import Any


class SqlCompositionError(Exception):
    """Base class for every error raised by selectstar."""

    pass


class MalformedInvocation(SqlCompositionError, TypeError):
    """Raised when ``sql``/``template`` is not given a fragment sequence."""

    pass


class UnboxingError(SqlCompositionError, TypeError):
    """Raised when unwrapping a value that is not a tagged value."""

    pass


class UnsupportedValueType(SqlCompositionError, TypeError):
    """Raised when a parameter is neither a tagged value nor a bindable literal."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(
            message
            or f"Value {value!r} ({type(value).__name__}) is not a valid pg literal"
        )


class ParameterCountMismatch(SqlCompositionError, ValueError):
    """Raised when params do not line up with the fragment slots."""

    pass
