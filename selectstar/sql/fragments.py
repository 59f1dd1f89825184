"""
Fragment sequences and deferred templates.

A fragment sequence is N+1 literal text segments around N parameter slots::

    FragmentSequence(("SELECT * FROM accounts WHERE id = ", ""), (12345,))

On Python 3.14+ a ``string.templatelib.Template`` (a ``t"..."`` string) can be
passed wherever a fragment tuple is accepted.
"""

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from selectstar.errors import MalformedInvocation
from selectstar.sql.boxes import Box, BoxType, box

if sys.version_info >= (3, 14):
    from string.templatelib import Template as TemplateString
else:
    TemplateString = None


@dataclass(frozen=True)
class FragmentSequence:
    fragments: tuple[str, ...]
    params: tuple[Any, ...] = ()

    @classmethod
    def of(cls, fragments: Any, params: Sequence[Any] = ()) -> "FragmentSequence":
        """Validate the first argument of ``sql()``/``template()`` and pair it with *params*."""
        if isinstance(fragments, FragmentSequence):
            if params:
                raise MalformedInvocation(
                    "Unexpected params next to an already built FragmentSequence"
                )
            return fragments
        if TemplateString is not None and isinstance(fragments, TemplateString):
            if params:
                raise MalformedInvocation(
                    "Unexpected params next to a template string; interpolate them instead"
                )
            return cls(tuple(fragments.strings), tuple(fragments.values))
        if isinstance(fragments, (str, bytes, bytearray)) or not isinstance(
            fragments, Sequence
        ):
            raise MalformedInvocation(
                f"Unexpected value {type(fragments).__name__} at arg 0; "
                "expected a sequence of text fragments"
            )
        if not fragments:
            raise MalformedInvocation("Fragment sequence must hold at least one fragment")
        for i, fragment in enumerate(fragments):
            if not isinstance(fragment, str):
                raise MalformedInvocation(
                    f"Fragment {i} is {type(fragment).__name__}, expected str"
                )
        return cls(tuple(fragments), tuple(params))


def template(fragments: Any, *params: Any) -> Box:
    """
    Capture a fragment sequence for later use inside ``sql()``.

    Nothing is evaluated here: placeholder numbers are assigned when an
    enclosing query reaches the template, so the same template can be reused
    at different positions and in different queries.
    """
    return box(BoxType.TEMPLATE, FragmentSequence.of(fragments, params))


# The sub-templater handed to callable parameters.
subsql = template
