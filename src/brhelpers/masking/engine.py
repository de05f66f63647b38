"""
Low-level masking primitives.

What lives here
---------------
- `only_digits`: strip everything that is not 0-9 from a string.
- `apply_mask`: render a digit string into a template such as
  ``###.###.###-##`` where ``#`` is a slot and everything else is literal.

Every formatter in `masking.formatters` is a thin wrapper around these two.

Mask semantics
--------------
The template is walked left to right with a cursor into the value:

- a placeholder consumes the next character of the value, or is skipped
  (nothing appended) once the value is exhausted;
- any other character is copied verbatim, even after the value ran out.

So ``apply_mask("1", "(##)")`` gives ``"(1)"`` and extra value characters past
the last slot are dropped. The output is never longer than the template.
"""

from __future__ import annotations

import re
from typing import Optional

_NON_DIGIT = re.compile(r"[^0-9]")


def only_digits(value: Optional[str]) -> Optional[str]:
    """
    Return only the ASCII digit characters of `value`, in order.

    ``None`` and ``""`` mean "no value" and return ``None``. Any other input
    returns a (possibly empty) string, e.g. ``"(11) 98888-8888"`` ->
    ``"11988888888"``.
    """
    if not value:
        return None
    return _NON_DIGIT.sub("", value)


def apply_mask(value: str, template: str, placeholder: str = "#") -> str:
    """
    Interleave the characters of `value` into the slots of `template`.

    Args:
        value: Characters to place, usually the output of `only_digits`.
        template: Mask made of `placeholder` slots and literal characters.
        placeholder: The slot character (exactly one character).

    Returns:
        The masked string. Never longer than `template`.

    Raises:
        ValueError: if `placeholder` is not a single character.
    """
    if len(placeholder) != 1:
        raise ValueError("placeholder must be a single character")

    out = []
    k = 0
    for ch in template:
        if ch == placeholder:
            if k < len(value):
                out.append(value[k])
                k += 1
        else:
            out.append(ch)
    return "".join(out)
