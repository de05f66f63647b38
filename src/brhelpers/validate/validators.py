"""
Validators for Brazilian documents, telephone data and date strings.

Why this file exists
--------------------
Formatting helpers happily render any digit string into a CPF or phone mask.
These functions answer the separate question "is this value plausible?"
without raising: every validator returns ``True`` or ``False`` and treats
``None`` or garbage input as simply invalid.

Design principles
-----------------
- **Pure functions**: no shared state; tables come from the (immutable) config.
- **Boolean contract**: invalid input is never an exception.
"""

from __future__ import annotations

import re
from datetime import date as date_type, datetime
from typing import Optional, Union

from ..config import BrHelpersConfig, resolve
from ..masking.engine import only_digits

_ASCII_DIGITS = re.compile(r"[0-9]+")


def strftime_padded(value: date_type, fmt: str) -> str:
    """strftime with ``%Y`` always rendered as four digits (``0999``, not ``999``)."""
    return value.strftime(fmt.replace("%Y", f"{value.year:04d}"))


def valid_cpf(cpf: Optional[str]) -> bool:
    """
    Validate a CPF (individual taxpayer number) by its two check digits.

    Formatting is ignored, so ``"111.444.777-35"`` and ``"11144477735"`` are
    equivalent. Repeated-digit sequences such as ``"111.111.111-11"`` pass the
    checksum arithmetic but are rejected explicitly.

    Check digit for position t (9, then 10):
        sum(d[c] * (t + 1 - c) for c < t) * 10 % 11 % 10 == d[t]

    Args:
        cpf: Candidate CPF, with or without punctuation.

    Returns:
        True if the number has 11 digits and both check digits match.
    """
    if cpf is None:
        return False
    digits = only_digits(str(cpf)) or ""

    if len(digits) != 11:
        return False

    # 000.000.000-00, 111.111.111-11, ...
    if digits == digits[0] * 11:
        return False

    for t in (9, 10):
        total = sum(int(digits[c]) * (t + 1 - c) for c in range(t))
        check = ((total * 10) % 11) % 10
        if int(digits[t]) != check:
            return False
    return True


def valid_ddd(ddd: Union[int, str, None], cfg: Optional[BrHelpersConfig] = None) -> bool:
    """
    Validate a Brazilian telephone area code (DDD).

    A DDD is valid when it lies in 11..99, does not end in 0 and is not one of
    the unassigned codes listed in ``cfg.phone.invalid_ddds``.
    """
    if ddd is None or isinstance(ddd, bool):
        return False

    text = str(ddd).strip()
    if not _ASCII_DIGITS.fullmatch(text):
        return False

    value = int(text)
    rules = resolve(cfg).phone
    if value < rules.min_ddd or value > rules.max_ddd:
        return False
    if value % 10 == 0:
        return False
    return value not in rules.invalid_ddds


def phone_validate(phone: Optional[str], cfg: Optional[BrHelpersConfig] = None) -> bool:
    """
    Loosely check that `phone` looks like a Brazilian telephone number.

    Country code (``+55``/``0055``/``55``) and DDD are optional; the subscriber
    number is 8 digits, or 9 digits starting with 9. Leading zeros are ignored.

    Examples accepted: ``+55 (11) 98888-8888``, ``9999-9999``,
    ``21 98888-8888``, ``5511988888888``.
    """
    if phone is None:
        return False
    candidate = str(phone).lstrip("0")
    return re.match(resolve(cfg).phone.pattern, candidate, re.ASCII) is not None


def valid_date_format(
    date: Optional[str],
    fmt: Optional[str] = None,
    cfg: Optional[BrHelpersConfig] = None,
) -> bool:
    """
    True if `date` parses with `fmt` AND formatting it back gives the same text.

    The round trip rejects values strptime would otherwise tolerate, such as
    unpadded fields (``"1/2/2024"`` against ``%d/%m/%Y``).

    Args:
        date: Candidate string.
        fmt: strptime/strftime format. Defaults to ``cfg.locale.datetime_format``
             (``%d/%m/%Y %H:%M:%S``).
    """
    if date is None:
        return False
    if fmt is None:
        fmt = resolve(cfg).locale.datetime_format

    try:
        parsed = datetime.strptime(date, fmt)
    except ValueError:
        return False
    return strftime_padded(parsed, fmt) == date
