"""
Parse locale-formatted number strings and render amounts as Brazilian Real.

Input to `convert_string_to_double` can come from either convention:

  - ``"1234.5"`` / ``"-3e2"``  plain numeric literal, rounded to cents
  - ``"1,234.56"``             US grouping (a ``.`` among the last 3 chars)
  - ``"1.234,56"``             BR grouping (anything else)

Rounding is half away from zero, on the decimal text rather than the binary
float, so ``"1.005"`` becomes ``1.01``.
"""

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional, TypeVar, Union

from ..config import BrHelpersConfig, resolve

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CENTS = Decimal("0.01")
_NUMERIC = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _round_cents(text: str) -> float:
    try:
        return float(Decimal(text).quantize(_CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # Too many digits to hold at cent precision; cents are irrelevant there.
        return float(text)


def convert_string_to_double(
    value: Optional[str], default: T = None
) -> Union[float, T]:
    """
    Convert a US- or BR-formatted number string to float.

    Args:
        value: Text such as ``"1.234,56"``, ``"1,234.56"`` or ``"12.3"``.
        default: Returned as-is when `value` is None or blank.

    Returns:
        The parsed float, or `default`.

    Raises:
        ValueError: if `value` is present but is not a number in either format.
    """
    if value is None or not value.strip():
        logger.debug("Empty number string, returning default")
        return default

    text = value.strip()
    if _NUMERIC.fullmatch(text):
        return _round_cents(text)

    if "." in text[-3:]:
        # 1,234.56
        normalized = text.replace(",", "")
    else:
        # 1.234,56
        normalized = text.replace(".", "").replace(",", ".")

    if not _NUMERIC.fullmatch(normalized):
        logger.debug(f"Rejected number string {value!r}")
        raise ValueError(f"Not a number: {value!r}")
    return float(normalized)


def convert_float_to_brl(
    value: Union[int, float, Decimal],
    with_symbol: bool = False,
    cfg: Optional[BrHelpersConfig] = None,
) -> str:
    """
    Render `value` with two decimals in Brazilian notation.

    Examples:
      1234.5                    -> '1.234,50'
      1234.5, with_symbol=True  -> 'R$ 1.234,50'
      -0.5                      -> '-0,50'
    """
    amount = Decimal(str(value))
    if not amount.is_finite():
        raise ValueError(f"Cannot format non-finite amount: {value!r}")

    # Enough precision to keep every integer digit plus the cents.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        if amount == 0:
            amount = abs(amount)  # no '-0,00'
        grouped = f"{amount:,f}"

    fmt = resolve(cfg).locale
    integer, _, cents = grouped.partition(".")
    text = integer.replace(",", fmt.thousands_separator) + fmt.decimal_separator + cents
    return f"{fmt.currency_symbol} {text}" if with_symbol else text
