from __future__ import annotations

import logging
import re
from datetime import date
from typing import Optional, TypeVar, Union

from ..config import BrHelpersConfig, resolve
from ..validate.validators import strftime_padded, valid_date_format

logger = logging.getLogger(__name__)

T = TypeVar("T")

_BR_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})", re.ASCII)


def convert_string_to_date(
    value: Optional[str],
    default: T = None,
    cfg: Optional[BrHelpersConfig] = None,
) -> Union[str, T]:
    """
    Normalize a BR (``DD/MM/YYYY``) or ISO (``YYYY-MM-DD``) date string to ISO.

    An optional time after the first space is carried through verbatim:
    ``"05/01/2024 10:30"`` -> ``"2024-01-05 10:30"``. Day and month may be
    unpadded.

    Raises:
        ValueError: for text that is neither format or names an impossible date.
    """
    if value is None or not value.strip():
        logger.debug("Empty date string, returning default")
        return default

    parts = value.strip().split(" ")
    date_part = parts[0]
    time_part = f" {parts[1]}" if len(parts) > 1 and parts[1] else ""

    iso_format = resolve(cfg).locale.iso_date_format
    if valid_date_format(date_part, iso_format):
        return date_part + time_part

    match = _BR_DATE.fullmatch(date_part)
    if not match:
        logger.debug(f"Rejected date string {value!r}")
        raise ValueError(f"Unrecognized date: {value!r}")

    day, month, year = (int(g) for g in match.groups())
    try:
        parsed = date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Invalid date: {value!r}") from e
    return strftime_padded(parsed, iso_format) + time_part
