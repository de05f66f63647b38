from .dates import convert_string_to_date
from .numbers import convert_float_to_brl, convert_string_to_double

__all__ = [
    "convert_string_to_date",
    "convert_float_to_brl",
    "convert_string_to_double",
]
