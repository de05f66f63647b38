"""brhelpers: Brazilian-locale parsing, masking and validation helpers."""

from .config import BrHelpersConfig, config_from_env, load_config
from .convert import convert_float_to_brl, convert_string_to_date, convert_string_to_double
from .masking import apply_mask, cep_mask, document_mask, only_digits, phone_mask
from .validate import phone_validate, valid_cpf, valid_date_format, valid_ddd

__version__ = "0.1.0"

__all__ = [
    # Config
    "BrHelpersConfig",
    "config_from_env",
    "load_config",
    # Conversion
    "convert_float_to_brl",
    "convert_string_to_date",
    "convert_string_to_double",
    # Masks
    "apply_mask",
    "cep_mask",
    "document_mask",
    "only_digits",
    "phone_mask",
    # Validators
    "phone_validate",
    "valid_cpf",
    "valid_date_format",
    "valid_ddd",
]
