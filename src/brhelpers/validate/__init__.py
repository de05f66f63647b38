"""Boolean validators: CPF checksum, DDD table, phone regex, date formats."""

from .validators import phone_validate, valid_cpf, valid_date_format, valid_ddd

__all__ = [
    "phone_validate",
    "valid_cpf",
    "valid_date_format",
    "valid_ddd",
]
