"""Digit extraction and template masks (CPF, CNPJ, phone, CEP)."""

from .engine import apply_mask, only_digits
from .formatters import cep_mask, document_mask, phone_mask

__all__ = [
    "apply_mask",
    "only_digits",
    "cep_mask",
    "document_mask",
    "phone_mask",
]
