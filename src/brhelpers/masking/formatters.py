"""
Ready-made masks for Brazilian phone numbers, CPF/CNPJ and CEP.

Each formatter extracts the digits first, so already-formatted input is
re-rendered cleanly: ``phone_mask("(11)98888 8888")`` -> ``"(11) 98888-8888"``.
"""

from __future__ import annotations

from typing import Optional

from ..config import BrHelpersConfig, resolve
from .engine import apply_mask, only_digits

CPF_LENGTH = 11
CNPJ_LENGTH = 14
MOBILE_PHONE_LENGTH = 11


def phone_mask(value: Optional[str], cfg: Optional[BrHelpersConfig] = None) -> str:
    """
    Format a phone number as ``(DD) NNNNN-NNNN`` (11 digits) or
    ``(DD) NNNN-NNNN`` (anything else). Empty input gives ``""``.
    """
    digits = only_digits(value)
    if not digits:
        return ""

    masks = resolve(cfg).masks
    if len(digits) == MOBILE_PHONE_LENGTH:
        return apply_mask(digits, masks.mobile_phone, masks.placeholder)
    return apply_mask(digits, masks.landline_phone, masks.placeholder)


def document_mask(value: Optional[str], cfg: Optional[BrHelpersConfig] = None) -> str:
    """
    Format a taxpayer document by length.

    - 11 digits -> CPF  ``XXX.XXX.XXX-XX``
    - 14 digits -> CNPJ ``XX.XXX.XXX/XXXX-XX``
    - otherwise the bare digits are returned unchanged

    No checksum is verified here; see `validate.validators.valid_cpf`.
    """
    digits = only_digits(value)
    if not digits:
        return ""

    masks = resolve(cfg).masks
    if len(digits) == CPF_LENGTH:
        return apply_mask(digits, masks.cpf, masks.placeholder)
    if len(digits) == CNPJ_LENGTH:
        return apply_mask(digits, masks.cnpj, masks.placeholder)
    return digits


def cep_mask(value: Optional[str], cfg: Optional[BrHelpersConfig] = None) -> str:
    """Format a postal code (CEP) as ``XXXXX-XXX``."""
    digits = only_digits(value)
    if not digits:
        return ""

    masks = resolve(cfg).masks
    return apply_mask(digits, masks.cep, masks.placeholder)
