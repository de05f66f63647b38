from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BRHELPERS_CONFIG"

# Simple Brazilian phone check. No DDD may start with 0 and no subscriber
# number may start with 0 or 1.
# Valid examples: +55 (11) 98888-8888 / 9999-9999 / 21 98888-8888 / 5511988888888
PHONE_PATTERN = (
    r"^(?:(?:\+|00)?(55)\s?)?(?:\(?([1-9][0-9])\)?\s?)?"
    r"(?:((?:9\d|[2-9])\d{3})\-?(\d{4}))$"
)


# ---- Mask templates (placeholder slots + literal characters) ----
class MaskTemplates(BaseModel):
    model_config = ConfigDict(frozen=True)

    placeholder: str = Field(default="#", min_length=1, max_length=1)
    cpf: str = "###.###.###-##"
    cnpj: str = "##.###.###/####-##"
    mobile_phone: str = "(##) #####-####"
    landline_phone: str = "(##) ####-####"
    cep: str = "#####-###"


# ---- Telephone rules (DDD table + number regex) ----
class PhoneRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_ddd: int = 11
    max_ddd: int = 99
    # Unassigned area codes inside the 11..99 range
    invalid_ddds: Tuple[int, ...] = (25, 26, 29, 36, 39, 52, 72, 76, 78)
    pattern: str = PHONE_PATTERN


# ---- Number / date presentation ----
class LocaleFormats(BaseModel):
    model_config = ConfigDict(frozen=True)

    currency_symbol: str = "R$"
    decimal_separator: str = ","
    thousands_separator: str = "."
    iso_date_format: str = "%Y-%m-%d"
    datetime_format: str = "%d/%m/%Y %H:%M:%S"


# ---- Root config ----
class BrHelpersConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    masks: MaskTemplates = Field(default_factory=MaskTemplates)
    phone: PhoneRules = Field(default_factory=PhoneRules)
    locale: LocaleFormats = Field(default_factory=LocaleFormats)


DEFAULT_CONFIG = BrHelpersConfig()


def resolve(cfg: Optional[BrHelpersConfig]) -> BrHelpersConfig:
    """Return `cfg`, or the module default when the caller passed nothing."""
    return cfg if cfg is not None else DEFAULT_CONFIG


# ---- Loaders ----
def load_config(path: Optional[Path]) -> BrHelpersConfig:
    if not path:
        return BrHelpersConfig()
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    logger.info(f"Loaded brhelpers config from {path}")
    return BrHelpersConfig(**data)


def config_from_env() -> BrHelpersConfig:
    """
    Load the YAML file named by BRHELPERS_CONFIG, if set.
    Falls back to the built-in defaults otherwise.
    """
    path = os.getenv(CONFIG_ENV_VAR)
    return load_config(Path(path) if path else None)
