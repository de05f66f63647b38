import pytest
from pydantic import ValidationError

import brhelpers
from brhelpers.config import DEFAULT_CONFIG, BrHelpersConfig, config_from_env, load_config, resolve
from brhelpers.convert import convert_float_to_brl, convert_string_to_date
from brhelpers.masking import document_mask, phone_mask
from brhelpers.validate import valid_ddd


@pytest.fixture
def custom_config(tmp_path):
    path = tmp_path / "brhelpers.yaml"
    path.write_text(
        "masks:\n"
        "  placeholder: 'X'\n"
        "  cpf: 'XXXXXXXXX/XX'\n"
        "phone:\n"
        "  invalid_ddds: [11]\n"
        "locale:\n"
        "  currency_symbol: 'BRL'\n",
        encoding="utf-8",
    )
    return path


def test_defaults():
    cfg = load_config(None)
    assert cfg.masks.placeholder == "#"
    assert cfg.masks.cpf == "###.###.###-##"
    assert 25 in cfg.phone.invalid_ddds
    assert cfg.locale.currency_symbol == "R$"


def test_partial_yaml_overrides_only_named_keys(custom_config):
    cfg = load_config(custom_config)
    assert cfg.masks.placeholder == "X"
    assert cfg.masks.cpf == "XXXXXXXXX/XX"
    # untouched keys keep defaults
    assert cfg.masks.cnpj == "##.###.###/####-##"
    assert cfg.phone.min_ddd == 11


def test_config_flows_into_helpers(custom_config):
    cfg = load_config(custom_config)
    assert document_mask("12345678901", cfg=cfg) == "123456789/01"
    assert not valid_ddd(11, cfg=cfg)
    assert valid_ddd(11)
    assert convert_float_to_brl(10, True, cfg=cfg) == "BRL 10,00"
    # '#' templates no longer have slots under placeholder 'X'
    assert phone_mask("11988888888", cfg=cfg) == "(##) #####-####"


def test_custom_iso_format():
    cfg = BrHelpersConfig(locale={"iso_date_format": "%Y%m%d"})
    assert convert_string_to_date("05/01/2024", cfg=cfg) == "20240105"


def test_placeholder_must_be_one_character():
    with pytest.raises(ValidationError):
        BrHelpersConfig(masks={"placeholder": "##"})


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == BrHelpersConfig()


def test_config_from_env(custom_config, monkeypatch):
    monkeypatch.setenv("BRHELPERS_CONFIG", str(custom_config))
    assert config_from_env().masks.placeholder == "X"

    monkeypatch.delenv("BRHELPERS_CONFIG")
    assert config_from_env() == BrHelpersConfig()


def test_package_exports():
    assert brhelpers.__version__
    assert brhelpers.valid_cpf("111.444.777-35")
    assert brhelpers.phone_mask("1133334444") == "(11) 3333-4444"


def test_default_config_is_immutable():
    cfg = resolve(None)
    assert cfg is DEFAULT_CONFIG

    with pytest.raises(ValidationError):
        cfg.phone.min_ddd = 5
    with pytest.raises(ValidationError):
        cfg.masks = None
    with pytest.raises(AttributeError):
        cfg.phone.invalid_ddds.append(11)

    assert valid_ddd(11)
    assert 11 not in DEFAULT_CONFIG.phone.invalid_ddds


def test_yaml_ddd_list_is_stored_as_tuple(custom_config):
    assert load_config(custom_config).phone.invalid_ddds == (11,)
