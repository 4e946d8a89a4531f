# tests/core/config/test_loader.py
"""
Testes do loader de configuração (defaults + local).

Os testes asseguram que:
- YAML e JSON são aceitos
- o override local tem precedência e é opcional
- arquivos ausentes, formatos desconhecidos e raízes inválidas falham explicitamente
"""

import json
from pathlib import Path

import pytest

from builderflow.core.config.errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from builderflow.core.config.loader import load_config


def test_defaults_only(tmp_path: Path, project_like_config_defaults_yaml):
    defaults = tmp_path / "builderflow.defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    cfg = load_config(defaults_path=str(defaults))

    assert cfg["engine"]["strict_target"] is False
    assert cfg["flows"]["checkout"]["target"] == "order"


def test_local_overrides_defaults(tmp_path: Path, project_like_config_defaults_yaml, project_like_config_local_yaml):
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    cfg = load_config(defaults_path=defaults, local_path=local)

    assert cfg["engine"]["strict_target"] is True
    assert cfg["flows"]["checkout"]["transients"] == ["cart_total"]


def test_missing_local_is_ignored(tmp_path: Path, project_like_config_defaults_yaml):
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    cfg = load_config(defaults_path=defaults, local_path=tmp_path / "nope.yaml")

    assert cfg["engine"]["strict_target"] is False


def test_json_is_supported(tmp_path: Path):
    defaults = tmp_path / "defaults.json"
    defaults.write_text(json.dumps({"engine": {"strict_target": True}}), encoding="utf-8")
    assert load_config(defaults_path=defaults) == {"engine": {"strict_target": True}}


def test_empty_file_is_empty_dict(tmp_path: Path):
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("", encoding="utf-8")
    assert load_config(defaults_path=defaults) == {}


def test_missing_defaults_raises(tmp_path: Path):
    with pytest.raises(ConfigFileNotFoundError):
        load_config(defaults_path=tmp_path / "missing.yaml")


def test_invalid_root_type_raises(tmp_path: Path):
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_unsupported_extension_raises(tmp_path: Path):
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("engine = { strict_target = true }\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults), local_path=None)
