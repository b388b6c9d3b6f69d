# tests/core/config/test_settings_loader.py
"""
Testes do carregador de settings (load_settings / load_settings_dict).

Este módulo valida o comportamento do loader responsável por:
- aplicar os defaults embutidos
- carregar um arquivo de defaults (YAML ou JSON)
- carregar um arquivo local de overrides
- rejeitar formatos e estruturas inválidas

Os testes asseguram que:
- o arquivo de defaults, quando informado, é obrigatório
- o arquivo local é opcional
- formatos não suportados são rejeitados
- o hash dos settings efetivos é estável

Decisões arquiteturais:
    - Settings são declarativos e baseados em arquivos
    - Overrides locais atuam apenas sobre as chaves que declaram
    - Erros estruturais são tratados como falhas fatais

Limites explícitos:
    - Não valida a interpretação tipada (ver test_engine_settings.py)
"""

import json
from pathlib import Path

import pytest

try:
    from cleanconfig.core.config.errors import (
        InvalidConfigRootTypeError,
        SettingsNotFoundError,
        UnsupportedConfigFormatError,
    )
    from cleanconfig.core.config.loader import (
        compute_settings_hash,
        load_settings,
        load_settings_dict,
    )
    from cleanconfig.core.config.settings import DEFAULT_SETTINGS
except Exception as e:  # noqa: BLE001
    load_settings = None
    load_settings_dict = None
    compute_settings_hash = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de settings e suas exceções tipadas estejam disponíveis.

    Decisões arquiteturais:
        - Falha antecipada e explícita quando contratos do loader estão ausentes
        - Mensagem de erro descreve exatamente os módulos esperados
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/cleanconfig/core/config/loader.py (load_settings)\n"
            "- src/cleanconfig/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_no_files_yields_builtin_defaults():
    _require_imports()
    assert load_settings_dict() == DEFAULT_SETTINGS


def test_missing_defaults_raises(tmp_path: Path):
    """
    Verifica que um arquivo de defaults informado e ausente é erro fatal.

    Invariantes:
        - A exceção utilizada é específica (`SettingsNotFoundError`)
        - Nenhum settings parcial é retornado
    """
    _require_imports()
    with pytest.raises(SettingsNotFoundError):
        load_settings_dict(defaults_path=tmp_path / "defaults.yaml")


def test_missing_local_is_ok(tmp_path: Path, settings_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(settings_defaults_yaml, encoding="utf-8")

    out = load_settings_dict(defaults_path=defaults, local_path=tmp_path / "local.yaml")
    assert out["cache"]["max_size"] == 50
    assert out["cache"]["ttl_seconds"] == 300
    assert out["logging"]["level"] == "INFO"


def test_load_defaults_and_local(tmp_path: Path, settings_defaults_yaml, settings_local_yaml):
    """
    Verifica o merge defaults embutidos ← defaults ← local.

    O resultado final deve refletir:
    - valores sobrescritos pelo arquivo local
    - valores preservados do arquivo de defaults
    - valores embutidos para chaves não declaradas
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(settings_defaults_yaml, encoding="utf-8")
    local.write_text(settings_local_yaml, encoding="utf-8")

    settings = load_settings(defaults_path=str(defaults), local_path=str(local))
    assert settings.cache.max_size == 50
    assert settings.cache.ttl_seconds == 30
    assert settings.validation.reject_unknown_properties is True
    assert settings.validation.empty_is_missing is True
    assert settings.logging.level == "DEBUG"
    assert settings.logging.json is False


def test_json_files_are_supported(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.json"
    defaults.write_text(json.dumps({"cache": {"enabled": False}}), encoding="utf-8")
    assert load_settings(defaults_path=defaults).cache.enabled is False


def test_empty_file_is_empty_dict(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yml"
    defaults.write_text("", encoding="utf-8")
    assert load_settings_dict(defaults_path=defaults) == DEFAULT_SETTINGS


def test_unsupported_format_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("[cache]\nenabled = true\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_settings_dict(defaults_path=defaults)


def test_root_must_be_a_mapping(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_settings_dict(defaults_path=defaults)


def test_settings_hash_is_stable_and_tracks_content(tmp_path: Path, settings_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(settings_defaults_yaml, encoding="utf-8")

    first = load_settings(defaults_path=defaults)
    second = load_settings(defaults_path=defaults)
    assert first.config_hash == second.config_hash
    assert len(first.config_hash) == 64
    assert first.config_hash != load_settings().config_hash


def test_hash_ignores_key_order():
    _require_imports()
    assert compute_settings_hash({"a": 1, "b": {"c": 2}}) == compute_settings_hash({"b": {"c": 2}, "a": 1})
    with pytest.raises(TypeError):
        compute_settings_hash([("a", 1)])  # type: ignore[arg-type]
