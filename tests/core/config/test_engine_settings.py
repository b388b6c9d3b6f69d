# tests/core/config/test_engine_settings.py

from datetime import timedelta

import pytest

from cleanconfig.core.config.errors import ConfigError, InvalidSettingsError
from cleanconfig.core.config.settings import EngineSettings
from cleanconfig.core.engine.validator import MISSING_AND_CONVERSION
from cleanconfig.core.types import ValidationContextType


def test_defaults():
    settings = EngineSettings.defaults()
    assert settings.cache.enabled is True
    assert settings.cache.max_size == 100
    assert settings.cache.ttl == timedelta(minutes=5)
    assert settings.validation.reject_unknown_properties is False
    assert settings.validation.empty_is_missing is True
    assert settings.validation.default_context_type is ValidationContextType.STARTUP
    assert settings.logging.level == "INFO"
    assert settings.logging.json is True
    assert settings.config_hash == ""


def test_partial_dict_is_merged_over_defaults():
    settings = EngineSettings.from_dict(
        {
            "cache": {"ttl_seconds": 0.5},
            "validation": {
                "required_conversion_policy": MISSING_AND_CONVERSION,
                "default_context_type": "RUNTIME_OVERRIDE",
            },
            "logging": {"level": "debug"},
            "unknown": {"ignored": True},
        },
        config_hash="abc",
    )
    assert settings.cache.max_size == 100
    assert settings.cache.ttl == timedelta(milliseconds=500)
    assert settings.validation.default_context_type is ValidationContextType.RUNTIME_OVERRIDE
    assert settings.validation.to_options().required_conversion_policy == MISSING_AND_CONVERSION
    assert settings.logging.level == "DEBUG"
    assert settings.logging.level_number == 10
    assert settings.config_hash == "abc"


@pytest.mark.parametrize(
    "data",
    [
        {"cache": {"max_size": -1}},
        {"cache": {"ttl_seconds": 0}},
        {"cache": {"ttl_seconds": -1.5}},
        {"validation": {"required_conversion_policy": "strict"}},
        {"validation": {"default_context_type": "production"}},
        {"logging": {"level": "LOUD"}},
        {"cache": None},
    ],
)
def test_invalid_values_raise(data):
    with pytest.raises(InvalidSettingsError):
        EngineSettings.from_dict(data)


@pytest.mark.parametrize(
    "data",
    [
        {"cache": {"enabled": "yes"}},
        {"cache": {"max_size": True}},
        {"logging": "DEBUG"},
    ],
)
def test_type_conflicts_raise_config_error(data):
    with pytest.raises(ConfigError):
        EngineSettings.from_dict(data)


def test_root_must_be_mapping():
    with pytest.raises(InvalidSettingsError):
        EngineSettings.from_dict(["cache"])  # type: ignore[arg-type]
