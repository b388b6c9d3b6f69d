# src/cleanconfig/core/config/settings.py
"""
Settings tipados do engine.

Este módulo transforma o dicionário resolvido pelo loader em um
`EngineSettings` imutável, validando tipos e intervalos de cada chave.

Chaves reconhecidas (v1):
    cache:
        enabled: bool
        max_size: int >= 0
        ttl_seconds: número > 0
    validation:
        reject_unknown_properties: bool
        empty_is_missing: bool
        required_conversion_policy: "conversion" | "missing_and_conversion"
        default_context_type: startup | runtime_override | persisted | testing
    logging:
        level: nome de nível do logging padrão
        json: bool

Decisões arquiteturais:
    - `DEFAULT_SETTINGS` é a base de todo merge; um dicionário vazio produz
      os settings padrão
    - Chaves desconhecidas são ignoradas (compatibilidade para frente)
    - Valores inválidos são fatais (`InvalidSettingsError`)
"""

from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Mapping

from ..engine.validator import REQUIRED_CONVERSION_POLICIES, ValidatorOptions
from ..types import ValidationContextType
from .errors import InvalidSettingsError
from .merge import deep_merge

DEFAULT_SETTINGS: Dict[str, Any] = {
    "cache": {
        "enabled": True,
        "max_size": 100,
        "ttl_seconds": 300,
    },
    "validation": {
        "reject_unknown_properties": False,
        "empty_is_missing": True,
        "required_conversion_policy": "conversion",
        "default_context_type": "startup",
    },
    "logging": {
        "level": "INFO",
        "json": True,
    },
}

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, Mapping):
        raise InvalidSettingsError(f"'{name}' deve ser um mapa, recebido: {type(value).__name__}")
    return value


def _bool(section: Mapping[str, Any], path: str, key: str) -> bool:
    value = section.get(key)
    if not isinstance(value, bool):
        raise InvalidSettingsError(f"'{path}.{key}' deve ser bool, recebido: {value!r}")
    return value


@dataclass(frozen=True)
class CacheSettings:
    enabled: bool = True
    max_size: int = 100
    ttl_seconds: float = 300

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.ttl_seconds)


@dataclass(frozen=True)
class ValidationSettings:
    reject_unknown_properties: bool = False
    empty_is_missing: bool = True
    required_conversion_policy: str = "conversion"
    default_context_type: ValidationContextType = ValidationContextType.STARTUP

    def to_options(self) -> ValidatorOptions:
        return ValidatorOptions(
            reject_unknown_properties=self.reject_unknown_properties,
            empty_is_missing=self.empty_is_missing,
            required_conversion_policy=self.required_conversion_policy,
        )


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    json: bool = True

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass(frozen=True)
class EngineSettings:
    """
    Settings imutáveis do `ConfigEngine`.

    Campos:
        - cache: política do `CachingPropertyValidator`
        - validation: opções do `PropertyValidator`
        - logging: nível e renderer do structlog
        - config_hash: SHA-256 do dicionário de origem (rastreabilidade)
    """

    cache: CacheSettings = field(default_factory=CacheSettings)
    validation: ValidationSettings = field(default_factory=ValidationSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    config_hash: str = ""

    @classmethod
    def defaults(cls) -> "EngineSettings":
        return cls.from_dict({})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, config_hash: str = "") -> "EngineSettings":
        """
        Interpreta um dicionário de settings (parcial ou completo).

        O dicionário é mesclado sobre `DEFAULT_SETTINGS` antes da leitura.

        Raises:
            InvalidSettingsError: Se algum valor tiver tipo ou conteúdo inválido.
        """
        if not isinstance(data, Mapping):
            raise InvalidSettingsError(
                f"Settings devem ser um mapa, recebido: {type(data).__name__}"
            )
        effective = deep_merge(deepcopy(DEFAULT_SETTINGS), dict(data))

        cache = _section(effective, "cache")
        max_size = cache.get("max_size")
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 0:
            raise InvalidSettingsError(f"'cache.max_size' deve ser int >= 0, recebido: {max_size!r}")
        ttl_seconds = cache.get("ttl_seconds")
        if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, (int, float)) or ttl_seconds <= 0:
            raise InvalidSettingsError(f"'cache.ttl_seconds' deve ser > 0, recebido: {ttl_seconds!r}")

        validation = _section(effective, "validation")
        policy = validation.get("required_conversion_policy")
        if policy not in REQUIRED_CONVERSION_POLICIES:
            raise InvalidSettingsError(
                f"'validation.required_conversion_policy' deve ser um de "
                f"{REQUIRED_CONVERSION_POLICIES}, recebido: {policy!r}"
            )
        context_type_raw = validation.get("default_context_type")
        try:
            context_type = ValidationContextType(str(context_type_raw).lower())
        except ValueError:
            raise InvalidSettingsError(
                f"'validation.default_context_type' desconhecido: {context_type_raw!r}"
            ) from None

        log_section = _section(effective, "logging")
        level = str(log_section.get("level", "")).upper()
        if level not in _LOG_LEVELS:
            raise InvalidSettingsError(f"'logging.level' desconhecido: {log_section.get('level')!r}")

        return cls(
            cache=CacheSettings(
                enabled=_bool(cache, "cache", "enabled"),
                max_size=max_size,
                ttl_seconds=ttl_seconds,
            ),
            validation=ValidationSettings(
                reject_unknown_properties=_bool(validation, "validation", "reject_unknown_properties"),
                empty_is_missing=_bool(validation, "validation", "empty_is_missing"),
                required_conversion_policy=policy,
                default_context_type=context_type,
            ),
            logging=LoggingSettings(level=level, json=_bool(log_section, "logging", "json")),
            config_hash=config_hash,
        )
