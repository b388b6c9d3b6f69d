# src/cleanconfig/core/engine/engine.py
"""
Fachada do cleanconfig: aplica defaults e valida em um único passo.

O `ConfigEngine` compõe, a partir de um `PropertyRegistry` e de
`EngineSettings`:
    - um `DefaultValueApplier`
    - um `PropertyValidator` com as opções dos settings
    - opcionalmente, um `CachingPropertyValidator` em volta do validador

`process(user)` aplica os defaults e valida o mapa resultante, devolvendo
um `ProcessResult` com as três informações.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..config.settings import EngineSettings
from ..converter import TypeConverterRegistry
from ..schema.registry import PropertyRegistry
from ..types import DefaultApplicationInfo, DefaultApplicationResult, ValidationContextType
from ..validation.result import ValidationResult
from .applier import DefaultValueApplier
from .cache import CachingPropertyValidator
from .validator import PropertyValidator


@dataclass(frozen=True)
class ProcessResult:
    """Resultado de `ConfigEngine.process`."""

    properties: Mapping[str, str]
    defaults_info: DefaultApplicationInfo
    validation: ValidationResult

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid


class ConfigEngine:
    def __init__(
        self,
        registry: PropertyRegistry,
        settings: Optional[EngineSettings] = None,
        converters: Optional[TypeConverterRegistry] = None,
    ):
        if registry is None:
            raise ValueError("registry cannot be None")
        self.registry = registry
        self.settings = settings or EngineSettings.defaults()
        self.converters = converters or TypeConverterRegistry.with_defaults()

        self.applier = DefaultValueApplier(registry, self.converters)
        validator = PropertyValidator(
            registry,
            self.converters,
            self.settings.validation.to_options(),
        )
        if self.settings.cache.enabled:
            self.validator = CachingPropertyValidator(
                validator,
                max_size=self.settings.cache.max_size,
                ttl=self.settings.cache.ttl,
            )
        else:
            self.validator = validator

    def _context_type(self, context_type: Optional[ValidationContextType]) -> ValidationContextType:
        return context_type or self.settings.validation.default_context_type

    def apply_defaults(
        self,
        user_properties: Mapping[str, str],
        context_type: Optional[ValidationContextType] = None,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> DefaultApplicationResult:
        return self.applier.apply_defaults(user_properties, self._context_type(context_type), metadata)

    def validate(
        self,
        properties: Mapping[str, str],
        context_type: Optional[ValidationContextType] = None,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        return self.validator.validate(properties, self._context_type(context_type), metadata)

    def process(
        self,
        user_properties: Mapping[str, str],
        context_type: Optional[ValidationContextType] = None,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> ProcessResult:
        ctx_type = self._context_type(context_type)
        applied = self.applier.apply_defaults(user_properties, ctx_type, metadata)
        result = self.validator.validate(applied.properties, ctx_type, metadata)
        return ProcessResult(
            properties=applied.properties,
            defaults_info=applied.info,
            validation=result,
        )

    def clear_cache(self) -> None:
        if isinstance(self.validator, CachingPropertyValidator):
            self.validator.clear_cache()
