# src/cleanconfig/core/engine/applier.py
"""
Aplicação de valores default sobre as propriedades do usuário.

Para cada definição (em ordem de registro):
    - valor do usuário presente → mantido, sem registro em `info`
    - ausente e com provedor de default → o provedor é chamado com um
      `PropertyContext` somente leitura sobre os valores do usuário
    - resultado não nulo → convertido para string e registrado
    - resultado `None` → propriedade permanece ausente

Decisões arquiteturais:
    - O contexto entregue aos provedores contém apenas valores do usuário;
      defaults calculados anteriormente nunca influenciam outros defaults,
      o que torna o resultado independente da ordem de registro
    - Booleanos são serializados como "true"/"false", demais valores via `str`

Invariantes:
    - O mapa do usuário nunca é mutado
    - Toda chave do usuário aparece no resultado com o valor original

Limites explícitos:
    - Não valida valores (responsabilidade do `PropertyValidator`)
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import structlog

from ..context import PropertyContext
from ..converter import TypeConverterRegistry
from ..schema.registry import PropertyRegistry
from ..types import DefaultApplicationInfo, DefaultApplicationResult, ValidationContextType

logger = structlog.get_logger(__name__)


def stringify_default(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class DefaultValueApplier:
    """Aplica os defaults declarados no registry a um mapa de propriedades."""

    def __init__(self, registry: PropertyRegistry, converters: Optional[TypeConverterRegistry] = None):
        if registry is None:
            raise ValueError("registry cannot be None")
        self.registry = registry
        self.converters = converters or TypeConverterRegistry.with_defaults()

    def apply_defaults(
        self,
        user_properties: Mapping[str, str],
        context_type: ValidationContextType = ValidationContextType.STARTUP,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> DefaultApplicationResult:
        if user_properties is None:
            raise ValueError("user_properties cannot be None")

        context = PropertyContext(
            properties=user_properties,
            context_type=context_type,
            converters=self.converters,
            metadata=metadata or {},
        )

        merged: Dict[str, str] = dict(user_properties)
        applied: Dict[str, str] = {}

        for definition in self.registry.all_properties():
            if definition.name in user_properties:
                continue
            if definition.default_value is None:
                continue

            value = definition.default_value.compute_default(context)
            if value is None:
                continue

            text = stringify_default(value)
            merged[definition.name] = text
            applied[definition.name] = text

        logger.debug(
            "defaults.applied",
            applied=len(applied),
            properties=list(applied),
            context_type=context_type.value,
        )
        return DefaultApplicationResult(properties=merged, info=DefaultApplicationInfo(applied))
