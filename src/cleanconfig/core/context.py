# src/cleanconfig/core/context.py
"""
Contexto somente leitura entregue a regras, condições e defaults.

Este módulo define o `PropertyContext`, a visão canônica de um conjunto de
propriedades durante uma validação ou uma aplicação de defaults.

O PropertyContext consolida:
    - o mapa de propriedades (strings brutas)
    - o tipo de contexto da chamada (`ValidationContextType`)
    - metadata livre (ex.: ambiente, tenant), ortogonal às propriedades
    - o registry de conversores usado em `get_typed_property`

Decisões arquiteturais:
    - O contexto é imutável: propriedades e metadata são expostas via
      `MappingProxyType`
    - Uma chamada de validação cria um único contexto compartilhado por
      todas as regras
    - O registry de conversores é injetado, nunca global

Invariantes:
    - Nenhuma regra consegue alterar o mapa observado por outra regra
    - `get_typed_property` nunca levanta exceção por valor inválido

Limites explícitos:
    - Não valida propriedades
    - Não aplica defaults
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .converter import TypeConverterRegistry
from .types import ValidationContextType


@dataclass(frozen=True)
class PropertyContext:
    properties: Mapping[str, str]
    context_type: ValidationContextType = ValidationContextType.STARTUP
    converters: TypeConverterRegistry = field(
        default_factory=TypeConverterRegistry.with_defaults, repr=False, compare=False
    )
    metadata: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.properties, Mapping):
            raise TypeError("properties must be a mapping")
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata or {})))

    @classmethod
    def of(cls, properties: Mapping[str, str], **kwargs: Any) -> "PropertyContext":
        return cls(properties=properties, **kwargs)

    # -----------------------------
    # Propriedades
    # -----------------------------
    def get_property(self, property_name: str) -> Optional[str]:
        return self.properties.get(property_name)

    def get_typed_property(self, property_name: str, target_type: type) -> Optional[Any]:
        value = self.properties.get(property_name)
        if value is None:
            return None
        return self.converters.convert(value, target_type)

    def get_all_properties(self) -> Mapping[str, str]:
        return self.properties

    def has_property(self, property_name: str) -> bool:
        return property_name in self.properties

    # -----------------------------
    # Metadata
    # -----------------------------
    def get_metadata(self, key: str) -> Optional[str]:
        return self.metadata.get(key)
