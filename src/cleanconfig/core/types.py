# src/cleanconfig/core/types.py
"""
Tipos canônicos compartilhados pelo core do cleanconfig.

Este módulo reúne:
    - `PropertyCategory`: classificação semântica de uma propriedade
    - `ValidationContextType`: momento/origem de uma validação
    - `DefaultApplicationInfo` e `DefaultApplicationResult`: registro
      imutável da aplicação de defaults

Os enums são `str` para facilitar serialização e inspeção.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class PropertyCategory(str, Enum):
    """
    Categorias semânticas de propriedades de configuração.

    A categoria é puramente informativa: o validador não altera
    comportamento com base nela.
    """
    GENERAL = "general"
    NETWORKING = "networking"
    SECURITY = "security"
    DATABASE = "database"
    PERFORMANCE = "performance"
    LOGGING = "logging"
    FEATURE_FLAGS = "feature_flags"
    UI = "ui"
    INTEGRATION = "integration"
    STORAGE = "storage"
    BUSINESS_LOGIC = "business_logic"


class ValidationContextType(str, Enum):
    """
    Origem de um conjunto de propriedades sendo validado ou defaultado.

    Estados definidos:
        - STARTUP: carga inicial da aplicação
        - RUNTIME_OVERRIDE: alteração aplicada em tempo de execução
        - PERSISTED: valores lidos de armazenamento
        - TESTING: cenários de teste

    Regras e defaults podem consultar o tipo via `PropertyContext.context_type`.
    """
    STARTUP = "startup"
    RUNTIME_OVERRIDE = "runtime_override"
    PERSISTED = "persisted"
    TESTING = "testing"


def _frozen_mapping(data: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class DefaultApplicationInfo:
    """
    Registro imutável dos defaults efetivamente aplicados.

    Campos:
        - applied: nome da propriedade → valor (string) aplicado

    Invariantes:
        - Apenas propriedades ausentes no input do usuário aparecem aqui
        - A ordem reflete a ordem de registro das definições
    """
    applied: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "applied", _frozen_mapping(self.applied))

    @classmethod
    def empty(cls) -> "DefaultApplicationInfo":
        return cls({})

    def was_default_applied(self, property_name: str) -> bool:
        return property_name in self.applied

    def get_applied_value(self, property_name: str) -> Optional[str]:
        return self.applied.get(property_name)

    @property
    def properties_with_defaults(self) -> Tuple[str, ...]:
        return tuple(self.applied)

    @property
    def applied_count(self) -> int:
        return len(self.applied)


@dataclass(frozen=True)
class DefaultApplicationResult:
    """
    Resultado imutável de `DefaultValueApplier.apply_defaults`.

    Campos:
        - properties: mapa final (valores do usuário + defaults aplicados)
        - info: detalhes sobre quais defaults foram aplicados

    Invariantes:
        - Toda chave do usuário mantém exatamente o valor do usuário
        - `properties` é somente leitura
    """
    properties: Mapping[str, str]
    info: DefaultApplicationInfo

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", _frozen_mapping(self.properties))

    def as_dict(self) -> dict[str, Any]:
        return dict(self.properties)
