# src/cleanconfig/core/schema/registry.py
"""
Registro estrutural de propriedades de configuração.

Este módulo define o `PropertyRegistryBuilder`, responsável por registrar
definições e grupos e validar a integridade estrutural do schema, e o
`PropertyRegistry`, a visão imutável produzida pelo `build()`.

O builder atua como uma camada de proteção antecipada, garantindo que:
    - cada propriedade possua um nome único
    - cada grupo possua um nome único
    - toda dependência declarada exista
    - o grafo de dependências seja acíclico

Decisões arquiteturais:
    - A validação estrutural ocorre no `build()`, antes de qualquer
      validação de valores
    - A ordem de registro é mantida separadamente da estrutura de
      armazenamento e preservada no registry final
    - A ordem topológica é calculada uma única vez e anexada ao registry
    - Erros estruturais são fatais: nenhum registry parcial é devolvido

Invariantes:
    - Cada nome de propriedade é único no registry
    - Toda dependência declarada existe no registry
    - O grafo de dependências é um DAG (auto-dependência inclusa)
    - O registry construído nunca é alterado e pode ser compartilhado
      entre threads sem lock

Limites explícitos:
    - Não valida valores
    - Não aplica defaults
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import structlog

from ..errors import DuplicateGroupError, DuplicatePropertyError
from ..validation.group import PropertyGroup
from .definition import PropertyDefinition
from .planner import check_dependencies_exist, plan_validation_order

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PropertyRegistry:
    """
    Registry imutável de definições e grupos.

    Campos:
        - properties: nome → definição, em ordem de registro
        - groups: nome → grupo, em ordem de registro
        - validation_order: nomes em ordem topológica (dependências primeiro)
    """

    properties: Mapping[str, PropertyDefinition] = field(default_factory=dict)
    groups: Mapping[str, PropertyGroup] = field(default_factory=dict)
    validation_order: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))
        object.__setattr__(self, "validation_order", tuple(self.validation_order))

    @staticmethod
    def builder() -> "PropertyRegistryBuilder":
        return PropertyRegistryBuilder()

    def get_property(self, name: str) -> Optional[PropertyDefinition]:
        return self.properties.get(name)

    def is_defined(self, name: str) -> bool:
        return name in self.properties

    def all_properties(self) -> List[PropertyDefinition]:
        return list(self.properties.values())

    def property_names(self) -> List[str]:
        return list(self.properties)

    def get_group(self, name: str) -> Optional[PropertyGroup]:
        return self.groups.get(name)

    def all_groups(self) -> List[PropertyGroup]:
        return list(self.groups.values())

    def ordered_properties(self) -> List[PropertyDefinition]:
        """Definições na ordem em que devem ser validadas."""
        return [self.properties[name] for name in self.validation_order]

    def __len__(self) -> int:
        return len(self.properties)

    def __contains__(self, name: object) -> bool:
        return name in self.properties


@dataclass
class PropertyRegistryBuilder:
    """
    Acumula definições e grupos até o `build()`.

    Duplicidades são detectadas já no `register`; dependências e ciclos
    somente no `build()`, quando o conjunto completo é conhecido.
    """

    _properties: Dict[str, PropertyDefinition] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)
    _groups: Dict[str, PropertyGroup] = field(default_factory=dict, init=False, repr=False)

    def register(self, definition: PropertyDefinition) -> "PropertyRegistryBuilder":
        if not isinstance(definition, PropertyDefinition):
            raise TypeError(
                f"register() expects PropertyDefinition, got {type(definition).__name__}"
            )
        if definition.name in self._properties:
            raise DuplicatePropertyError(definition.name)

        self._properties[definition.name] = definition
        self._order.append(definition.name)
        return self

    def register_all(self, *definitions: PropertyDefinition) -> "PropertyRegistryBuilder":
        for definition in definitions:
            self.register(definition)
        return self

    def register_group(self, group: PropertyGroup) -> "PropertyRegistryBuilder":
        if not isinstance(group, PropertyGroup):
            raise TypeError(
                f"register_group() expects PropertyGroup, got {type(group).__name__}"
            )
        if group.name in self._groups:
            raise DuplicateGroupError(group.name)

        self._groups[group.name] = group
        return self

    def build(self) -> PropertyRegistry:
        """
        Valida o schema e congela o registry.

        Raises:
            UndefinedDependencyError: Dependência declarada inexistente.
            CircularDependencyError: Ciclo no grafo de dependências.
        """
        dependencies = {
            name: set(self._properties[name].depends_on_for_validation)
            for name in self._order
        }
        check_dependencies_exist(dependencies)

        order = plan_validation_order(
            dependencies,
            priority={name: self._properties[name].validation_order for name in self._order},
        )

        registry = PropertyRegistry(
            properties={name: self._properties[name] for name in self._order},
            groups=dict(self._groups),
            validation_order=tuple(order),
        )
        logger.debug(
            "registry.built",
            properties=len(registry.properties),
            groups=len(registry.groups),
            with_dependencies=sum(1 for deps in dependencies.values() if deps),
        )
        return registry
