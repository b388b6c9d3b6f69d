# src/cleanconfig/core/schema/definition.py
"""
Definição imutável de uma propriedade de configuração.

Uma `PropertyDefinition` descreve um valor configurável: nome, tipo alvo,
regra de validação, provedor de default, obrigatoriedade, categoria,
dependências de validação e metadados de depreciação.

Decisões arquiteturais:
    - Definições são dados simples: não referenciam outras definições;
      dependências são apenas nomes, resolvidos pelo registry no `build()`
    - A construção é fluente (`PropertyDefinition.builder(int)...build()`)
    - Após o `build()`, a definição é congelada

Invariantes:
    - `name` é uma string não vazia
    - `depends_on_for_validation` é um frozenset

Limites explícitos:
    - Não valida a existência das dependências (responsabilidade do registry)
    - Não executa regras nem defaults
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Optional

from ..errors import InvalidPropertyDefinitionError
from ..types import PropertyCategory
from ..validation.rule import RuleFn, ValidationRule, as_rule
from .defaults import ConditionalDefaultValue


@dataclass(frozen=True)
class PropertyDefinition:
    name: str
    type: type = str
    description: Optional[str] = None
    validation_rule: Optional[ValidationRule] = None
    default_value: Optional[ConditionalDefaultValue] = None
    required: bool = False
    category: PropertyCategory = PropertyCategory.GENERAL
    depends_on_for_validation: FrozenSet[str] = field(default_factory=frozenset)
    validation_order: int = 0
    deprecated: bool = False
    deprecation_message: Optional[str] = None
    replacement_property: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidPropertyDefinitionError("Property name is required")
        if self.type is None:
            raise InvalidPropertyDefinitionError(f"Property '{self.name}' requires a type")
        object.__setattr__(self, "depends_on_for_validation", frozenset(self.depends_on_for_validation))

    @staticmethod
    def builder(type_: type = str) -> "PropertyDefinitionBuilder":
        return PropertyDefinitionBuilder(type_)

    def __repr__(self) -> str:
        return (
            f"PropertyDefinition(name={self.name!r}, type={getattr(self.type, '__name__', self.type)}, "
            f"required={self.required})"
        )


class PropertyDefinitionBuilder:
    """Builder mutável; `build()` produz a `PropertyDefinition` congelada."""

    def __init__(self, type_: type = str):
        if type_ is None:
            raise ValueError("Type cannot be None")
        self._type = type_
        self._name: Optional[str] = None
        self._description: Optional[str] = None
        self._rule: Optional[ValidationRule] = None
        self._default: Optional[ConditionalDefaultValue] = None
        self._required = False
        self._category = PropertyCategory.GENERAL
        self._depends_on: FrozenSet[str] = frozenset()
        self._order = 0
        self._deprecated = False
        self._deprecation_message: Optional[str] = None
        self._replacement: Optional[str] = None

    def name(self, name: str) -> "PropertyDefinitionBuilder":
        self._name = name
        return self

    def description(self, description: str) -> "PropertyDefinitionBuilder":
        self._description = description
        return self

    def validation_rule(self, rule: "ValidationRule | RuleFn") -> "PropertyDefinitionBuilder":
        self._rule = as_rule(rule)
        return self

    def default_value(self, default: Any) -> "PropertyDefinitionBuilder":
        # valores simples viram `static`
        if isinstance(default, ConditionalDefaultValue):
            self._default = default
        else:
            self._default = ConditionalDefaultValue.static(default)
        return self

    def required(self, required: bool = True) -> "PropertyDefinitionBuilder":
        self._required = required
        return self

    def category(self, category: PropertyCategory) -> "PropertyDefinitionBuilder":
        self._category = category
        return self

    def depends_on_for_validation(self, *names: str) -> "PropertyDefinitionBuilder":
        self._depends_on = frozenset(names)
        return self

    def validation_order(self, order: int) -> "PropertyDefinitionBuilder":
        self._order = order
        return self

    def deprecated(self, message: Optional[str] = None) -> "PropertyDefinitionBuilder":
        self._deprecated = True
        if message is not None:
            self._deprecation_message = message
        return self

    def replaced_by(self, replacement_property: str) -> "PropertyDefinitionBuilder":
        self._replacement = replacement_property
        return self

    def build(self) -> PropertyDefinition:
        if not self._name:
            raise InvalidPropertyDefinitionError("Property name is required")
        return PropertyDefinition(
            name=self._name,
            type=self._type,
            description=self._description,
            validation_rule=self._rule,
            default_value=self._default,
            required=self._required,
            category=self._category,
            depends_on_for_validation=self._depends_on,
            validation_order=self._order,
            deprecated=self._deprecated,
            deprecation_message=self._deprecation_message,
            replacement_property=self._replacement,
        )
