"""
Grupos de propriedades com regras multi-propriedade.

Um `PropertyGroup` agrupa nomes de propriedades relacionadas (ex.: usuário
e senha de banco) e as regras que se aplicam a elas em conjunto. Grupos
são registrados no `PropertyRegistryBuilder` e avaliados pelo validador
após as regras individuais, sem curto-circuito entre grupos.

Invariantes:
    - O nome do grupo não é vazio
    - Um grupo possui ao menos uma propriedade
    - Um grupo construído nunca é alterado
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..errors import EmptyPropertyGroupError
from .multi import MultiPropertyValidationRule, MultiRuleFn, as_multi_rule


@dataclass(frozen=True, eq=False)
class PropertyGroup:
    name: str
    property_names: Tuple[str, ...]
    rules: Tuple[MultiPropertyValidationRule, ...] = ()
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Group name cannot be empty")
        object.__setattr__(self, "property_names", tuple(self.property_names))
        object.__setattr__(self, "rules", tuple(as_multi_rule(r) for r in self.rules))
        if not self.property_names:
            raise EmptyPropertyGroupError(
                f"Property group '{self.name}' must contain at least one property"
            )

    @staticmethod
    def builder(name: str) -> "PropertyGroupBuilder":
        return PropertyGroupBuilder(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyGroup):
            return NotImplemented
        return self.name == other.name and self.property_names == other.property_names

    def __hash__(self) -> int:
        return hash((self.name, self.property_names))

    def __repr__(self) -> str:
        extra = f", description={self.description!r}" if self.description else ""
        return (
            f"PropertyGroup(name={self.name!r}, properties={len(self.property_names)}, "
            f"rules={len(self.rules)}{extra})"
        )


@dataclass
class PropertyGroupBuilder:
    """Construção fluente de um `PropertyGroup`; `build()` congela o resultado."""

    name: str
    _property_names: List[str] = field(default_factory=list, init=False, repr=False)
    _rules: List[MultiPropertyValidationRule] = field(default_factory=list, init=False, repr=False)
    _description: Optional[str] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.name is None:
            raise ValueError("Group name cannot be None")
        if not self.name.strip():
            raise ValueError("Group name cannot be empty")

    def add_property(self, property_name: str) -> "PropertyGroupBuilder":
        if property_name is None:
            raise ValueError("Property name cannot be None")
        self._property_names.append(property_name)
        return self

    def add_properties(self, *property_names: str) -> "PropertyGroupBuilder":
        for property_name in property_names:
            self.add_property(property_name)
        return self

    def add_rule(self, rule: "MultiPropertyValidationRule | MultiRuleFn") -> "PropertyGroupBuilder":
        if rule is None:
            raise ValueError("Validation rule cannot be None")
        self._rules.append(as_multi_rule(rule))
        return self

    def description(self, description: str) -> "PropertyGroupBuilder":
        self._description = description
        return self

    def build(self) -> PropertyGroup:
        if not self._property_names:
            raise EmptyPropertyGroupError(
                f"Property group '{self.name}' must contain at least one property"
            )
        return PropertyGroup(
            name=self.name,
            property_names=tuple(self._property_names),
            rules=tuple(self._rules),
            description=self._description,
        )
