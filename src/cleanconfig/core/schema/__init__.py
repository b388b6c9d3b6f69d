"""
Schema de propriedades do cleanconfig.

Componentes principais:
    - definition → `PropertyDefinition` e seu builder fluente
    - defaults   → provedores de default condicionais
    - planner    → ordenação topológica determinística (Kahn)
    - registry   → builder com validação estrutural e registry imutável
"""

from .defaults import ConditionalDefaultValue
from .definition import PropertyDefinition, PropertyDefinitionBuilder
from .planner import check_dependencies_exist, plan_validation_order
from .registry import PropertyRegistry, PropertyRegistryBuilder

__all__ = [
    "ConditionalDefaultValue",
    "PropertyDefinition",
    "PropertyDefinitionBuilder",
    "PropertyRegistry",
    "PropertyRegistryBuilder",
    "check_dependencies_exist",
    "plan_validation_order",
]
