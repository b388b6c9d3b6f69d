"""
Validação do cleanconfig: resultados, álgebra de regras, grupos,
condições e formatadores.

Este pacote não depende do schema nem do engine; é a camada de valores
sobre a qual ambos são construídos.
"""

from .format import JsonValidationFormatter, TextValidationFormatter, ValidationFormatter
from .group import PropertyGroup, PropertyGroupBuilder
from .multi import (
    MultiPropertyValidationRule,
    all_of_multi,
    always_fails_multi,
    always_valid_multi,
    any_of_multi,
    as_multi_rule,
)
from .result import ValidationError, ValidationResult
from .rule import (
    ValidationRule,
    all_of,
    always_fails,
    always_valid,
    any_of,
    as_rule,
    from_predicate,
)

__all__ = [
    "JsonValidationFormatter",
    "MultiPropertyValidationRule",
    "PropertyGroup",
    "PropertyGroupBuilder",
    "TextValidationFormatter",
    "ValidationError",
    "ValidationFormatter",
    "ValidationResult",
    "ValidationRule",
    "all_of",
    "all_of_multi",
    "always_fails",
    "always_fails_multi",
    "always_valid",
    "always_valid_multi",
    "any_of",
    "any_of_multi",
    "as_multi_rule",
    "as_rule",
    "from_predicate",
]
