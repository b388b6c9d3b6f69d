# src/cleanconfig/rules/multiproperty/numeric.py
"""
Relações de ordem entre duas propriedades tipadas.

Os dois valores são obtidos com `context.get_typed_property(nome, tipo)`.
Se qualquer um estiver ausente ou não for convertível, a regra é ignorada
(sucesso): a ausência e a conversão são reportadas pelo validador.

O erro é sempre atribuído à primeira propriedade da relação avaliada.
`greater_than(a, b)` é avaliada como `less_than(b, a)`, portanto o erro
recai sobre `b`.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from ...core.context import PropertyContext
from ...core.validation.codes import NUMERIC_RELATIONSHIP_VIOLATION
from ...core.validation.multi import MultiPropertyValidationRule
from ...core.validation.result import ValidationError, ValidationResult


def _relationship(
    first: str,
    second: str,
    target_type: type,
    holds: Callable[[Any, Any], bool],
    relation: str,
    expected_prefix: str,
) -> MultiPropertyValidationRule:
    if first is None or second is None:
        raise ValueError("property names cannot be None")
    if target_type is None:
        raise ValueError("type cannot be None")

    def _check(names, context: PropertyContext) -> ValidationResult:
        a = context.get_typed_property(first, target_type)
        b = context.get_typed_property(second, target_type)
        if a is None or b is None:
            return ValidationResult.success()
        if holds(a, b):
            return ValidationResult.success()
        return ValidationResult.failure(
            ValidationError(
                property_name=first,
                message=f"{first} must be {relation} {second}",
                actual_value=str(a),
                expected_value=f"{expected_prefix} {b}",
                code=NUMERIC_RELATIONSHIP_VIOLATION,
            )
        )

    return MultiPropertyValidationRule(_check, f"{first} {relation} {second}")


def less_than(first: str, second: str, target_type: type = int) -> MultiPropertyValidationRule:
    return _relationship(first, second, target_type, operator.lt, "less than", "Value less than")


def less_than_or_equal(first: str, second: str, target_type: type = int) -> MultiPropertyValidationRule:
    return _relationship(first, second, target_type, operator.le, "less than or equal to", "Value <=")


def greater_than(first: str, second: str, target_type: type = int) -> MultiPropertyValidationRule:
    return less_than(second, first, target_type)


def greater_than_or_equal(first: str, second: str, target_type: type = int) -> MultiPropertyValidationRule:
    return less_than_or_equal(second, first, target_type)
