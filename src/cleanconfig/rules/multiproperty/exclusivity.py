# src/cleanconfig/rules/multiproperty/exclusivity.py
"""
Regras de exclusividade entre propriedades.

Uma propriedade conta como "definida" quando está presente e não é vazia
após remover espaços (ver `is_set`).
"""

from __future__ import annotations

from typing import List, Tuple

from ...core.context import PropertyContext
from ...core.validation.codes import AT_LEAST_ONE_REQUIRED, MUTUALLY_EXCLUSIVE_VIOLATION
from ...core.validation.multi import MultiPropertyValidationRule
from ...core.validation.result import ValidationError, ValidationResult


def is_set(context: PropertyContext, property_name: str) -> bool:
    value = context.get_property(property_name)
    return value is not None and bool(value.strip())


def _names(property_names: Tuple[str, ...], minimum: int, message: str) -> Tuple[str, ...]:
    if any(name is None for name in property_names):
        raise ValueError("property names cannot be None")
    if len(property_names) < minimum:
        raise ValueError(message)
    return tuple(property_names)


def mutually_exclusive(*property_names: str) -> MultiPropertyValidationRule:
    names = _names(property_names, 2, "At least 2 properties are required for mutual exclusivity")
    listed = ", ".join(names)

    def _check(_group, context: PropertyContext) -> ValidationResult:
        present: List[str] = [name for name in names if is_set(context, name)]
        if len(present) <= 1:
            return ValidationResult.success()
        return ValidationResult.failure(
            ValidationError(
                property_name=present[0],
                message=f"Only one of [{listed}] can be set, but found: {', '.join(present)}",
                code=MUTUALLY_EXCLUSIVE_VIOLATION,
            )
        )

    return MultiPropertyValidationRule(_check, f"mutually_exclusive({listed})")


def at_least_one_required(*property_names: str) -> MultiPropertyValidationRule:
    names = _names(property_names, 1, "At least 1 property is required")
    listed = ", ".join(names)

    def _check(_group, context: PropertyContext) -> ValidationResult:
        if any(is_set(context, name) for name in names):
            return ValidationResult.success()
        return ValidationResult.failure(
            ValidationError(
                property_name=names[0],
                message=f"At least one of [{listed}] must be set",
                code=AT_LEAST_ONE_REQUIRED,
            )
        )

    return MultiPropertyValidationRule(_check, f"at_least_one_required({listed})")


def exactly_one_required(*property_names: str) -> MultiPropertyValidationRule:
    names = _names(property_names, 2, "At least 2 properties are required")
    return at_least_one_required(*names).and_(mutually_exclusive(*names))
