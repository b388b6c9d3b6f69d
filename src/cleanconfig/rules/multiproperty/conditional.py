# src/cleanconfig/rules/multiproperty/conditional.py
"""Requisitos condicionais entre propriedades."""

from __future__ import annotations

from typing import List

from ...core.context import PropertyContext
from ...core.validation.codes import (
    ALL_OR_NOTHING_VIOLATION,
    CONDITIONAL_REQUIREMENT_VIOLATION,
)
from ...core.validation.multi import MultiPropertyValidationRule
from ...core.validation.result import ValidationError, ValidationResult
from .exclusivity import is_set


def if_then(if_property: str, then_property: str) -> MultiPropertyValidationRule:
    """Se `if_property` estiver definida, `then_property` também deve estar."""
    if if_property is None or then_property is None:
        raise ValueError("property names cannot be None")

    def _check(_group, context: PropertyContext) -> ValidationResult:
        if not is_set(context, if_property) or is_set(context, then_property):
            return ValidationResult.success()
        return ValidationResult.failure(
            ValidationError(
                property_name=then_property,
                message=f"Property {then_property} is required when {if_property} is set",
                code=CONDITIONAL_REQUIREMENT_VIOLATION,
            )
        )

    return MultiPropertyValidationRule(_check, f"if_then({if_property}, {then_property})")


def all_or_nothing(*property_names: str) -> MultiPropertyValidationRule:
    """
    Todas as propriedades definidas juntas, ou nenhuma.

    O erro é atribuído à primeira propriedade ausente e lista as presentes
    e as ausentes na ordem declarada.
    """
    if any(name is None for name in property_names):
        raise ValueError("property names cannot be None")
    if len(property_names) < 2:
        raise ValueError("At least 2 properties are required")
    names = tuple(property_names)
    listed = ", ".join(names)

    def _check(_group, context: PropertyContext) -> ValidationResult:
        present: List[str] = []
        missing: List[str] = []
        for name in names:
            (present if is_set(context, name) else missing).append(name)

        if not present or not missing:
            return ValidationResult.success()
        return ValidationResult.failure(
            ValidationError(
                property_name=missing[0],
                message=(
                    f"All of [{listed}] must be set together, or none at all. "
                    f"Present: [{', '.join(present)}], Missing: [{', '.join(missing)}]"
                ),
                code=ALL_OR_NOTHING_VIOLATION,
            )
        )

    return MultiPropertyValidationRule(_check, f"all_or_nothing({listed})")
