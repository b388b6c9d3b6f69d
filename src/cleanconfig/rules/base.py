# src/cleanconfig/rules/base.py
"""
Utilitários compartilhados pelo catálogo de regras.

Regras do catálogo ignoram valores ausentes (`None`): a obrigatoriedade é
responsabilidade da definição (`required`) ou de `not_none`/`not_blank`.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..core.validation.codes import RULE_VIOLATION
from ..core.validation.result import ValidationError, ValidationResult
from ..core.validation.rule import ValidationRule, from_predicate


def when_present(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    return lambda value: value is None or bool(predicate(value))


def rule(
    predicate: Callable[[Any], bool],
    message: str,
    *,
    expected_value: Optional[str] = None,
    description: Optional[str] = None,
) -> ValidationRule:
    """Regra de catálogo: `predicate` só é avaliado para valores presentes."""
    return from_predicate(
        when_present(predicate),
        message,
        expected_value=expected_value,
        code=RULE_VIOLATION,
        description=description,
    )


def failure(
    name: str,
    message: str,
    actual_value: Optional[str] = None,
    expected_value: Optional[str] = None,
) -> ValidationResult:
    return ValidationResult.failure(
        ValidationError(
            property_name=name,
            message=message,
            actual_value=actual_value,
            expected_value=expected_value,
            code=RULE_VIOLATION,
        )
    )

