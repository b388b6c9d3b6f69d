# src/cleanconfig/rules/general.py
"""Regras independentes de tipo."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from ..core.context import PropertyContext
from ..core.validation.result import ValidationResult
from ..core.validation.rule import ValidationRule
from .base import failure, rule


def not_none() -> ValidationRule:
    def _check(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        if value is None:
            return failure(name, "Value is required", actual_value="null")
        return ValidationResult.success()

    return ValidationRule(_check, "not_none")


def _values(values: Iterable[Any]) -> list:
    collected = list(values)
    # one_of("a", "b") e one_of(["a", "b"]) são equivalentes
    if len(collected) == 1 and isinstance(collected[0], (list, tuple, set, frozenset)):
        collected = list(collected[0])
    return collected


def one_of(*allowed_values: Any) -> ValidationRule:
    allowed = _values(allowed_values)
    return rule(lambda v: v in allowed, f"Value must be one of: {allowed}")


def none_of(*forbidden_values: Any) -> ValidationRule:
    forbidden = _values(forbidden_values)
    return rule(lambda v: v not in forbidden, f"Value must not be one of: {forbidden}")


def equal_to(expected: Any) -> ValidationRule:
    def _check(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        if value != expected:
            return failure(
                name,
                f"Value must equal: {expected}",
                actual_value="null" if value is None else str(value),
                expected_value=str(expected),
            )
        return ValidationResult.success()

    return ValidationRule(_check, f"equal_to({expected!r})")


def not_equal_to(forbidden: Any) -> ValidationRule:
    return rule(lambda v: v != forbidden, f"Value must not equal: {forbidden}")


def custom(
    predicate: Callable[[Any], bool],
    message: str,
    expected_value: Optional[str] = None,
) -> ValidationRule:
    if predicate is None:
        raise ValueError("predicate cannot be None")
    return rule(predicate, message, expected_value=expected_value)


def custom_with_context(
    predicate: Callable[[Any, PropertyContext], bool],
    message: str,
) -> ValidationRule:
    """Predicado que também recebe o `PropertyContext` (ex.: comparar com outra propriedade)."""
    if predicate is None:
        raise ValueError("predicate cannot be None")

    def _check(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        if value is not None and not predicate(value, context):
            return failure(name, message, actual_value=str(value))
        return ValidationResult.success()

    return ValidationRule(_check, message)
