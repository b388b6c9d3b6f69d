# src/cleanconfig/core/validation/rule.py
"""
Álgebra de regras de validação de propriedade única.

Uma regra é um valor de primeira classe: encapsula uma função
`(property_name, value, context) -> ValidationResult` e oferece
combinadores que devolvem **novas** regras, sem mutar os operandos.

Semântica dos combinadores:
    - `a.and_(b)` / `a & b`: avalia `a`; se falhar, devolve a falha de `a`
      sem avaliar `b`. Caso contrário devolve o resultado de `b`.
    - `a.or_(b)` / `a | b`: avalia `a`; se passar, devolve sem avaliar `b`.
      Caso contrário devolve o resultado de `b` (apenas a falha de `b`).
    - `a.only_if(cond)`: avalia `a` somente quando `cond(context)` é
      verdadeiro; caso contrário, sucesso trivial.
    - `all_of(*rules)`: fold de `and_` da esquerda para a direita.
    - `any_of(*rules)`: primeiro sucesso vence; se **todas** falharem,
      agrega os erros de **todas** as regras (diferente de `or_`).

Invariantes:
    - Combinadores nunca mutam o receptor
    - Curto-circuito é garantido (a regra não avaliada não é chamada)
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..context import PropertyContext
from .codes import RULE_VIOLATION
from .result import ValidationError, ValidationResult

RuleFn = Callable[[str, Any, PropertyContext], ValidationResult]
Condition = Callable[[PropertyContext], bool]


class ValidationRule:
    """Regra de validação aplicada ao valor (já convertido) de uma propriedade."""

    __slots__ = ("_fn", "description")

    def __init__(self, fn: RuleFn, description: Optional[str] = None):
        if not callable(fn):
            raise TypeError("rule function must be callable")
        self._fn = fn
        self.description = description

    def validate(self, property_name: str, value: Any, context: PropertyContext) -> ValidationResult:
        result = self._fn(property_name, value, context)
        if not isinstance(result, ValidationResult):
            raise TypeError(
                f"ValidationRule must return ValidationResult, got {type(result).__name__}"
            )
        return result

    __call__ = validate

    # -----------------------------
    # Combinadores
    # -----------------------------
    def and_(self, other: "ValidationRule | RuleFn") -> "ValidationRule":
        second = as_rule(other)

        def _and(name: str, value: Any, context: PropertyContext) -> ValidationResult:
            first = self.validate(name, value, context)
            if not first.is_valid:
                return first
            return second.validate(name, value, context)

        return ValidationRule(_and)

    def or_(self, other: "ValidationRule | RuleFn") -> "ValidationRule":
        second = as_rule(other)

        def _or(name: str, value: Any, context: PropertyContext) -> ValidationResult:
            first = self.validate(name, value, context)
            if first.is_valid:
                return first
            return second.validate(name, value, context)

        return ValidationRule(_or)

    def only_if(self, condition: Condition) -> "ValidationRule":
        if not callable(condition):
            raise TypeError("condition must be callable")

        def _only_if(name: str, value: Any, context: PropertyContext) -> ValidationResult:
            if not condition(context):
                return ValidationResult.success()
            return self.validate(name, value, context)

        return ValidationRule(_only_if)

    __and__ = and_
    __or__ = or_

    def __repr__(self) -> str:
        label = self.description or getattr(self._fn, "__name__", "rule")
        return f"ValidationRule({label})"


def as_rule(rule: "ValidationRule | RuleFn") -> ValidationRule:
    if isinstance(rule, ValidationRule):
        return rule
    if callable(rule):
        return ValidationRule(rule)
    raise TypeError(f"expected ValidationRule or callable, got {type(rule).__name__}")


def from_predicate(
    predicate: Callable[[Any], bool],
    message: str,
    *,
    expected_value: Optional[str] = None,
    code: str = RULE_VIOLATION,
    suggestion: Optional[str] = None,
    description: Optional[str] = None,
) -> ValidationRule:
    """
    Constrói uma regra a partir de um predicado sobre o valor.

    Base de todo o catálogo em `cleanconfig.rules`: o erro produzido carrega
    o valor observado como string e o código informado.
    """

    def _check(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        if predicate(value):
            return ValidationResult.success()
        return ValidationResult.failure(
            ValidationError(
                property_name=name,
                message=message,
                actual_value=None if value is None else str(value),
                expected_value=expected_value,
                code=code,
                suggestion=suggestion,
            )
        )

    return ValidationRule(_check, description or message)


def all_of(*rules: "ValidationRule | RuleFn") -> ValidationRule:
    if not rules:
        raise ValueError("At least one rule is required for all_of()")
    combined = as_rule(rules[0])
    for rule in rules[1:]:
        combined = combined.and_(rule)
    return combined


def any_of(*rules: "ValidationRule | RuleFn") -> ValidationRule:
    if not rules:
        raise ValueError("At least one rule is required for any_of()")
    members = tuple(as_rule(r) for r in rules)

    def _any(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        errors: list[ValidationError] = []
        for rule in members:
            result = rule.validate(name, value, context)
            if result.is_valid:
                return ValidationResult.success()
            errors.extend(result.errors)
        return ValidationResult.failure(errors)

    return ValidationRule(_any)


def always_valid() -> ValidationRule:
    return ValidationRule(lambda name, value, context: ValidationResult.success(), "always_valid")


def always_fails(message: str) -> ValidationRule:
    if message is None:
        raise ValueError("message cannot be None")
    return ValidationRule(
        lambda name, value, context: ValidationResult.failure(
            ValidationError(property_name=name, message=message, code=RULE_VIOLATION)
        ),
        "always_fails",
    )
