"""
Álgebra de regras multi-propriedade.

Uma regra multi-propriedade inspeciona várias propriedades de uma vez a
partir do contexto: `(property_names, context) -> ValidationResult`.
`property_names` são os nomes do grupo que está sendo avaliado; as
famílias prontas em `cleanconfig.rules.multiproperty` capturam seus
próprios nomes e ignoram esse argumento.

Os combinadores espelham os de `rule.py` (mesmo curto-circuito e mesma
assimetria entre `or_` e `any_of_multi`).
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from ..context import PropertyContext
from .codes import RULE_VIOLATION
from .result import ValidationError, ValidationResult

MultiRuleFn = Callable[[Tuple[str, ...], PropertyContext], ValidationResult]
Condition = Callable[[PropertyContext], bool]


class MultiPropertyValidationRule:
    __slots__ = ("_fn", "description")

    def __init__(self, fn: MultiRuleFn, description: Optional[str] = None):
        if not callable(fn):
            raise TypeError("rule function must be callable")
        self._fn = fn
        self.description = description

    def validate(self, property_names: Sequence[str], context: PropertyContext) -> ValidationResult:
        result = self._fn(tuple(property_names), context)
        if not isinstance(result, ValidationResult):
            raise TypeError(
                f"MultiPropertyValidationRule must return ValidationResult, got {type(result).__name__}"
            )
        return result

    __call__ = validate

    def and_(self, other: "MultiPropertyValidationRule | MultiRuleFn") -> "MultiPropertyValidationRule":
        second = as_multi_rule(other)

        def _and(names: Tuple[str, ...], context: PropertyContext) -> ValidationResult:
            first = self.validate(names, context)
            if not first.is_valid:
                return first
            return second.validate(names, context)

        return MultiPropertyValidationRule(_and)

    def or_(self, other: "MultiPropertyValidationRule | MultiRuleFn") -> "MultiPropertyValidationRule":
        second = as_multi_rule(other)

        def _or(names: Tuple[str, ...], context: PropertyContext) -> ValidationResult:
            first = self.validate(names, context)
            if first.is_valid:
                return first
            return second.validate(names, context)

        return MultiPropertyValidationRule(_or)

    def only_if(self, condition: Condition) -> "MultiPropertyValidationRule":
        if not callable(condition):
            raise TypeError("condition must be callable")

        def _only_if(names: Tuple[str, ...], context: PropertyContext) -> ValidationResult:
            if condition(context):
                return self.validate(names, context)
            return ValidationResult.success()

        return MultiPropertyValidationRule(_only_if)

    __and__ = and_
    __or__ = or_

    def __repr__(self) -> str:
        label = self.description or getattr(self._fn, "__name__", "rule")
        return f"MultiPropertyValidationRule({label})"


def as_multi_rule(rule: "MultiPropertyValidationRule | MultiRuleFn") -> MultiPropertyValidationRule:
    if isinstance(rule, MultiPropertyValidationRule):
        return rule
    if callable(rule):
        return MultiPropertyValidationRule(rule)
    raise TypeError(
        f"expected MultiPropertyValidationRule or callable, got {type(rule).__name__}"
    )


def all_of_multi(*rules: "MultiPropertyValidationRule | MultiRuleFn") -> MultiPropertyValidationRule:
    if not rules:
        raise ValueError("At least one rule is required for all_of_multi()")
    combined = as_multi_rule(rules[0])
    for rule in rules[1:]:
        combined = combined.and_(rule)
    return combined


def any_of_multi(*rules: "MultiPropertyValidationRule | MultiRuleFn") -> MultiPropertyValidationRule:
    if not rules:
        raise ValueError("At least one rule is required for any_of_multi()")
    members = tuple(as_multi_rule(r) for r in rules)

    def _any(names: Tuple[str, ...], context: PropertyContext) -> ValidationResult:
        errors: list[ValidationError] = []
        for rule in members:
            result = rule.validate(names, context)
            if result.is_valid:
                return ValidationResult.success()
            errors.extend(result.errors)
        return ValidationResult.failure(errors)

    return MultiPropertyValidationRule(_any)


def always_valid_multi() -> MultiPropertyValidationRule:
    return MultiPropertyValidationRule(lambda names, context: ValidationResult.success(), "always_valid")


def always_fails_multi(message: str) -> MultiPropertyValidationRule:
    if message is None:
        raise ValueError("message cannot be None")
    return MultiPropertyValidationRule(
        lambda names, context: ValidationResult.failure(
            ValidationError(
                property_name=names[0] if names else "unknown",
                message=message,
                code=RULE_VIOLATION,
            )
        ),
        "always_fails",
    )
