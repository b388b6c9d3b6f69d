# src/cleanconfig/rules/numeric.py
"""
Regras para propriedades numéricas (`int`, `float`, `Decimal`).

Os limites aparecem nas mensagens exatamente como foram informados
(`min_value(1)` → "Value must be at least 1").
"""

from __future__ import annotations

from numbers import Number

from ..core.validation.rule import ValidationRule
from .base import rule


def positive() -> ValidationRule:
    return rule(lambda v: v > 0, "Value must be positive", expected_value="> 0")


def negative() -> ValidationRule:
    return rule(lambda v: v < 0, "Value must be negative", expected_value="< 0")


def non_negative() -> ValidationRule:
    return rule(lambda v: v >= 0, "Value must be non-negative", expected_value=">= 0")


def non_positive() -> ValidationRule:
    return rule(lambda v: v <= 0, "Value must be non-positive", expected_value="<= 0")


def min_value(minimum: Number) -> ValidationRule:
    return rule(lambda v: v >= minimum, f"Value must be at least {minimum}", expected_value=f">= {minimum}")


def max_value(maximum: Number) -> ValidationRule:
    return rule(lambda v: v <= maximum, f"Value must not exceed {maximum}", expected_value=f"<= {maximum}")


def between(minimum: Number, maximum: Number) -> ValidationRule:
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) must be <= maximum ({maximum})")
    return rule(
        lambda v: minimum <= v <= maximum,
        f"Value must be between {minimum} and {maximum}",
        expected_value=f"[{minimum}, {maximum}]",
    )


def greater_than(threshold: Number) -> ValidationRule:
    return rule(lambda v: v > threshold, f"Value must be greater than {threshold}", expected_value=f"> {threshold}")


def less_than(threshold: Number) -> ValidationRule:
    return rule(lambda v: v < threshold, f"Value must be less than {threshold}", expected_value=f"< {threshold}")


def port() -> ValidationRule:
    return between(1, 65535)


def even() -> ValidationRule:
    return rule(lambda v: v % 2 == 0, "Value must be even")


def odd() -> ValidationRule:
    return rule(lambda v: v % 2 != 0, "Value must be odd")


def multiple_of(divisor: int) -> ValidationRule:
    if divisor == 0:
        raise ValueError("divisor cannot be zero")
    return rule(lambda v: v % divisor == 0, f"Value must be a multiple of {divisor}")
