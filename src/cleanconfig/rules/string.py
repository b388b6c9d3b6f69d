# src/cleanconfig/rules/string.py
"""Regras para propriedades do tipo `str`."""

from __future__ import annotations

import re
from typing import Any, Optional, Pattern, Union
from urllib.parse import urlparse

from ..core.context import PropertyContext
from ..core.validation.result import ValidationResult
from ..core.validation.rule import ValidationRule
from .base import failure, rule

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def _quoted(value: Optional[str]) -> str:
    return "null" if value is None else f'"{value}"'


def not_blank() -> ValidationRule:
    def _check(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        if value is None or not str(value).strip():
            return failure(name, "Value cannot be blank", actual_value=_quoted(value))
        return ValidationResult.success()

    return ValidationRule(_check, "not_blank")


def not_empty() -> ValidationRule:
    def _check(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        if value is None or len(value) == 0:
            return failure(name, "Value cannot be empty", actual_value=_quoted(value))
        return ValidationResult.success()

    return ValidationRule(_check, "not_empty")


def _length_rule(predicate, message: str, expected: str, description: str) -> ValidationRule:
    def _check(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        if value is not None and not predicate(len(value)):
            return failure(name, message, actual_value=str(len(value)), expected_value=expected)
        return ValidationResult.success()

    return ValidationRule(_check, description)


def min_length(minimum: int) -> ValidationRule:
    return _length_rule(
        lambda n: n >= minimum,
        f"Value length must be at least {minimum}",
        f">= {minimum}",
        f"min_length({minimum})",
    )


def max_length(maximum: int) -> ValidationRule:
    return _length_rule(
        lambda n: n <= maximum,
        f"Value length must not exceed {maximum}",
        f"<= {maximum}",
        f"max_length({maximum})",
    )


def length_between(minimum: int, maximum: int) -> ValidationRule:
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) must be <= maximum ({maximum})")
    return _length_rule(
        lambda n: minimum <= n <= maximum,
        f"Value length must be between {minimum} and {maximum}",
        f"[{minimum}, {maximum}]",
        f"length_between({minimum}, {maximum})",
    )


def matches_regex(pattern: Union[str, Pattern[str]]) -> ValidationRule:
    """Casamento integral (`fullmatch`) com a expressão informada."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return rule(
        lambda v: compiled.fullmatch(v) is not None,
        f"Value does not match pattern: {compiled.pattern}",
    )


def email() -> ValidationRule:
    return rule(lambda v: EMAIL_PATTERN.fullmatch(v) is not None, "Value is not a valid email address")


def _is_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path)


def url() -> ValidationRule:
    return rule(_is_url, "Value is not a valid URL")


def starts_with(prefix: str) -> ValidationRule:
    return rule(lambda v: v.startswith(prefix), f"Value must start with: {prefix}")


def ends_with(suffix: str) -> ValidationRule:
    return rule(lambda v: v.endswith(suffix), f"Value must end with: {suffix}")


def contains(substring: str) -> ValidationRule:
    return rule(lambda v: substring in v, f"Value must contain: {substring}")


def does_not_contain(substring: str) -> ValidationRule:
    return rule(lambda v: substring not in v, f"Value must not contain: {substring}")


def alphanumeric() -> ValidationRule:
    return matches_regex(r"[a-zA-Z0-9]+")


def alphabetic() -> ValidationRule:
    return matches_regex(r"[a-zA-Z]+")


def numeric() -> ValidationRule:
    return matches_regex(r"[0-9]+")


def lowercase() -> ValidationRule:
    return rule(lambda v: v == v.lower(), "Value must be lowercase")


def uppercase() -> ValidationRule:
    return rule(lambda v: v == v.upper(), "Value must be uppercase")
