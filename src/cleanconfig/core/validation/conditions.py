"""
Condições reutilizáveis sobre `PropertyContext`.

Condições são predicados `context -> bool` usados por `only_if` nas regras
e por `when` nos defaults condicionais. Propriedades ausentes tornam as
condições de igualdade/forma falsas (exceto `property_not_equals`, que é
verdadeira quando a propriedade não existe).
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ..context import PropertyContext
from ..converter import parse_bool

Condition = Callable[[PropertyContext], bool]


def property_equals(property_name: str, expected_value: str) -> Condition:
    return lambda ctx: ctx.get_property(property_name) == expected_value


def property_not_equals(property_name: str, forbidden_value: str) -> Condition:
    def _check(ctx: PropertyContext) -> bool:
        value = ctx.get_property(property_name)
        return value is None or value != forbidden_value

    return _check


def property_is_present(property_name: str) -> Condition:
    return lambda ctx: ctx.has_property(property_name)


def property_is_absent(property_name: str) -> Condition:
    return lambda ctx: not ctx.has_property(property_name)


def _bool_property(ctx: PropertyContext, property_name: str) -> Any:
    value = ctx.get_property(property_name)
    if value is None:
        return None
    try:
        return parse_bool(value)
    except ValueError:
        return None


def property_is_true(property_name: str) -> Condition:
    return lambda ctx: _bool_property(ctx, property_name) is True


def property_is_false(property_name: str) -> Condition:
    return lambda ctx: _bool_property(ctx, property_name) is False


def property_matches(property_name: str, predicate: Callable[[str], bool]) -> Condition:
    def _check(ctx: PropertyContext) -> bool:
        value = ctx.get_property(property_name)
        return value is not None and bool(predicate(value))

    return _check


def typed_property_matches(
    property_name: str, target_type: type, predicate: Callable[[Any], bool]
) -> Condition:
    def _check(ctx: PropertyContext) -> bool:
        value = ctx.get_typed_property(property_name, target_type)
        return value is not None and bool(predicate(value))

    return _check


def metadata_equals(key: str, expected_value: str) -> Condition:
    return lambda ctx: ctx.get_metadata(key) == expected_value


def metadata_is_present(key: str) -> Condition:
    return lambda ctx: ctx.get_metadata(key) is not None


def always_true() -> Condition:
    return lambda ctx: True


def always_false() -> Condition:
    return lambda ctx: False


def not_(condition: Condition) -> Condition:
    return lambda ctx: not condition(ctx)


def and_(*conditions: Condition) -> Condition:
    return lambda ctx: all(condition(ctx) for condition in conditions)


def or_(*conditions: Condition) -> Condition:
    return lambda ctx: any(condition(ctx) for condition in conditions)


def all_properties_present(*property_names: str) -> Condition:
    return lambda ctx: all(ctx.has_property(name) for name in property_names)


def any_property_present(*property_names: str) -> Condition:
    return lambda ctx: any(ctx.has_property(name) for name in property_names)


def integer_property_between(property_name: str, minimum: int, maximum: int) -> Condition:
    return typed_property_matches(property_name, int, lambda v: minimum <= v <= maximum)


def property_one_of(property_name: str, *allowed_values: str) -> Condition:
    allowed: Iterable[str] = frozenset(allowed_values)
    return lambda ctx: ctx.get_property(property_name) in allowed


def property_starts_with(property_name: str, prefix: str) -> Condition:
    return property_matches(property_name, lambda v: v.startswith(prefix))


def property_ends_with(property_name: str, suffix: str) -> Condition:
    return property_matches(property_name, lambda v: v.endswith(suffix))


def property_contains(property_name: str, substring: str) -> Condition:
    return property_matches(property_name, lambda v: substring in v)
