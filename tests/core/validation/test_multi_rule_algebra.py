# tests/core/validation/test_multi_rule_algebra.py

import pytest

from cleanconfig.core.validation import conditions
from cleanconfig.core.validation.multi import (
    MultiPropertyValidationRule,
    all_of_multi,
    always_fails_multi,
    always_valid_multi,
    any_of_multi,
)


def exploding():
    def _boom(names, ctx):
        raise AssertionError("must not be evaluated")

    return MultiPropertyValidationRule(_boom)


def test_and_short_circuits(make_context):
    rule = always_fails_multi("first") & exploding()
    result = rule.validate(("a", "b"), make_context())
    assert [e.message for e in result.errors] == ["first"]
    assert result.errors[0].property_name == "a"


def test_or_surfaces_second_failure(make_context):
    rule = always_fails_multi("first") | always_fails_multi("second")
    assert [e.message for e in rule.validate(("a",), make_context()).errors] == ["second"]


def test_any_of_multi_aggregates(make_context):
    rule = any_of_multi(always_fails_multi("e1"), always_fails_multi("e2"), always_fails_multi("e3"))
    assert rule.validate(("a",), make_context()).error_count == 3


def test_all_of_multi_and_only_if(make_context):
    rule = all_of_multi(always_valid_multi(), always_fails_multi("x")).only_if(
        conditions.property_is_present("flag")
    )
    assert rule.validate(("a",), make_context()).is_valid
    assert not rule.validate(("a",), make_context({"flag": "1"})).is_valid


def test_always_fails_without_names_uses_unknown(make_context):
    result = always_fails_multi("x").validate((), make_context())
    assert result.errors[0].property_name == "unknown"


def test_empty_combinators_rejected():
    with pytest.raises(ValueError):
        all_of_multi()
    with pytest.raises(ValueError):
        any_of_multi()
