# tests/core/validation/test_property_group.py

import pytest

from cleanconfig.core.errors import EmptyPropertyGroupError
from cleanconfig.core.validation.group import PropertyGroup
from cleanconfig.core.validation.multi import always_valid_multi


def test_builder_collects_properties_rules_and_description():
    group = (
        PropertyGroup.builder("db")
        .add_property("db.host")
        .add_properties("db.user", "db.password")
        .add_rule(always_valid_multi())
        .description("Conexão com o banco")
        .build()
    )
    assert group.property_names == ("db.host", "db.user", "db.password")
    assert len(group.rules) == 1
    assert group.description == "Conexão com o banco"


def test_empty_group_rejected():
    with pytest.raises(EmptyPropertyGroupError):
        PropertyGroup.builder("empty").build()


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_rejected(name):
    with pytest.raises(ValueError):
        PropertyGroup.builder(name)


def test_equality_ignores_rules_and_description():
    a = PropertyGroup.builder("g").add_property("x").build()
    b = PropertyGroup.builder("g").add_property("x").add_rule(always_valid_multi()).description("d").build()
    assert a == b
    assert hash(a) == hash(b)
    assert a != PropertyGroup.builder("g").add_property("y").build()
