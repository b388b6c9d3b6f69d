# tests/conftest.py
"""
Fixtures compartilhados para testes do cleanconfig.

Este módulo define fixtures reutilizáveis que fornecem:
- registry de conversores padrão
- fábrica de `PropertyContext`
- um registry pequeno e realista (servidor + pool + credenciais)
- conteúdos YAML de settings para testes do loader

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O (arquivos ficam a cargo de `tmp_path`)
    - Todas as fixtures são seguras para execução em paralelo

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Contexto e conversão
# =====================================================

@pytest.fixture
def converters():
    """Registry de conversores com os tipos padrão registrados."""
    from cleanconfig.core.converter import TypeConverterRegistry

    return TypeConverterRegistry.with_defaults()


@pytest.fixture
def make_context(converters):
    """
    Fábrica de `PropertyContext` para testes de regras e condições.

    Returns:
        Callable[..., PropertyContext]: `make_context(props, **kwargs)`.
    """
    from cleanconfig.core.context import PropertyContext

    def _make(properties=None, **kwargs):
        kwargs.setdefault("converters", converters)
        return PropertyContext(properties=properties or {}, **kwargs)

    return _make


# =====================================================
# Schema
# =====================================================

@pytest.fixture
def server_registry():
    """
    Registry pequeno semelhante ao uso real:

    - server.host (str, obrigatório, default "localhost")
    - server.port (int, default 8080, porta válida)
    - pool.min / pool.max (int, defaults 1 / 10, pool.min <= pool.max)
    - db.username / db.password (all-or-nothing)
    """
    from cleanconfig.core.schema.definition import PropertyDefinition
    from cleanconfig.core.schema.registry import PropertyRegistry
    from cleanconfig.core.types import PropertyCategory
    from cleanconfig.core.validation.group import PropertyGroup
    from cleanconfig.rules import multiproperty, numeric, string

    return (
        PropertyRegistry.builder()
        .register(
            PropertyDefinition.builder(str)
            .name("server.host")
            .required()
            .default_value("localhost")
            .validation_rule(string.not_blank())
            .category(PropertyCategory.NETWORKING)
            .build()
        )
        .register(
            PropertyDefinition.builder(int)
            .name("server.port")
            .default_value(8080)
            .validation_rule(numeric.port())
            .category(PropertyCategory.NETWORKING)
            .build()
        )
        .register(
            PropertyDefinition.builder(int)
            .name("pool.min")
            .default_value(1)
            .validation_rule(numeric.positive())
            .category(PropertyCategory.PERFORMANCE)
            .build()
        )
        .register(
            PropertyDefinition.builder(int)
            .name("pool.max")
            .default_value(10)
            .validation_rule(numeric.positive())
            .depends_on_for_validation("pool.min")
            .category(PropertyCategory.PERFORMANCE)
            .build()
        )
        .register(PropertyDefinition.builder(str).name("db.username").category(PropertyCategory.DATABASE).build())
        .register(PropertyDefinition.builder(str).name("db.password").category(PropertyCategory.SECURITY).build())
        .register_group(
            PropertyGroup.builder("pool")
            .add_properties("pool.min", "pool.max")
            .add_rule(multiproperty.less_than_or_equal("pool.min", "pool.max"))
            .build()
        )
        .register_group(
            PropertyGroup.builder("credentials")
            .add_properties("db.username", "db.password")
            .add_rule(multiproperty.all_or_nothing("db.username", "db.password"))
            .build()
        )
        .build()
    )


# =====================================================
# Settings
# =====================================================

@pytest.fixture
def settings_defaults_yaml() -> str:
    """YAML de defaults semelhante a um `cleanconfig.defaults.yaml`."""
    return """\
cache:
  enabled: true
  max_size: 50
validation:
  reject_unknown_properties: false
logging:
  level: INFO
"""


@pytest.fixture
def settings_local_yaml() -> str:
    """YAML de override local (apenas as chaves alteradas)."""
    return """\
cache:
  ttl_seconds: 30
validation:
  reject_unknown_properties: true
logging:
  level: DEBUG
  json: false
"""
