"""
Exceções canônicas de construção de schema do cleanconfig.

Este módulo define a hierarquia oficial de exceções levantadas durante a
declaração de propriedades, grupos e durante o `build()` do registry.

As exceções aqui definidas representam **defeitos de autoria do schema**,
e não defeitos nos dados fornecidos pelo usuário. Defeitos de dados são
sempre coletados em `ValidationResult` e nunca levantados.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Nenhum registry parcial ou inconsistente é produzido

Invariantes:
    - Todas as exceções de schema herdam de `SchemaError`
    - `SchemaError` também é `ValueError`, para captura genérica

Limites explícitos:
    - Não representa falha de validação de valores
    - Não realiza fallback ou recovery

Este módulo existe para garantir clareza,
consistência e previsibilidade no tratamento de erros de schema.
"""

from __future__ import annotations


class SchemaError(ValueError):
    """
    Exceção base para erros de autoria do schema.

    Permite:
        - captura genérica de qualquer falha de construção
        - distinção clara entre falhas de schema e falhas de dados
    """


class InvalidPropertyDefinitionError(SchemaError):
    """Definição de propriedade incompleta (ex.: nome ausente ou vazio)."""


class DuplicatePropertyError(SchemaError):
    """
    Exceção levantada quando duas definições compartilham o mesmo nome.

    Decisões arquiteturais:
        - Nomes de propriedade são únicos no registry
        - A duplicidade é detectada no momento do `register`, antes do build

    Limites explícitos:
        - Não tenta renomear ou mesclar definições
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Property '{name}' is already registered")


class DuplicateGroupError(SchemaError):
    """Grupo de propriedades registrado mais de uma vez com o mesmo nome."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Property group '{name}' is already registered")


class EmptyPropertyGroupError(SchemaError):
    """Grupo de propriedades construído sem nenhuma propriedade."""


class UndefinedDependencyError(SchemaError):
    """
    Exceção levantada quando uma propriedade depende de outra inexistente.

    Esta exceção indica que uma definição declarou em
    `depends_on_for_validation` um nome que não corresponde a nenhuma
    propriedade registrada.

    Invariantes:
        - Uma propriedade não pode depender de uma propriedade inexistente
        - O schema é considerado inválido nesta condição
    """

    def __init__(self, property_name: str, dependency: str):
        self.property_name = property_name
        self.dependency = dependency
        super().__init__(
            f"Property '{property_name}' depends on undefined property '{dependency}'"
        )


class CircularDependencyError(SchemaError):
    """
    Exceção levantada quando o grafo de dependências contém um ciclo.

    Inclui o caso degenerado de uma propriedade que depende de si mesma.

    Decisões arquiteturais:
        - O grafo de dependências deve ser acíclico
        - Nenhuma ordem topológica parcial é devolvida

    Limites explícitos:
        - Não tenta quebrar ciclos automaticamente
    """

    def __init__(self, unresolved: list[str] | None = None):
        self.unresolved = sorted(unresolved or [])
        message = "Circular dependency detected in property validation dependencies"
        if self.unresolved:
            message += f": {', '.join(self.unresolved)}"
        super().__init__(message)
