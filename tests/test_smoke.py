# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do cleanconfig.

Garantem apenas que o pacote importa sem erros estruturais (ex.: ciclos
de import) e que a API pública está exposta.

Limites explícitos:
    - Não testar lógica de negócio
    - Não acumular asserts funcionais
"""


def test_smoke():
    import cleanconfig
    import cleanconfig.core.config.loader  # noqa: F401
    import cleanconfig.core.log  # noqa: F401
    import cleanconfig.rules

    assert cleanconfig.__version__
    for name in cleanconfig.__all__:
        assert hasattr(cleanconfig, name), name
