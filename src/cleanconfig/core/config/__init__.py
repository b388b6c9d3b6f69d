# src/cleanconfig/core/config/__init__.py

"""
Camada de settings do cleanconfig.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, interpretar e identificar os settings do engine (cache, opções
do validador e logging).

Responsabilidades do pacote:
    - Carregamento de arquivos de settings (defaults + overrides locais)
    - Resolução dos settings via deep-merge determinístico
    - Interpretação tipada em `EngineSettings`
    - Geração de hash canônico para rastreabilidade

Invariantes:
    - A mesma entrada sempre produz os mesmos settings
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não descreve propriedades de aplicação (ver `cleanconfig.core.schema`)
    - Não valida propriedades
"""
