# src/cleanconfig/core/engine/__init__.py
"""
Engine do cleanconfig.

Este pacote contém os componentes que operam sobre um `PropertyRegistry`
já construído:
    - applier   → aplicação de defaults condicionais
    - validator → validação completa, sem curto-circuito entre propriedades
    - cache     → decorator com TTL e limite de tamanho sobre o validador
    - engine    → fachada que compõe os três a partir de `EngineSettings`

Princípios fundamentais:
    - Defeitos nos dados são valores (`ValidationResult`), nunca exceções
    - Nenhum componente muta o input do usuário
    - O registry é compartilhado somente leitura

Limites explícitos:
    - Não constrói schemas
    - Não lê arquivos
"""
