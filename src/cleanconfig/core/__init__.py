# src/cleanconfig/core/__init__.py
"""
Core do cleanconfig.

Este pacote contém a implementação canônica do motor de propriedades de
configuração: declaração de schema, resolução de defaults condicionais e
validação com dependências entre propriedades.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de frameworks de aplicação
    - orientado a contratos explícitos

Componentes principais:
    - schema     → definições, defaults condicionais, planner (DAG) e registry
    - validation → resultados, álgebra de regras, grupos e formatadores
    - engine     → applier, validador, cache e fachada
    - config     → settings do engine (merge, validação estrutural, hashing)

Princípios fundamentais:
    - Defeitos de schema são exceções; defeitos de dados são valores
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado

Limites explícitos:
    - Não lê fontes de propriedades (arquivos, ambiente, serviços)
    - Não depende de CLI ou serviços externos
"""
