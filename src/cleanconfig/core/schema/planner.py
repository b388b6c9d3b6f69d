# src/cleanconfig/core/schema/planner.py
"""
Planejador da ordem de validação das propriedades (DAG).

Este módulo valida a estrutura de dependências declarada pelas
propriedades (`depends_on_for_validation`) e produz uma ordem topológica
determinística: toda propriedade aparece depois das propriedades das
quais depende.

Princípios fundamentais:
    - O grafo de dependências deve ser um DAG válido
    - A ordenação é determinística para a mesma entrada
    - Validação estrutural ocorre antes de qualquer validação de dados

Decisões arquiteturais:
    - Utiliza o algoritmo de Kahn: grau de entrada = tamanho do conjunto de
      dependências de cada nó
    - Empates entre nós prontos são resolvidos por (`validation_order`,
      posição de registro)
    - O grafo é uma estrutura de adjacência transitória indexada por nome,
      descartada ao final; definições nunca se referenciam diretamente
    - Uma auto-dependência nunca atinge grau zero e é reportada como ciclo

Invariantes:
    - Nenhuma propriedade aparece antes de suas dependências
    - Todas as propriedades aparecem exatamente uma vez
    - A mesma definição de schema produz sempre a mesma ordem

Limites explícitos:
    - Não valida valores
    - Não interage com o validador nem com o applier
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Mapping, Optional, Set, Tuple

from ..errors import CircularDependencyError, UndefinedDependencyError


def check_dependencies_exist(dependencies: Mapping[str, Set[str]]) -> None:
    """
    Garante que toda dependência declarada corresponde a um nó existente.

    Raises:
        UndefinedDependencyError: Na primeira dependência inexistente,
            percorrendo as propriedades em ordem de registro.
    """
    for name, deps in dependencies.items():
        for dep in sorted(deps):
            if dep not in dependencies:
                raise UndefinedDependencyError(name, dep)


def plan_validation_order(
    dependencies: Mapping[str, Set[str]],
    priority: Optional[Mapping[str, int]] = None,
) -> List[str]:
    """
    Produz a ordem topológica determinística das propriedades.

    Args:
        dependencies (Mapping[str, Set[str]]): nome → nomes dos quais depende,
            na ordem de registro. Dependências desconhecidas são ignoradas
            (a existência é verificada por `check_dependencies_exist`).
        priority (Optional[Mapping[str, int]]): dica de ordem por nome
            (`validation_order` das definições); menor vem primeiro.

    Returns:
        List[str]: Nomes em ordem topológica.

    Raises:
        CircularDependencyError: Se houver ciclo (inclusive auto-dependência).
    """
    priority = priority or {}
    position = {name: index for index, name in enumerate(dependencies)}

    edges: Dict[str, Set[str]] = {
        name: {dep for dep in deps if dep in dependencies}
        for name, deps in dependencies.items()
    }

    incoming_count: Dict[str, int] = {name: len(deps) for name, deps in edges.items()}
    dependents: Dict[str, Set[str]] = {name: set() for name in edges}
    for name, deps in edges.items():
        for dep in deps:
            dependents[dep].add(name)

    def _key(name: str) -> Tuple[int, int, str]:
        return (priority.get(name, 0), position[name], name)

    ready: List[Tuple[int, int, str]] = [_key(n) for n, c in incoming_count.items() if c == 0]
    heapq.heapify(ready)
    order: List[str] = []

    while ready:
        _, _, name = heapq.heappop(ready)
        order.append(name)
        for child in dependents[name]:
            incoming_count[child] -= 1
            if incoming_count[child] == 0:
                heapq.heappush(ready, _key(child))

    if len(order) != len(edges):
        raise CircularDependencyError([n for n, c in incoming_count.items() if c > 0])

    return order
