# tests/core/schema/test_validation_order_planner.py
"""
Testes do planner de ordem de validação (Kahn determinístico).

Os testes asseguram que:
- a ordem respeita rigorosamente as dependências declaradas
- empates são resolvidos pela dica de prioridade e depois pela posição
- ciclos são reportados com os nós que nunca atingem grau zero
- dependências inexistentes são rejeitadas antes da ordenação

Limites explícitos:
    - Não valida construção de registry (ver test_registry_structure.py)
"""

import pytest

try:
    from cleanconfig.core.errors import CircularDependencyError, UndefinedDependencyError
    from cleanconfig.core.schema.planner import check_dependencies_exist, plan_validation_order
except Exception as e:  # noqa: BLE001
    plan_validation_order = None
    check_dependencies_exist = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o planner de validação esteja disponível para os testes.

    Falha antecipada e explícita quando o módulo ou as exceções
    canônicas não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing planner. Implement:\n"
            "- src/cleanconfig/core/schema/planner.py (plan_validation_order)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_toposort_linear():
    """
    Verifica a ordenação em um grafo linear (a → b → c).

    Invariantes:
        - Uma propriedade sempre aparece após todas as suas dependências
        - Nenhuma propriedade é omitida
    """
    _require_imports()
    order = plan_validation_order({"c": {"b"}, "b": {"a"}, "a": set()})
    assert order == ["a", "b", "c"]


def test_toposort_multiple_roots_follow_registration():
    _require_imports()
    order = plan_validation_order({"z": set(), "y": set(), "x": {"z", "y"}})
    assert order == ["z", "y", "x"]


def test_priority_breaks_ties_before_registration():
    _require_imports()
    order = plan_validation_order({"a": set(), "b": set(), "c": set()}, priority={"c": -1, "a": 2})
    assert order == ["c", "b", "a"]


def test_priority_never_overrides_dependencies():
    _require_imports()
    order = plan_validation_order({"child": {"parent"}, "parent": set()}, priority={"child": -10, "parent": 10})
    assert order == ["parent", "child"]


def test_cycle_reports_blocked_dependents_too():
    _require_imports()
    with pytest.raises(CircularDependencyError) as exc:
        plan_validation_order({"a": {"b"}, "b": {"a"}, "c": {"a"}, "d": set()})
    assert exc.value.unresolved == ["a", "b", "c"]


def test_unknown_dependency_detected():
    _require_imports()
    with pytest.raises(UndefinedDependencyError) as exc:
        check_dependencies_exist({"a": set(), "b": {"a", "ghost"}})
    assert exc.value.property_name == "b"
    assert exc.value.dependency == "ghost"


def test_empty_graph():
    _require_imports()
    assert plan_validation_order({}) == []
    check_dependencies_exist({})
