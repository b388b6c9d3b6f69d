# tests/core/schema/test_conditional_defaults.py
"""
Testes dos provedores de default condicionais.

Os testes asseguram que:
- `static`, `computed` e `no_default` devolvem o esperado
- `when` encadeado faz o override mais recente vencer
- `computed_cached` memoiza por fingerprint do mapa completo, nunca
  armazena `None` e respeita `max_size` sem eviction, inclusive sob
  chamadas concorrentes
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from cleanconfig.core.schema.defaults import ConditionalDefaultValue
from cleanconfig.core.validation import conditions


def test_static_returns_value(make_context):
    assert ConditionalDefaultValue.static(8080).compute_default(make_context()) == 8080


def test_static_rejects_none():
    with pytest.raises(ValueError):
        ConditionalDefaultValue.static(None)


def test_no_default_is_absent(make_context):
    assert ConditionalDefaultValue.no_default()(make_context({"a": "1"})) is None


def test_computed_reads_context(make_context):
    provider = ConditionalDefaultValue.computed(
        lambda ctx: f"{ctx.get_property('server.host')}:8080"
    )
    assert provider(make_context({"server.host": "db"})) == "db:8080"


def test_when_overrides_only_when_condition_holds(make_context):
    provider = ConditionalDefaultValue.static("INFO").when(
        conditions.property_equals("env", "dev"), "DEBUG"
    )
    assert provider(make_context({"env": "dev"})) == "DEBUG"
    assert provider(make_context({"env": "prod"})) == "INFO"
    assert provider(make_context({})) == "INFO"


def test_last_when_wins_when_several_conditions_hold(make_context):
    base = ConditionalDefaultValue.static(1)
    chained = base.when(conditions.always_true(), 2).when(conditions.always_true(), 3)
    assert chained(make_context()) == 3
    # o receptor não é mutado
    assert base(make_context()) == 1


def test_when_computed(make_context):
    provider = ConditionalDefaultValue.no_default().when_computed(
        conditions.property_is_present("replicas"),
        lambda ctx: ctx.get_typed_property("replicas", int) * 2,
    )
    assert provider(make_context({"replicas": "3"})) == 6
    assert provider(make_context({})) is None


def test_when_rejects_none_override():
    with pytest.raises(ValueError):
        ConditionalDefaultValue.static(1).when(conditions.always_true(), None)


def test_computed_cached_calls_function_once_per_distinct_map(make_context):
    calls = []

    def compute(ctx):
        calls.append(dict(ctx.get_all_properties()))
        return "x"

    provider = ConditionalDefaultValue.computed_cached(compute)
    for _ in range(5):
        assert provider(make_context({"a": "1"})) == "x"
    assert len(calls) == 1

    provider(make_context({"a": "2"}))
    assert len(calls) == 2


def test_computed_cached_never_stores_none(make_context):
    calls = []

    def compute(ctx):
        calls.append(1)
        return None

    provider = ConditionalDefaultValue.computed_cached(compute)
    provider(make_context({"a": "1"}))
    provider(make_context({"a": "1"}))
    assert len(calls) == 2


def test_computed_cached_refuses_new_keys_when_full(make_context):
    calls = []

    def compute(ctx):
        calls.append(ctx.get_property("k"))
        return ctx.get_property("k")

    provider = ConditionalDefaultValue.computed_cached(compute, max_size=2)
    provider(make_context({"k": "1"}))
    provider(make_context({"k": "2"}))
    provider(make_context({"k": "3"}))  # memo cheio: não armazenado
    provider(make_context({"k": "3"}))
    provider(make_context({"k": "1"}))  # ainda memoizado
    assert calls == ["1", "2", "3", "3"]


def _counting_compute():
    lock = threading.Lock()
    calls = []

    def compute(ctx):
        with lock:
            calls.append(ctx.get_property("k"))
        return f"v{ctx.get_property('k')}"

    return compute, calls


def test_computed_cached_concurrent_calls_on_one_map(make_context):
    workers = 8
    compute, calls = _counting_compute()
    provider = ConditionalDefaultValue.computed_cached(compute)
    context = make_context({"k": "1"})

    with ThreadPoolExecutor(max_workers=workers) as pool:
        values = list(pool.map(lambda _: provider(context), range(1000)))

    assert set(values) == {"v1"}
    assert 1 <= len(calls) <= workers


def test_computed_cached_concurrent_fill_stays_within_max_size(make_context):
    compute, calls = _counting_compute()
    provider = ConditionalDefaultValue.computed_cached(compute, max_size=3)
    keys = [str(i) for i in range(10)]
    contexts = {k: make_context({"k": k}) for k in keys}

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: provider(contexts[keys[i % 10]]), range(500)))

    # segunda passada sequencial: só as chaves memoizadas deixam de recomputar
    calls.clear()
    for k in keys:
        assert provider(contexts[k]) == f"v{k}"
    assert len(calls) == len(keys) - 3
