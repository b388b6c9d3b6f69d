# tests/core/engine/test_caching_validator.py
"""
Testes do `CachingPropertyValidator`.

Os testes asseguram que:
- chamadas repetidas com o mesmo input delegam uma única vez
- entradas expiram após o TTL (relógio injetado)
- cache cheio recusa novas entradas, purgando antes as expiradas
- tipo de contexto e metadata fazem parte da chave
- operações por propriedade e por grupo não são cacheadas
- chamadas concorrentes compartilham a mesma entrada sem lock do chamador
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from cleanconfig.core.engine.cache import CachingPropertyValidator
from cleanconfig.core.engine.validator import PropertyValidator
from cleanconfig.core.types import ValidationContextType
from cleanconfig.core.validation.result import ValidationResult


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingValidator:
    """Delegate mínimo que conta as chamadas recebidas."""

    def __init__(self):
        self.validate_calls = 0
        self.property_calls = 0
        self.group_calls = 0

    def validate(self, properties, context_type=ValidationContextType.STARTUP, metadata=None):
        self.validate_calls += 1
        return ValidationResult.success()

    def validate_property(self, property_name, value, *args, **kwargs):
        self.property_calls += 1
        return ValidationResult.success()

    def validate_property_group(self, group, properties, *args, **kwargs):
        self.group_calls += 1
        return ValidationResult.success()


def make_cache(max_size=100, ttl_seconds=300):
    delegate = CountingValidator()
    clock = FakeClock()
    cache = CachingPropertyValidator(delegate, max_size=max_size, ttl=timedelta(seconds=ttl_seconds), clock=clock)
    return cache, delegate, clock


def test_repeated_validation_hits_cache():
    cache, delegate, _ = make_cache()
    props = {"server.port": "8080"}

    first = cache.validate(props)
    for _ in range(999):
        assert cache.validate(dict(props)) is first

    assert delegate.validate_calls == 1
    assert cache.cache_size() == 1


def test_key_order_does_not_matter():
    cache, delegate, _ = make_cache()
    cache.validate({"a": "1", "b": "2"})
    cache.validate({"b": "2", "a": "1"})
    assert delegate.validate_calls == 1


def test_entry_expires_after_ttl():
    cache, delegate, clock = make_cache(ttl_seconds=60)
    props = {"a": "1"}

    cache.validate(props)
    clock.advance(59)
    cache.validate(props)
    assert delegate.validate_calls == 1

    clock.advance(1)
    cache.validate(props)
    assert delegate.validate_calls == 2
    assert cache.cache_size() == 1


def test_full_cache_refuses_new_entries():
    cache, delegate, _ = make_cache(max_size=2)
    cache.validate({"a": "1"})
    cache.validate({"a": "2"})
    cache.validate({"a": "3"})
    assert cache.cache_size() == 2

    # a terceira entrada não foi guardada; as duas primeiras continuam vivas
    cache.validate({"a": "3"})
    cache.validate({"a": "1"})
    assert delegate.validate_calls == 4


def test_full_cache_purges_expired_before_refusing():
    cache, delegate, clock = make_cache(max_size=2, ttl_seconds=10)
    cache.validate({"a": "1"})
    clock.advance(5)
    cache.validate({"a": "2"})
    clock.advance(6)

    # {"a": "1"} expirou; abre espaço para a nova entrada
    cache.validate({"a": "3"})
    assert cache.cache_size() == 2

    cache.validate({"a": "2"})
    cache.validate({"a": "3"})
    assert delegate.validate_calls == 3


def test_zero_max_size_never_stores():
    cache, delegate, _ = make_cache(max_size=0)
    cache.validate({"a": "1"})
    cache.validate({"a": "1"})
    assert delegate.validate_calls == 2
    assert cache.cache_size() == 0


def test_context_type_and_metadata_are_part_of_the_key():
    cache, delegate, _ = make_cache()
    props = {"a": "1"}
    cache.validate(props)
    cache.validate(props, ValidationContextType.TESTING)
    cache.validate(props, ValidationContextType.STARTUP, {"env": "prod"})
    cache.validate(props, ValidationContextType.STARTUP, {"env": "prod"})
    assert delegate.validate_calls == 3


def test_clear_cache():
    cache, delegate, _ = make_cache()
    cache.validate({"a": "1"})
    cache.clear_cache()
    assert cache.cache_size() == 0
    cache.validate({"a": "1"})
    assert delegate.validate_calls == 2


def test_property_and_group_operations_are_not_cached():
    cache, delegate, _ = make_cache()
    cache.validate_property("a", "1")
    cache.validate_property("a", "1")
    cache.validate_property_group(object(), {})
    cache.validate_property_group(object(), {})
    assert delegate.property_calls == 2
    assert delegate.group_calls == 2
    assert cache.cache_size() == 0


def test_results_match_underlying_validator(server_registry):
    cache = CachingPropertyValidator(PropertyValidator(server_registry))
    invalid = {"server.host": "h", "server.port": "70000"}
    assert cache.validate(invalid) == PropertyValidator(server_registry).validate(invalid)
    assert cache.registry is server_registry


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_size": -1},
        {"ttl": timedelta(0)},
        {"ttl": timedelta(seconds=-5)},
    ],
)
def test_invalid_configuration_is_rejected(kwargs):
    with pytest.raises(ValueError):
        CachingPropertyValidator(CountingValidator(), **kwargs)


def test_delegate_is_required():
    with pytest.raises(ValueError):
        CachingPropertyValidator(None)


class LockedCountingValidator(CountingValidator):
    """Delegate com contador protegido, para uso a partir de várias threads."""

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()

    def validate(self, properties, context_type=ValidationContextType.STARTUP, metadata=None):
        with self._lock:
            self.validate_calls += 1
        return ValidationResult.success()


def test_concurrent_calls_share_one_entry():
    workers = 8
    delegate = LockedCountingValidator()
    cache = CachingPropertyValidator(delegate, max_size=10, ttl=timedelta(minutes=5))
    props = {"server.port": "8080", "server.host": "localhost"}

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda _: cache.validate(dict(props)), range(1000)))

    assert all(r.is_valid for r in results)
    assert cache.cache_size() == 1
    assert 1 <= delegate.validate_calls <= workers


def test_concurrent_distinct_inputs_never_exceed_max_size():
    delegate = LockedCountingValidator()
    cache = CachingPropertyValidator(delegate, max_size=5, ttl=timedelta(minutes=5))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: cache.validate({"k": str(i % 40)}), range(1000)))

    assert cache.cache_size() == 5
