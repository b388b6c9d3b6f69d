"""
Resolução de valores default condicionais.

Um provedor de default é uma função `context -> Optional[valor]`, onde
`None` significa "nenhum default" (ex.: pré-condição não atendida).

Formas de construção:
    - `static(value)`: sempre o mesmo valor (não nulo)
    - `computed(fn)`: função arbitrária do contexto
    - `computed_cached(fn, max_size)`: `computed` memoizado pelo fingerprint
      do mapa completo de propriedades do contexto
    - `when(cond, value)` / `when_computed(cond, fn)`: override condicional
      encadeável; o override mais recente é avaliado primeiro
    - `no_default()`: sempre ausente

Decisões arquiteturais:
    - Cada `when` embrulha o provedor anterior e devolve um novo provedor:
      com várias condições verdadeiras, vence a última registrada
    - O memo de `computed_cached` nunca armazena `None` e nunca faz
      eviction: cheio, novas chaves simplesmente não são memoizadas
    - A chave do memo é o fingerprint SHA-256 do mapa de propriedades

Invariantes:
    - Nenhuma operação muta o provedor receptor
    - O memo nunca excede `max_size` entradas
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from ..context import PropertyContext
from ..hashing import compute_fingerprint

DefaultFn = Callable[[PropertyContext], Optional[Any]]
Condition = Callable[[PropertyContext], bool]

DEFAULT_MEMO_SIZE = 100


class ConditionalDefaultValue:
    __slots__ = ("_fn",)

    def __init__(self, fn: DefaultFn):
        if not callable(fn):
            raise TypeError("default function must be callable")
        self._fn = fn

    def compute_default(self, context: PropertyContext) -> Optional[Any]:
        return self._fn(context)

    __call__ = compute_default

    # -----------------------------
    # Construtores
    # -----------------------------
    @classmethod
    def static(cls, value: Any) -> "ConditionalDefaultValue":
        if value is None:
            raise ValueError("static value cannot be None")
        return cls(lambda context: value)

    @classmethod
    def computed(cls, fn: DefaultFn) -> "ConditionalDefaultValue":
        if fn is None:
            raise ValueError("computer function cannot be None")
        return cls(fn)

    @classmethod
    def computed_cached(cls, fn: DefaultFn, max_size: int = DEFAULT_MEMO_SIZE) -> "ConditionalDefaultValue":
        if fn is None:
            raise ValueError("computer function cannot be None")
        if max_size < 0:
            raise ValueError("max_size must be >= 0")
        return cls(_MemoizedDefault(fn, max_size))

    @classmethod
    def no_default(cls) -> "ConditionalDefaultValue":
        return cls(lambda context: None)

    # -----------------------------
    # Overrides condicionais
    # -----------------------------
    def when(self, condition: Condition, override_value: Any) -> "ConditionalDefaultValue":
        if condition is None:
            raise ValueError("condition cannot be None")
        if override_value is None:
            raise ValueError("override_value cannot be None")
        previous = self

        def _when(context: PropertyContext) -> Optional[Any]:
            if condition(context):
                return override_value
            return previous.compute_default(context)

        return ConditionalDefaultValue(_when)

    def when_computed(self, condition: Condition, override_fn: DefaultFn) -> "ConditionalDefaultValue":
        if condition is None:
            raise ValueError("condition cannot be None")
        if override_fn is None:
            raise ValueError("override function cannot be None")
        previous = self

        def _when(context: PropertyContext) -> Optional[Any]:
            if condition(context):
                return override_fn(context)
            return previous.compute_default(context)

        return ConditionalDefaultValue(_when)


class _MemoizedDefault:
    """Memo limitado, thread-safe, para `computed_cached`."""

    def __init__(self, fn: DefaultFn, max_size: int):
        self._fn = fn
        self._max_size = max_size
        self._memo: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def __call__(self, context: PropertyContext) -> Optional[Any]:
        key = compute_fingerprint(context.get_all_properties())
        with self._lock:
            if key in self._memo:
                return self._memo[key]

        # fn roda fora do lock: chamadas concorrentes podem recomputar
        value = self._fn(context)
        if value is None:
            return None

        with self._lock:
            if key not in self._memo and len(self._memo) < self._max_size:
                self._memo[key] = value
        return value

    def __len__(self) -> int:
        return len(self._memo)
