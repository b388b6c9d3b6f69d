# src/cleanconfig/core/engine/cache.py
"""
Decorator de cache para validadores.

O `CachingPropertyValidator` envolve qualquer objeto com a interface do
`PropertyValidator` e memoriza o resultado de `validate` por fingerprint
do input.

Política de cache (v1):
    - chave: SHA-256 do JSON canônico de (propriedades ordenadas,
      tipo de contexto, metadata)
    - entrada viva: idade < TTL, medida por um relógio monotônico injetável
    - entrada expirada: tratada como ausente e removida na leitura
    - cache cheio: entradas expiradas são purgadas; se ainda estiver cheio,
      a nova entrada é **recusada** (entradas vivas nunca são removidas)

Decisões arquiteturais:
    - O dicionário é protegido por um `threading.Lock` interno
    - O validador delegado roda fora do lock; sob contenção o mesmo
      fingerprint pode ser validado mais de uma vez
    - `validate_property` e `validate_property_group` não são cacheados
    - Não há invalidação automática: mudanças no registry exigem
      `clear_cache()`

Invariantes:
    - O tamanho do cache nunca excede `max_size`
    - Resultados cacheados são imutáveis e podem ser compartilhados
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Dict, Mapping, Optional

import structlog

from ..hashing import compute_fingerprint
from ..types import ValidationContextType
from ..validation.group import PropertyGroup
from ..validation.result import ValidationResult

logger = structlog.get_logger(__name__)

DEFAULT_MAX_SIZE = 100
DEFAULT_TTL = timedelta(minutes=5)

Clock = Callable[[], float]


@dataclass(frozen=True)
class _CacheEntry:
    result: ValidationResult
    stored_at: float


class CachingPropertyValidator:
    def __init__(
        self,
        delegate: Any,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: timedelta = DEFAULT_TTL,
        clock: Clock = time.monotonic,
    ):
        if delegate is None:
            raise ValueError("delegate validator cannot be None")
        if max_size < 0:
            raise ValueError("max_size must be >= 0")
        if ttl.total_seconds() <= 0:
            raise ValueError("ttl must be positive")

        self.delegate = delegate
        self.max_size = max_size
        self.ttl = ttl
        self._ttl_seconds = ttl.total_seconds()
        self._clock = clock
        self._entries: Dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def registry(self):
        return getattr(self.delegate, "registry", None)

    # -----------------------------
    # API de validador
    # -----------------------------
    def validate(
        self,
        properties: Mapping[str, str],
        context_type: ValidationContextType = ValidationContextType.STARTUP,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        if properties is None:
            raise ValueError("properties cannot be None")

        key = self.fingerprint(properties, context_type, metadata)
        cached = self._lookup(key)
        if cached is not None:
            logger.debug("validation.cache_hit", fingerprint=key[:12])
            return cached

        result = self.delegate.validate(properties, context_type, metadata)
        self._store(key, result)
        return result

    def validate_property(self, property_name: str, value: Optional[str], *args: Any, **kwargs: Any) -> ValidationResult:
        return self.delegate.validate_property(property_name, value, *args, **kwargs)

    def validate_property_group(self, group: PropertyGroup, properties: Mapping[str, str], *args: Any, **kwargs: Any) -> ValidationResult:
        return self.delegate.validate_property_group(group, properties, *args, **kwargs)

    # -----------------------------
    # Administração
    # -----------------------------
    def cache_size(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear_cache(self) -> None:
        with self._lock:
            self._entries.clear()

    @staticmethod
    def fingerprint(
        properties: Mapping[str, str],
        context_type: ValidationContextType = ValidationContextType.STARTUP,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> str:
        return compute_fingerprint(
            properties,
            scope={"context_type": context_type.value, "metadata": dict(metadata or {})},
        )

    # -----------------------------
    # Internos
    # -----------------------------
    def _is_expired(self, entry: _CacheEntry, now: float) -> bool:
        return now - entry.stored_at >= self._ttl_seconds

    def _lookup(self, key: str) -> Optional[ValidationResult]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry, now):
                del self._entries[key]
                return None
            return entry.result

    def _store(self, key: str, result: ValidationResult) -> None:
        now = self._clock()
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_size:
                expired = [k for k, e in self._entries.items() if self._is_expired(e, now)]
                for k in expired:
                    del self._entries[k]
                if len(self._entries) >= self.max_size:
                    logger.warning("validation.cache_full", max_size=self.max_size)
                    return
            self._entries[key] = _CacheEntry(result=result, stored_at=now)
        logger.debug("validation.cache_store", fingerprint=key[:12])
