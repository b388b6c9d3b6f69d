"""
Registro de conversores string → tipo.

Propriedades chegam sempre como strings. Antes de executar uma regra, o
validador converte o valor bruto para o tipo declarado na definição usando
um `TypeConverterRegistry`.

Decisões arquiteturais:
    - O registry é construído e injetado explicitamente (sem singleton global)
    - Um conversor sinaliza falha levantando `ValueError`, `TypeError` ou
      `ArithmeticError`; o registry traduz isso para `None`
    - Tipos sem conversor registrado resultam em `None` (falha de conversão)

Limites explícitos:
    - Não valida regras de domínio
    - Não formata valores de volta para string
"""

from __future__ import annotations

import re
import threading
from datetime import date, datetime, time, timedelta
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Callable, Dict, Optional

Converter = Callable[[str], Any]

_TRUE_VALUES = frozenset({"true", "yes", "1"})
_FALSE_VALUES = frozenset({"false", "no", "0"})

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_ISO_DURATION = re.compile(
    r"^P(?:(?P<days>[0-9]+(?:\.[0-9]+)?)D)?"
    r"(?:T(?:(?P<hours>[0-9]+(?:\.[0-9]+)?)H)?(?:(?P<minutes>[0-9]+(?:\.[0-9]+)?)M)?(?:(?P<seconds>[0-9]+(?:\.[0-9]+)?)S)?)?$",
    re.IGNORECASE,
)


def parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_int(value: str) -> int:
    """Inteiro decimal com sinal opcional; só dígitos ASCII, sem `_`."""
    v = value.strip()
    if not _INTEGER.fullmatch(v):
        raise ValueError(f"not an integer: {value!r}")
    return int(v)


def parse_float(value: str) -> float:
    v = value.strip()
    if not _FLOAT.fullmatch(v):
        raise ValueError(f"not a float: {value!r}")
    return float(v)


def parse_duration(value: str) -> timedelta:
    """Aceita segundos (`"30"`, `"1.5"`) ou ISO-8601 (`"PT5M"`, `"P1DT2H"`)."""
    v = value.strip()
    try:
        return timedelta(seconds=parse_float(v))
    except ValueError:
        pass
    match = _ISO_DURATION.match(v)
    if match is None or v.upper() in {"P", "PT"} or v.upper().endswith("T"):
        raise ValueError(f"not a duration: {value!r}")
    parts = {k: float(g) for k, g in match.groupdict().items() if g is not None}
    return timedelta(**parts)


def _strip(fn: Callable[[str], Any]) -> Converter:
    return lambda value: fn(value.strip())


def _parse_decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"not a decimal: {value!r}") from exc


def _parse_path(value: str) -> Path:
    if not value:
        raise ValueError("empty path")
    return Path(value)


class TypeConverterRegistry:
    """
    Tabela de conversores indexada por tipo alvo.

    Uso típico:
        converters = TypeConverterRegistry.with_defaults()
        converters.register(MyType, MyType.parse)
        converters.convert("8080", int)  # -> 8080

    Invariantes:
        - `convert` nunca levanta exceção por valor inválido
        - `convert(None, ...)` devolve `None`
    """

    def __init__(self) -> None:
        self._converters: Dict[type, Converter] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_defaults(cls) -> "TypeConverterRegistry":
        registry = cls()
        registry.register(str, lambda value: value)
        registry.register(int, parse_int)
        registry.register(float, parse_float)
        registry.register(bool, parse_bool)
        registry.register(Decimal, _strip(_parse_decimal))
        registry.register(Path, _strip(_parse_path))
        registry.register(date, _strip(date.fromisoformat))
        registry.register(datetime, _strip(datetime.fromisoformat))
        registry.register(time, _strip(time.fromisoformat))
        registry.register(timedelta, parse_duration)
        return registry

    def register(self, target_type: type, converter: Converter) -> "TypeConverterRegistry":
        if not callable(converter):
            raise TypeError("converter must be callable")
        with self._lock:
            self._converters[target_type] = converter
        return self

    def has_converter(self, target_type: type) -> bool:
        return target_type in self._converters

    def convert(self, value: Optional[str], target_type: type) -> Optional[Any]:
        if value is None:
            return None
        converter = self._converters.get(target_type)
        if converter is None:
            return None
        try:
            return converter(value)
        except (ValueError, TypeError, ArithmeticError):
            return None
