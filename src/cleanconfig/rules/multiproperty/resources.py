# src/cleanconfig/rules/multiproperty/resources.py
"""
Restrições de recursos (request ≤ limit, mínimo < máximo).

Atalhos sobre as relações de `numeric.py`.
"""

from __future__ import annotations

from ...core.validation.multi import MultiPropertyValidationRule
from .numeric import less_than, less_than_or_equal


def cpu_request_limit(request_property: str, limit_property: str) -> MultiPropertyValidationRule:
    return less_than_or_equal(request_property, limit_property, int)


def memory_request_limit(request_property: str, limit_property: str) -> MultiPropertyValidationRule:
    # int do Python não tem limite de 64 bits: cobre valores em bytes
    return less_than_or_equal(request_property, limit_property, int)


def valid_range(min_property: str, max_property: str, target_type: type = int) -> MultiPropertyValidationRule:
    return less_than(min_property, max_property, target_type)
