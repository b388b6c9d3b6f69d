"""
Formatadores de `ValidationResult` para texto e JSON.

Formatadores são adapters de apresentação: não alteram o resultado e não
dependem do validador.
"""

from __future__ import annotations

import json
from typing import List, Protocol

from .result import ValidationError, ValidationResult

_INDENT = "  "


class ValidationFormatter(Protocol):
    def format(self, result: ValidationResult) -> str:
        ...


class TextValidationFormatter:
    """
    Saída legível para humanos:

        Validation failed with 2 errors:

        Error 1: server.port
          Message: Port must be between 1 and 65535
          Actual: 99999
    """

    SUCCESS_MESSAGE = "Validation passed: 0 errors"

    def format(self, result: ValidationResult) -> str:
        if result.is_valid:
            return self.SUCCESS_MESSAGE

        count = result.error_count
        lines: List[str] = [
            f"Validation failed with {count} {'error' if count == 1 else 'errors'}:",
            "",
        ]
        for number, error in enumerate(result.errors, start=1):
            lines.extend(self._format_error(number, error))
            lines.append("")
        return "\n".join(lines).strip()

    def _format_error(self, number: int, error: ValidationError) -> List[str]:
        lines = [f"Error {number}: {error.property_name}", f"{_INDENT}Message: {error.message}"]
        optional = (
            ("Actual", error.actual_value),
            ("Expected", error.expected_value),
            ("Code", error.code),
            ("Suggestion", error.suggestion),
        )
        for label, value in optional:
            if value is not None:
                lines.append(f"{_INDENT}{label}: {value}")
        return lines


class JsonValidationFormatter:
    """Documento JSON com `valid`, `errorCount` e `errors` (campos nulos omitidos)."""

    _FIELDS = (
        ("propertyName", "property_name"),
        ("errorMessage", "message"),
        ("actualValue", "actual_value"),
        ("expectedValue", "expected_value"),
        ("errorCode", "code"),
        ("suggestion", "suggestion"),
    )

    def format(self, result: ValidationResult) -> str:
        document = {
            "valid": result.is_valid,
            "errorCount": result.error_count,
            "errors": [self._error_to_dict(error) for error in result.errors],
        }
        return json.dumps(document, indent=2, ensure_ascii=False)

    def _error_to_dict(self, error: ValidationError) -> dict:
        out = {}
        for key, attr in self._FIELDS:
            value = getattr(error, attr)
            if value is not None:
                out[key] = value
        return out
