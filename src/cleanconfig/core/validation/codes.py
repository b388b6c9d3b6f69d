"""
cleanconfig: Catálogo canônico de códigos de erro de validação (v1)

Erros de validação fazem parte do contrato operacional do sistema e devem
ser explícitos, serializáveis e acionáveis. Os códigos abaixo são estáveis;
as mensagens podem evoluir.
"""

from __future__ import annotations

from typing import Optional

from .result import ValidationError


# ---------------------------------------------------------------------------
# Catálogo canônico de códigos (v1)
# ---------------------------------------------------------------------------

# Validador
REQUIRED_PROPERTY_MISSING = "REQUIRED_PROPERTY_MISSING"
TYPE_CONVERSION_FAILED = "TYPE_CONVERSION_FAILED"
UNKNOWN_PROPERTY = "UNKNOWN_PROPERTY"

# Regras
RULE_VIOLATION = "RULE_VIOLATION"
NUMERIC_RELATIONSHIP_VIOLATION = "NUMERIC_RELATIONSHIP_VIOLATION"
MUTUALLY_EXCLUSIVE_VIOLATION = "MUTUALLY_EXCLUSIVE_VIOLATION"
AT_LEAST_ONE_REQUIRED = "AT_LEAST_ONE_REQUIRED"
CONDITIONAL_REQUIREMENT_VIOLATION = "CONDITIONAL_REQUIREMENT_VIOLATION"
ALL_OR_NOTHING_VIOLATION = "ALL_OR_NOTHING_VIOLATION"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def required_property_missing(
    *,
    property_name: str,
    actual_value: Optional[str] = None,
    suggestion: str = "Informe um valor para a propriedade ou declare um default.",
) -> ValidationError:
    return ValidationError(
        property_name=property_name,
        message="Required property is missing",
        actual_value=actual_value,
        expected_value="Non-null value",
        code=REQUIRED_PROPERTY_MISSING,
        suggestion=suggestion,
    )


def type_conversion_failed(
    *,
    property_name: str,
    actual_value: Optional[str],
    target_type: type,
    suggestion: Optional[str] = None,
) -> ValidationError:
    return ValidationError(
        property_name=property_name,
        message="Type conversion failed",
        actual_value=actual_value,
        expected_value=f"Value of type {getattr(target_type, '__name__', str(target_type))}",
        code=TYPE_CONVERSION_FAILED,
        suggestion=suggestion,
    )


def unknown_property(
    *,
    property_name: str,
    actual_value: Optional[str] = None,
    suggestion: str = "Remova a propriedade ou registre sua definição no schema.",
) -> ValidationError:
    return ValidationError(
        property_name=property_name,
        message="Unknown property",
        actual_value=actual_value,
        expected_value="Property is not defined in the registry",
        code=UNKNOWN_PROPERTY,
        suggestion=suggestion,
    )
