# src/cleanconfig/core/validation/result.py
"""
Estruturas canônicas de resultado de validação.

`ValidationError` descreve uma violação; `ValidationResult` agrega zero ou
mais violações. Ambos são value objects imutáveis, produzidos por chamada e
nunca retidos pelo validador (exceto pelo cache, que os compartilha
justamente por serem imutáveis).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple, Union


@dataclass(frozen=True)
class ValidationError:
    """
    Violação de validação associada a uma propriedade.

    Campos:
    - property_name: propriedade à qual a violação é atribuída
    - message: mensagem curta e humana
    - actual_value: valor observado (quando relevante)
    - expected_value: descrição do valor esperado
    - code: código estável (ver `codes.py`), não é texto livre
    - suggestion: ação sugerida ao operador

    Dois erros são iguais se, e somente se, todos os campos coincidem.
    """

    property_name: str
    message: str
    actual_value: Optional[str] = None
    expected_value: Optional[str] = None
    code: Optional[str] = None
    suggestion: Optional[str] = None

    def __post_init__(self) -> None:
        if self.property_name is None:
            raise ValueError("property_name cannot be None")
        if self.message is None:
            raise ValueError("message cannot be None")

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável, sem campos vazios."""
        return {k: v for k, v in asdict(self).items() if v is not None}


ErrorsLike = Union[ValidationError, Iterable[ValidationError]]


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado agregado de uma validação.

    Invariantes:
        - `is_valid` é verdadeiro se, e somente se, não há erros
        - A ordem dos erros é a ordem em que foram produzidos
    """

    errors: Tuple[ValidationError, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    @staticmethod
    def success() -> "ValidationResult":
        return _SUCCESS

    @staticmethod
    def failure(errors: ErrorsLike) -> "ValidationResult":
        if isinstance(errors, ValidationError):
            return ValidationResult((errors,))
        collected = tuple(errors)
        if not collected:
            raise ValueError("errors cannot be empty for a failure result")
        return ValidationResult(collected)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def combine(self, other: "ValidationResult") -> "ValidationResult":
        if self.is_valid and other.is_valid:
            return _SUCCESS
        return ValidationResult(self.errors + other.errors)

    @staticmethod
    def merge(results: Iterable["ValidationResult"]) -> "ValidationResult":
        errors: list[ValidationError] = []
        for result in results:
            errors.extend(result.errors)
        return ValidationResult(tuple(errors)) if errors else _SUCCESS

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(valid)"
        return f"ValidationResult(errors={len(self.errors)})"


_SUCCESS = ValidationResult(())
