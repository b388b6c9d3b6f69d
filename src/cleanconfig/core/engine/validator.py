# src/cleanconfig/core/engine/validator.py
"""
Validador canônico de propriedades.

O `PropertyValidator` percorre as definições na ordem topológica calculada
pelo registry e produz um `ValidationResult` com **todas** as violações
encontradas. Defeitos nos dados nunca são levantados como exceção.

Política por propriedade:
    - obrigatória e ausente → REQUIRED_PROPERTY_MISSING
    - ausente e opcional → ignorada (regras não são avaliadas)
    - presente → conversão para o tipo declarado
        - falha → TYPE_CONVERSION_FAILED (regra não é avaliada)
        - sucesso → regra da definição, com o contexto compartilhado

Depois das propriedades:
    - chaves desconhecidas → UNKNOWN_PROPERTY (somente com
      `reject_unknown_properties`)
    - regras de todos os grupos registrados, contra o input completo

Decisões arquiteturais:
    - Não há curto-circuito entre propriedades nem entre grupos
    - Um único `PropertyContext` é criado por chamada
    - Propriedades depreciadas presentes geram um warning estruturado,
      nunca um erro de validação
    - String vazia conta como ausente quando `empty_is_missing` está ativo

Invariantes:
    - A ordem dos erros é: propriedades (ordem topológica), desconhecidas,
      grupos (ordem de registro)
    - O input nunca é mutado

Limites explícitos:
    - Não aplica defaults (ver `DefaultValueApplier`)
    - Não mantém estado entre chamadas (ver `CachingPropertyValidator`)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional

import structlog

from ..context import PropertyContext
from ..converter import TypeConverterRegistry
from ..schema.definition import PropertyDefinition
from ..schema.registry import PropertyRegistry
from ..types import ValidationContextType
from ..validation import codes
from ..validation.group import PropertyGroup
from ..validation.result import ValidationError, ValidationResult

logger = structlog.get_logger(__name__)

CONVERSION_ONLY = "conversion"
MISSING_AND_CONVERSION = "missing_and_conversion"
REQUIRED_CONVERSION_POLICIES = (CONVERSION_ONLY, MISSING_AND_CONVERSION)


@dataclass(frozen=True)
class ValidatorOptions:
    """
    Opções de comportamento do validador.

    Campos:
        - reject_unknown_properties: reporta chaves fora do registry
        - empty_is_missing: string vazia conta como ausente
        - required_conversion_policy: para propriedade obrigatória presente
          mas inconvertível, "conversion" reporta apenas a falha de
          conversão; "missing_and_conversion" reporta ambas
    """

    reject_unknown_properties: bool = False
    empty_is_missing: bool = True
    required_conversion_policy: str = CONVERSION_ONLY

    def __post_init__(self) -> None:
        if self.required_conversion_policy not in REQUIRED_CONVERSION_POLICIES:
            raise ValueError(
                f"required_conversion_policy must be one of {REQUIRED_CONVERSION_POLICIES}, "
                f"got {self.required_conversion_policy!r}"
            )


class PropertyValidator:
    def __init__(
        self,
        registry: PropertyRegistry,
        converters: Optional[TypeConverterRegistry] = None,
        options: Optional[ValidatorOptions] = None,
    ):
        if registry is None:
            raise ValueError("registry cannot be None")
        self.registry = registry
        self.converters = converters or TypeConverterRegistry.with_defaults()
        self.options = options or ValidatorOptions()

    # -----------------------------
    # API pública
    # -----------------------------
    def validate(
        self,
        properties: Mapping[str, str],
        context_type: ValidationContextType = ValidationContextType.STARTUP,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        if properties is None:
            raise ValueError("properties cannot be None")

        context = self._context(properties, context_type, metadata)
        errors: List[ValidationError] = []

        for definition in self.registry.ordered_properties():
            errors.extend(self._validate_definition(definition, properties.get(definition.name), context))

        if self.options.reject_unknown_properties:
            for name, value in properties.items():
                if not self.registry.is_defined(name):
                    errors.append(codes.unknown_property(property_name=name, actual_value=value))

        for group in self.registry.all_groups():
            errors.extend(self._validate_group(group, context).errors)

        result = ValidationResult(tuple(errors))
        logger.debug(
            "validation.completed",
            valid=result.is_valid,
            errors=result.error_count,
            properties=len(properties),
            context_type=context_type.value,
        )
        return result

    def validate_property(
        self,
        property_name: str,
        value: Optional[str],
        all_properties: Optional[Mapping[str, str]] = None,
        context_type: ValidationContextType = ValidationContextType.STARTUP,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        definition = self.registry.get_property(property_name)
        if definition is None:
            return ValidationResult.failure(
                codes.unknown_property(property_name=property_name, actual_value=value)
            )

        snapshot = dict(all_properties or {})
        if value is not None:
            snapshot[property_name] = value
        context = self._context(snapshot, context_type, metadata)
        errors = self._validate_definition(definition, value, context)
        return ValidationResult(tuple(errors)) if errors else ValidationResult.success()

    def validate_property_group(
        self,
        group: PropertyGroup,
        properties: Mapping[str, str],
        context_type: ValidationContextType = ValidationContextType.STARTUP,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        if group is None:
            raise ValueError("group cannot be None")
        return self._validate_group(group, self._context(properties, context_type, metadata))

    # -----------------------------
    # Internos
    # -----------------------------
    def _context(
        self,
        properties: Mapping[str, str],
        context_type: ValidationContextType,
        metadata: Optional[Mapping[str, str]],
    ) -> PropertyContext:
        return PropertyContext(
            properties=properties,
            context_type=context_type,
            converters=self.converters,
            metadata=metadata or {},
        )

    def _is_missing(self, value: Optional[str]) -> bool:
        if value is None:
            return True
        return self.options.empty_is_missing and value == ""

    def _validate_definition(
        self,
        definition: PropertyDefinition,
        value: Optional[str],
        context: PropertyContext,
    ) -> List[ValidationError]:
        name = definition.name

        if self._is_missing(value):
            if definition.required:
                return [codes.required_property_missing(property_name=name, actual_value=value)]
            return []

        if definition.deprecated:
            logger.warning(
                "property.deprecated",
                property=name,
                message=definition.deprecation_message,
                replacement=definition.replacement_property,
            )

        typed = self.converters.convert(value, definition.type)
        if typed is None:
            errors = [codes.type_conversion_failed(property_name=name, actual_value=value, target_type=definition.type)]
            if definition.required and self.options.required_conversion_policy == MISSING_AND_CONVERSION:
                errors.insert(0, codes.required_property_missing(property_name=name, actual_value=value))
            return errors

        if definition.validation_rule is None:
            return []
        return list(definition.validation_rule.validate(name, typed, context).errors)

    def _validate_group(self, group: PropertyGroup, context: PropertyContext) -> ValidationResult:
        results = [rule.validate(group.property_names, context) for rule in group.rules]
        return ValidationResult.merge(results)
