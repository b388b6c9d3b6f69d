# src/cleanconfig/__init__.py
"""
cleanconfig: propriedades de configuração tipadas, com defaults
condicionais e validação ciente de dependências.

Exemplo:

    from cleanconfig import PropertyDefinition, PropertyRegistry, ConfigEngine
    from cleanconfig.rules import numeric

    registry = (
        PropertyRegistry.builder()
        .register(
            PropertyDefinition.builder(int)
            .name("server.port")
            .default_value(8080)
            .validation_rule(numeric.port())
            .build()
        )
        .build()
    )
    result = ConfigEngine(registry).process({})
"""

from .core.config.errors import ConfigError, InvalidSettingsError
from .core.config.loader import load_settings
from .core.config.settings import EngineSettings
from .core.context import PropertyContext
from .core.converter import TypeConverterRegistry
from .core.engine.applier import DefaultValueApplier
from .core.engine.cache import CachingPropertyValidator
from .core.engine.engine import ConfigEngine, ProcessResult
from .core.engine.validator import PropertyValidator, ValidatorOptions
from .core.errors import (
    CircularDependencyError,
    DuplicateGroupError,
    DuplicatePropertyError,
    EmptyPropertyGroupError,
    InvalidPropertyDefinitionError,
    SchemaError,
    UndefinedDependencyError,
)
from .core.log import configure_from_settings, configure_logging
from .core.schema import (
    ConditionalDefaultValue,
    PropertyDefinition,
    PropertyRegistry,
    PropertyRegistryBuilder,
)
from .core.types import (
    DefaultApplicationInfo,
    DefaultApplicationResult,
    PropertyCategory,
    ValidationContextType,
)
from .core.validation import (
    JsonValidationFormatter,
    MultiPropertyValidationRule,
    PropertyGroup,
    TextValidationFormatter,
    ValidationError,
    ValidationResult,
    ValidationRule,
)
from .core.validation import conditions

__version__ = "0.1.0"

__all__ = [
    "CachingPropertyValidator",
    "CircularDependencyError",
    "ConditionalDefaultValue",
    "ConfigEngine",
    "ConfigError",
    "DefaultApplicationInfo",
    "DefaultApplicationResult",
    "DefaultValueApplier",
    "DuplicateGroupError",
    "DuplicatePropertyError",
    "EmptyPropertyGroupError",
    "EngineSettings",
    "InvalidPropertyDefinitionError",
    "InvalidSettingsError",
    "JsonValidationFormatter",
    "MultiPropertyValidationRule",
    "ProcessResult",
    "PropertyCategory",
    "PropertyContext",
    "PropertyDefinition",
    "PropertyGroup",
    "PropertyRegistry",
    "PropertyRegistryBuilder",
    "PropertyValidator",
    "SchemaError",
    "TextValidationFormatter",
    "TypeConverterRegistry",
    "UndefinedDependencyError",
    "ValidationContextType",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    "ValidatorOptions",
    "conditions",
    "configure_from_settings",
    "configure_logging",
    "load_settings",
]
