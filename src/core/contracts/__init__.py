"""
Contract Validation Module

Модуль для валидации JSON контрактов конвертера.
"""

from .validators import (
    CONVERSION_CONFIG_SCHEMA_VERSION,
    ContractValidator,
    ConversionConfigValidator,
    SchemaLoader,
    validate_conversion_config,
)

__all__ = [
    # Constants
    "CONVERSION_CONFIG_SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionConfigValidator",
    # Functions
    "validate_conversion_config",
]
