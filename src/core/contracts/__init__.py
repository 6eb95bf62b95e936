"""
Contract Validation Module

Валидация сериализованных конвертеров против JSON Schema контракта.
"""

from .validators import (
    SCHEMA_NAME,
    ContractValidator,
    SchemaLoader,
    UnitConverterValidator,
    validate_unit_converter,
)

__all__ = [
    "SCHEMA_NAME",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnitConverterValidator",
    # Functions
    "validate_unit_converter",
]
