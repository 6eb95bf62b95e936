"""
Unit converters: неизменяемые композируемые стратегии конвертации единиц.

Типичное использование:
    >>> km_to_m = MultiplyConverter(1000.0)
    >>> m_to_mm = RationalConverter(1000, 1)
    >>> m_to_mm.concatenate(km_to_m).convert(1.5)
    1500000.0
"""

from src.core.converter.base import (
    IDENTITY,
    CompoundConverter,
    IdentityConverter,
    UnitConverter,
)
from src.core.converter.errors import (
    ConverterError,
    InvalidFactorError,
    InvalidOffsetError,
)
from src.core.converter.logarithmic import ExpConverter, LogConverter
from src.core.converter.offset import AddConverter, offset_value_of
from src.core.converter.scaling import (
    MultiplyConverter,
    RationalConverter,
    rational_value_of,
    value_of,
)
from src.core.converter.schema import (
    converter_from_dict,
    converter_from_json,
    converter_to_dict,
    converter_to_json,
    converter_to_spec,
)

__all__ = [
    # Contract
    "UnitConverter",
    "IDENTITY",
    "IdentityConverter",
    "CompoundConverter",
    # Variants
    "MultiplyConverter",
    "RationalConverter",
    "AddConverter",
    "LogConverter",
    "ExpConverter",
    # Canonicalizing factories
    "value_of",
    "rational_value_of",
    "offset_value_of",
    # Errors
    "ConverterError",
    "InvalidFactorError",
    "InvalidOffsetError",
    # Serialization
    "converter_to_spec",
    "converter_to_dict",
    "converter_from_dict",
    "converter_to_json",
    "converter_from_json",
]
