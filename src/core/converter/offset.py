"""
AddConverter: аффинное смещение convert(x) = x + offset

Используется для шкал с разным нулём (°C ↔ K). Не линеен, поэтому
композиция с масштабирующими конвертерами остаётся цепочкой.
"""

from dataclasses import dataclass

from src.core.converter.base import IDENTITY, UnitConverter
from src.core.converter.errors import InvalidOffsetError
from src.core.logger import get_logger
from src.core.math.numerical_safeguards import is_single_precision_zero

_log = get_logger("converter.offset")


def offset_value_of(offset: float) -> UnitConverter:
    """IDENTITY, если float32(offset) == 0.0, иначе AddConverter(offset)."""
    if is_single_precision_zero(offset):
        _log.debug("offset %r rounds to 0.0f, canonicalized to IDENTITY", offset)
        return IDENTITY
    return AddConverter(offset)


@dataclass(frozen=True)
class AddConverter(UnitConverter):
    """
    Прибавление постоянного смещения (float64).

    Raises:
        InvalidOffsetError: Если offset округляется до 0.0 в single precision
    """

    offset: float

    def __post_init__(self) -> None:
        offset = float(self.offset)
        if is_single_precision_zero(offset):
            raise InvalidOffsetError(
                f"Identity converter not allowed: offset {offset!r} rounds to 0.0 "
                "in single precision, use IDENTITY",
                value=offset,
            )
        object.__setattr__(self, "offset", offset)

    def get_offset(self) -> float:
        return self.offset

    def convert(self, amount: float) -> float:
        return amount + self.offset

    def inverse(self) -> UnitConverter:
        return offset_value_of(-self.offset)

    def is_linear(self) -> bool:
        return False

    def concatenate(self, other: UnitConverter) -> UnitConverter:
        if isinstance(other, AddConverter):
            return offset_value_of(self.offset + other.offset)
        return super().concatenate(other)
