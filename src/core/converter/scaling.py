"""
Scaling converters: умножение на приближённый или точный множитель

- MultiplyConverter: convert(x) = factor * x, factor хранится как float64
- RationalConverter: convert(x) = x * dividend / divisor, точное отношение целых

Оба варианта замкнуты относительно композиции друг с другом, поэтому
живут в одном модуле: Multiply ∘ Multiply, Multiply ∘ Rational и
Rational ∘ Rational сворачиваются в один конвертер или в IDENTITY.

ДВОЙНАЯ ТОЧНОСТЬ:
    Проверка "множитель фактически равен 1" выполняется после округления
    до float32, а хранится всегда полный float64. Округление применяется
    только в сравнении и никогда к хранимому или возвращаемому значению.
"""

import math
import operator
from dataclasses import dataclass
from fractions import Fraction

from src.core.converter.base import IDENTITY, UnitConverter
from src.core.converter.errors import InvalidFactorError
from src.core.logger import get_logger
from src.core.math.numerical_safeguards import (
    RATIONAL_TERM_LIMIT,
    is_single_precision_one,
    is_valid_float,
    safe_ratio,
    safe_reciprocal,
)

_log = get_logger("converter.scaling")


# =============================================================================
# КАНОНИЗИРУЮЩИЕ ФАБРИКИ
# =============================================================================


def value_of(factor: float) -> UnitConverter:
    """
    Канонический конвертер для множителя.

    Args:
        factor: Множитель (float64)

    Returns:
        IDENTITY, если float32(factor) == 1.0,
        иначе MultiplyConverter с исходным (не округлённым) factor

    Examples:
        >>> value_of(2.0 * 0.5) is IDENTITY
        True
        >>> value_of(1.0 + 1e-9) is IDENTITY
        True
        >>> value_of(1.001).factor
        1.001
    """
    if is_single_precision_one(factor):
        _log.debug("factor %r rounds to 1.0f, canonicalized to IDENTITY", factor)
        return IDENTITY
    return MultiplyConverter(factor)


def rational_value_of(dividend: int, divisor: int) -> UnitConverter:
    """
    Канонический конвертер для отношения dividend / divisor.

    Знак переносится в делимое, отношение сокращается на НОД.
    Отношение 1/1 даёт IDENTITY. Если после сокращения член отношения
    превышает RATIONAL_TERM_LIMIT, отношение сворачивается в приближённый
    множитель через value_of, чтобы цепочки не росли без границ.

    Raises:
        InvalidFactorError: Если divisor == 0
    """
    dividend = operator.index(dividend)
    divisor = operator.index(divisor)

    if divisor == 0:
        raise InvalidFactorError("divisor must be non-zero", value=divisor)

    if divisor < 0:
        dividend, divisor = -dividend, -divisor

    gcd = math.gcd(dividend, divisor)
    if gcd > 1:
        dividend //= gcd
        divisor //= gcd

    if dividend == divisor:
        _log.debug("ratio %d/%d canonicalized to IDENTITY", dividend, divisor)
        return IDENTITY

    if abs(dividend) > RATIONAL_TERM_LIMIT or divisor > RATIONAL_TERM_LIMIT:
        _log.debug("ratio terms exceed %d, approximated as a float factor", RATIONAL_TERM_LIMIT)
        return value_of(safe_ratio(dividend, divisor))
    return RationalConverter(dividend, divisor)


# =============================================================================
# MULTIPLY
# =============================================================================


@dataclass(frozen=True)
class MultiplyConverter(UnitConverter):
    """
    Умножение на постоянный множитель, приближённый как float64.

    Для точного масштабирования предпочтителен RationalConverter.

    Raises:
        InvalidFactorError: Если factor округляется до 1.0 в single precision

    Examples:
        >>> MultiplyConverter(2.5).convert(4.0)
        10.0
        >>> MultiplyConverter(1000.0).concatenate(MultiplyConverter(0.001)) is IDENTITY
        True
    """

    factor: float

    def __post_init__(self) -> None:
        factor = float(self.factor)
        if is_single_precision_one(factor):
            raise InvalidFactorError(
                f"Identity converter not allowed: factor {factor!r} rounds to 1.0 "
                "in single precision, use IDENTITY",
                value=factor,
            )
        object.__setattr__(self, "factor", factor)

    def get_factor(self) -> float:
        """Хранимый множитель с полной точностью float64."""
        return self.factor

    def convert(self, amount: float) -> float:
        return self.factor * amount

    def inverse(self) -> UnitConverter:
        # 1/factor может округлиться до 1.0f, поэтому через фабрику
        return value_of(safe_reciprocal(self.factor))

    def is_linear(self) -> bool:
        return True

    def concatenate(self, other: UnitConverter) -> UnitConverter:
        if isinstance(other, MultiplyConverter):
            return value_of(self.factor * other.factor)

        if isinstance(other, RationalConverter):
            return value_of(_scale(self.factor, other.dividend, other.divisor))

        return super().concatenate(other)


# =============================================================================
# RATIONAL
# =============================================================================


@dataclass(frozen=True)
class RationalConverter(UnitConverter):
    """
    Умножение на точное отношение целых dividend / divisor.

    Конструктор не сокращает дробь; сокращение выполняют
    rational_value_of и concatenate. Произведение отношений точное, пока
    члены не превышают RATIONAL_TERM_LIMIT; длиннее сворачиваются в
    MultiplyConverter. convert не бросает OverflowError даже для
    членов вне диапазона float64.

    Raises:
        InvalidFactorError: Если divisor <= 0 или dividend == divisor
    """

    dividend: int
    divisor: int

    def __post_init__(self) -> None:
        dividend = operator.index(self.dividend)
        divisor = operator.index(self.divisor)

        if divisor <= 0:
            raise InvalidFactorError(f"divisor must be positive, got {divisor}", value=divisor)

        if dividend == divisor:
            raise InvalidFactorError(
                f"Identity converter not allowed: {dividend}/{divisor}, use IDENTITY",
                value=(dividend, divisor),
            )

        object.__setattr__(self, "dividend", dividend)
        object.__setattr__(self, "divisor", divisor)

    def get_dividend(self) -> int:
        return self.dividend

    def get_divisor(self) -> int:
        return self.divisor

    def convert(self, amount: float) -> float:
        return _scale(amount, self.dividend, self.divisor)

    def inverse(self) -> UnitConverter:
        if self.dividend == 0:
            # x * 0 необратимо, как и MultiplyConverter(0.0)
            return MultiplyConverter(math.inf)
        return rational_value_of(self.divisor, self.dividend)

    def is_linear(self) -> bool:
        return True

    def concatenate(self, other: UnitConverter) -> UnitConverter:
        if isinstance(other, RationalConverter):
            return rational_value_of(
                self.dividend * other.dividend,
                self.divisor * other.divisor,
            )

        if isinstance(other, MultiplyConverter):
            # скаляры коммутируют
            return other.concatenate(self)

        return super().concatenate(other)


def _scale(value: float, dividend: int, divisor: int) -> float:
    """
    value * dividend / divisor без OverflowError.

    Для членов в пределах RATIONAL_TERM_LIMIT порядок операций обычный;
    для длинных членов результат считается точно через Fraction и
    насыщается до ±inf при выходе за диапазон float64.
    """
    if abs(dividend) <= RATIONAL_TERM_LIMIT and divisor <= RATIONAL_TERM_LIMIT:
        return value * dividend / divisor

    if not is_valid_float(value):
        return value * safe_ratio(dividend, divisor)

    exact = Fraction(value) * Fraction(dividend, divisor)
    return safe_ratio(exact.numerator, exact.denominator)
