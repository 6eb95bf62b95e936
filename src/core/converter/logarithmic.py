"""
LogConverter / ExpConverter: логарифмические шкалы (децибелы, pH, звёздные величины)

- LogConverter(base):  convert(x) = ln(x) / ln(base)
- ExpConverter(base):  convert(x) = exp(ln(base) * x)

Конвертеры взаимно обратны. convert не бросает исключений:
ln(0) = -inf, ln(x < 0) = nan, переполнение exp даёт inf.

СОКРАЩЕНИЕ Exp ∘ Log:
    Exp(b) ∘ Log(b) сворачивается в IDENTITY, что расширяет область
    определения: для x < 0 цепочка даёт nan, а IDENTITY возвращает x
    (при x = 0 оба дают 0). Log(b) ∘ Exp(b) тождественен везде, кроме
    переполнения exp.
"""

from dataclasses import dataclass, field

from src.core.converter.base import IDENTITY, UnitConverter
from src.core.converter.errors import InvalidFactorError
from src.core.math.numerical_safeguards import safe_exp, safe_log, validate_log_base


def _checked_base(base: float) -> float:
    base = float(base)
    try:
        validate_log_base(base)
    except ValueError as e:
        raise InvalidFactorError(str(e), value=base) from e
    return base


@dataclass(frozen=True)
class LogConverter(UnitConverter):
    """
    Логарифм по основанию base.

    Raises:
        InvalidFactorError: Если base не конечное, не положительное или равно 1
    """

    base: float
    log_base: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        base = _checked_base(self.base)
        object.__setattr__(self, "base", base)
        object.__setattr__(self, "log_base", safe_log(base))

    def convert(self, amount: float) -> float:
        return safe_log(amount) / self.log_base

    def inverse(self) -> UnitConverter:
        return ExpConverter(self.base)

    def is_linear(self) -> bool:
        return False

    def concatenate(self, other: UnitConverter) -> UnitConverter:
        if isinstance(other, ExpConverter) and other.base == self.base:
            return IDENTITY
        return super().concatenate(other)


@dataclass(frozen=True)
class ExpConverter(UnitConverter):
    """
    Возведение base в степень x.

    concatenate с LogConverter того же основания даёт IDENTITY
    (область определения расширяется на x < 0).

    Raises:
        InvalidFactorError: Если base не конечное, не положительное или равно 1
    """

    base: float
    log_base: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        base = _checked_base(self.base)
        object.__setattr__(self, "base", base)
        object.__setattr__(self, "log_base", safe_log(base))

    def convert(self, amount: float) -> float:
        return safe_exp(self.log_base * amount)

    def inverse(self) -> UnitConverter:
        return LogConverter(self.base)

    def is_linear(self) -> bool:
        return False

    def concatenate(self, other: UnitConverter) -> UnitConverter:
        if isinstance(other, LogConverter) and other.base == self.base:
            return IDENTITY
        return super().concatenate(other)
