"""
UnitConverter: контракт конвертера единиц и базовые варианты

Конвертер - чистая функция из числового значения в одной единице в
эквивалентное значение в другой. Все варианты неизменяемы (frozen dataclass)
и безопасны для параллельного использования без синхронизации.

Модуль содержит:
- UnitConverter: абстрактный контракт (convert / inverse / is_linear / concatenate)
- IdentityConverter и единственный экземпляр IDENTITY
- CompoundConverter: обобщённая цепочка из двух шагов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Тождественное преобразование представлено только объектом IDENTITY
2. a.concatenate(b).convert(x) == a.convert(b.convert(x)) (с точностью до округления)
3. Упрощение цепочек выполняется сразу при concatenate, а не при convert
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.logger import get_logger

_log = get_logger("converter")


# =============================================================================
# КОНТРАКТ
# =============================================================================


class UnitConverter(ABC):
    """
    Абстрактный конвертер единиц.

    Наследники обязаны реализовать convert, inverse и is_linear.
    concatenate по умолчанию строит CompoundConverter без упрощения;
    варианты, замкнутые относительно композиции, переопределяют его.
    """

    @abstractmethod
    def convert(self, amount: float) -> float:
        """Применяет преобразование к значению (чистая функция)."""

    @abstractmethod
    def inverse(self) -> "UnitConverter":
        """Обратный конвертер: c.inverse().convert(c.convert(x)) ≈ x."""

    @abstractmethod
    def is_linear(self) -> bool:
        """
        Линейность через начало координат.

        True если convert(0) == 0 и convert(k * x) == k * convert(x).
        Используется для решения, распределяется ли конвертер
        по сложению (производные единицы).
        """

    def concatenate(self, other: "UnitConverter") -> "UnitConverter":
        """
        Композиция self ∘ other: сначала other, затем self.

        Args:
            other: Конвертер, применяемый первым

        Returns:
            self, если other тождественный, иначе CompoundConverter
        """
        if other is IDENTITY:
            return self
        _log.debug("no simplification for %r after %r, chaining", self, other)
        return CompoundConverter(first=other, second=self)

    def is_equivalent(self, other: "UnitConverter") -> bool:
        """
        Семантическое равенство: self ∘ other⁻¹ канонизируется в IDENTITY.

        В отличие от ==, не зависит от структуры представления
        (например, Multiply(0.5) эквивалентен Rational(1, 2)).
        """
        return self.concatenate(other.inverse()) is IDENTITY

    def __call__(self, amount: float) -> float:
        return self.convert(amount)


# =============================================================================
# IDENTITY
# =============================================================================


@dataclass(frozen=True)
class IdentityConverter(UnitConverter):
    """
    Тождественный конвертер, нейтральный элемент композиции.

    Существует ровно один экземпляр: IdentityConverter() всегда
    возвращает IDENTITY, поэтому проверка через `is` корректна.
    """

    _instance: ClassVar[Optional["IdentityConverter"]] = None

    def __new__(cls) -> "IdentityConverter":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def convert(self, amount: float) -> float:
        return amount

    def inverse(self) -> "UnitConverter":
        return self

    def is_linear(self) -> bool:
        return True

    def concatenate(self, other: UnitConverter) -> UnitConverter:
        return other


IDENTITY: IdentityConverter = IdentityConverter()


# =============================================================================
# COMPOUND
# =============================================================================


@dataclass(frozen=True)
class CompoundConverter(UnitConverter):
    """
    Цепочка из двух конвертеров: сначала first, затем second.

    Используется, когда композицию нельзя свернуть алгебраически
    (например, множитель после смещения).
    """

    first: UnitConverter
    second: UnitConverter

    def __post_init__(self) -> None:
        for name in ("first", "second"):
            value = getattr(self, name)
            if not isinstance(value, UnitConverter):
                raise TypeError(f"{name} must be a UnitConverter, got {type(value).__name__}")

    def convert(self, amount: float) -> float:
        return self.second.convert(self.first.convert(amount))

    def inverse(self) -> UnitConverter:
        # (second ∘ first)⁻¹ = first⁻¹ ∘ second⁻¹
        return self.first.inverse().concatenate(self.second.inverse())

    def is_linear(self) -> bool:
        return self.first.is_linear() and self.second.is_linear()

    def concatenate(self, other: UnitConverter) -> UnitConverter:
        """
        Композиция с попыткой свернуть other в первый шаг цепочки.

        Если first ∘ other упрощается (результат не цепочка), возвращает
        second ∘ (first ∘ other); иначе обычную цепочку.
        """
        if other is IDENTITY:
            return self

        merged = self.first.concatenate(other)
        if not isinstance(merged, CompoundConverter):
            return self.second.concatenate(merged)

        return super().concatenate(other)

    def __len__(self) -> int:
        """Количество элементарных шагов в цепочке."""
        return _chain_length(self.first) + _chain_length(self.second)


def _chain_length(converter: UnitConverter) -> int:
    if isinstance(converter, CompoundConverter):
        return len(converter)
    return 1
