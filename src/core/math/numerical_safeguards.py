"""
Numerical Safeguards: float primitives для конвертеров единиц

Модуль изолирует все численные тонкости, на которые опираются конвертеры:
- Округление до single precision (float32) для проверок "фактически единица"
- Безопасное обратное значение (1/x) без ZeroDivisionError
- Логарифм и экспонента без исключений (IEEE-754 семантика)
- Валидация параметров конвертеров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление до float32 используется ТОЛЬКО для сравнений, никогда
   для хранимых значений (хранится полный float64)
2. NaN/Inf не санитизируются, а пропагируют как в IEEE-754
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

import numpy as np

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Значение, к которому сравнивается округлённый до float32 множитель.
# Множитель, равный ему после округления, считается тождественным
IDENTITY_FACTOR: Final[float] = 1.0

# Значение, к которому сравнивается округлённое до float32 смещение
ZERO_OFFSET: Final[float] = 0.0

# Предел членов точного отношения: как у 64-битного long.
# Более длинные отношения сворачиваются в приближённый множитель
RATIONAL_TERM_LIMIT: Final[int] = 2**63 - 1

# Тип для грубого сравнения (coarse-grained equality test)
SINGLE_PRECISION: Final = np.float32


# =============================================================================
# SINGLE PRECISION
# =============================================================================


def to_single_precision(value: float) -> float:
    """
    Округление float64 до ближайшего float32 (round half to even).

    Значения вне диапазона float32 становятся ±inf, NaN остаётся NaN.
    Результат возвращается как Python float, но содержит ровно
    float32-представимое значение.

    Args:
        value: Исходное значение (float64)

    Returns:
        Значение, округлённое до single precision

    Examples:
        >>> to_single_precision(1.0 + 1e-9)
        1.0
        >>> to_single_precision(0.1)
        0.10000000149011612
        >>> to_single_precision(1e300)
        inf
    """
    with np.errstate(over="ignore"):
        return float(SINGLE_PRECISION(value))


def is_single_precision_one(value: float) -> bool:
    """
    Проверка, что значение равно 1.0 в пределах single precision.

    Args:
        value: Проверяемый множитель

    Returns:
        True если float32(value) == 1.0
    """
    return to_single_precision(value) == IDENTITY_FACTOR


def is_single_precision_zero(value: float) -> bool:
    """
    Проверка, что значение равно 0.0 в пределах single precision.

    Субнормальные float64 (например, 1e-50) округляются до нуля.

    Args:
        value: Проверяемое смещение

    Returns:
        True если float32(value) == 0.0
    """
    return to_single_precision(value) == ZERO_OFFSET


# =============================================================================
# IEEE-754 АРИФМЕТИКА БЕЗ ИСКЛЮЧЕНИЙ
# =============================================================================


def safe_reciprocal(value: float) -> float:
    """
    Обратное значение 1/value по правилам IEEE-754.

    В отличие от Python-деления, не бросает ZeroDivisionError:
    1/(+0.0) = +inf, 1/(-0.0) = -inf.

    Examples:
        >>> safe_reciprocal(4.0)
        0.25
        >>> safe_reciprocal(0.0)
        inf
        >>> safe_reciprocal(-0.0)
        -inf
    """
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def safe_ratio(numerator: int, denominator: int) -> float:
    """
    Отношение целых как float без OverflowError.

    Python делит целые с корректным округлением; если результат вне
    диапазона float64, возвращается ±inf, малые результаты дают 0.0.
    Делитель 0 обрабатывается как в IEEE-754.

    Examples:
        >>> safe_ratio(3, 2)
        1.5
        >>> safe_ratio(10**400, 3)
        inf
        >>> safe_ratio(-(10**400), 3)
        -inf
    """
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.inf if numerator > 0 else -math.inf
    try:
        return numerator / denominator
    except OverflowError:
        return math.inf if (numerator > 0) == (denominator > 0) else -math.inf


def safe_log(value: float) -> float:
    """
    Натуральный логарифм: ln(0) = -inf, ln(x<0) = nan, без исключений.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(value))


def safe_exp(value: float) -> float:
    """
    Экспонента: переполнение даёт inf, без OverflowError.
    """
    with np.errstate(over="ignore"):
        return float(np.exp(value))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).
    """
    return math.isfinite(value)


def validate_log_base(value: float, name: str = "base") -> None:
    """
    Валидация основания логарифма.

    Args:
        value: Проверяемое основание
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если основание NaN/Inf, не положительное или равно 1
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")

    if value == 1.0:
        raise ValueError(f"{name} must not be 1, got {value}")
