"""
Numerical Safeguards — примитивы для пары (mantissa, exponent)

Модуль содержит константы и проверки, общие для всех вариантов
ExponentialNumber:
- Основание системы счисления (RADIX = 10) и границы канонической мантиссы
- Границы экспоненты для знакового целого заданной ширины
- Классификация float (finite / NaN / Inf)
- Приведение экспоненты к int

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая мантисса: 1 <= |m| < 10 (верхняя граница строгая)
2. Экспонента всегда помещается в знаковое целое ширины EXPONENT_BITS
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from numbers import Integral
from typing import Final

from expnum.core.errors import ExponentOverflowError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание, используемое для всех сдвигов мантиссы
RADIX: Final[int] = 10

# Каноническая мантисса: MANTISSA_MIN <= |m| < MANTISSA_LIMIT
MANTISSA_MIN: Final[float] = 1.0
MANTISSA_LIMIT: Final[float] = float(RADIX)

# Мантисса граничных значений MAX_VALUE / MIN_VALUE
MANTISSA_BOUND: Final[float] = 9.9999999

# Ширины экспоненты для двух вариантов
EXPONENT_BITS_64: Final[int] = 64
EXPONENT_BITS_128: Final[int] = 128


# =============================================================================
# ГРАНИЦЫ ЭКСПОНЕНТЫ
# =============================================================================


def exponent_bounds(bits: int) -> tuple[int, int]:
    """
    Диапазон знакового целого заданной ширины.

    Args:
        bits: Ширина в битах (> 1)

    Returns:
        (min, max) включительно

    Examples:
        >>> exponent_bounds(64)
        (-9223372036854775808, 9223372036854775807)
    """
    if bits < 2:
        raise ValueError(f"bits must be >= 2, got {bits}")

    half = 1 << (bits - 1)
    return -half, half - 1


def check_exponent(exponent: int, bits: int) -> int:
    """
    Проверка, что экспонента помещается в заданную ширину.

    Raises:
        ExponentOverflowError: Если экспонента вне диапазона
    """
    low, high = exponent_bounds(bits)
    if exponent < low or exponent > high:
        raise ExponentOverflowError(exponent, bits)
    return exponent


def coerce_exponent(value: object) -> int:
    """
    Приведение экспоненты к int.

    Принимаются только целочисленные значения (bool отвергается,
    float с дробной частью тоже).

    Raises:
        TypeError: Если значение не целое
    """
    if isinstance(value, bool):
        raise TypeError("exponent must be an integer, got bool")

    if isinstance(value, Integral):
        return int(value)

    if isinstance(value, float) and value.is_integer():
        return int(value)

    raise TypeError(f"exponent must be an integer, got {value!r}")


# =============================================================================
# КЛАССИФИКАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def is_canonical_mantissa(mantissa: float) -> bool:
    """
    Проверка канонического диапазона мантиссы по модулю.

    Examples:
        >>> is_canonical_mantissa(9.99)
        True
        >>> is_canonical_mantissa(-1.0)
        True
        >>> is_canonical_mantissa(10.0)
        False
    """
    return MANTISSA_MIN <= abs(mantissa) < MANTISSA_LIMIT

