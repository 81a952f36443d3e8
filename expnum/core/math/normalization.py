"""
Normalization — приведение пары (mantissa, exponent) к канонической форме

Модуль реализует два примитива, на которых построена вся арифметика:
- normalize(): восстановление инварианта 1 <= |m| < 10 (Normalizer)
- align_digits(): сдвиг мантиссы к заданной экспоненте (digit alignment)

Плюс вспомогательные разбиения для значений, не помещающихся во float
(большие int, Decimal): мантисса берётся из старших цифр, порядок уходит
в экспоненту.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/±Inf мантисса: пара сохраняется как есть, масштабирование не выполняется
2. Нулевая мантисса: результат всегда (0.0, 0), экспонента игнорируется
3. Граница масштабирования: |m| >= 10 (не > 10)
4. Каждый шаг — ровно один десятичный сдвиг
"""

import logging
import math
from enum import Enum
from typing import NamedTuple

from expnum.core.math.numerical_safeguards import (
    MANTISSA_LIMIT,
    MANTISSA_MIN,
    RADIX,
    is_valid_float,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TYPES
# =============================================================================


class NumberKind(str, Enum):
    """Классификация значения"""

    FINITE = "finite"
    INFINITY = "infinity"
    NAN = "nan"


class NormalizedPair(NamedTuple):
    """Пара (mantissa, exponent) вместе с классификацией."""

    mantissa: float
    exponent: int
    kind: NumberKind


# =============================================================================
# CLASSIFICATION
# =============================================================================


def classify(mantissa: float) -> NumberKind:
    """
    Классификация мантиссы.

    Examples:
        >>> classify(1.5)
        <NumberKind.FINITE: 'finite'>
        >>> classify(float("-inf"))
        <NumberKind.INFINITY: 'infinity'>
    """
    if math.isnan(mantissa):
        return NumberKind.NAN
    if math.isinf(mantissa):
        return NumberKind.INFINITY
    return NumberKind.FINITE


def canonical_pair(mantissa: float, exponent: int) -> NormalizedPair:
    """
    Классификация + канонизация нуля без масштабирования.

    Используется там, где вызывающий код уже получил нормализованную
    (или намеренно ненормализованную) мантиссу: после digit alignment,
    при смене знака, при расширении экспоненты.
    """
    kind = classify(mantissa)
    if kind is not NumberKind.FINITE:
        return NormalizedPair(mantissa, exponent, kind)

    if mantissa == 0:
        # -0.0 тоже становится 0.0: у нуля одно представление
        return NormalizedPair(0.0, 0, NumberKind.FINITE)

    return NormalizedPair(mantissa, exponent, NumberKind.FINITE)


# =============================================================================
# NORMALIZER
# =============================================================================


def normalize(mantissa: float, exponent: int) -> NormalizedPair:
    """
    Приведение пары к канонической форме.

    Алгоритм:
        while |m| >= 10: m /= 10, e += 1
        while |m| < 1:   m *= 10, e -= 1

    Цикл конечен: мантисса конечна и ненулевая, каждый шаг меняет её
    модуль ровно в 10 раз.

    Args:
        mantissa: Исходная мантисса (любой float)
        exponent: Исходная экспонента

    Returns:
        NormalizedPair в канонической форме

    Examples:
        >>> normalize(1250.0, 0)
        NormalizedPair(mantissa=1.25, exponent=3, kind=<NumberKind.FINITE: 'finite'>)
        >>> normalize(0.0, 42).exponent
        0
    """
    pair = canonical_pair(mantissa, exponent)
    if pair.kind is not NumberKind.FINITE or pair.mantissa == 0:
        return pair

    m, e = pair.mantissa, pair.exponent

    while abs(m) >= MANTISSA_LIMIT:
        m /= RADIX
        e += 1

    while abs(m) < MANTISSA_MIN:
        m *= RADIX
        e -= 1

    return NormalizedPair(m, e, NumberKind.FINITE)


# =============================================================================
# DIGIT ALIGNMENT
# =============================================================================


def align_digits(mantissa: float, exponent: int, target_exponent: int) -> NormalizedPair:
    """
    Сдвиг мантиссы так, чтобы экспонента стала равной target_exponent.

    Сдвиг итеративный: один множитель 10 на каждую единицу разницы
    экспонент. При большой разнице деление доводит мантиссу до 0
    (операнд пренебрежимо мал), а умножение до ±Inf.

    Как только мантисса стала 0, ±Inf или NaN, дальнейшие шаги её не
    меняют, поэтому цикл прерывается досрочно. Результат совпадает с
    полным циклом, но время ограничено ~650 шагами вместо |разницы|.

    Результат не нормализуется (только канонизация нуля и классификация).

    Args:
        mantissa: Мантисса сдвигаемого операнда
        exponent: Экспонента сдвигаемого операнда
        target_exponent: Требуемая экспонента

    Returns:
        NormalizedPair с exponent == target_exponent (или каноническим нулём)

    Examples:
        >>> align_digits(2.0, 2, 0).mantissa
        200.0
        >>> align_digits(5.0, -1, 0).mantissa
        0.5
    """
    diff = exponent - target_exponent
    m = mantissa

    if diff > 0:
        for _ in range(diff):
            m *= RADIX
            if not is_valid_float(m):
                break
    elif diff < 0:
        for _ in range(-diff):
            m /= RADIX
            if m == 0 or not is_valid_float(m):
                break

    if m == 0 and mantissa != 0:
        logger.debug(
            "operand %r at exponent %d vanished while aligning to exponent %d",
            mantissa,
            exponent,
            target_exponent,
        )

    return canonical_pair(m, target_exponent)


# =============================================================================
# DIGIT SPLITTING
# =============================================================================


def split_digits(negative: bool, digits: str, exponent: int) -> tuple[float, int]:
    """
    Мантисса и экспонента из строки десятичных цифр.

    Значение = (-1)^negative * int(digits) * 10^exponent.
    Мантисса строится как "d.ddd" и парсится float() с корректным
    округлением, порядок переносится в экспоненту.

    Args:
        negative: Знак
        digits: Непустая строка цифр без ведущих нулей (кроме "0")
        exponent: Десятичная экспонента младшей цифры

    Returns:
        (mantissa, exponent) — мантисса может округлиться до 10.0,
        поэтому результат следует передать в normalize()

    Examples:
        >>> split_digits(False, "12345", 0)
        (1.2345, 4)
    """
    if not digits or not digits.isdigit():
        raise ValueError(f"digits must be a non-empty digit string, got {digits!r}")

    digits = digits.lstrip("0") or "0"
    mantissa = float(f"{digits[0]}.{digits[1:]}" if len(digits) > 1 else digits)
    if negative:
        mantissa = -mantissa

    return mantissa, exponent + len(digits) - 1


def split_integer(value: int) -> tuple[float, int]:
    """
    Разбиение int на (mantissa, exponent).

    Значения, помещающиеся во float, переводятся напрямую (exponent = 0).
    Большие значения (float(value) -> OverflowError) разбиваются по
    десятичным цифрам.

    Examples:
        >>> split_integer(42)
        (42.0, 0)
        >>> split_integer(10**400)
        (1.0, 400)
    """
    try:
        return float(value), 0
    except OverflowError:
        return split_digits(value < 0, str(abs(value)), 0)
