"""
Variants — Huge (64-битная экспонента) и Humongous (128-битная экспонента)

Оба варианта разделяют одну реализацию (ExponentialNumber) и
отличаются только шириной экспоненты. Humongous неявно принимает Huge
в арифметике и сравнениях (расширение без потерь); обратного сужения нет.

Константы создаются один раз при импорте модуля и больше не меняются.
"""

from typing import ClassVar

from expnum.core.domain.exponential_number import ExponentialNumber
from expnum.core.math.numerical_safeguards import (
    EXPONENT_BITS_64,
    EXPONENT_BITS_128,
    MANTISSA_BOUND,
    exponent_bounds,
)


class Huge(ExponentialNumber):
    """Экспоненциальное число с 64-битной экспонентой."""

    EXPONENT_BITS: ClassVar[int] = EXPONENT_BITS_64


class Humongous(ExponentialNumber):
    """
    Экспоненциальное число с 128-битной экспонентой.

    Диапазон экспоненты — надмножество Huge, поэтому Humongous.widen(huge)
    всегда без потерь.
    """

    EXPONENT_BITS: ClassVar[int] = EXPONENT_BITS_128


def _install_constants(cls: type[ExponentialNumber]) -> None:
    _, max_exponent = exponent_bounds(cls.EXPONENT_BITS)

    cls.ZERO = cls()
    cls.ONE = cls(1.0, 0)
    cls.ADDITIVE_IDENTITY = cls.ZERO
    cls.MULTIPLICATIVE_IDENTITY = cls.ONE
    cls.MAX_VALUE = cls(MANTISSA_BOUND, max_exponent)
    cls.MIN_VALUE = cls(-MANTISSA_BOUND, max_exponent)


for _variant in (Huge, Humongous):
    _install_constants(_variant)

VARIANTS_BY_BITS: dict[int, type[ExponentialNumber]] = {
    Huge.EXPONENT_BITS: Huge,
    Humongous.EXPONENT_BITS: Humongous,
}
