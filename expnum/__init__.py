"""
expnum — числа в нормализованной экспоненциальной записи

mantissa (double) × 10^exponent (64- или 128-битное целое): величины
далеко за пределами float (10^1000 и больше) с относительной точностью
double.

    >>> from expnum import Huge
    >>> str(Huge(1, 1) + Huge(3, 1))
    '4.000000E+001'
"""

from expnum.core.domain import (
    ExponentialNumber,
    FormatOptions,
    Huge,
    Humongous,
    NumberKind,
    Ordering,
)
from expnum.core.errors import (
    ExponentialNumberError,
    ExponentOverflowError,
    InvalidFormatArgument,
    UnsupportedOperation,
)

__all__ = [
    "ExponentialNumber",
    "FormatOptions",
    "Huge",
    "Humongous",
    "NumberKind",
    "Ordering",
    "ExponentialNumberError",
    "ExponentOverflowError",
    "InvalidFormatArgument",
    "UnsupportedOperation",
]
