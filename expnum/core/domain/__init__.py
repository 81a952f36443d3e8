"""
Domain models для expnum

Immutable Pydantic модели экспоненциальных чисел.
"""

from expnum.core.domain.exponential_number import ExponentialNumber, Ordering
from expnum.core.domain.formatting import DEFAULT_FORMAT, FormatOptions
from expnum.core.domain.variants import VARIANTS_BY_BITS, Huge, Humongous
from expnum.core.math.normalization import NumberKind

__all__ = [
    "ExponentialNumber",
    "Ordering",
    "NumberKind",
    "Huge",
    "Humongous",
    "VARIANTS_BY_BITS",
    "FormatOptions",
    "DEFAULT_FORMAT",
]
