"""
Core math modules для expnum

Нормализация пары (mantissa, exponent), выравнивание разрядов и
численные константы.
"""

# Numerical Safeguards
from expnum.core.math.numerical_safeguards import (
    # Constants
    EXPONENT_BITS_64,
    EXPONENT_BITS_128,
    MANTISSA_BOUND,
    MANTISSA_LIMIT,
    MANTISSA_MIN,
    RADIX,
    # Exponent bounds
    check_exponent,
    coerce_exponent,
    exponent_bounds,
    # Classification
    is_canonical_mantissa,
    is_valid_float,
)

# Normalization
from expnum.core.math.normalization import (
    NormalizedPair,
    NumberKind,
    align_digits,
    canonical_pair,
    classify,
    normalize,
    split_digits,
    split_integer,
)

__all__ = [
    # Numerical Safeguards — Constants
    "EXPONENT_BITS_64",
    "EXPONENT_BITS_128",
    "MANTISSA_BOUND",
    "MANTISSA_LIMIT",
    "MANTISSA_MIN",
    "RADIX",
    # Numerical Safeguards — Exponent bounds
    "check_exponent",
    "coerce_exponent",
    "exponent_bounds",
    # Numerical Safeguards — Classification
    "is_canonical_mantissa",
    "is_valid_float",
    # Normalization — Types
    "NormalizedPair",
    "NumberKind",
    # Normalization — Functions
    "align_digits",
    "canonical_pair",
    "classify",
    "normalize",
    "split_digits",
    "split_integer",
]
