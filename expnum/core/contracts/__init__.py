"""
Contract Validation Module

Валидация сериализованной формы ExponentialNumber по JSON Schema.
"""

from .validators import (
    ExponentialNumberContract,
    SchemaLoader,
    exponential_number_from_contract,
    validate_exponential_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ExponentialNumberContract",
    # Functions
    "validate_exponential_number",
    "exponential_number_from_contract",
]
