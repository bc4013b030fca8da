"""
Contract Validation Module

Модуль для валидации JSON контрактов BigInteger.
"""

from .validators import (
    BigIntegerContractValidator,
    SchemaLoader,
    deserialize_big_integer,
    serialize_big_integer,
    validate_big_integer,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "BigIntegerContractValidator",
    # Functions
    "validate_big_integer",
    "serialize_big_integer",
    "deserialize_big_integer",
]
