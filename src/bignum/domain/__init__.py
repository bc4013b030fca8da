"""
Domain models and value objects.

Contains the BigInteger entity, its Sign and the serializable snapshot.
"""

from src.bignum.domain.big_integer import BigInteger
from src.bignum.domain.parsing import (
    sign_and_digits_from_int,
    sign_and_digits_from_string,
)
from src.bignum.domain.sign import Sign
from src.bignum.domain.snapshot import BigIntegerSnapshot

__all__ = [
    # BigInteger model
    "BigInteger",
    "Sign",
    # Parsing
    "sign_and_digits_from_int",
    "sign_and_digits_from_string",
    # Serialization
    "BigIntegerSnapshot",
]
