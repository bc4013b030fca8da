"""
BigIntegerSnapshot — сериализуемый снимок BigInteger

Immutable Pydantic модель: знак и цифры модуля строкой от старшей к
младшей. Соответствует JSON Schema контракту big_integer.json.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from src.bignum.domain.big_integer import BigInteger
from src.bignum.domain.sign import Sign

DIGITS_PATTERN = r"^(0|[1-9][0-9]*)$"


class BigIntegerSnapshot(BaseModel):
    """
    Снимок значения BigInteger.

    Immutable модель (frozen=True); восстановление значения через
    to_big_integer().
    """

    sign: Sign = Field(..., description="Знак (positive/negative)")
    digits: str = Field(
        ...,
        min_length=1,
        pattern=DIGITS_PATTERN,
        description="Цифры модуля от старшей к младшей, без ведущих нулей",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_ascii_digits(cls, v: str) -> str:
        """Только ASCII-цифры (не Unicode-цифры и не пробельные символы)"""
        if not (v.isascii() and v.isdigit()):
            raise ValueError(f"digits must be ASCII decimal digits, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigIntegerSnapshot":
        """Ноль всегда положительный"""
        if self.digits == "0" and self.sign is Sign.NEGATIVE:
            raise ValueError("zero must carry sign 'positive'")
        return self

    @classmethod
    def from_big_integer(cls, value: BigInteger) -> "BigIntegerSnapshot":
        magnitude = "".join(str(digit) for digit in reversed(value.digits))
        return cls(sign=value.sign, digits=magnitude)

    def to_big_integer(self) -> BigInteger:
        if self.sign is Sign.NEGATIVE:
            return BigInteger.from_string("-" + self.digits)
        return BigInteger.from_string(self.digits)
