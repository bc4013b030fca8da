"""
Math modules для bignum

Беззнаковые цифровые примитивы: сложение, вычитание, сравнение, умножение.
"""

from src.bignum.math.digit_kernels import (
    # Constants
    DIGIT_BASE,
    ZERO_DIGITS,
    # Normalization
    digits_from_int,
    digits_to_int,
    is_zero_magnitude,
    strip_leading_zeros,
    # Kernels
    add_magnitudes,
    compare_magnitudes,
    multiply_by_digit,
    multiply_magnitudes,
    subtract_magnitudes,
)

__all__ = [
    # Digit Kernels — Constants
    "DIGIT_BASE",
    "ZERO_DIGITS",
    # Digit Kernels — Normalization
    "digits_from_int",
    "digits_to_int",
    "is_zero_magnitude",
    "strip_leading_zeros",
    # Digit Kernels — Kernels
    "add_magnitudes",
    "compare_magnitudes",
    "multiply_by_digit",
    "multiply_magnitudes",
    "subtract_magnitudes",
]
