"""
bignum — целые числа произвольной точности

Десятичное представление знак/модуль, арифметика (сложение, вычитание,
умножение столбиком, смена знака), полный набор сравнений и форматирование.
Не зависит от внешних систем.
"""

from src.bignum.config import DEFAULT_PARSING_CONFIG, ParsingConfig
from src.bignum.domain import BigInteger, BigIntegerSnapshot, Sign
from src.bignum.errors import BigIntegerError, MalformedNumberError, MalformedReason
from src.bignum.operations import (
    add,
    add_assign,
    equals,
    from_integer,
    from_string,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    multiply,
    multiply_assign,
    negate,
    negated,
    not_equals,
    subtract,
    subtract_assign,
    to_display_string,
    zero,
)

__all__ = [
    # Domain
    "BigInteger",
    "BigIntegerSnapshot",
    "Sign",
    # Config
    "ParsingConfig",
    "DEFAULT_PARSING_CONFIG",
    # Errors
    "BigIntegerError",
    "MalformedNumberError",
    "MalformedReason",
    # Construction
    "zero",
    "from_integer",
    "from_string",
    # Arithmetic
    "add",
    "add_assign",
    "subtract",
    "subtract_assign",
    "multiply",
    "multiply_assign",
    "negate",
    "negated",
    # Comparisons
    "equals",
    "not_equals",
    "less_than",
    "less_or_equal",
    "greater_than",
    "greater_or_equal",
    # Formatting
    "to_display_string",
]
