"""
Operations — функциональный интерфейс BigInteger

Единый набор операций над BigInteger в виде функций:
- Построение: zero, from_integer, from_string
- Арифметика: add/subtract/multiply (чистые) и *_assign (in-place)
- Знак: negate (in-place), negated (чистая)
- Сравнения: equals, not_equals, less_than, less_or_equal,
  greater_than, greater_or_equal
- Форматирование: to_display_string

Чистые функции никогда не изменяют аргументы.
"""

from typing import Optional

from src.bignum.config import ParsingConfig
from src.bignum.domain.big_integer import BigInteger


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


def zero() -> BigInteger:
    """Ноль"""
    return BigInteger.zero()


def from_integer(value: int) -> BigInteger:
    """
    Построение из нативного int.

    Args:
        value: Целое число (любой величины)

    Returns:
        Новый BigInteger

    Raises:
        TypeError: Если value не int

    Examples:
        >>> to_display_string(from_integer(-12))
        '-12'
    """
    return BigInteger.from_integer(value)


def from_string(text: str, config: Optional[ParsingConfig] = None) -> BigInteger:
    """
    Разбор десятичной строки.

    Args:
        text: Десятичная запись ("", "0", "-123", ...)
        config: Параметры разбора (optional)

    Returns:
        Новый BigInteger

    Raises:
        MalformedNumberError: Ведущий ноль, недопустимый символ,
            голый "-" или превышение max_digits
    """
    return BigInteger.from_string(text, config)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    """a + b (новый экземпляр)"""
    return a.copy().add_assign(b)


def add_assign(a: BigInteger, b: BigInteger) -> BigInteger:
    """a += b (изменяет a, возвращает a)"""
    return a.add_assign(b)


def subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    a - b (новый экземпляр).

    Examples:
        >>> to_display_string(subtract(from_string("300"), from_string("500")))
        '-200'
    """
    return a.copy().subtract_assign(b)


def subtract_assign(a: BigInteger, b: BigInteger) -> BigInteger:
    """a -= b (изменяет a, возвращает a)"""
    return a.subtract_assign(b)


def multiply(a: BigInteger, b: BigInteger) -> BigInteger:
    """a * b (новый экземпляр)"""
    return a.copy().multiply_assign(b)


def multiply_assign(a: BigInteger, b: BigInteger) -> BigInteger:
    """a *= b (изменяет a, возвращает a)"""
    return a.multiply_assign(b)


def negate(a: BigInteger) -> BigInteger:
    """Смена знака на месте (ноль остаётся положительным)"""
    return a.negate()


def negated(a: BigInteger) -> BigInteger:
    """-a (новый экземпляр)"""
    return a.copy().negate()


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def equals(a: BigInteger, b: BigInteger) -> bool:
    return a == b


def not_equals(a: BigInteger, b: BigInteger) -> bool:
    return a != b


def less_than(a: BigInteger, b: BigInteger) -> bool:
    return a < b


def less_or_equal(a: BigInteger, b: BigInteger) -> bool:
    return a <= b


def greater_than(a: BigInteger, b: BigInteger) -> bool:
    return a > b


def greater_or_equal(a: BigInteger, b: BigInteger) -> bool:
    return a >= b


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def to_display_string(a: BigInteger) -> str:
    """Десятичная запись: "-" для отрицательных, цифры от старшей"""
    return a.to_display_string()
