"""
BigInteger — целое число произвольной точности

Представление знак/модуль:
- _digits: десятичные цифры модуля, младшая первой, длина >= 1
- _sign: Sign.POSITIVE / Sign.NEGATIVE

Два вида операций:
- in-place (add_assign, subtract_assign, multiply_assign, negate, +=, -=, *=)
  изменяют приёмник и возвращают его
- чистые (+, -, *, унарный -) возвращают новый экземпляр

Экземпляры не разделяют хранилище цифр (copy-on-assign). Так как объект
изменяем через in-place операции, он не хешируется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль — это ровно [0] со знаком POSITIVE (отрицательный ноль невозможен)
2. Нет старших нулей, кроме единственного нуля
3. Ровно одно из a < b, a == b, a > b истинно для любой пары
"""

from typing import Optional, Union

from src.bignum.config import ParsingConfig
from src.bignum.domain.parsing import (
    sign_and_digits_from_int,
    sign_and_digits_from_string,
)
from src.bignum.domain.sign import Sign
from src.bignum.math.digit_kernels import (
    ZERO_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    digits_to_int,
    is_zero_magnitude,
    multiply_magnitudes,
    subtract_magnitudes,
)

Operand = Union["BigInteger", int]


class BigInteger:
    """
    Знаковое целое произвольной точности в десятичном представлении.

    Конструктор принимает int, десятичную строку или другой BigInteger
    (копия); без аргумента создаётся ноль.

    Examples:
        >>> BigInteger(5) + BigInteger(-12)
        BigInteger('-7')
        >>> str(BigInteger("-1932138") * BigInteger(-111119))
        '214697242422'
    """

    __slots__ = ("_digits", "_sign")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union["BigInteger", int, str, None] = None):
        if value is None:
            self._sign = Sign.POSITIVE
            self._digits = list(ZERO_DIGITS)
        elif isinstance(value, BigInteger):
            self._sign = value._sign
            self._digits = list(value._digits)
        elif isinstance(value, str):
            self._sign, self._digits = sign_and_digits_from_string(value)
        else:
            self._sign, self._digits = sign_and_digits_from_int(value)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "BigInteger":
        """Ноль"""
        return cls()

    @classmethod
    def from_integer(cls, value: int) -> "BigInteger":
        """Построение из нативного int"""
        result = cls.__new__(cls)
        result._sign, result._digits = sign_and_digits_from_int(value)
        return result

    @classmethod
    def from_string(
        cls,
        text: str,
        config: Optional[ParsingConfig] = None,
    ) -> "BigInteger":
        """
        Разбор десятичной строки.

        Args:
            text: Десятичная запись
            config: Параметры разбора (optional)

        Raises:
            MalformedNumberError: Если запись некорректна
        """
        result = cls.__new__(cls)
        result._sign, result._digits = sign_and_digits_from_string(text, config)
        return result

    def copy(self) -> "BigInteger":
        """Независимая копия"""
        return BigInteger(self)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры модуля, младшая первой (копия)"""
        return tuple(self._digits)

    @property
    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    @property
    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    # =========================================================================
    # ЗНАКОВАЯ АРИФМЕТИКА (IN-PLACE)
    # =========================================================================

    def add_assign(self, other: "BigInteger") -> "BigInteger":
        """
        self += other.

        Одинаковые знаки — сложение модулей, знак не меняется.
        Разные знаки — из большего модуля вычитается меньший, результат
        получает знак операнда с большим модулем (при равенстве — ноль).
        """
        other_digits = list(other._digits)

        if self._sign is other._sign:
            add_magnitudes(self._digits, other_digits)
        elif compare_magnitudes(self._digits, other_digits) >= 0:
            subtract_magnitudes(self._digits, other_digits)
        else:
            subtract_magnitudes(other_digits, self._digits)
            self._digits = other_digits
            self._sign = other._sign

        self._normalize_sign()
        return self

    def subtract_assign(self, other: "BigInteger") -> "BigInteger":
        """self -= other (сложение с противоположным)"""
        return self.add_assign(-other)

    def multiply_assign(self, other: "BigInteger") -> "BigInteger":
        """
        self *= other.

        Знак произведения — XOR знаков; нулевое произведение положительно.
        """
        self._digits = multiply_magnitudes(self._digits, other._digits)
        self._sign = self._sign.combine(other._sign)
        self._normalize_sign()
        return self

    def negate(self) -> "BigInteger":
        """Смена знака на месте; знак нуля не меняется"""
        if not self.is_zero:
            self._sign = self._sign.flipped()
        return self

    def _normalize_sign(self) -> None:
        if self.is_zero:
            self._sign = Sign.POSITIVE

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __iadd__(self, other: Operand) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.add_assign(coerced)

    def __isub__(self, other: Operand) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.subtract_assign(coerced)

    def __imul__(self, other: Operand) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.multiply_assign(coerced)

    def __add__(self, other: Operand) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.copy().add_assign(coerced)

    def __radd__(self, other: int) -> "BigInteger":
        return self.__add__(other)

    def __sub__(self, other: Operand) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.copy().subtract_assign(coerced)

    def __rsub__(self, other: int) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.subtract_assign(self)

    def __mul__(self, other: Operand) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.copy().multiply_assign(coerced)

    def __rmul__(self, other: int) -> "BigInteger":
        return self.__mul__(other)

    def __neg__(self) -> "BigInteger":
        return self.copy().negate()

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __abs__(self) -> "BigInteger":
        result = self.copy()
        result._sign = Sign.POSITIVE
        return result

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self._sign is coerced._sign and self._digits == coerced._digits

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Operand) -> bool:
        """
        Строгий порядок: NEGATIVE < POSITIVE; при равных знаках сравниваются
        модули (длина, затем старшие цифры), для отрицательных — инверсно.
        """
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented

        if self._sign is not coerced._sign:
            return self._sign is Sign.NEGATIVE

        order = compare_magnitudes(self._digits, coerced._digits)
        if self._sign is Sign.NEGATIVE:
            return order > 0
        return order < 0

    def __le__(self, other: Operand) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self < coerced or self == coerced

    def __gt__(self, other: Operand) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced < self

    def __ge__(self, other: Operand) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return not self < coerced

    # =========================================================================
    # ПРЕОБРАЗОВАНИЯ
    # =========================================================================

    def to_display_string(self) -> str:
        """Знак (только для отрицательных) и цифры от старшей к младшей"""
        body = "".join(str(digit) for digit in reversed(self._digits))
        if self._sign is Sign.NEGATIVE:
            return "-" + body
        return body

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"BigInteger({self.to_display_string()!r})"

    def __int__(self) -> int:
        magnitude = digits_to_int(self._digits)
        return -magnitude if self._sign is Sign.NEGATIVE else magnitude

    def __bool__(self) -> bool:
        return not self.is_zero


def _coerce(value: object) -> Optional[BigInteger]:
    """BigInteger как есть, int через from_integer, иначе None"""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_integer(value)
    return None
