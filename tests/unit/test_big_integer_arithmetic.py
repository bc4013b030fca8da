"""
Тесты знаковой арифметики BigInteger

Проверяет:
1. Сложение по всем четырём комбинациям знаков
2. Вычитание как сложение с противоположным
3. Умножение (знак XOR, ноль всегда положительный)
4. Смену знака
5. In-place операторы и независимость экземпляров
6. Алгебраические свойства (коммутативность, ассоциативность)
"""

import itertools

import pytest

from src.bignum import BigInteger, Sign

SAMPLE_VALUES = [
    0,
    1,
    -1,
    5,
    -12,
    9,
    -10,
    999,
    -1000,
    1932138,
    -111119,
    10**32,
    -(10**32 - 1),
    12345678901234567890123,
]


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


class TestAddition:
    """Тесты для add_assign / + / +="""

    def test_positive_plus_negative(self) -> None:
        """5 + (-12) = -7"""
        result = BigInteger(5) + BigInteger(-12)
        assert result == BigInteger(-7)
        assert str(result) == "-7"

    def test_carry_into_new_digit(self) -> None:
        """Перенос порождает новый старший разряд"""
        a = BigInteger("99999999999999999999999999999999")
        b = BigInteger("1")
        assert a + b == BigInteger("100000000000000000000000000000000")

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            (7, 5, 12),  # (+, +)
            (-7, -5, -12),  # (-, -)
            (7, -5, 2),  # (+, -), |lhs| > |rhs|
            (5, -7, -2),  # (+, -), |lhs| < |rhs|
            (-7, 5, -2),  # (-, +), |lhs| > |rhs|
            (-5, 7, 2),  # (-, +), |lhs| < |rhs|
            (5, -5, 0),  # (+, -), равные модули
            (-5, 5, 0),  # (-, +), равные модули
        ],
    )
    def test_sign_cases(self, left: int, right: int, expected: int) -> None:
        """Все комбинации знаков"""
        result = BigInteger(left) + BigInteger(right)
        assert int(result) == expected

    def test_zero_result_is_positive(self) -> None:
        """Нулевой результат всегда со знаком POSITIVE"""
        result = BigInteger(-42) + BigInteger(42)
        assert result.sign is Sign.POSITIVE
        assert result == BigInteger()
        assert str(result) == "0"

    def test_pure_addition_does_not_mutate(self) -> None:
        a = BigInteger(10)
        b = BigInteger(-3)
        _ = a + b
        assert str(a) == "10"
        assert str(b) == "-3"

    def test_in_place_addition(self) -> None:
        """+= изменяет приёмник и возвращает тот же объект"""
        a = BigInteger(10)
        alias = a
        a += BigInteger(5)
        assert a is alias
        assert str(a) == "15"

    def test_self_addition(self) -> None:
        """a += a работает как сложение с копией"""
        a = BigInteger(-999)
        a += a
        assert str(a) == "-1998"

    def test_int_operands(self) -> None:
        """int допускается с любой стороны"""
        assert BigInteger(5) + 3 == BigInteger(8)
        assert 3 + BigInteger(5) == BigInteger(8)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            BigInteger(5) + 1.5  # type: ignore[operator]
        with pytest.raises(TypeError):
            BigInteger(5) + "1"  # type: ignore[operator]

    @pytest.mark.parametrize("left, right", list(itertools.product(SAMPLE_VALUES, repeat=2)))
    def test_matches_native(self, left: int, right: int) -> None:
        """Сумма совпадает с нативной арифметикой int"""
        assert int(BigInteger(left) + BigInteger(right)) == left + right


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


class TestSubtraction:
    """Тесты для subtract_assign / - / -="""

    def test_larger_minus_smaller(self) -> None:
        assert BigInteger("500") - BigInteger("300") == BigInteger("200")

    def test_smaller_minus_larger(self) -> None:
        assert BigInteger("300") - BigInteger("500") == BigInteger("-200")

    def test_demo_sequence(self) -> None:
        """A = 5, B = A + (-12) = -7, A - B = 12"""
        a = BigInteger()
        a += BigInteger(5)
        b = a + BigInteger(-12)
        assert str(a) == "5"
        assert str(b) == "-7"
        assert str(a - b) == "12"
        assert str(a * b) == "-35"

    def test_self_subtraction(self) -> None:
        """a -= a даёт положительный ноль"""
        a = BigInteger(-12345)
        a -= a
        assert a.is_zero
        assert a.sign is Sign.POSITIVE

    def test_rsub(self) -> None:
        assert 10 - BigInteger(25) == BigInteger(-15)

    def test_borrow_across_many_digits(self) -> None:
        result = BigInteger("100000000000000000000") - BigInteger(1)
        assert str(result) == "99999999999999999999"

    @pytest.mark.parametrize("left, right", list(itertools.product(SAMPLE_VALUES, repeat=2)))
    def test_matches_native(self, left: int, right: int) -> None:
        assert int(BigInteger(left) - BigInteger(right)) == left - right


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


class TestMultiplication:
    """Тесты для multiply_assign / * / *="""

    def test_negative_times_negative(self) -> None:
        """-1932138 * -111119 — положительное произведение"""
        result = BigInteger("-1932138") * BigInteger.from_integer(-111119)
        assert result.sign is Sign.POSITIVE
        assert int(result) == 1932138 * 111119
        assert str(result) == "214697242422"

    @pytest.mark.parametrize(
        "left, right, sign",
        [
            (3, 4, Sign.POSITIVE),
            (-3, 4, Sign.NEGATIVE),
            (3, -4, Sign.NEGATIVE),
            (-3, -4, Sign.POSITIVE),
        ],
    )
    def test_sign_xor(self, left: int, right: int, sign: Sign) -> None:
        assert (BigInteger(left) * BigInteger(right)).sign is sign

    @pytest.mark.parametrize("value", [0, 7, -7, 10**40, -(10**40)])
    def test_multiply_by_zero(self, value: int) -> None:
        """a * 0 == 0 со знаком POSITIVE"""
        result = BigInteger(value) * BigInteger()
        assert result == BigInteger()
        assert result.sign is Sign.POSITIVE
        assert (BigInteger() * BigInteger(value)).sign is Sign.POSITIVE

    def test_self_multiplication(self) -> None:
        a = BigInteger(-111)
        a *= a
        assert str(a) == "12321"

    def test_in_place_returns_receiver(self) -> None:
        a = BigInteger(6)
        alias = a
        a *= 7
        assert a is alias
        assert str(a) == "42"

    def test_int_operands(self) -> None:
        assert 3 * BigInteger(-5) == BigInteger(-15)

    @pytest.mark.parametrize("left, right", list(itertools.product(SAMPLE_VALUES, repeat=2)))
    def test_matches_native(self, left: int, right: int) -> None:
        assert int(BigInteger(left) * BigInteger(right)) == left * right


# =============================================================================
# СМЕНА ЗНАКА
# =============================================================================


class TestNegation:
    """Тесты для negate / унарного минуса / abs"""

    def test_negate_in_place(self) -> None:
        a = BigInteger(5)
        a.negate()
        assert str(a) == "-5"
        a.negate()
        assert str(a) == "5"

    def test_zero_sign_never_flips(self) -> None:
        a = BigInteger()
        a.negate()
        assert a.sign is Sign.POSITIVE
        assert (-BigInteger()).sign is Sign.POSITIVE

    def test_unary_minus_is_pure(self) -> None:
        a = BigInteger(8)
        b = -a
        assert str(a) == "8"
        assert str(b) == "-8"

    def test_unary_plus_copies(self) -> None:
        a = BigInteger(8)
        b = +a
        assert b == a
        assert b is not a

    def test_abs(self) -> None:
        assert abs(BigInteger(-8)) == BigInteger(8)
        assert abs(BigInteger(8)) == BigInteger(8)


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ СВОЙСТВА
# =============================================================================


class TestAlgebraicProperties:
    """Инварианты арифметики над набором значений"""

    @pytest.mark.parametrize("left, right", list(itertools.combinations(SAMPLE_VALUES, 2)))
    def test_commutativity(self, left: int, right: int) -> None:
        a, b = BigInteger(left), BigInteger(right)
        assert a + b == b + a
        assert a * b == b * a

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_additive_inverse(self, value: int) -> None:
        """a + (-a) == 0"""
        a = BigInteger(value)
        result = a + (-a)
        assert result == BigInteger()
        assert str(result) == "0"

    @pytest.mark.parametrize(
        "a, b, c",
        [
            (1, -2, 3),
            (10**20, -(10**19), 7),
            (-999, -1, 1000),
            (0, 5, -5),
        ],
    )
    def test_associativity(self, a: int, b: int, c: int) -> None:
        x, y, z = BigInteger(a), BigInteger(b), BigInteger(c)
        assert (x + y) + z == x + (y + z)
        assert (x * y) * z == x * (y * z)

    def test_distributivity(self) -> None:
        x, y, z = BigInteger(-123), BigInteger(456), BigInteger(-789)
        assert x * (y + z) == x * y + x * z

    def test_not_hashable(self) -> None:
        """Изменяемый тип не хешируется"""
        with pytest.raises(TypeError):
            hash(BigInteger(1))
