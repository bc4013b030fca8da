"""
Digit Kernels — беззнаковая арифметика над десятичными цифрами

Модуль содержит примитивы над модулями (magnitude) чисел, представленными
списком десятичных цифр, младшая цифра первой:
- Сложение с переносом (carry)
- Вычитание большего минус меньшее с заёмом (borrow)
- Сравнение модулей разной длины
- Умножение столбиком (schoolbook, O(n·m))

Знак здесь не рассматривается: знаковая логика живёт в BigInteger.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность цифр непуста; ноль — это ровно [0]
2. Нет ведущих (старших) нулей, кроме единственного нуля
3. Каждая цифра в диапазоне 0..9
4. Все операции детерминированы и ограничены длиной операндов
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления цифр
DIGIT_BASE: Final[int] = 10

# Каноническое представление нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Модуль равен нулю (нормализованная запись [0])"""
    return len(digits) == 1 and digits[0] == 0


def strip_leading_zeros(digits: list[int]) -> None:
    """
    Удаление старших нулей на месте, вплоть до единственного [0].

    Examples:
        >>> d = [3, 0, 0]; strip_leading_zeros(d); d
        [3]
        >>> d = [0, 0, 0]; strip_leading_zeros(d); d
        [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()


def digits_from_int(value: int) -> list[int]:
    """
    Десятичное разложение неотрицательного int, младшая цифра первой.

    Args:
        value: Неотрицательное целое

    Returns:
        Список цифр; для 0 возвращается [0]

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value == 0:
        return list(ZERO_DIGITS)

    digits: list[int] = []
    while value:
        value, digit = divmod(value, DIGIT_BASE)
        digits.append(digit)
    return digits


def digits_to_int(digits: Sequence[int]) -> int:
    """Обратное преобразование: цифры (младшая первой) → int"""
    value = 0
    for digit in reversed(digits):
        value = value * DIGIT_BASE + digit
    return value


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Сравнение двух нормализованных модулей.

    Сначала по длине (более короткий меньше), при равной длине — от старшей
    цифры к младшей до первого различия.

    Args:
        left: Цифры левого операнда (младшая первой)
        right: Цифры правого операнда (младшая первой)

    Returns:
        -1 если |left| < |right|
         0 если |left| == |right|
        +1 если |left| > |right|

    Examples:
        >>> compare_magnitudes([9, 9], [0, 0, 1])
        -1
        >>> compare_magnitudes([1, 2], [1, 2])
        0
        >>> compare_magnitudes([0, 3], [9, 2])
        1
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1

    for index in range(len(left) - 1, -1, -1):
        if left[index] != right[index]:
            return -1 if left[index] < right[index] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_magnitudes(target: list[int], addend: Sequence[int]) -> None:
    """
    Беззнаковое сложение на месте: target += addend.

    Проходит обе последовательности от младшей цифры, записывая
    sum mod 10 и перенося sum // 10. После исчерпания более короткой
    последовательности перенос продолжается по хвосту target, либо хвост
    addend дописывается с учётом переноса. Оставшийся перенос добавляет
    старшую цифру.

    Длина результата: max(n, m) или max(n, m) + 1.

    Args:
        target: Приёмник (изменяется на месте)
        addend: Слагаемое (не изменяется)
    """
    carry = 0
    common = min(len(target), len(addend))

    for index in range(common):
        total = target[index] + addend[index] + carry
        target[index] = total % DIGIT_BASE
        carry = total // DIGIT_BASE

    # Хвост приёмника: только распространение переноса
    index = common
    while carry and index < len(target):
        total = target[index] + carry
        target[index] = total % DIGIT_BASE
        carry = total // DIGIT_BASE
        index += 1

    # Хвост слагаемого: дописываем с учётом переноса
    for digit in addend[common:]:
        total = digit + carry
        target.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE

    if carry:
        target.append(carry)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract_magnitudes(minuend: list[int], subtrahend: Sequence[int]) -> None:
    """
    Беззнаковое вычитание на месте: minuend -= subtrahend.

    ПРЕДУСЛОВИЕ: |minuend| >= |subtrahend|. Проверка — ответственность
    вызывающего (знаковый диспетчер сравнивает модули до вызова).
    Нарушение предусловия — ошибка программирования, а не входных данных.

    На каждой позиции raw = l + 10 - r - borrow, цифра raw mod 10,
    заём при raw < 10. Заём продолжается по хвосту minuend. Результат
    нормализуется (старшие нули удаляются до единственного [0]).

    Args:
        minuend: Уменьшаемое (изменяется на месте)
        subtrahend: Вычитаемое (не изменяется)

    Examples:
        >>> d = [0, 0, 5]; subtract_magnitudes(d, [0, 0, 3]); d
        [0, 0, 2]
        >>> d = [0, 0, 1]; subtract_magnitudes(d, [1]); d
        [9, 9]
    """
    borrow = 0

    for index in range(len(subtrahend)):
        raw = minuend[index] + DIGIT_BASE - subtrahend[index] - borrow
        minuend[index] = raw % DIGIT_BASE
        borrow = 1 if raw < DIGIT_BASE else 0

    index = len(subtrahend)
    while borrow and index < len(minuend):
        raw = minuend[index] + DIGIT_BASE - borrow
        minuend[index] = raw % DIGIT_BASE
        borrow = 1 if raw < DIGIT_BASE else 0
        index += 1

    assert borrow == 0, "subtract_magnitudes called with |minuend| < |subtrahend|"

    strip_leading_zeros(minuend)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_by_digit(digits: Sequence[int], digit: int, shift: int) -> list[int]:
    """
    Частичное произведение: digits * digit * 10**shift.

    Результат начинается с shift нулей (позиционный сдвиг), затем идут
    цифры digit * digits[j] + carry по модулю 10; оставшийся перенос
    дописывается старшей цифрой.

    Args:
        digits: Цифры множителя (младшая первой)
        digit: Одна цифра 0..9
        shift: Позиционный сдвиг (количество младших нулей)

    Returns:
        Новый список цифр частичного произведения (не нормализован,
        если digit == 0)
    """
    partial = [0] * shift
    carry = 0

    for other_digit in digits:
        total = digit * other_digit + carry
        partial.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE

    if carry:
        partial.append(carry)

    return partial


def multiply_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Умножение столбиком: |left| * |right|.

    Для каждой цифры left на позиции i строится частичное произведение
    со сдвигом i, частичные произведения накапливаются через add_magnitudes.
    Нулевые цифры left дают нулевое частичное произведение и пропускаются.

    Сложность: O(n·m) цифровых операций.

    Args:
        left: Цифры множимого (младшая первой)
        right: Цифры множителя (младшая первой)

    Returns:
        Новый нормализованный список цифр произведения

    Examples:
        >>> multiply_magnitudes([2, 1], [3])
        [6, 3]
        >>> multiply_magnitudes([5, 2, 1], [0])
        [0]
    """
    if is_zero_magnitude(left) or is_zero_magnitude(right):
        return list(ZERO_DIGITS)

    product = list(ZERO_DIGITS)
    for position, digit in enumerate(left):
        if digit == 0:
            continue
        add_magnitudes(product, multiply_by_digit(right, digit, position))

    strip_leading_zeros(product)
    return product
