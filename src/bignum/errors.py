"""
Ошибки модуля bignum

Единственный вид ошибки времени выполнения — MalformedNumberError,
возникающий только при разборе десятичной строки. Арифметика и сравнения
тотальны и ошибок не порождают.

Каждая ошибка создаётся заново при отказе разбора (без разделяемых
экземпляров), причина отказа сохраняется в поле reason.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class MalformedReason(str, Enum):
    """Причина отказа разбора десятичной строки"""

    LEADING_ZERO = "leading_zero"
    INVALID_CHARACTER = "invalid_character"
    EMPTY_AFTER_SIGN = "empty_after_sign"
    EMPTY = "empty"
    TOO_LONG = "too_long"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntegerError(Exception):
    """Базовый класс ошибок bignum"""

    pass


class MalformedNumberError(BigIntegerError, ValueError):
    """
    Строка не является корректной записью целого числа.

    Наследует ValueError: некорректный ввод сообщается так же,
    как остальные ошибки валидации входных данных.

    Attributes:
        text: Исходная строка
        reason: Причина отказа (MalformedReason)
        position: Индекс символа, на котором разбор остановился (если применимо)
    """

    def __init__(
        self,
        text: str,
        reason: MalformedReason,
        position: int | None = None,
        detail: str | None = None,
    ):
        self.text = text
        self.reason = reason
        self.position = position

        message = f"Malformed number {text!r}: {reason.value}"
        if position is not None:
            message += f" at position {position}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
