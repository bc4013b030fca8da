"""
Разбор и построение представления знак/модуль.

Правила десятичной записи:
- "" (при empty_string_is_zero) и "0" — ноль
- необязательный ведущий "-"
- после знака первая цифра не может быть "0" (ведущие нули запрещены)
- остальные символы — только ASCII-цифры 0..9

Разбор либо полностью успешен, либо завершается MalformedNumberError
без частичного состояния.
"""

import logging
from typing import NoReturn, Optional

from src.bignum.config import DEFAULT_PARSING_CONFIG, ParsingConfig
from src.bignum.domain.sign import Sign
from src.bignum.errors import MalformedNumberError, MalformedReason
from src.bignum.math.digit_kernels import ZERO_DIGITS, digits_from_int

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")


def sign_and_digits_from_int(value: int) -> tuple[Sign, list[int]]:
    """
    Знак и цифры (младшая первой) для нативного int.

    Args:
        value: Целое число любой величины

    Returns:
        (sign, digits); для 0 — (Sign.POSITIVE, [0])

    Raises:
        TypeError: Если value не int (bool также отклоняется)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")

    sign = Sign.POSITIVE if value >= 0 else Sign.NEGATIVE
    return sign, digits_from_int(abs(value))


def sign_and_digits_from_string(
    text: str,
    config: Optional[ParsingConfig] = None,
) -> tuple[Sign, list[int]]:
    """
    Разбор десятичной строки в (знак, цифры младшей первой).

    Args:
        text: Десятичная запись, например "-1932138"
        config: Параметры разбора (default: DEFAULT_PARSING_CONFIG)

    Returns:
        (sign, digits)

    Raises:
        TypeError: Если text не str
        MalformedNumberError: Если запись некорректна

    Examples:
        >>> sign_and_digits_from_string("-120")
        (<Sign.NEGATIVE: 'negative'>, [0, 2, 1])
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    config = config or DEFAULT_PARSING_CONFIG

    if text == "":
        if config.empty_string_is_zero:
            return Sign.POSITIVE, list(ZERO_DIGITS)
        _reject(text, MalformedReason.EMPTY)

    if text == "0":
        return Sign.POSITIVE, list(ZERO_DIGITS)

    sign = Sign.POSITIVE
    start = 0
    if text[0] == "-":
        sign = Sign.NEGATIVE
        start = 1

    if start == len(text):
        _reject(text, MalformedReason.EMPTY_AFTER_SIGN, position=start)

    if text[start] == "0":
        _reject(text, MalformedReason.LEADING_ZERO, position=start)

    for position in range(start, len(text)):
        if text[position] not in _ASCII_DIGITS:
            _reject(text, MalformedReason.INVALID_CHARACTER, position=position)

    digit_count = len(text) - start
    if config.max_digits is not None and digit_count > config.max_digits:
        _reject(
            text,
            MalformedReason.TOO_LONG,
            detail=f"{digit_count} digits exceeds max_digits={config.max_digits}",
        )

    digits = [ord(char) - ord("0") for char in reversed(text[start:])]
    return sign, digits


def _reject(
    text: str,
    reason: MalformedReason,
    position: int | None = None,
    detail: str | None = None,
) -> NoReturn:
    logger.debug("Rejected decimal literal %r: %s (position=%s)", text, reason.value, position)
    raise MalformedNumberError(text, reason, position=position, detail=detail)
