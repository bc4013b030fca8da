"""
Конфигурация разбора десятичных строк.

Immutable dataclass с значениями по умолчанию; переопределение передаётся
явно в from_string(text, config=...).
"""

from dataclasses import dataclass
from typing import Final, Optional


@dataclass(frozen=True)
class ParsingConfig:
    """Параметры разбора десятичной записи.

    - empty_string_is_zero: пустая строка трактуется как ноль
      (иначе MalformedNumberError с причиной EMPTY)
    - max_digits: ограничение на число цифр (None — без ограничения)
    """

    empty_string_is_zero: bool = True
    max_digits: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits < 1:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")


DEFAULT_PARSING_CONFIG: Final[ParsingConfig] = ParsingConfig()
