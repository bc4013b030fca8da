"""
Sign — знак целого числа.

Двузначное перечисление вместо знакового скаляра: ноль всегда POSITIVE,
инвариант восстанавливается там, где модуль обращается в ноль.
"""

from enum import Enum


class Sign(str, Enum):
    """Знак числа"""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    def flipped(self) -> "Sign":
        """Противоположный знак"""
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.POSITIVE

    def combine(self, other: "Sign") -> "Sign":
        """
        Знак произведения (XOR знаков).

        Examples:
            >>> Sign.NEGATIVE.combine(Sign.NEGATIVE)
            <Sign.POSITIVE: 'positive'>
        """
        if self is other:
            return Sign.POSITIVE
        return Sign.NEGATIVE
