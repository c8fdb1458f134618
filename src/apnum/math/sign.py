"""
Sign — трёхзначный тег знака {POSITIVE, NEGATIVE, ZERO}

Знак хранится отдельно от модуля (magnitude). ZERO используется тогда и только
тогда, когда модуль пустой: это гарантирует единственное представление нуля.
"""

from enum import Enum


class Sign(str, Enum):
    """Знак целого числа"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"

    def flipped(self) -> "Sign":
        """Смена знака: POSITIVE <-> NEGATIVE, ZERO без изменений."""
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        return Sign.ZERO

    def product(self, other: "Sign") -> "Sign":
        """Знак произведения (и частного) двух знаков."""
        if self is Sign.ZERO or other is Sign.ZERO:
            return Sign.ZERO
        return Sign.POSITIVE if self is other else Sign.NEGATIVE

    @property
    def signum(self) -> int:
        """-1 / 0 / +1"""
        if self is Sign.POSITIVE:
            return 1
        if self is Sign.NEGATIVE:
            return -1
        return 0
