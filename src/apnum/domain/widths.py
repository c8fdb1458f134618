"""
Machine Integer Widths — взаимодействие с целыми фиксированной ширины

В Python нет u8/i32/u64 как отдельных типов, поэтому ширина задаётся явно
через IntWidth. Все операторы BigNat/BigInt принимают обычный int и
приводят его к внутреннему представлению одной общей функцией, вместо
отдельной реализации на каждый тип.

Единственный допустимый способ проверки диапазона машинного целого:
check_fits(value, width).
"""

from enum import Enum

from src.apnum.math.digits import BASE


# =============================================================================
# ENUMS
# =============================================================================


class IntWidth(str, Enum):
    """Поддерживаемые машинные целые (ширина × знаковость)"""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"

    @property
    def bits(self) -> int:
        """Ширина в битах"""
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        """True для знаковых типов (дополнительный код)"""
        return self.value.startswith("i")

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_machine_int(value: object) -> bool:
    """
    Является ли значение целым операндом (int, но не bool).

    bool — подкласс int в Python, но как арифметический операнд отвергается.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def fits_single_digit(value: int) -> bool:
    """Помещается ли |value| в одну цифру Digit Vector (fast path)."""
    return -BASE < value < BASE


def check_fits(value: int, width: IntWidth) -> int:
    """
    Проверка, что значение представимо в заданной ширине.

    Args:
        value: Целое значение
        width: Целевая машинная ширина

    Returns:
        value без изменений

    Raises:
        OverflowError: Если value вне [width.min_value, width.max_value]

    Examples:
        >>> check_fits(255, IntWidth.U8)
        255
        >>> check_fits(-1, IntWidth.U8)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        OverflowError: ...
    """
    if not width.min_value <= value <= width.max_value:
        raise OverflowError(
            f"Value {value} does not fit into {width.value} "
            f"[{width.min_value}, {width.max_value}]"
        )
    return value
