"""
Digit Vector — каноническое беззнаковое представление

Натуральное число хранится как список цифр в основании BASE = 2^32,
младшая цифра первой (least-significant-digit first).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра лежит в [0, BASE)
2. Старшая цифра никогда не равна нулю
3. Ноль представлен ТОЛЬКО пустым списком (единственное представление)

Модуль не знает о знаке. Все функции чистые: входные списки не изменяются.
"""

from typing import Final, Iterable, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Ширина одной цифры в битах
DIGIT_BITS: Final[int] = 32

# Основание позиционной системы
BASE: Final[int] = 1 << DIGIT_BITS

# Максимальное значение одной цифры (BASE - 1)
DIGIT_MAX: Final[int] = BASE - 1

# Маска младших DIGIT_BITS бит (эквивалент % BASE для неотрицательных)
DIGIT_MASK: Final[int] = DIGIT_MAX


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithmeticInvariantError(AssertionError):
    """
    Нарушение внутреннего инварианта арифметического движка.

    Никогда не вызывается корректным входом: означает ошибку в самом движке
    (например, недозаём при вычитании или ненулевой остаток денормализации).
    Проверки выполняются явно, а не через assert, чтобы не отключаться при -O.
    """

    pass


def ensure(condition: bool, message: str) -> None:
    """Проверка внутреннего инварианта."""
    if not condition:
        raise ArithmeticInvariantError(message)


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def normalize(digits: list[int]) -> list[int]:
    """
    Zero-normalization: удаление старших нулевых цифр.

    Мутирует и возвращает переданный список (используется только для
    свежих буферов, принадлежащих вызывающему коду).

    Examples:
        >>> normalize([8, 0, 0])
        [8]
        >>> normalize([0, 0])
        []
    """
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def is_canonical(digits: Sequence[int]) -> bool:
    """
    Проверка канонической формы: все цифры в [0, BASE), старшая ненулевая.

    Args:
        digits: Последовательность цифр (младшая первой)

    Returns:
        True если последовательность является валидным Digit Vector
    """
    if digits and digits[-1] == 0:
        return False
    return all(0 <= digit < BASE for digit in digits)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Структурное сравнение двух канонических Digit Vector.

    Сначала по количеству цифр, затем лексикографически от старшей цифры.

    Returns:
        -1 если left < right
         0 если left == right
        +1 если left > right

    Examples:
        >>> compare([1, 1], [5])
        1
        >>> compare([7, 2], [9, 2])
        -1
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1

    for position in range(len(left) - 1, -1, -1):
        left_digit = left[position]
        right_digit = right[position]
        if left_digit != right_digit:
            return -1 if left_digit < right_digit else 1

    return 0


def compare_digit(digits: Sequence[int], digit: int) -> int:
    """
    Сравнение Digit Vector с одной цифрой (fast path для машинных целых).

    Args:
        digits: Канонический Digit Vector
        digit: Значение в [0, BASE)

    Returns:
        -1 / 0 / +1 как в compare()
    """
    if len(digits) > 1:
        return 1

    value = digits[0] if digits else 0
    if value == digit:
        return 0
    return -1 if value < digit else 1


# =============================================================================
# КОНВЕРСИЯ С PYTHON int
# =============================================================================


def from_int(value: int) -> list[int]:
    """
    Конверсия неотрицательного Python int в Digit Vector.

    Raises:
        ValueError: Если value отрицательный

    Examples:
        >>> from_int(0)
        []
        >>> from_int(2**32 + 5)
        [5, 1]
    """
    if value < 0:
        raise ValueError(f"Digit vector cannot hold negative value: {value}")

    digits: list[int] = []
    while value:
        digits.append(value & DIGIT_MASK)
        value >>= DIGIT_BITS
    return digits


def to_int(digits: Iterable[int]) -> int:
    """Конверсия Digit Vector обратно в Python int."""
    result = 0
    for digit in reversed(list(digits)):
        result = (result << DIGIT_BITS) | digit
    return result


def from_digits(digits: Iterable[int]) -> list[int]:
    """
    Построение канонического Digit Vector из произвольной последовательности.

    Raises:
        ValueError: Если какая-либо цифра вне [0, BASE)
    """
    result = list(digits)
    for digit in result:
        if not 0 <= digit < BASE:
            raise ValueError(f"Digit {digit} outside of [0, {BASE})")
    return normalize(result)
