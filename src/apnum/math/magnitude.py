"""
Magnitude Arithmetic Engine — сложение, вычитание и умножение Digit Vector

Операции над беззнаковыми модулями в основании BASE = 2^32:
- add: сложение с переносом (carry)
- sub: вычитание с заёмом (borrow), результат ЗНАКОВЫЙ: (Sign, digits)
- mul_digit: умножение на одну цифру
- mul: школьное умножение O(len(a) * len(b))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда канонический (без старших нулей, ноль = [])
2. Входные списки не изменяются
3. Промежуточные значения не выходят за удвоенную ширину цифры:
   digit + digit + carry < 2 * BASE
   digit * digit + carry < BASE^2
"""

from typing import Sequence

from src.apnum.math.digits import BASE, compare, ensure, normalize
from src.apnum.math.sign import Sign


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Сложение двух Digit Vector с распространением переноса.

    Длина результата не превышает max(len(left), len(right)) + 1.

    Examples:
        >>> add([2**32 - 1], [2**32 - 1])
        [4294967294, 1]
        >>> add([], [7])
        [7]
    """
    if not left:
        return list(right)
    if not right:
        return list(left)

    result: list[int] = []
    carry = 0
    for position in range(max(len(left), len(right))):
        left_digit = left[position] if position < len(left) else 0
        right_digit = right[position] if position < len(right) else 0

        # digit_sum ∈ [0, 2 * (BASE - 1) + 1], carry ∈ {0, 1}
        carry, digit = divmod(left_digit + right_digit + carry, BASE)
        result.append(digit)

    if carry:
        result.append(carry)

    return result


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub(left: Sequence[int], right: Sequence[int]) -> tuple[Sign, list[int]]:
    """
    Вычитание модулей. Разность двух натуральных чисел может быть
    отрицательной, поэтому результат — пара (знак, модуль).

    Алгоритм:
    1. Сравнение определяет bigger, smaller и знак результата
       (равные модули → ZERO)
    2. Поразрядное вычитание smaller из bigger с заёмом
    3. Канонизация модуля

    Returns:
        (sign, digits): знак разности и канонический модуль

    Raises:
        ArithmeticInvariantError: если после последней цифры остался заём

    Examples:
        >>> sub([100], [98])
        (<Sign.POSITIVE: 'positive'>, [2])
        >>> sub([98], [100])
        (<Sign.NEGATIVE: 'negative'>, [2])
    """
    order = compare(left, right)
    if order == 0:
        return Sign.ZERO, []

    if order > 0:
        bigger, smaller, sign = left, right, Sign.POSITIVE
    else:
        bigger, smaller, sign = right, left, Sign.NEGATIVE

    if not smaller:
        return sign, list(bigger)

    result: list[int] = []
    borrowed = 0
    for position in range(len(bigger)):
        left_digit = bigger[position] - borrowed
        right_digit = smaller[position] if position < len(smaller) else 0

        borrowed = 1 if left_digit < right_digit else 0
        if borrowed:
            left_digit += BASE

        # Без заёма: [0, BASE); с заёмом: BASE + x - y при x < y, тоже < BASE
        result.append(left_digit - right_digit)

    # bigger >= smaller, поэтому последняя позиция никогда не занимает
    ensure(not borrowed, "subtraction borrowed past the most significant digit")

    # (120 - 112) → [8, 0, 0] до нормализации
    return sign, normalize(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_digit(digits: Sequence[int], digit: int, shift: int = 0) -> list[int]:
    """
    Умножение Digit Vector на одну цифру со сдвигом на shift позиций.

    Сдвиг реализован дописыванием shift младших нулевых цифр.

    Args:
        digits: Канонический Digit Vector
        digit: Множитель в [0, BASE)
        shift: Количество позиций сдвига влево (в цифрах)

    Returns:
        Канонический Digit Vector digits * digit * BASE^shift
    """
    if not digits or digit == 0:
        return []

    product: list[int] = [0] * shift
    carry = 0
    for left_digit in digits:
        # digit_product ≤ (BASE - 1)^2 + (BASE - 2) < BASE^2, carry ≤ BASE - 2
        carry, low = divmod(left_digit * digit + carry, BASE)
        product.append(low)

    if carry:
        product.append(carry)

    return product


def mul(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Школьное умножение (schoolbook).

    Для каждой цифры right[j] вычисляется left * right[j] со сдвигом на j
    позиций, частичные произведения накапливаются через add().

    Нулевой операнд сразу даёт [], иначе 123 * 0 дало бы [0, 0, 0].

    Examples:
        >>> mul([2**32 - 1], [2**32 - 1])
        [1, 4294967294]
    """
    if not left or not right:
        return []

    result: list[int] = []
    for position, right_digit in enumerate(right):
        result = add(result, mul_digit(left, right_digit, shift=position))

    return normalize(result)
