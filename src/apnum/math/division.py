"""
Division Engine — деление Digit Vector с остатком

Knuth, TAOCP Vol. 2, §4.3.1:
- Algorithm D: деление многоразрядного на многоразрядное (long division)
- Exercise 16: деление на одну цифру (short division), O(n)

Деление на ноль — нарушение предусловия (ошибка программиста), а не
восстанавливаемая ситуация: вызывается ZeroDivisionError.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dividend == quotient * divisor + remainder, 0 <= remainder < divisor
2. Остаток денормализации (D8) всегда делится на d без остатка
3. Окно u[j..j+n] после шага D4-D6 помещается ровно в n+1 цифр
"""

import logging
from typing import Sequence

from src.apnum.math.digits import BASE, compare, ensure, normalize
from src.apnum.math.magnitude import mul_digit, sub
from src.apnum.math.sign import Sign

logger = logging.getLogger(__name__)


# =============================================================================
# SHORT DIVISION (делитель из одной цифры)
# =============================================================================


def short_divmod(digits: Sequence[int], divisor: int) -> tuple[list[int], int]:
    """
    Деление Digit Vector на одну цифру.

    Линейный проход от старшей цифры к младшей:
        digit_q = (carry * BASE + u[i]) // v
        carry   = (carry * BASE + u[i]) %  v

    Args:
        digits: Канонический Digit Vector (делимое)
        divisor: Делитель в (0, BASE)

    Returns:
        (quotient, remainder): канонический Digit Vector и int в [0, divisor)

    Raises:
        ZeroDivisionError: если divisor == 0
        ValueError: если divisor не помещается в одну цифру

    Examples:
        >>> short_divmod([1234], 10)
        ([123], 4)
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero magnitude")
    if not 0 < divisor < BASE:
        raise ValueError(f"Short division requires a single-digit divisor, got {divisor}")

    if divisor == 1:
        return list(digits), 0

    quotient: list[int] = []
    remainder = 0
    for position in range(len(digits) - 1, -1, -1):
        digit, remainder = divmod(remainder * BASE + digits[position], divisor)
        quotient.append(digit)

    quotient.reverse()
    return normalize(quotient), remainder


# =============================================================================
# LONG DIVISION (Algorithm D)
# =============================================================================


def long_divmod(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Knuth, Algorithm D: деление (n+m)-разрядного u на n-разрядный v.

    Шаги:
        D1 [Normalize]      u, v *= d, чтобы старшая цифра v была >= BASE/2;
                            к u дописывается нулевая цифра для переноса
        D2 [Initialize j]   j = m
        D3 [Calculate qh]   оценка цифры частного по двум старшим цифрам окна
                            и коррекция по v[n-2]
        D4 [Multiply/sub]   окно u[j..j+n] -= qh * v
        D5/D6 [Add back]    пока разность отрицательна: qh -= 1, окно += v
        D7 [Loop on j]
        D8 [Unnormalize]    остаток = u[0..n-1] / d

    Шаг D5 реализован циклом, а не однократной проверкой: цикл остаётся
    корректным, даже если оценка qh ошибается больше чем на единицу.

    Args:
        dividend: Канонический Digit Vector
        divisor: Канонический ненулевой Digit Vector

    Returns:
        (quotient, remainder): оба канонические

    Raises:
        ZeroDivisionError: если divisor пустой
        ArithmeticInvariantError: при нарушении внутренних инвариантов
    """
    if not divisor:
        raise ZeroDivisionError("division by zero magnitude")

    n = len(divisor)
    m = len(dividend) - n
    if m < 0:
        return [], list(dividend)

    # D1 [Normalize.]
    # d = floor(BASE / (v[n-1] + 1)) не переполняет v: len(v * d) == n
    scale = BASE // (divisor[n - 1] + 1)
    u = mul_digit(list(dividend) + [0], scale)
    v = mul_digit(divisor, scale)
    ensure(len(u) == n + m + 1, "normalized dividend must keep n+m+1 digits")
    ensure(len(v) == n, "normalized divisor must keep n digits")

    v_top = v[n - 1]
    v_next = v[n - 2] if n > 1 else 0

    # D2 [Initialize j.]
    quotient: list[int] = []
    for j in range(m, -1, -1):
        # D3 [Calculate qh.]
        qh, rh = divmod(u[j + n] * BASE + u[j + n - 1], v_top)

        while qh >= BASE or (n > 1 and qh * v_next > BASE * rh + u[j + n - 2]):
            qh -= 1
            rh += v_top
            if rh >= BASE:
                break

        # D4 [Multiply and subtract.]
        window = normalize(u[j : j + n + 1])
        sign, rest = sub(window, mul_digit(v, qh))

        # D5 [Test remainder.] / D6 [Add back.]
        add_backs = 0
        while sign is Sign.NEGATIVE:
            qh -= 1
            add_backs += 1
            # window - qh*v < 0: прибавляем v к отрицательной разности
            sign, rest = sub(v, rest)

        if add_backs:
            logger.debug(
                "Algorithm D add-back at j=%d: %d correction(s), qh=%d", j, add_backs, qh
            )

        ensure(len(rest) <= n + 1, "corrected window must fit into n+1 digits")
        u[j : j + n + 1] = rest + [0] * (n + 1 - len(rest))

        quotient.append(qh)

    # D8 [Unnormalize.]
    remainder, leftover = short_divmod(normalize(u[:n]), scale)
    ensure(leftover == 0, "unnormalized remainder must divide evenly by the scale factor")

    quotient.reverse()
    return normalize(quotient), remainder


# =============================================================================
# DISPATCH
# =============================================================================


def divmod_digits(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Деление с остатком двух Digit Vector.

    Короткие пути:
    - divisor == 1         → (dividend, 0)
    - dividend < divisor   → (0, dividend)
    - dividend == divisor  → (1, 0)
    - len(divisor) == 1    → short division
    Иначе — Algorithm D.

    Raises:
        ZeroDivisionError: если divisor нулевой

    Examples:
        >>> divmod_digits([4100], [588])
        ([6], [572])
    """
    if not divisor:
        raise ZeroDivisionError("division by zero magnitude")

    if len(divisor) == 1 and divisor[0] == 1:
        return list(dividend), []

    order = compare(dividend, divisor)
    if order < 0:
        return [], list(dividend)
    if order == 0:
        return [1], []

    if len(divisor) == 1:
        quotient, remainder = short_divmod(dividend, divisor[0])
        return quotient, [remainder] if remainder else []

    return long_divmod(dividend, divisor)
