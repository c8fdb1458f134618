"""
Radix Conversion — десятичный текст <-> Digit Vector

Грамматика:
    natural := digit+
    integer := ["-"] digit+
    digit   := "0" | "1" | ... | "9"

Разбор: ведущие нули игнорируются, значение вычисляется как позиционная
сумма result = result + digit * 10^position в основании BASE.

Форматирование: Knuth, TAOCP Vol. 2, §4.4, Method 1a — повторное деление
на 10 (short division), цифры собираются от младшей и разворачиваются.

Ошибки разбора — единственные восстанавливаемые ошибки библиотеки:
- EMPTY: после необязательного знака не осталось символов
- INVALID: недопустимый символ (включая второй "-")
"""

import logging
from enum import Enum
from typing import Final, Optional, Sequence

from src.apnum.math.division import short_divmod
from src.apnum.math.magnitude import add, mul_digit
from src.apnum.math.sign import Sign

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Основание текстового представления
DECIMAL_RADIX: Final[int] = 10

# Допустимые символы цифр (только ASCII, без Unicode-цифр)
DECIMAL_DIGITS: Final[str] = "0123456789"

# Префикс отрицательного числа
MINUS_SIGN: Final[str] = "-"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Вид ошибки разбора"""

    EMPTY = "empty"
    INVALID = "invalid"


class APNumParseError(ValueError):
    """
    Ошибка разбора десятичного текста.

    Attributes:
        kind: EMPTY или INVALID
        text: Исходный текст
        position: Индекс недопустимого символа (None для EMPTY)
    """

    def __init__(self, kind: ParseErrorKind, text: str, position: Optional[int] = None):
        self.kind = kind
        self.text = text
        self.position = position

        if kind is ParseErrorKind.EMPTY:
            message = f"Cannot parse number from empty input: {text!r}"
        else:
            message = f"Invalid character at position {position} in {text!r}"
        super().__init__(message)


# =============================================================================
# РАЗБОР
# =============================================================================


def _scan_digits(text: str, start: int) -> None:
    """Проверка, что text[start:] состоит только из десятичных цифр."""
    for position in range(start, len(text)):
        if text[position] not in DECIMAL_DIGITS:
            logger.debug("Rejecting %r: invalid character at position %d", text, position)
            raise APNumParseError(ParseErrorKind.INVALID, text, position)


def _evaluate(text: str, start: int) -> list[int]:
    """
    Позиционная сумма десятичных цифр text[start:] в основании BASE.

    Ведущие нули пропускаются; степень 10 накапливается по ходу.
    """
    while start < len(text) and text[start] == "0":
        start += 1

    result: list[int] = []
    power: list[int] = [1]
    for position in range(len(text) - 1, start - 1, -1):
        digit = ord(text[position]) - ord("0")
        result = add(result, mul_digit(power, digit))
        power = mul_digit(power, DECIMAL_RADIX)

    return result


def parse_natural(text: str) -> list[int]:
    """
    Разбор натурального числа.

    Args:
        text: Десятичная строка без знака

    Returns:
        Канонический Digit Vector

    Raises:
        APNumParseError: EMPTY для "", INVALID для любого не-цифрового символа
            (в том числе "-")

    Examples:
        >>> parse_natural("00005")
        [5]
        >>> parse_natural("000")
        []
    """
    if not text:
        logger.debug("Rejecting empty natural number input")
        raise APNumParseError(ParseErrorKind.EMPTY, text)

    _scan_digits(text, 0)
    return _evaluate(text, 0)


def parse_integer(text: str) -> tuple[Sign, list[int]]:
    """
    Разбор целого числа со знаком.

    Ведущий "-" задаёт знак и отбрасывается до разбора модуля.
    Нулевой модуль всегда даёт Sign.ZERO (включая "-0").

    Returns:
        (sign, digits)

    Raises:
        APNumParseError: EMPTY для "" и "-", INVALID для "--", "1-2" и т.п.

    Examples:
        >>> parse_integer("-42")
        (<Sign.NEGATIVE: 'negative'>, [42])
    """
    start = 1 if text.startswith(MINUS_SIGN) else 0
    if start >= len(text):
        logger.debug("Rejecting input without digits: %r", text)
        raise APNumParseError(ParseErrorKind.EMPTY, text)

    _scan_digits(text, start)
    digits = _evaluate(text, start)

    if not digits:
        return Sign.ZERO, digits
    return (Sign.NEGATIVE if start else Sign.POSITIVE), digits


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_natural(digits: Sequence[int]) -> str:
    """
    Десятичное представление Digit Vector.

    Examples:
        >>> format_natural([])
        '0'
        >>> format_natural([0, 1])
        '4294967296'
    """
    if not digits:
        return "0"

    chars: list[str] = []
    number = list(digits)
    while number:
        number, digit = short_divmod(number, DECIMAL_RADIX)
        chars.append(DECIMAL_DIGITS[digit])

    chars.reverse()
    return "".join(chars)


def format_integer(sign: Sign, digits: Sequence[int]) -> str:
    """Десятичное представление со знаком: ровно один "-" для отрицательных."""
    if sign is Sign.ZERO:
        return "0"

    text = format_natural(digits)
    if sign is Sign.NEGATIVE:
        return MINUS_SIGN + text
    return text
