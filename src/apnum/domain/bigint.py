"""
BigInt — целое число произвольной точности со знаком

Immutable Pydantic модель: тег знака (Sign) + модуль (BigNat).

Каждая знаковая операция сводится к разбору комбинаций знаков и делегирует
вычисления движку модулей (magnitude) или делению (division).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sign == ZERO тогда и только тогда, когда модуль нулевой
2. Ровно одно представление нуля: BigInt(sign=ZERO, magnitude=BigNat())
3. Деление — с округлением к -∞ (floor), а не к нулю:
   a == q * b + r, знак r совпадает со знаком b (или r == 0)
"""

from typing import Iterable, Optional

from pydantic import BaseModel, Field, model_validator

from src.apnum.contracts.validators import Contract
from src.apnum.domain.bignat import BigNat
from src.apnum.domain.widths import (
    IntWidth,
    check_fits,
    fits_single_digit,
    is_machine_int,
)
from src.apnum.math import digits as dv
from src.apnum.math.division import divmod_digits, short_divmod
from src.apnum.math.magnitude import add, mul, sub
from src.apnum.math.radix import format_integer, parse_integer
from src.apnum.math.sign import Sign


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Целое число произвольной точности.

    Immutable модель (frozen=True). Все изменения создают новый экземпляр.
    """

    sign: Sign = Field(default=Sign.ZERO, description="Знак (positive/negative/zero)")
    magnitude: BigNat = Field(default_factory=BigNat, description="Модуль числа")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_zero_representation(self) -> "BigInt":
        """
        Проверка единственности представления нуля.

        sign == ZERO ⟺ magnitude == 0
        """
        if (self.sign is Sign.ZERO) != self.magnitude.is_zero():
            raise ValueError(
                f"sign {self.sign.value} is inconsistent with magnitude {self.magnitude}"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _of(cls, sign: Sign, digits: Iterable[int]) -> "BigInt":
        magnitude = BigNat(digits=tuple(digits))
        if magnitude.is_zero():
            return cls()
        return cls(sign=sign, magnitude=magnitude)

    @classmethod
    def zero(cls) -> "BigInt":
        return cls()

    @classmethod
    def one(cls) -> "BigInt":
        return cls(sign=Sign.POSITIVE, magnitude=BigNat.one())

    @classmethod
    def from_nat(cls, value: BigNat) -> "BigInt":
        """Знаковое представление натурального числа."""
        if value.is_zero():
            return cls()
        return cls(sign=Sign.POSITIVE, magnitude=value)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        if value < 0:
            return cls._of(Sign.NEGATIVE, dv.from_int(-value))
        return cls._of(Sign.POSITIVE, dv.from_int(value))

    @classmethod
    def from_machine(cls, value: int, width: IntWidth) -> "BigInt":
        """
        Конверсия машинного целого заданной ширины.

        Raises:
            OverflowError: Если value не помещается в width
        """
        return cls.from_int(check_fits(value, width))

    @classmethod
    def parse(cls, text: str) -> "BigInt":
        """
        Разбор десятичной строки с необязательным ведущим "-".

        Raises:
            APNumParseError: EMPTY ("" или "-") или INVALID
        """
        sign, digits = parse_integer(text)
        return cls._of(sign, digits)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "BigInt":
        """
        Загрузка из JSON с проверкой контракта bigint.

        Raises:
            jsonschema.ValidationError: Если документ нарушает контракт
                (в том числе знак не согласован с пустотой модуля)
            pydantic.ValidationError: Если старшая цифра модуля нулевая
        """
        return cls.model_validate(Contract.BIGINT.load(payload))

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.sign is Sign.ZERO

    def is_positive(self) -> bool:
        return self.sign is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def signum(self) -> int:
        return self.sign.signum

    def digit_count(self) -> int:
        return self.magnitude.digit_count()

    def abs(self) -> "BigInt":
        """Модуль числа как BigInt (неотрицательный)."""
        if self.is_negative():
            return BigInt(sign=Sign.POSITIVE, magnitude=self.magnitude)
        return self

    def to_machine(self, width: IntWidth) -> int:
        """
        Сужающая конверсия в машинное целое.

        Raises:
            OverflowError: Если значение не помещается в width
        """
        return check_fits(int(self), width)

    # -------------------------------------------------------------------------
    # Приведение операндов
    # -------------------------------------------------------------------------

    @classmethod
    def _coerce(cls, operand: object) -> Optional["BigInt"]:
        """Приведение BigInt / BigNat / int к BigInt (None → NotImplemented)."""
        if isinstance(operand, BigInt):
            return operand
        if isinstance(operand, BigNat):
            return cls.from_nat(operand)
        if is_machine_int(operand):
            return cls.from_int(operand)
        return None

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        if self.is_zero():
            return self
        return BigInt(sign=self.sign.flipped(), magnitude=self.magnitude)

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        return self.abs()

    def __add__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return _signed_sum(self, rhs)

    __radd__ = __add__

    def __sub__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return _signed_sum(self, -rhs)

    def __rsub__(self, other: object) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return _signed_sum(lhs, -self)

    def __mul__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._of(
            self.sign.product(rhs.sign), mul(self.magnitude.digits, rhs.magnitude.digits)
        )

    __rmul__ = __mul__

    def __divmod__(self, other: object):
        """
        Деление с округлением к -∞.

        BigInt / BigNat делитель → (BigInt, BigInt).
        int делитель → (BigInt, int); |делитель| из одной цифры идёт через
        short division.

        Examples:
            >>> divmod(BigInt.from_int(-1000), BigInt.from_int(900))
            (BigInt(-2), BigInt(800))

        Raises:
            ZeroDivisionError: Если делитель равен нулю
        """
        if is_machine_int(other):
            if other == 0:
                raise ZeroDivisionError("division by zero")
            if fits_single_digit(other):
                if self.is_zero():
                    return BigInt(), 0
                quotient, remainder = short_divmod(self.magnitude.digits, abs(other))
                divisor_sign = Sign.POSITIVE if other > 0 else Sign.NEGATIVE
                return _floor_adjust(
                    self.sign,
                    divisor_sign,
                    BigInt._of(Sign.POSITIVE, quotient),
                    remainder,
                    other,
                )

        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        quotient, remainder = _signed_divmod(self, rhs)
        if is_machine_int(other):
            return quotient, int(remainder)
        return quotient, remainder

    def __rdivmod__(self, other: object):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return _signed_divmod(lhs, self)

    def __floordiv__(self, other: object):
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __rfloordiv__(self, other: object):
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: object):
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __rmod__(self, other: object):
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _compare(self, other: object) -> Optional[int]:
        """
        Сравнение со знаком.

        NEGATIVE < ZERO < POSITIVE; при равных знаках сравниваются модули,
        для NEGATIVE порядок обращается. int из одной цифры сравнивается
        напрямую с единственной цифрой модуля.
        """
        if is_machine_int(other) and fits_single_digit(other):
            other_signum = (other > 0) - (other < 0)
            if self.sign.signum != other_signum:
                return 1 if self.sign.signum > other_signum else -1
            order = dv.compare_digit(self.magnitude.digits, abs(other))
            return -order if self.is_negative() else order

        rhs = self._coerce(other)
        if rhs is None:
            return None

        if self.sign is not rhs.sign:
            return 1 if self.sign.signum > rhs.sign.signum else -1
        if self.is_zero():
            return 0

        order = dv.compare(self.magnitude.digits, rhs.magnitude.digits)
        return -order if self.is_negative() else order

    def __eq__(self, other: object) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order == 0

    def __ne__(self, other: object) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order != 0

    def __lt__(self, other: object) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order < 0

    def __le__(self, other: object) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order <= 0

    def __gt__(self, other: object) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order > 0

    def __ge__(self, other: object) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order >= 0

    def __hash__(self) -> int:
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.sign.signum * int(self.magnitude)

    def __str__(self) -> str:
        return format_integer(self.sign, self.magnitude.digits)

    def __repr__(self) -> str:
        return f"BigInt({self})"


# =============================================================================
# РАЗБОР КОМБИНАЦИЙ ЗНАКОВ
# =============================================================================


def _signed_sum(left: BigInt, right: BigInt) -> BigInt:
    """
    Сложение со знаком.

    - один из операндов ноль → другой операнд
    - одинаковые знаки → сумма модулей, знак сохраняется
    - разные знаки → вычитание модулей (знак определяет sub)
    """
    if right.is_zero():
        return left
    if left.is_zero():
        return right

    if left.sign is right.sign:
        return BigInt._of(left.sign, add(left.magnitude.digits, right.magnitude.digits))

    if left.is_positive():
        sign, digits = sub(left.magnitude.digits, right.magnitude.digits)
    else:
        sign, digits = sub(right.magnitude.digits, left.magnitude.digits)
    return BigInt._of(sign, digits)


def _floor_adjust(dividend_sign: Sign, divisor_sign: Sign, quotient: BigInt, remainder, divisor):
    """
    Коррекция частного и остатка модулей под деление с округлением к -∞.

    (q, r) — результат деления модулей, dividend != 0:
        (+, +) → (q, r)
        (-, -) → (q, -r)
        (+, -) → (-q - 1, divisor + r)
        (-, +) → (-q - 1, divisor - r)
    Для разных знаков при r == 0 деление точное: (-q, 0).

    remainder и divisor — BigInt или int (fast path), тип сохраняется.
    """
    if dividend_sign is divisor_sign:
        if dividend_sign is Sign.POSITIVE:
            return quotient, remainder
        return quotient, -remainder

    if not remainder:
        return -quotient, remainder

    if dividend_sign is Sign.POSITIVE:
        return -quotient - 1, divisor + remainder
    return -quotient - 1, divisor - remainder


def _signed_divmod(dividend: BigInt, divisor: BigInt) -> tuple[BigInt, BigInt]:
    """Деление BigInt на BigInt с остатком (floor)."""
    if divisor.is_zero():
        raise ZeroDivisionError("division by zero")

    if dividend.is_zero():
        return BigInt(), BigInt()

    quotient, remainder = divmod_digits(dividend.magnitude.digits, divisor.magnitude.digits)

    return _floor_adjust(
        dividend.sign,
        divisor.sign,
        BigInt._of(Sign.POSITIVE, quotient),
        BigInt._of(Sign.POSITIVE, remainder),
        divisor,
    )
