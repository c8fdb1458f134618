"""
BigNat — натуральное число произвольной точности

Immutable Pydantic модель поверх Digit Vector (основание 2^32, младшая цифра
первой). Все операции чистые и возвращают новый экземпляр.

Операторы принимают BigNat или неотрицательный int (машинное целое) с любой
стороны. Вычитание возвращает BigInt, так как разность может быть
отрицательной. Деление: divmod(a, b) -> (частное, остаток).
"""

from typing import Iterable, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from src.apnum.contracts.validators import Contract
from src.apnum.domain.widths import IntWidth, check_fits, is_machine_int
from src.apnum.math import digits as dv
from src.apnum.math.division import divmod_digits, short_divmod
from src.apnum.math.magnitude import add, mul, sub
from src.apnum.math.radix import format_natural, parse_natural


# =============================================================================
# BIGNAT MODEL
# =============================================================================


class BigNat(BaseModel):
    """
    Натуральное число произвольной точности.

    Immutable модель (frozen=True). Инвариант канонической формы проверяется
    валидатором: ноль — только пустой кортеж digits.
    """

    digits: tuple[StrictInt, ...] = Field(
        default=(), description="Цифры в основании 2^32, младшая первой"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_canonical(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """
        Проверка канонической формы Digit Vector.

        Каждая цифра в [0, 2^32), старшая цифра ненулевая.
        """
        for digit in v:
            if not 0 <= digit < dv.BASE:
                raise ValueError(f"digit {digit} outside of [0, {dv.BASE})")
        if v and v[-1] == 0:
            raise ValueError("most significant digit must be nonzero (zero is ())")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _of(cls, digits: Iterable[int]) -> "BigNat":
        return cls(digits=tuple(digits))

    @classmethod
    def zero(cls) -> "BigNat":
        return cls()

    @classmethod
    def one(cls) -> "BigNat":
        return cls(digits=(1,))

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> "BigNat":
        """
        Построение из произвольной последовательности цифр (младшая первой).

        Старшие нули отбрасываются.

        Raises:
            ValueError: Если цифра вне [0, 2^32)
        """
        return cls._of(dv.from_digits(digits))

    @classmethod
    def from_int(cls, value: int) -> "BigNat":
        """
        Конверсия неотрицательного int.

        Raises:
            ValueError: Если value отрицательный
        """
        return cls._of(dv.from_int(value))

    @classmethod
    def from_machine(cls, value: int, width: IntWidth) -> "BigNat":
        """
        Конверсия машинного целого заданной ширины.

        Raises:
            OverflowError: Если value не помещается в width
            ValueError: Если value отрицательный
        """
        return cls.from_int(check_fits(value, width))

    @classmethod
    def parse(cls, text: str) -> "BigNat":
        """
        Разбор десятичной строки.

        Raises:
            APNumParseError: EMPTY или INVALID
        """
        return cls._of(parse_natural(text))

    @classmethod
    def from_json(cls, payload: str | bytes) -> "BigNat":
        """
        Загрузка из JSON с проверкой контракта bignat.

        Документ сначала проверяется JSON Schema, затем моделью (каноническая
        форма).

        Raises:
            jsonschema.ValidationError: Если документ нарушает контракт
            pydantic.ValidationError: Если старшая цифра нулевая

        Examples:
            >>> BigNat.from_json('{"digits": [5, 1]}')
            BigNat(4294967301)
        """
        return cls.model_validate(Contract.BIGNAT.load(payload))

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return not self.digits

    def digit_count(self) -> int:
        """Количество цифр в основании 2^32 (0 для нуля)."""
        return len(self.digits)

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
    def _coerce(cls, operand: object) -> Optional["BigNat"]:
        """
        Приведение операнда к BigNat.

        Returns:
            BigNat, либо None для неподдерживаемых типов (→ NotImplemented)

        Raises:
            ValueError: Если операнд — отрицательный int
        """
        if isinstance(operand, BigNat):
            return operand
        if is_machine_int(operand):
            return cls.from_int(operand)
        return None

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigNat":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._of(add(self.digits, rhs.digits))

    __radd__ = __add__

    def __sub__(self, other: object):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return _signed_difference(self, rhs)

    def __rsub__(self, other: object):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return _signed_difference(lhs, self)

    def __mul__(self, other: object) -> "BigNat":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._of(mul(self.digits, rhs.digits))

    __rmul__ = __mul__

    def __divmod__(self, other: object):
        """
        Деление с остатком.

        BigNat делитель → (BigNat, BigNat).
        int делитель → (BigNat, int); делитель из одной цифры идёт через
        short division.

        Raises:
            ZeroDivisionError: Если делитель равен нулю
        """
        if is_machine_int(other) and 0 < other < dv.BASE:
            quotient, remainder = short_divmod(self.digits, other)
            return self._of(quotient), remainder

        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        quotient, remainder = divmod_digits(self.digits, rhs.digits)
        if isinstance(other, BigNat):
            return self._of(quotient), self._of(remainder)
        return self._of(quotient), dv.to_int(remainder)

    def __rdivmod__(self, other: object):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return divmod(lhs, self)

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

    def pow(self, exponent: int) -> "BigNat":
        """
        Возведение в натуральную степень повторным умножением.

        Raises:
            ValueError: Если exponent отрицательный
        """
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")

        accumulator: list[int] = [1]
        for _ in range(exponent):
            accumulator = mul(accumulator, self.digits)
        return self._of(accumulator)

    def __pow__(self, exponent: object) -> "BigNat":
        if not is_machine_int(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __abs__(self) -> "BigNat":
        return self

    def __pos__(self) -> "BigNat":
        return self

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _compare(self, other: object) -> Optional[int]:
        if isinstance(other, BigNat):
            return dv.compare(self.digits, other.digits)
        if is_machine_int(other):
            if other < 0:
                return 1
            if other < dv.BASE:
                return dv.compare_digit(self.digits, other)
            return dv.compare(self.digits, dv.from_int(other))
        return None

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

    # Совпадает с hash(int), так как BigNat(5) == 5
    def __hash__(self) -> int:
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return bool(self.digits)

    def __int__(self) -> int:
        return dv.to_int(self.digits)

    def __str__(self) -> str:
        return format_natural(self.digits)

    def __repr__(self) -> str:
        return f"BigNat({self})"


def _signed_difference(left: BigNat, right: BigNat):
    """left - right как BigInt."""
    from src.apnum.domain.bigint import BigInt

    sign, digits = sub(left.digits, right.digits)
    return BigInt(sign=sign, magnitude=BigNat._of(digits))
