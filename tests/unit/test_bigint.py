"""
Тесты для модели BigInt

В основном проверяют разбор комбинаций знаков: численные вычисления
опираются на движок модулей, который тестируется отдельно.

Проверяет:
1. Единственное представление нуля (валидатор модели)
2. Сложение / вычитание / умножение для всех комбинаций знаков
3. Деление с округлением к -∞
4. Сравнение и согласованность порядка с вычитанием
5. Взаимодействие с int и BigNat
"""

import random

import pytest
from pydantic import ValidationError

from src.apnum.domain import APNumParseError, BigInt, BigNat, IntWidth, ParseErrorKind, Sign


@pytest.fixture
def rng() -> random.Random:
    """Детерминированный генератор случайных чисел"""
    return random.Random(31337)


def big(value: int) -> BigInt:
    return BigInt.from_int(value)


def random_signed(rng: random.Random, max_bits: int = 160) -> int:
    return rng.getrandbits(rng.randint(0, max_bits)) * rng.choice([-1, 1])


# =============================================================================
# ТЕСТЫ МОДЕЛИ
# =============================================================================


class TestBigIntModel:
    """Тесты валидации и канонического нуля"""

    def test_zero(self) -> None:
        zero = BigInt.zero()
        assert zero.sign is Sign.ZERO
        assert zero.magnitude.digits == ()
        assert BigInt() == zero
        assert big(0) == zero

    def test_zero_sign_with_magnitude_rejected(self) -> None:
        with pytest.raises(ValidationError, match="inconsistent"):
            BigInt(sign=Sign.ZERO, magnitude=BigNat.one())

    def test_nonzero_sign_with_zero_magnitude_rejected(self) -> None:
        """Положительный или отрицательный ноль невозможен"""
        with pytest.raises(ValidationError):
            BigInt(sign=Sign.POSITIVE, magnitude=BigNat.zero())
        with pytest.raises(ValidationError):
            BigInt(sign=Sign.NEGATIVE)

    def test_frozen(self) -> None:
        value = big(5)
        with pytest.raises(ValidationError):
            value.sign = Sign.NEGATIVE

    def test_computed_zero_is_canonical(self, rng: random.Random) -> None:
        """Любой вычисленный ноль имеет Sign.ZERO и пустой модуль"""
        for _ in range(50):
            a = big(random_signed(rng))
            for result in (a - a, a + (-a), a * BigInt.zero(), BigInt.zero() * a):
                assert result.sign is Sign.ZERO
                assert result.magnitude.digits == ()

    def test_from_nat(self) -> None:
        assert BigInt.from_nat(BigNat.from_int(5)) == big(5)
        assert BigInt.from_nat(BigNat.zero()).is_zero()

    def test_queries(self) -> None:
        assert big(-3).is_negative()
        assert big(3).is_positive()
        assert big(-3).signum() == -1
        assert big(0).signum() == 0
        assert big(2**40).digit_count() == 2


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestBigIntAdd:
    """Тесты сложения"""

    def test_sign_combinations(self) -> None:
        assert BigInt.zero() + big(123) == big(123)
        assert big(321) + big(-296) == big(25)
        assert big(-321) + big(12) == big(-309)
        assert big(77) + big(-33) == big(44)
        assert big(-77) + big(-33) == big(-110)
        assert big(-5) + BigInt.zero() == big(-5)

    def test_additive_inverse(self, rng: random.Random) -> None:
        """a + (-a) == 0"""
        for _ in range(100):
            a = big(random_signed(rng))
            assert a + (-a) == BigInt.zero()


class TestBigIntSub:
    """Тесты вычитания"""

    def test_sign_combinations(self) -> None:
        x, y = big(100), big(-98)
        assert x - y == big(198)
        assert y - x == big(-198)
        assert x - x == BigInt.zero()

        x, y = big(4464), big(-18)
        assert x - y == big(4482)
        assert y - x == big(-4482)

    def test_with_zero(self) -> None:
        x = big(5)
        assert x - BigInt.zero() == big(5)
        assert BigInt.zero() - x == big(-5)
        assert BigInt.zero() - BigInt.zero() == BigInt.zero()


class TestBigIntMul:
    """Тесты умножения"""

    def test_sign_combinations(self) -> None:
        assert BigInt.zero() * big(123) == BigInt.zero()
        assert big(321) * big(-296) == big(-95016)
        assert big(-321) * big(12) == big(-3852)
        assert big(-77) * big(-33) == big(2541)


class TestBigIntNegation:
    """Тесты смены знака и модуля"""

    def test_neg(self) -> None:
        assert -big(5) == big(-5)
        assert -big(-5) == big(5)
        assert -BigInt.zero() == BigInt.zero()
        assert (-BigInt.zero()).sign is Sign.ZERO

    def test_abs(self) -> None:
        assert abs(big(-5)) == big(5)
        assert big(-5).abs() == big(5)
        assert abs(big(5)) == big(5)
        assert abs(BigInt.zero()) == BigInt.zero()

    def test_pos(self) -> None:
        assert +big(-5) == big(-5)


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestBigIntDivision:
    """Деление с округлением к -∞: остаток имеет знак делителя"""

    @pytest.mark.parametrize(
        "dividend, divisor, quotient, remainder",
        [
            (-1000, 900, -2, 800),
            (42, -10, -5, -8),
            (43, -2, -22, -1),
            (-789, -34, 23, -7),
            (789, -34, -24, -27),
            (0, 2, 0, 0),
            (1000, 900, 1, 100),
        ],
    )
    def test_sign_combinations(
        self, dividend: int, divisor: int, quotient: int, remainder: int
    ) -> None:
        assert divmod(big(dividend), big(divisor)) == (big(quotient), big(remainder))

    @pytest.mark.parametrize(
        "dividend, divisor", [(10, -5), (-10, 5), (-10, -5), (10, 5), (6, -3), (-6, 3)]
    )
    def test_exact_division(self, dividend: int, divisor: int) -> None:
        """Точное деление при разных знаках даёт нулевой остаток"""
        quotient, remainder = divmod(big(dividend), big(divisor))
        assert quotient == big(dividend // divisor)
        assert remainder == BigInt.zero()

    def test_division_identity(self, rng: random.Random) -> None:
        """q * b + r == a, знак r совпадает со знаком b (или r == 0)"""
        for _ in range(200):
            a = random_signed(rng)
            b = random_signed(rng, max_bits=100) or 1
            quotient, remainder = divmod(big(a), big(b))
            assert quotient * big(b) + remainder == big(a)
            assert remainder.is_zero() or remainder.sign is big(b).sign
            assert (int(quotient), int(remainder)) == divmod(a, b)

    def test_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divmod(big(5), BigInt.zero())
        with pytest.raises(ZeroDivisionError):
            divmod(big(5), 0)
        with pytest.raises(ZeroDivisionError):
            divmod(BigInt.zero(), BigInt.zero())

    def test_floordiv_and_mod(self) -> None:
        assert big(-1000) // big(900) == big(-2)
        assert big(-1000) % big(900) == big(800)


# =============================================================================
# ТЕСТЫ ВЗАИМОДЕЙСТВИЯ С int И BigNat
# =============================================================================


class TestBigIntInterop:
    """int и BigNat операнды приводятся к BigInt"""

    def test_arithmetic_with_int(self) -> None:
        assert big(5) + (-7) == big(-2)
        assert -7 + big(5) == big(-2)
        assert big(5) - 7 == big(-2)
        assert 7 - big(5) == big(2)
        assert big(-5) * 3 == big(-15)
        assert 3 * big(-5) == big(-15)

    def test_arithmetic_with_bignat(self) -> None:
        assert big(-5) + BigNat.from_int(3) == big(-2)
        assert BigNat.from_int(3) + big(-5) == big(-2)
        assert BigNat.from_int(3) - big(-5) == big(8)
        assert BigNat.from_int(3) * big(-5) == big(-15)

    @pytest.mark.parametrize(
        "dividend, divisor",
        [(-1000, 900), (42, -10), (43, -2), (-789, -34), (789, -34), (0, 7), (10, -5)],
    )
    def test_divmod_single_digit_int(self, dividend: int, divisor: int) -> None:
        """Делитель-int из одной цифры: short division, остаток — int"""
        quotient, remainder = divmod(big(dividend), divisor)
        assert (int(quotient), remainder) == divmod(dividend, divisor)
        assert isinstance(remainder, int)

    def test_divmod_large_int(self) -> None:
        quotient, remainder = divmod(big(-(10**30)), 10**12 + 39)
        assert (int(quotient), remainder) == divmod(-(10**30), 10**12 + 39)

    def test_rdivmod(self) -> None:
        assert divmod(-1000, big(900)) == (big(-2), big(800))
        assert -1000 // big(900) == big(-2)
        assert -1000 % big(900) == big(800)

    def test_divmod_by_bignat(self) -> None:
        assert divmod(big(-1000), BigNat.from_int(900)) == (big(-2), big(800))
        assert divmod(BigNat.from_int(1000), big(-900)) == (big(-2), big(-800))

    def test_single_digit_division_consistency(self, rng: random.Random) -> None:
        for _ in range(100):
            a = big(random_signed(rng))
            k = rng.randrange(1, 2**32) * rng.choice([-1, 1])
            q_fast, r_fast = divmod(a, k)
            q_full, r_full = divmod(a, big(k))
            assert q_fast == q_full
            assert r_fast == int(r_full)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            big(5) + "5"
        with pytest.raises(TypeError):
            big(5) * 2.0


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestBigIntComparison:
    """Тесты порядка NEGATIVE < ZERO < POSITIVE"""

    def test_cases(self) -> None:
        x, y = big(123), big(321)
        assert x < y
        assert -x < y
        x, y = big(123), big(21)
        assert x > y
        assert -x < -y
        x, y = big(4), big(4)
        assert x == y
        assert x > -y
        x, y = big(0), big(0)
        assert x == y
        assert x == -y
        x, y = big(0), big(4)
        assert x < y
        assert x > -y

    def test_compare_with_int(self) -> None:
        assert big(-5) < 0
        assert big(-5) < -4
        assert big(-5) > -6
        assert big(0) == 0
        assert big(5) >= 5
        assert big(-(2**40)) < -(2**33)
        assert big(2**40) == 2**40

    def test_ordering_consistent_with_sub(self, rng: random.Random) -> None:
        """a < b ⟺ (a - b) отрицательно"""
        for _ in range(200):
            a = big(random_signed(rng, max_bits=70))
            b = big(random_signed(rng, max_bits=70))
            assert (a < b) == (a - b).is_negative()
            assert (a == b) == (a - b).is_zero()

    def test_sorting_matches_int(self, rng: random.Random) -> None:
        values = [random_signed(rng, max_bits=80) for _ in range(50)]
        assert [int(v) for v in sorted(big(v) for v in values)] == sorted(values)

    def test_hash_matches_int(self) -> None:
        assert hash(big(-(2**70))) == hash(-(2**70))
        assert hash(big(7)) == hash(BigNat.from_int(7))


# =============================================================================
# ТЕСТЫ КОНВЕРСИЙ
# =============================================================================


class TestBigIntConversion:
    """Тесты разбора, форматирования и сужающих конверсий"""

    def test_parse(self) -> None:
        value = BigInt.parse("-9546970867456973047694867034678")
        assert value.sign is Sign.NEGATIVE
        assert value.magnitude.digits == (1443885622, 2721072739, 2146252237, 120)

    def test_parse_zero(self) -> None:
        assert BigInt.parse("00000").is_zero()
        assert BigInt.parse("-0").is_zero()

    def test_parse_errors(self) -> None:
        with pytest.raises(APNumParseError) as exc_info:
            BigInt.parse("-")
        assert exc_info.value.kind is ParseErrorKind.EMPTY
        with pytest.raises(APNumParseError) as exc_info:
            BigInt.parse("--")
        assert exc_info.value.kind is ParseErrorKind.INVALID

    def test_round_trip(self) -> None:
        assert str(BigInt.parse("00005")) == "5"
        assert str(BigInt.parse("-00120")) == "-120"
        assert str(BigInt.zero()) == "0"

    def test_repr(self) -> None:
        assert repr(big(-42)) == "BigInt(-42)"

    def test_int_and_bool(self) -> None:
        assert int(big(-(2**100))) == -(2**100)
        assert not BigInt.zero()
        assert big(-1)

    def test_from_machine(self) -> None:
        assert BigInt.from_machine(-128, IntWidth.I8) == big(-128)
        with pytest.raises(OverflowError):
            BigInt.from_machine(128, IntWidth.I8)

    def test_to_machine(self) -> None:
        assert big(-(2**63)).to_machine(IntWidth.I64) == -(2**63)
        assert big(2**31 - 1).to_machine(IntWidth.I32) == 2**31 - 1
        with pytest.raises(OverflowError):
            big(-1).to_machine(IntWidth.U32)
        with pytest.raises(OverflowError):
            big(2**31).to_machine(IntWidth.I32)
