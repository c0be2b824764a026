"""
Тести для cg2q.rational

Перевіряє:
1. Конструктори (int, float, дріб, рядок) і відмову на inf/NaN
2. Арифметику без втрати точності
3. Ділення й обернення нуля
4. Знак, порівняння, min/max
5. Рядкове представлення
"""
import math
from decimal import Decimal
from fractions import Fraction

import pytest

from cg2q.exceptions import DivisionByZero, GeometryError, NonFiniteInput
from cg2q.rational import ONE, TWO, ZERO, Q


# =============================================================================
# КОНСТРУКТОРИ
# =============================================================================


class TestConstruction:
    """Побудова Q"""

    def test_from_int(self) -> None:
        assert Q.from_int(7).fraction() == Fraction(7)
        assert Q.from_int(-3) == -3

    @pytest.mark.parametrize("bad", [2.5, 2.0, Fraction(5, 2), "2"])
    def test_from_int_rejects_non_integers(self, bad) -> None:
        """Дробове значення не обрізається до цілого"""
        with pytest.raises(TypeError):
            Q.from_int(bad)

    def test_from_int_accepts_numpy_integers(self) -> None:
        np = pytest.importorskip("numpy")
        assert Q.from_int(np.int64(-9)) == -9

    def test_from_float_is_exact(self) -> None:
        """0.1 зберігає точне двійкове значення, а не 1/10"""
        q = Q.from_float(0.1)
        assert q.fraction() == Fraction(0.1)
        assert q != Q.from_fraction(1, 10)
        assert Q.from_float(0.5) == Q.from_fraction(1, 2)

    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
    def test_from_float_rejects_non_finite(self, bad: float) -> None:
        with pytest.raises(NonFiniteInput):
            Q.from_float(bad)

    def test_non_finite_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Q.of(float("nan"))
        with pytest.raises(GeometryError):
            Q.of(Decimal("Infinity"))

    def test_from_fraction_normalizes(self) -> None:
        q = Q.from_fraction(6, -4)
        assert q.numerator == -3
        assert q.denominator == 2

    def test_from_fraction_zero_denominator(self) -> None:
        with pytest.raises(DivisionByZero):
            Q.from_fraction(1, 0)

    def test_of_string(self) -> None:
        assert Q.of("1/3") == Q.from_fraction(1, 3)
        assert Q.of(" -2 / 6 ") == Q.from_fraction(-1, 3)
        assert Q.of("0.25") == Q.from_fraction(1, 4)

    @pytest.mark.parametrize("text", ["inf", "-Infinity", "nan", " NaN ", "1/inf"])
    def test_of_string_rejects_non_finite(self, text: str) -> None:
        with pytest.raises(NonFiniteInput):
            Q.of(text)

    def test_of_rejects_unknown_type(self) -> None:
        with pytest.raises(TypeError):
            Q.of([1, 2])

    def test_default_is_zero(self) -> None:
        assert Q() == ZERO

    def test_constants(self) -> None:
        assert ZERO == 0 and ONE == 1 and TWO == 2
        assert ONE + ONE == TWO


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Точні операції"""

    def test_no_rounding(self) -> None:
        third = Q.from_fraction(1, 3)
        assert third + third + third == ONE
        assert Q.from_float(0.1) + Q.from_float(0.2) != Q.from_float(0.3)

    def test_operators_return_new_values(self) -> None:
        a = Q.from_fraction(3, 4)
        b = a + 1
        assert a == Q.from_fraction(3, 4)
        assert b == Q.from_fraction(7, 4)

    def test_mixed_operands(self) -> None:
        a = Q.from_fraction(1, 2)
        assert 1 - a == a
        assert 3 * a == Q.from_fraction(3, 2)
        assert 1 / a == TWO
        assert a * Fraction(2, 3) == Q.from_fraction(1, 3)

    def test_neg_abs(self) -> None:
        a = Q.from_fraction(-5, 7)
        assert -a == Q.from_fraction(5, 7)
        assert abs(a) == Q.from_fraction(5, 7)

    def test_inv(self) -> None:
        assert Q.from_fraction(-2, 5).inv() == Q.from_fraction(-5, 2)

    def test_inv_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            ZERO.inv()

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            ONE / ZERO
        with pytest.raises(ZeroDivisionError):
            ONE / 0
        with pytest.raises(DivisionByZero):
            5 / ZERO

    def test_huge_magnitudes(self) -> None:
        big = Q.from_int(10 ** 60)
        tiny = Q.from_fraction(1, 10 ** 60)
        assert (big + tiny) - big == tiny


# =============================================================================
# ЗНАК І ПОРІВНЯННЯ
# =============================================================================


class TestOrdering:
    """sign / cmp / min / max"""

    def test_sign(self) -> None:
        assert Q.from_int(-4).sign() == -1
        assert ZERO.sign() == 0
        assert Q.from_fraction(1, 10 ** 30).sign() == 1

    def test_cmp(self) -> None:
        a, b = Q.from_fraction(1, 3), Q.from_fraction(2, 6)
        assert a.cmp(b) == 0
        assert a.cmp(1) == -1
        assert ONE.cmp(a) == 1

    def test_min_max(self) -> None:
        a, b = Q.from_int(-1), Q.from_fraction(1, 2)
        assert a.min(b) == a
        assert a.max(b) == b

    def test_rich_comparisons(self) -> None:
        assert Q.from_fraction(1, 3) < Q.from_fraction(1, 2) <= Q.from_fraction(2, 4)
        assert Q.from_int(2) > 1
        assert sorted([TWO, ZERO, ONE]) == [ZERO, ONE, TWO]

    def test_hash_consistent_with_eq(self) -> None:
        assert hash(Q.from_fraction(2, 4)) == hash(Q.from_fraction(1, 2))
        assert len({Q.from_fraction(2, 4), Q.from_fraction(1, 2)}) == 1
        assert hash(Q.from_int(3)) == hash(3)

    def test_compare_with_nan_is_false(self) -> None:
        """Порівняння з NaN не кидає виняток, а дає False (окрім !=)"""
        assert (ONE == math.nan) is False
        assert (ONE != math.nan) is True
        assert not (ONE < math.nan) and not (ONE >= math.nan)
        assert (ZERO == Decimal("NaN")) is False

    def test_compare_with_infinity(self) -> None:
        assert ONE < math.inf
        assert Q.from_int(-10 ** 400) > -math.inf
        assert not (ONE >= math.inf)
        assert ONE < Decimal("Infinity")

    def test_arithmetic_with_non_finite_still_raises(self) -> None:
        with pytest.raises(NonFiniteInput):
            ONE + math.inf

    def test_int_truncates_toward_zero(self) -> None:
        assert int(Q.from_fraction(7, 2)) == 3
        assert int(Q.from_fraction(-7, 2)) == -3
        assert int(Q.from_int(10 ** 30)) == 10 ** 30


# =============================================================================
# РЯДКИ
# =============================================================================


class TestRendering:
    """str / repr / float_string"""

    def test_str(self) -> None:
        assert str(Q.from_fraction(-6, 4)) == "-3/2"
        assert str(Q.from_int(5)) == "5"
        assert repr(Q.from_fraction(1, 3)) == "Q(1/3)"

    def test_float_string(self) -> None:
        assert Q.from_fraction(1, 3).float_string(4) == "0.3333"
        assert Q.from_fraction(2, 3).float_string(4) == "0.6667"
        assert Q.from_fraction(-1, 8).float_string(2) == "-0.13"
        assert Q.from_int(7).float_string(0) == "7"
        assert Q.from_fraction(1, 4).float_string(2) == "0.25"

    def test_float_string_small_negative_rounds_to_zero(self) -> None:
        assert Q.from_fraction(-1, 1000).float_string(2) == "0.00"

    def test_float_string_negative_prec(self) -> None:
        with pytest.raises(ValueError):
            ONE.float_string(-1)
