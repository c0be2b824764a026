# cg2q/rational.py
"""
Q - раціональне число довільної точності (обгортка над fractions.Fraction).

Інваріанти:
  - знаменник > 0, дріб завжди нескоротний (це гарантує Fraction);
  - значення незмінне, кожна операція повертає нове число;
  - порядок і рівність визначаються числовим значенням.
"""
from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Union

from .exceptions import DivisionByZero, NonFiniteInput

Scalar = Union["Q", int, Fraction, float, Decimal, str]
_NON_FINITE = ("inf", "infinity", "nan", "snan")


@dataclass(frozen=True, eq=False)
class Q:
    r: Fraction = Fraction(0)

    def __post_init__(self):
        if isinstance(self.r, Fraction):
            return
        if isinstance(self.r, int):
            object.__setattr__(self, "r", Fraction(self.r))
            return
        raise TypeError(f"Q expects int or Fraction, got {type(self.r).__name__}")

    # ---------------- конструктори ----------------
    @classmethod
    def from_int(cls, n: int) -> Q:
        # operator.index: 2.5 не ціле, а не «майже 2»
        return cls(Fraction(operator.index(n)))

    @classmethod
    def from_float(cls, f: float) -> Q:
        """Точне значення двійкового float (0.1 -> 3602879701896397/36028797018963968)."""
        f = float(f)
        if not math.isfinite(f):
            raise NonFiniteInput(f"cannot build a rational from {f!r}")
        return cls(Fraction(f))

    @classmethod
    def from_fraction(cls, num: Union[int, Fraction], den: Union[int, Fraction] = 1) -> Q:
        if den == 0:
            raise DivisionByZero(f"zero denominator in {num}/{den}")
        return cls(Fraction(num) / Fraction(den))

    @classmethod
    def of(cls, value: Scalar) -> Q:
        """Загальне зведення до Q: Q, int, Fraction, скінченний float/Decimal, рядок "p/q"."""
        if isinstance(value, Q):
            return value
        if isinstance(value, numbers.Integral):
            return cls.from_int(int(value))
        if isinstance(value, numbers.Rational):
            return cls.from_fraction(value.numerator, value.denominator)
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value))
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise NonFiniteInput(f"cannot build a rational from {value!r}")
            return cls(Fraction(value))
        if isinstance(value, str):
            num, _, den = value.partition("/")
            if any(s.strip().lower().lstrip("+-") in _NON_FINITE for s in (num, den)):
                raise NonFiniteInput(f"cannot build a rational from {value!r}")
            if den:
                return cls.from_fraction(Fraction(num.strip()), Fraction(den.strip()))
            return cls(Fraction(value.strip()))
        raise TypeError(f"cannot convert {type(value).__name__} to Q")

    # ---------------- арифметика ----------------
    def __neg__(self) -> Q:
        return Q(-self.r)

    def __pos__(self) -> Q:
        return self

    def __abs__(self) -> Q:
        return Q(abs(self.r))

    def inv(self) -> Q:
        if self.r == 0:
            raise DivisionByZero("inverse of zero")
        return Q(1 / self.r)

    def __add__(self, other) -> Q:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Q(self.r + o.r)

    __radd__ = __add__

    def __sub__(self, other) -> Q:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Q(self.r - o.r)

    def __rsub__(self, other) -> Q:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Q(o.r - self.r)

    def __mul__(self, other) -> Q:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Q(self.r * o.r)

    __rmul__ = __mul__

    def __truediv__(self, other) -> Q:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if o.r == 0:
            raise DivisionByZero(f"{self} / 0")
        return Q(self.r / o.r)

    def __rtruediv__(self, other) -> Q:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if self.r == 0:
            raise DivisionByZero(f"{o} / 0")
        return Q(o.r / self.r)

    # ---------------- знак і порівняння ----------------
    def sign(self) -> int:
        """-1, 0 або +1."""
        if self.r > 0:
            return 1
        if self.r < 0:
            return -1
        return 0

    def cmp(self, other: Scalar) -> int:
        o = Q.of(other)
        if self.r < o.r:
            return -1
        if self.r > o.r:
            return 1
        return 0

    def min(self, other: Scalar) -> Q:
        o = Q.of(other)
        return self if self.r <= o.r else o

    def max(self, other: Scalar) -> Q:
        o = Q.of(other)
        return self if self.r >= o.r else o

    def __eq__(self, other) -> bool:
        o = _cmp_operand(other)
        if o is None:
            return NotImplemented
        return self.r == o

    def __hash__(self) -> int:
        return hash(self.r)

    def __lt__(self, other) -> bool:
        o = _cmp_operand(other)
        if o is None:
            return NotImplemented
        return self.r < o

    def __le__(self, other) -> bool:
        o = _cmp_operand(other)
        if o is None:
            return NotImplemented
        return self.r <= o

    def __gt__(self, other) -> bool:
        o = _cmp_operand(other)
        if o is None:
            return NotImplemented
        return self.r > o

    def __ge__(self, other) -> bool:
        o = _cmp_operand(other)
        if o is None:
            return NotImplemented
        return self.r >= o

    def __bool__(self) -> bool:
        return self.r != 0

    # ---------------- експорт ----------------
    @property
    def numerator(self) -> int:
        return self.r.numerator

    @property
    def denominator(self) -> int:
        return self.r.denominator

    def fraction(self) -> Fraction:
        return self.r

    def __float__(self) -> float:
        # лише для відображення; в алгоритмах не використовується
        return float(self.r)

    def __int__(self) -> int:
        # відкидання дробової частини в бік нуля, як int(Fraction)
        return int(self.r)

    def float_string(self, prec: int = 10) -> str:
        """
        Десятковий запис з prec знаками після коми.
        Остання цифра округлюється до найближчої, половини - від нуля.
        """
        if prec < 0:
            raise ValueError(f"prec must be non-negative, got {prec}")
        num, den = self.r.numerator, self.r.denominator
        q, rem = divmod(abs(num) * 10 ** prec, den)
        if 2 * rem >= den:
            q += 1
        sign = "-" if num < 0 and q != 0 else ""
        if prec == 0:
            return f"{sign}{q}"
        digits = str(q).rjust(prec + 1, "0")
        return f"{sign}{digits[:-prec]}.{digits[-prec:]}"

    def __str__(self) -> str:
        return str(self.r)

    def __repr__(self) -> str:
        return f"Q({self.r})"


def _coerce(value) -> Optional[Q]:
    """Зведення операнда арифметики; None - тип не підтримується (рядки теж ні)."""
    if isinstance(value, Q):
        return value
    if isinstance(value, (numbers.Real, Decimal)):
        return Q.of(value)
    return None


def _cmp_operand(value) -> Optional[Union[Fraction, float]]:
    """
    Операнд порівняння. Нескінченності й NaN не зводимо до Q (це помилка),
    а порівнюємо як float: Fraction упорядковується відносно них коректно.
    """
    if isinstance(value, Decimal) and not value.is_finite():
        return math.nan if value.is_nan() else float(value)
    if isinstance(value, numbers.Real) and not isinstance(value, (Q, numbers.Rational)):
        f = float(value)
        if not math.isfinite(f):
            return f
    o = _coerce(value)
    return None if o is None else o.r


ZERO = Q(Fraction(0))
ONE = Q(Fraction(1))
TWO = Q(Fraction(2))
