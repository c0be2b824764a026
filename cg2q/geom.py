from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .rational import Q, ZERO, ONE, TWO, Scalar


def _setq(obj, **coords: Scalar) -> None:
    # frozen dataclass: координати зводимо до Q в обхід заборони присвоєння
    for name, value in coords.items():
        object.__setattr__(obj, name, Q.of(value))


@dataclass(frozen=True)
class Vec:
    """Вектор (зміщення) на площині з раціональними координатами."""
    x: Q
    y: Q

    def __post_init__(self):
        _setq(self, x=self.x, y=self.y)

    def __iter__(self):
        yield self.x; yield self.y

    def xy(self) -> Tuple[Q, Q]:
        return self.x, self.y

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)

    def __mul__(self, a: Scalar) -> Vec:
        a = Q.of(a)
        return Vec(a * self.x, a * self.y)

    __rmul__ = __mul__

    def __truediv__(self, a: Scalar) -> Vec:
        a = Q.of(a)
        return Vec(self.x / a, self.y / a)

    def dot(self, other: Vec) -> Q:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec) -> Q:
        """z-компонента векторного добутку (подвоєна орієнтована площа)."""
        return self.x * other.y - self.y * other.x

    def abs2(self) -> Q:
        """Квадрат евклідової норми."""
        return self.dot(self)

    def max_abs(self) -> Q:
        return abs(self.x).max(abs(self.y))

    def sum_abs(self) -> Q:
        return abs(self.x) + abs(self.y)

    def __str__(self) -> str:
        return f"<{self.x},{self.y}>"


@dataclass(frozen=True, order=True)
class Pt:
    """
    Точка площини. Природний порядок - xy (спершу x, потім y),
    бо поля порівнюються у порядку оголошення.
    """
    x: Q
    y: Q

    def __post_init__(self):
        _setq(self, x=self.x, y=self.y)

    def __iter__(self):
        yield self.x; yield self.y

    def xy(self) -> Tuple[Q, Q]:
        return self.x, self.y

    def __add__(self, u: Vec) -> Pt:
        if not isinstance(u, Vec):
            return NotImplemented
        return Pt(self.x + u.x, self.y + u.y)

    def __sub__(self, other):
        # p - q -> Vec; p - u -> Pt
        if isinstance(other, Pt):
            return Vec(self.x - other.x, self.y - other.y)
        if isinstance(other, Vec):
            return Pt(self.x - other.x, self.y - other.y)
        return NotImplemented

    def midpoint(self, other: Pt) -> Pt:
        return Pt((self.x + other.x) / TWO, (self.y + other.y) / TWO)

    def dist2(self, other: Pt) -> Q:
        return (self - other).abs2()

    def cmp_xy(self, other: Pt) -> int:
        c = self.x.cmp(other.x)
        return c if c != 0 else self.y.cmp(other.y)

    def cmp_yx(self, other: Pt) -> int:
        c = self.y.cmp(other.y)
        return c if c != 0 else self.x.cmp(other.x)

    # підйоми у 3D для предикатів вищої розмірності
    def lift0(self) -> Pt3:
        return Pt3(self.x, self.y, ZERO)

    def lift1(self) -> Pt3:
        return Pt3(self.x, self.y, ONE)

    def lift2(self) -> Pt3:
        """Підйом на параболоїд z = x² + y²."""
        return Pt3(self.x, self.y, self.x * self.x + self.y * self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Vec3:
    x: Q
    y: Q
    z: Q

    def __post_init__(self):
        _setq(self, x=self.x, y=self.y, z=self.z)

    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, a: Scalar) -> Vec3:
        a = Q.of(a)
        return Vec3(a * self.x, a * self.y, a * self.z)

    __rmul__ = __mul__

    def __truediv__(self, a: Scalar) -> Vec3:
        a = Q.of(a)
        return Vec3(self.x / a, self.y / a, self.z / a)

    def dot(self, other: Vec3) -> Q:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(self.y * other.z - self.z * other.y,
                    self.z * other.x - self.x * other.z,
                    self.x * other.y - self.y * other.x)

    def abs2(self) -> Q:
        return self.dot(self)

    def max_abs(self) -> Q:
        return abs(self.x).max(abs(self.y)).max(abs(self.z))

    def sum_abs(self) -> Q:
        return abs(self.x) + abs(self.y) + abs(self.z)

    def __str__(self) -> str:
        return f"<{self.x},{self.y},{self.z}>"


@dataclass(frozen=True, order=True)
class Pt3:
    """Точка простору; природний порядок - xyz."""
    x: Q
    y: Q
    z: Q

    def __post_init__(self):
        _setq(self, x=self.x, y=self.y, z=self.z)

    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def __add__(self, u: Vec3) -> Pt3:
        if not isinstance(u, Vec3):
            return NotImplemented
        return Pt3(self.x + u.x, self.y + u.y, self.z + u.z)

    def __sub__(self, other):
        if isinstance(other, Pt3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vec3):
            return Pt3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def midpoint(self, other: Pt3) -> Pt3:
        return Pt3((self.x + other.x) / TWO, (self.y + other.y) / TWO, (self.z + other.z) / TWO)

    def dist2(self, other: Pt3) -> Q:
        return (self - other).abs2()

    def cmp_xyz(self, other: Pt3) -> int:
        for a, b in zip(self, other):
            c = a.cmp(b)
            if c != 0:
                return c
        return 0

    def cmp_zyx(self, other: Pt3) -> int:
        for a, b in ((self.z, other.z), (self.y, other.y), (self.x, other.x)):
            c = a.cmp(b)
            if c != 0:
                return c
        return 0

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"


# ---------- вільні функції ----------
def sub(a, b):
    return a - b

def dot(a, b) -> Q:
    return a.dot(b)

def cross(a, b):
    return a.cross(b)

def norm2(a) -> Q:
    return a.abs2()

def xy_key(p: Pt) -> Tuple[Q, Q]:
    return (p.x, p.y)

def yx_key(p: Pt) -> Tuple[Q, Q]:
    return (p.y, p.x)

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = ZERO
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    return Pt(xs / n, ys / n)

def unique_points(points: Iterable) -> List[Pt]:
    """
    Точна дедуплікація (без квантування - координати раціональні).
    Приймає Pt або пари (x, y); порядок перших входжень зберігається.
    """
    seen: dict[Pt, None] = {}
    for p in points:
        if not isinstance(p, Pt):
            x, y = p
            p = Pt(x, y)
        seen.setdefault(p, None)
    return list(seen)
