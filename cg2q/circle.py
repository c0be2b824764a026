from __future__ import annotations
from dataclasses import dataclass

from .exceptions import CollinearPoints, NegativeRadius
from .geom import Pt
from .predicates import det2x2, orient2d
from .rational import Q, TWO, Scalar


@dataclass(frozen=True)
class Circle:
    """
    Коло на площині: центр і квадрат радіуса (r2 >= 0).
    Радіус не добуваємо - квадрат лишається точним раціональним числом.
    """
    center: Pt
    r2: Q

    def __post_init__(self):
        r2 = Q.of(self.r2)
        if r2.sign() < 0:
            raise NegativeRadius(f"negative squared radius {r2}")
        object.__setattr__(self, "r2", r2)

    # ---------------- конструктори ----------------
    @classmethod
    def from_center_r2(cls, center: Pt, r2: Scalar) -> Circle:
        return cls(center, Q.of(r2))

    @classmethod
    def from_diameter(cls, a: Pt, b: Pt) -> Circle:
        """Коло з діаметром [a, b]; для a == b - коло нульового радіуса."""
        cen = a.midpoint(b)
        return cls(cen, a.dist2(cen))

    @classmethod
    def from_three_points(cls, a: Pt, b: Pt, c: Pt) -> Circle:
        """
        Описане коло трикутника (a, b, c).

        Колінеарна трійка - не помилка: повертаємо коло на найдовшому з відрізків,
        тобто найменше коло, що містить усі три точки. CollinearPoints лише тоді,
        коли всі три точки збігаються.
        """
        if orient2d(a, b, c) == 0:
            if a == b == c:
                raise CollinearPoints(f"all three points coincide at {a}")
            p, q = max(((a, b), (b, c), (c, a)), key=lambda pq: pq[0].dist2(pq[1]))
            return cls.from_diameter(p, q)

        # переносимо a в початок координат і розв'язуємо систему 2x2
        qx, qy = b.x - a.x, b.y - a.y
        rx, ry = c.x - a.x, c.y - a.y
        q2 = qx * qx + qy * qy
        r2 = rx * rx + ry * ry
        den = det2x2(qx, qy, rx, ry) * TWO
        dcx = det2x2(ry, qy, r2, q2) / den
        dcy = -(det2x2(rx, qx, r2, q2) / den)

        cen = Pt(a.x + dcx, a.y + dcy)
        return cls(cen, cen.dist2(a))

    # ---------------- запити ----------------
    def side_of(self, p: Pt) -> int:
        """
        -1 якщо p строго зовні,
         0 якщо p на колі,
        +1 якщо p строго всередині.
        """
        return self.r2.cmp(self.center.dist2(p))

    def contains(self, p: Pt) -> bool:
        return self.side_of(p) >= 0

    def __str__(self) -> str:
        return f"Circle(center={self.center}, r2={self.r2})"


def circle_from_center_r2(center: Pt, r2: Scalar) -> Circle:
    return Circle.from_center_r2(center, r2)


def circle_from_diameter(a: Pt, b: Pt) -> Circle:
    return Circle.from_diameter(a, b)


def circle_from_three_points(a: Pt, b: Pt, c: Pt) -> Circle:
    return Circle.from_three_points(a, b, c)


def side_of(circle: Circle, p: Pt) -> int:
    return circle.side_of(p)
