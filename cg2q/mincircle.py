# cg2q/mincircle.py
"""
Мінімальне охоплююче коло: рандомізований інкрементальний алгоритм Вельцля,
застосований до вершин опуклої оболонки (внутрішні точки на коло не впливають).

Ref: E. Welzl, Smallest enclosing disks (balls and ellipsoids),
Lecture Notes in Computer Science 555, pp 359-370 (1991).
"""
from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence

from .circle import Circle
from .exceptions import EmptyPointSet
from .geom import Pt
from .hull import convex_hull, hull_vertices
from .parallel import DEFAULT_BACKEND, parallel_convex_hull

logger = logging.getLogger(__name__)


def min_enclosing_circle(points: Iterable[Pt], rng: Optional[random.Random] = None) -> Circle:
    """
    Найменше коло, що містить усі точки (на межі або всередині).
    rng - джерело перестановки; коректність від нього не залежить,
    лише очікуваний лінійний час.
    """
    lower, upper = convex_hull(points)
    return circle_of_hull(lower, upper, rng)


def parallel_min_enclosing_circle(
    workers: Optional[int],
    points: Iterable[Pt],
    rng: Optional[random.Random] = None,
    backend: str = DEFAULT_BACKEND,
) -> Circle:
    """Як min_enclosing_circle, але оболонка рахується parallel_convex_hull; сам Вельцль - послідовний."""
    lower, upper = parallel_convex_hull(workers, points, backend=backend)
    return circle_of_hull(lower, upper, rng)


def circle_of_hull(lower: List[Pt], upper: List[Pt], rng: Optional[random.Random] = None) -> Circle:
    """Мінімальне коло за вже готовими ланцюгами оболонки (спільні кінці відкидаються)."""
    return _mindisc0(hull_vertices(lower, upper), rng)


def _mindisc0(ps: List[Pt], rng: Optional[random.Random]) -> Circle:
    """Рівень 0: граничних точок ще не знаємо."""
    n = len(ps)
    if n == 0:
        raise EmptyPointSet("minimum enclosing circle of an empty point set")
    if n == 1:
        return Circle.from_diameter(ps[0], ps[0])
    if n == 2:
        return Circle.from_diameter(ps[0], ps[1])

    (rng or random).shuffle(ps)
    logger.debug("min circle: %d hull vertices", n)

    D = Circle.from_diameter(ps[0], ps[1])
    for k in range(2, n):
        if D.side_of(ps[k]) < 0:
            D = _mindisc1(ps[:k], ps[k])
    return D


def _mindisc1(ps: Sequence[Pt], q: Pt) -> Circle:
    """Рівень 1: q обов'язково лежить на колі."""
    D = Circle.from_diameter(ps[0], q)
    for k in range(1, len(ps)):
        if D.side_of(ps[k]) < 0:
            D = _mindisc2(ps[:k], ps[k], q)
    return D


def _mindisc2(ps: Sequence[Pt], q1: Pt, q2: Pt) -> Circle:
    """Рівень 2: q1 і q2 обидві на колі."""
    D = Circle.from_diameter(q1, q2)
    for p in ps:
        if D.side_of(p) < 0:
            D = Circle.from_three_points(q1, q2, p)
    return D
