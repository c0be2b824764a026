from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .circle import Circle
from .exceptions import NonFiniteInput
from .geom import Pt, unique_points
from .hull import Chain, convex_hull, hull_vertices
from .mincircle import circle_of_hull
from .parallel import DEFAULT_BACKEND, parallel_convex_hull
from .rational import Q

logger = logging.getLogger(__name__)


def points_from_array(arr) -> List[Pt]:
    """
    numpy-масив форми (n, 2) -> список Pt.
    Кожен float переводиться точно (двійкове значення зберігається), цілі - як є.
    """
    a = np.asarray(arr)
    if a.ndim != 2 or a.shape[1] != 2:
        raise ValueError(f"expected an array of shape (n, 2), got {a.shape}")
    if a.dtype.kind == "f" and not np.isfinite(a).all():
        raise NonFiniteInput("array contains inf or NaN")
    if a.dtype.kind in "iu":
        return [Pt(Q.from_int(int(x)), Q.from_int(int(y))) for x, y in a.tolist()]
    # tolist() дає вбудовані float/int - без проміжних округлень
    return [Pt(x, y) for x, y in a.tolist()]


def points_to_array(points: Iterable[Pt]) -> np.ndarray:
    """Список Pt -> float64 масив (n, 2); лише для відображення, точність втрачається."""
    coords = [(float(p.x), float(p.y)) for p in points]
    return np.array(coords, dtype=np.float64).reshape(-1, 2)


def enclose(
    points: Iterable,
    workers: Optional[int] = 1,
    rng: Optional[random.Random] = None,
    backend: str = DEFAULT_BACKEND,
) -> Tuple[List[Pt], Chain, Chain, Circle]:
    """
    Повний пайплайн:
      - прибирає дублікати точок (точно, без квантування);
      - будує опуклу оболонку (паралельно, якщо workers != 1);
      - рахує мінімальне охоплююче коло по вершинах оболонки.

    Повертає:
      pts    - унікальні точки у порядку перших входжень;
      lower  - нижній ланцюг оболонки;
      upper  - верхній ланцюг оболонки;
      circle - мінімальне охоплююче коло.
    """
    if isinstance(points, np.ndarray):
        points = points_from_array(points)
    pts: List[Pt] = unique_points(points)

    if workers == 1:
        lower, upper = convex_hull(pts)
    else:
        lower, upper = parallel_convex_hull(workers, pts, backend=backend)

    circle = circle_of_hull(lower, upper, rng)
    logger.info(
        "enclose: %d unique points, %d hull vertices, r2=%s",
        len(pts), len(hull_vertices(lower, upper)), circle.r2,
    )
    return pts, lower, upper, circle
