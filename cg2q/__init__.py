"""
cg2q - точна планарна обчислювальна геометрія над раціональними числами.
Предикати, опукла оболонка (послідовна і fork-join) та мінімальне охоплююче коло.
"""

__version__ = "0.1.0"

from cg2q.rational import Q, ZERO, ONE, TWO
from cg2q.exceptions import (
    GeometryError, NonFiniteInput, DivisionByZero, NegativeRadius,
    DegenerateInputError, CollinearPoints, InsufficientPointsError, EmptyPointSet,
)
from cg2q.geom import Pt, Vec, Pt3, Vec3, xy_key, yx_key, centroid, unique_points
from cg2q.predicates import det2x2, det3x3, det4x4, orient2d, orient3d, incircle
from cg2q.hull import ConvexHull2Q, convex_hull, hull_vertices
from cg2q.parallel import parallel_convex_hull, default_workers
from cg2q.circle import (
    Circle, circle_from_center_r2, circle_from_diameter, circle_from_three_points, side_of,
)
from cg2q.mincircle import min_enclosing_circle, parallel_min_enclosing_circle, circle_of_hull
from cg2q.pipeline import enclose, points_from_array, points_to_array

__all__ = [
    "Q", "ZERO", "ONE", "TWO",
    "GeometryError", "NonFiniteInput", "DivisionByZero", "NegativeRadius",
    "DegenerateInputError", "CollinearPoints", "InsufficientPointsError", "EmptyPointSet",
    "Pt", "Vec", "Pt3", "Vec3", "xy_key", "yx_key", "centroid", "unique_points",
    "det2x2", "det3x3", "det4x4", "orient2d", "orient3d", "incircle",
    "ConvexHull2Q", "convex_hull", "hull_vertices",
    "parallel_convex_hull", "default_workers",
    "Circle", "circle_from_center_r2", "circle_from_diameter", "circle_from_three_points", "side_of",
    "min_enclosing_circle", "parallel_min_enclosing_circle", "circle_of_hull",
    "enclose", "points_from_array", "points_to_array",
    "__version__",
]
