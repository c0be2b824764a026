from cg2q.geom import Pt, unique_points
from cg2q.hull import ConvexHull2Q

if __name__ == "__main__":
    raw = [
        (0, 0), (2, 0), (2, 2), (0, 2),
        (1, 0), (1, 1), ("1/3", "2/3"), (0.5, 1.5), (2, 2),
    ]
    pts = unique_points(raw)
    hull = ConvexHull2Q(pts)

    print("LOWER:", " ".join(str(p) for p in hull.lower))
    print("UPPER:", " ".join(str(p) for p in hull.upper))
    print("VALIDATION:", hull.validate())
    print("contains (1/2,1/2):", hull.contains(Pt("1/2", "1/2")))
