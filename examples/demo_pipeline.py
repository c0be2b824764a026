# examples/demo_pipeline.py
import logging
import random

from cg2q.pipeline import enclose

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    square = [
        (0, 0), (2, 0), (2, 2), (0, 2),
        (1, 1), (0.5, 0.25), (1.75, 1.5),
    ]

    pts, lower, upper, circle = enclose(square, workers=2, rng=random.Random(7))
    print("Vertices:", len(pts))
    print("Hull:", len(lower) + len(upper) - 2)
    print("Center:", circle.center, "r2:", circle.r2, "~", circle.r2.float_string(6))
