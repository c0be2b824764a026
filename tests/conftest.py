import random

import pytest

from cg2q.geom import Pt


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240517)


@pytest.fixture
def square():
    return [Pt(0, 0), Pt(2, 0), Pt(2, 2), Pt(0, 2)]


@pytest.fixture
def cloud(rng):
    """200 точок з цілими координатами, з дублікатами і колінеарними серіями."""
    pts = [Pt(rng.randint(-50, 50), rng.randint(-50, 50)) for _ in range(180)]
    pts += [Pt(k, 0) for k in range(-60, 61, 12)]
    pts += pts[:10]
    return pts


@pytest.fixture
def rational_cloud(rng):
    """Точки з дробовими координатами, включно з дуже малими знаменниками і великими чисельниками."""
    pts = []
    for _ in range(120):
        x = f"{rng.randint(-10**12, 10**12)}/{rng.randint(1, 997)}"
        y = f"{rng.randint(-10**12, 10**12)}/{rng.randint(1, 997)}"
        pts.append(Pt(x, y))
    return pts
