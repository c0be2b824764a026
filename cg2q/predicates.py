# cg2q/predicates.py
"""
Точні предикати над Q. Жодного eps: знак обчислюється без округлень,
тому «майже колінеарні» трійки класифікуються правильно.
"""
from __future__ import annotations

from .geom import Pt, Pt3
from .rational import Q


def det2x2(a: Q, b: Q, c: Q, d: Q) -> Q:
    """| a b |
       | c d |"""
    return a * d - b * c


def det3x3(a: Q, b: Q, c: Q,
           d: Q, e: Q, f: Q,
           g: Q, h: Q, i: Q) -> Q:
    # розклад за першим рядком
    return (a * det2x2(e, f, h, i)
            - b * det2x2(d, f, g, i)
            + c * det2x2(d, e, g, h))


def det4x4(a: Q, b: Q, c: Q, d: Q,
           e: Q, f: Q, g: Q, h: Q,
           i: Q, j: Q, k: Q, l: Q,
           m: Q, n: Q, o: Q, p: Q) -> Q:
    return (a * det3x3(f, g, h, j, k, l, n, o, p)
            - b * det3x3(e, g, h, i, k, l, m, o, p)
            + c * det3x3(e, f, h, i, j, l, m, n, p)
            - d * det3x3(e, f, g, i, j, k, m, n, o))


def orient2d(a: Pt, b: Pt, c: Pt) -> int:
    """
    Знак подвоєної орієнтованої площі трикутника (a, b, c):
      +1 проти годинникової стрілки, 0 колінеарні, -1 за годинниковою.
    """
    return det2x2(b.x - a.x, b.y - a.y, c.x - a.x, c.y - a.y).sign()


def orient3d(a: Pt3, b: Pt3, c: Pt3, d: Pt3) -> int:
    """Знак мішаного добутку (b-a, c-a, d-a); 0 - чотири точки компланарні."""
    ab, ac, ad = b - a, c - a, d - a
    return det3x3(ab.x, ab.y, ab.z,
                  ac.x, ac.y, ac.z,
                  ad.x, ad.y, ad.z).sign()


def incircle(a: Pt, b: Pt, c: Pt, d: Pt) -> int:
    """
    Чи лежить d всередині кола через a, b, c?
      +1 строго всередині, 0 на колі, -1 зовні.
    Знак нормується на орієнтацію (a, b, c); для колінеарної трійки - 0.
    Обчислюється через підйом на параболоїд: d всередині кола тоді й лише тоді,
    коли lift2(d) лежить під площиною через lift2(a), lift2(b), lift2(c).
    """
    ori = orient2d(a, b, c)
    if ori == 0:
        return 0
    la, lb, lc, ld = a.lift2(), b.lift2(), c.lift2(), d.lift2()
    # для CCW (a,b,c) точка всередині дає orient3d < 0
    return -orient3d(la, lb, lc, ld) * ori
