from __future__ import annotations
from typing import Dict, Iterable, List, Tuple

from .geom import Pt
from .predicates import orient2d

Chain = List[Pt]


def _noccw(chain: Chain, p: Pt) -> bool:
    """(chain[-2], chain[-1], p) не утворюють строгого лівого повороту."""
    return orient2d(chain[-2], chain[-1], p) <= 0


def _build_chain(ps: Iterable[Pt]) -> Chain:
    chain: Chain = []
    for p in ps:
        while len(chain) > 1 and _noccw(chain, p):
            chain.pop()
        chain.append(p)
    # виродження: ланцюг з двох однакових точок
    if len(chain) == 2 and chain[0] == chain[1]:
        chain.pop()
    return chain


def convex_hull(points: Iterable[Pt]) -> Tuple[Chain, Chain]:
    """
    Опукла оболонка на площині: алгоритм Грехема з модифікацією Ендрю (monotone chain).

    Вхід: будь-яка скінченна колекція Pt (дублікати й колінеарні серії дозволені).
    Колекцію викликача не змінюємо - сортуємо власну копію у xy-порядку.

    Повертає (lower, upper):
      lower - від найлівішої до найправішої точки,
      upper - від найправішої назад до найлівішої;
    обидва ланцюги йдуть проти годинникової стрілки, колінеарні внутрішні точки ребер
    відкинуто. Для 0 точок - ([], []), для 1 точки - ([p], [p]).

    Ref: A.M. Andrew, Another efficient algorithm for convex hulls in two dimensions,
    Inform. Process. Lett., 9:216-219 (1979).
    """
    ps: List[Pt] = sorted(points)  # Pt упорядковується за (x, y)
    n = len(ps)
    if n == 0:
        return [], []
    if n == 1:
        return [ps[0]], [ps[0]]
    lower = _build_chain(ps)
    upper = _build_chain(reversed(ps))
    return lower, upper


def hull_vertices(lower: Chain, upper: Chain) -> List[Pt]:
    """Цикл вершин проти годинникової стрілки без повторів спільних кінців ланцюгів."""
    out: List[Pt] = []
    for chain in (lower, upper):
        out.extend(chain[:-1] if len(chain) > 1 else chain)
    if len(out) == 2 and out[0] == out[1]:
        out.pop()
    return out


def _in_cycle(vs: List[Pt], p: Pt) -> bool:
    """p всередині або на межі опуклого CCW-циклу vs (включно з виродженими)."""
    if not vs:
        return False
    if len(vs) == 1:
        return p == vs[0]
    if len(vs) == 2:
        a, b = vs
        return orient2d(a, b, p) == 0 and min(a, b) <= p <= max(a, b)
    n = len(vs)
    return all(orient2d(vs[i], vs[(i + 1) % n], p) >= 0 for i in range(n))


class ConvexHull2Q:
    """
    Обгортка над convex_hull з діагностикою.

    Вхід: ітерована колекція Pt (може бути порожньою).
    Вихід: self.lower, self.upper - ланцюги; vertices() - цикл вершин CCW.
    """

    def __init__(self, points: Iterable[Pt]):
        self.P: List[Pt] = list(points)  # власна копія
        self.lower, self.upper = convex_hull(self.P)

    # ---------------- Публічний API ----------------
    def vertices(self) -> List[Pt]:
        return hull_vertices(self.lower, self.upper)

    def contains(self, p: Pt) -> bool:
        """p всередині або на межі оболонки."""
        return _in_cycle(self.vertices(), p)

    def __len__(self) -> int:
        return len(self.vertices())

    # ---------------- Діагностика ----------------
    def validate(self) -> Dict[str, object]:
        """
        Перевірка коректності:
          - кожен поворот циклу вершин строго лівий (немає колінеарних і ввігнутих вершин);
          - жодна вхідна точка не лежить строго зовні;
          - ланцюги мають спільні кінці (найлівіша і найправіша точки).
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        vs = self.vertices()
        n = len(vs)

        bad_turns: List[int] = []
        if n >= 3:
            for i in range(n):
                if orient2d(vs[i - 1], vs[i], vs[(i + 1) % n]) <= 0:
                    bad_turns.append(i)

        # цикл вершин будуємо один раз на всю перевірку
        outside = [p for p in self.P if not _in_cycle(vs, p)]

        bad_endpoints: List[str] = []
        if self.lower and self.upper:
            if self.lower[0] != self.upper[-1]:
                bad_endpoints.append("leftmost")
            if self.lower[-1] != self.upper[0]:
                bad_endpoints.append("rightmost")

        return {
            "vertices": n,
            "bad_turns": bad_turns,
            "outside_points": outside,
            "bad_endpoints": bad_endpoints,
        }
