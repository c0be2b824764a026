# cg2q/parallel.py
"""
Паралельна опукла оболонка (fork-join).

Схема: вхід ділиться на суміжні блоки, оболонка кожного блоку рахується окремою
задачею, драйвер чекає на всі задачі (повний бар'єр), склеює їхні вершини в
порядку блоків і ще раз проганяє послідовний convex_hull по об'єднанню.
Глобально крайня точка є крайньою і у своєму блоці, тож повторна оболонка
вершин підоболонок дає точну глобальну оболонку.
"""
from __future__ import annotations

import logging
import os
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Tuple

from .geom import Pt
from .hull import Chain, convex_hull

logger = logging.getLogger(__name__)

DEFAULT_BACKEND = "thread"
_BACKENDS = ("thread", "process")


def default_workers() -> int:
    """
    Кількість робітників за замовчуванням - ядра, доступні цьому процесу
    (з урахуванням affinity і лімітів контейнера), а не всі ядра машини.
    """
    if hasattr(os, "process_cpu_count"):  # Python 3.13+
        return os.process_cpu_count() or 1
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0)) or 1
    return os.cpu_count() or 1


def resolve_workers(workers: Optional[int]) -> int:
    if workers is None or workers <= 0:
        return default_workers()
    return workers


def split_blocks(ps: Sequence[Pt], k: int) -> List[Sequence[Pt]]:
    """Розбити ps на k суміжних блоків, розміри яких відрізняються не більше ніж на 1."""
    if k <= 0:
        raise ValueError(f"block count must be positive, got {k}")
    n = len(ps)
    size, extra = divmod(n, k)
    blocks: List[Sequence[Pt]] = []
    start = 0
    for i in range(k):
        stop = start + size + (1 if i < extra else 0)
        blocks.append(ps[start:stop])
        start = stop
    return blocks


def _block_hull(block: Sequence[Pt]) -> List[Pt]:
    """Вершини оболонки одного блоку (обидва ланцюги разом)."""
    lower, upper = convex_hull(block)
    return lower + upper


def _make_executor(backend: str, workers: int) -> Executor:
    name = backend.lower()
    if name == "thread":
        return ThreadPoolExecutor(max_workers=workers)
    if name == "process":
        return ProcessPoolExecutor(max_workers=workers)
    raise ValueError(f"Unknown backend: {backend}")


def parallel_convex_hull(
    workers: Optional[int],
    points: Iterable[Pt],
    backend: str = DEFAULT_BACKEND,
) -> Tuple[Chain, Chain]:
    """
    Те саме, що convex_hull, але оболонки блоків рахуються паралельно.

    workers <= 0 або None - default_workers(). Якщо точок менше, ніж робітників,
    одразу працює послідовний алгоритм.
    backend: "thread" (ThreadPoolExecutor) або "process" (ProcessPoolExecutor).
    """
    if backend.lower() not in _BACKENDS:
        raise ValueError(f"Unknown backend: {backend}")
    k = resolve_workers(workers)
    ps: List[Pt] = list(points)
    if len(ps) < k:
        logger.debug("parallel hull: %d points < %d workers, serial fallback", len(ps), k)
        return convex_hull(ps)

    blocks = split_blocks(ps, k)
    logger.debug("parallel hull: %d points in %d blocks (%s backend)", len(ps), k, backend)

    with _make_executor(backend, k) as ex:
        # map повертає результати в порядку блоків; вихід з with - бар'єр
        sub_hulls = list(ex.map(_block_hull, blocks))

    merged: List[Pt] = [p for sub in sub_hulls for p in sub]
    logger.debug("parallel hull: re-hulling %d sub-hull vertices", len(merged))
    return convex_hull(merged)
