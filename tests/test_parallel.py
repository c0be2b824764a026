"""
Тести для cg2q.parallel: fork-join оболонка збігається з послідовною.
"""
import os

import pytest

from cg2q.geom import Pt
from cg2q.hull import convex_hull, hull_vertices
from cg2q.parallel import default_workers, parallel_convex_hull, resolve_workers, split_blocks


class TestWorkers:
    """Політика кількості робітників"""

    def test_default_is_positive_and_bounded(self) -> None:
        assert 1 <= default_workers() <= (os.cpu_count() or 1)

    def test_default_follows_affinity(self, monkeypatch) -> None:
        """Без process_cpu_count береться affinity-маска, а не всі ядра машини"""
        monkeypatch.delattr(os, "process_cpu_count", raising=False)
        monkeypatch.setattr(os, "sched_getaffinity", lambda pid: {0, 2}, raising=False)
        monkeypatch.setattr(os, "cpu_count", lambda: 64)
        assert default_workers() == 2

    def test_default_prefers_process_cpu_count(self, monkeypatch) -> None:
        monkeypatch.setattr(os, "process_cpu_count", lambda: 3, raising=False)
        monkeypatch.setattr(os, "cpu_count", lambda: 64)
        assert default_workers() == 3

    def test_default_falls_back_to_cpu_count(self, monkeypatch) -> None:
        monkeypatch.delattr(os, "process_cpu_count", raising=False)
        monkeypatch.delattr(os, "sched_getaffinity", raising=False)
        monkeypatch.setattr(os, "cpu_count", lambda: None)
        assert default_workers() == 1

    @pytest.mark.parametrize("w", [None, 0, -3])
    def test_non_positive_selects_default(self, w) -> None:
        assert resolve_workers(w) == default_workers()

    def test_explicit(self) -> None:
        assert resolve_workers(5) == 5


class TestSplitBlocks:
    """split_blocks"""

    def test_contiguous_and_balanced(self) -> None:
        ps = list(range(10))
        blocks = split_blocks(ps, 3)
        assert blocks == [[0, 1, 2, 3], [4, 5, 6], [7, 8, 9]]
        assert [x for b in blocks for x in b] == ps

    def test_more_blocks_than_items(self) -> None:
        blocks = split_blocks([1, 2], 4)
        assert blocks == [[1], [2], [], []]

    def test_rejects_zero(self) -> None:
        with pytest.raises(ValueError):
            split_blocks([1, 2, 3], 0)


class TestParallelConvexHull:
    """Збіг із послідовною версією"""

    @pytest.mark.parametrize("k", range(1, 9))
    def test_same_membership_as_serial(self, cloud, k: int) -> None:
        serial = set(hull_vertices(*convex_hull(cloud)))
        par = set(hull_vertices(*parallel_convex_hull(k, cloud)))
        assert par == serial

    def test_same_chains_as_serial(self, rational_cloud) -> None:
        assert parallel_convex_hull(4, rational_cloud) == convex_hull(rational_cloud)

    def test_default_workers(self, cloud) -> None:
        assert parallel_convex_hull(0, cloud) == convex_hull(cloud)
        assert parallel_convex_hull(None, cloud) == convex_hull(cloud)

    def test_fewer_points_than_workers(self) -> None:
        pts = [Pt(0, 0), Pt(1, 0), Pt(2, 0)]
        assert parallel_convex_hull(8, pts) == ([Pt(0, 0), Pt(2, 0)], [Pt(2, 0), Pt(0, 0)])

    def test_empty(self) -> None:
        assert parallel_convex_hull(2, []) == ([], [])

    def test_blocks_with_single_points(self) -> None:
        pts = [Pt(0, 0), Pt(4, 0), Pt(4, 4), Pt(0, 4)]
        assert parallel_convex_hull(4, pts) == convex_hull(pts)

    def test_process_backend(self, cloud) -> None:
        assert parallel_convex_hull(2, cloud, backend="process") == convex_hull(cloud)

    def test_unknown_backend(self, cloud) -> None:
        with pytest.raises(ValueError):
            parallel_convex_hull(2, cloud, backend="gpu")

    def test_input_not_mutated(self, cloud) -> None:
        before = list(cloud)
        parallel_convex_hull(3, cloud)
        assert cloud == before
