"""Longest common substring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.length import _sized_result
from textdist.result import DistanceResult


@dataclass
class LCSStr(Algorithm[DistanceResult]):
    """Length of the longest common contiguous run of items."""

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        best = 0
        # Maps a position in s2 to the length of the run ending there.
        runs: dict[int, int] = {}
        for c1 in s1:
            runs = {j: runs.get(j - 1, 0) + 1 for j, c2 in enumerate(s2) if c1 == c2}
            best = max(best, max(runs.values(), default=0))
        return _sized_result(best, len(s1), len(s2), is_distance=False)