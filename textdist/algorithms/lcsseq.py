"""Longest common subsequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.length import _sized_result
from textdist.result import DistanceResult


@dataclass
class LCSSeq(Algorithm[DistanceResult]):
    """Length of the longest common subsequence.

    Unlike substrings, subsequences need not occupy consecutive positions.
    """

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        lengths = [0] * (len(s2) + 1)
        for c1 in s1:
            diagonal = 0
            for j, c2 in enumerate(s2, 1):
                above = lengths[j]
                lengths[j] = diagonal + 1 if c1 == c2 else max(lengths[j - 1], above)
                diagonal = above
        return _sized_result(lengths[-1], len(s1), len(s2), is_distance=False)