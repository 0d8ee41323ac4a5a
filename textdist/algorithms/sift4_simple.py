"""Sift4 distance, the "simplest" variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.length import _sized_result
from textdist.result import DistanceResult


@dataclass
class Sift4Simple(Algorithm[DistanceResult]):
    """Fast, approximate edit distance.

    ``max_offset`` is how far ahead to look for matching items.
    """

    max_offset: int = 5

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        l1, l2 = len(s1), len(s2)

        c1 = c2 = 0
        lcss = 0
        local_cs = 0
        while c1 < l1 and c2 < l2:
            if s1[c1] == s2[c2]:
                local_cs += 1
            else:
                lcss += local_cs
                local_cs = 0
                if c1 != c2:
                    # using min allows the computation of transpositions
                    c1 = c2 = min(c1, c2)
                for i in range(self.max_offset):
                    if not (c1 + 1 < l1 or c2 + i < l2):
                        break
                    if c1 + i < l1 and s1[c1 + i] == s2[c2]:
                        c1 += i
                        local_cs += 1
                        break
                    if c2 + i < l2 and s1[c1] == s2[c2 + i]:
                        c2 += i
                        local_cs += 1
                        break
            c1 += 1
            c2 += 1

        return _sized_result(max(l1, l2) - lcss - local_cs, l1, l2, is_distance=True)