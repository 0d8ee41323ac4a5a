"""Levenshtein distance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.length import _sized_result
from textdist.result import DistanceResult


@dataclass
class Levenshtein(Algorithm[DistanceResult]):
    """Minimum number of single-item insertions, deletions or substitutions
    needed to turn one sequence into the other.
    """

    del_cost: int = 1
    ins_cost: int = 1
    sub_cost: int = 1

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        l1, l2 = len(s1), len(s2)
        if not s1 or not s2:
            return _sized_result(l1 + l2, l1, l2, is_distance=True)

        cache = list(range(1, l1 + 1))
        result = 0
        for i2, c2 in enumerate(s2):
            result = dist1 = i2
            for i1, c1 in enumerate(s1):
                dist2 = dist1 if c1 == c2 else dist1 + self.sub_cost
                dist1 = cache[i1]
                if dist1 > result:
                    result = result + self.del_cost if dist2 > result else dist2
                elif dist2 > dist1:
                    result = dist1 + self.ins_cost
                else:
                    result = dist2
                cache[i1] = result

        return _sized_result(result, l1, l2, is_distance=True)