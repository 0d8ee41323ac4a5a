"""Bag distance."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.multiset import diff_count
from textdist.result import DistanceResult


@dataclass
class Bag(Algorithm[DistanceResult]):
    """The larger count of items in one sequence that are not in the other."""

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> DistanceResult:
        c1, c2 = Counter(s1), Counter(s2)
        l1, l2 = len(s1), len(s2)
        return DistanceResult(
            value=max(diff_count(c1, c2), diff_count(c2, c1)),
            is_distance=True,
            max=max(l1, l2),
            len1=l1,
            len2=l2,
        )