"""Overlap coefficient."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.multiset import intersect_count
from textdist.result import NormalizedResult


@dataclass
class Overlap(Algorithm[NormalizedResult]):
    """Size of the intersection divided by the size of the smaller multiset."""

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        c1, c2 = Counter(s1), Counter(s2)
        n1, n2 = len(s1), len(s2)
        if n1 == 0 and n2 == 0:
            value = 1.0
        elif n1 == 0 or n2 == 0:
            value = 0.0
        else:
            value = intersect_count(c1, c2) / min(n1, n2)
        return NormalizedResult(
            value=value, is_distance=False, max=1.0, len1=n1, len2=n2
        )