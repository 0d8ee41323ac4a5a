"""Jaccard index."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.multiset import intersect_count, union_count
from textdist.result import NormalizedResult


@dataclass
class Jaccard(Algorithm[NormalizedResult]):
    """Ratio of the intersection to the union of the two multisets."""

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        c1, c2 = Counter(s1), Counter(s2)
        union = union_count(c1, c2)
        value = 1.0 if union == 0 else intersect_count(c1, c2) / union
        return NormalizedResult(
            value=value, is_distance=False, max=1.0, len1=len(s1), len2=len(s2)
        )