"""Sørensen-Dice coefficient."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.multiset import intersect_count
from textdist.result import NormalizedResult


@dataclass
class SorensenDice(Algorithm[NormalizedResult]):
    """Twice the common items divided by the total number of items."""

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        c1, c2 = Counter(s1), Counter(s2)
        total = len(s1) + len(s2)
        value = 1.0 if total == 0 else 2 * intersect_count(c1, c2) / total
        return NormalizedResult(
            value=value, is_distance=False, max=1.0, len1=len(s1), len2=len(s2)
        )