"""Tversky index."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.multiset import intersect_count
from textdist.result import NormalizedResult


@dataclass
class Tversky(Algorithm[NormalizedResult]):
    """Generalization of the Sørensen-Dice and Jaccard indices.

    ``alpha`` weighs the first sequence, ``beta`` the second, and ``bias``
    is added to the numerator.
    """

    alpha: float = 1.0
    beta: float = 1.0
    bias: float = 0.0

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        c1, c2 = Counter(s1), Counter(s2)
        n1, n2 = len(s1), len(s2)
        if n1 == 0 and n2 == 0:
            value = 1.0
        else:
            common = intersect_count(c1, c2)
            denom = self.alpha * (n1 - common) + self.beta * (n2 - common)
            value = (common + self.bias) / (common + denom)
        return NormalizedResult(
            value=value, is_distance=False, max=1.0, len1=n1, len2=n2
        )