"""Smith-Waterman local sequence alignment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.length import _sized_result
from textdist.result import DistanceResult


@dataclass
class SmithWaterman(Algorithm[DistanceResult]):
    """Alignment score designed for nucleic acid and protein sequences."""

    gap_cost: int = 1
    match_cost: int = -1
    mismatch_cost: int = 0

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        scores = [0] * (len(s2) + 1)
        for c1 in s1:
            left = diagonal = 0
            for j, c2 in enumerate(s2, 1):
                up = scores[j]
                step = self.match_cost if c1 == c2 else self.mismatch_cost
                left = max(0, diagonal - step, up - self.gap_cost, left - self.gap_cost)
                diagonal, scores[j] = up, left
        return _sized_result(scores[-1], len(s1), len(s2), is_distance=False)