"""MLIPNS similarity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.hamming import Hamming
from textdist.result import DistanceResult


@dataclass
class MLIPNS(Algorithm[DistanceResult]):
    """Modified Language-Independent Product Name Search.

    A normalization of Hamming distance that yields either 0 or 1.
    """

    hamming: Hamming = field(default_factory=Hamming)
    threshold: float = 0.25
    max_mismatches: int = 2

    def _check(self, ham: DistanceResult) -> bool:
        longest = ham.max
        mismatched = ham.val()
        for _ in range(self.max_mismatches + 1):
            if longest == 0 or 1.0 - (longest - mismatched) / longest <= self.threshold:
                return True
            mismatched -= 1
            longest -= 1
        return longest == 0

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        ham = self.hamming.for_seq(s1, s2)
        similar = int(self._check(ham))
        return DistanceResult(
            value=similar, is_distance=False, max=1, len1=ham.len1, len2=ham.len2
        )