"""Length distance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.result import DistanceResult


def _sized_result(
    value: int, len1: int, len2: int, *, is_distance: bool
) -> DistanceResult:
    """Build a result bounded by the longer of the two input lengths."""
    return DistanceResult(
        value=value,
        is_distance=is_distance,
        max=max(len1, len2),
        len1=len1,
        len2=len2,
    )


@dataclass
class Length(Algorithm[DistanceResult]):
    """Absolute difference between the lengths of the two sequences."""

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        l1, l2 = len(s1), len(s2)
        return _sized_result(abs(l1 - l2), l1, l2, is_distance=True)