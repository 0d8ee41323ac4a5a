"""Suffix similarity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.length import _sized_result
from textdist.algorithms.prefix import _matching_run
from textdist.result import DistanceResult


@dataclass
class Suffix(Algorithm[DistanceResult]):
    """Length of the longest common suffix of the two sequences."""

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        common = _matching_run(zip(reversed(s1), reversed(s2)))
        return _sized_result(common, len(s1), len(s2), is_distance=False)