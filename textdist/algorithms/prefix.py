"""Prefix similarity."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile
from typing import Hashable, Iterable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.length import _sized_result
from textdist.result import DistanceResult


def _matching_run(pairs: Iterable[tuple[Hashable, Hashable]]) -> int:
    """Count the leading pairs whose two items are equal."""
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], pairs))


@dataclass
class Prefix(Algorithm[DistanceResult]):
    """Length of the longest common prefix of the two sequences."""

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        common = _matching_run(zip(s1, s2))
        return _sized_result(common, len(s1), len(s2), is_distance=False)