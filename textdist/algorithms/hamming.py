"""Hamming distance."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Hashable, Iterable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.length import _sized_result
from textdist.result import DistanceResult

_MISSING = object()


@dataclass
class Hamming(Algorithm[DistanceResult]):
    """Number of positions at which the corresponding items differ.

    With ``truncate`` set, the longer input is cut to the length of the
    shorter one; otherwise every extra item counts as a difference.
    """

    truncate: bool = False

    def for_iter(
        self, s1: Iterable[Hashable], s2: Iterable[Hashable]
    ) -> DistanceResult:
        mismatches = l1 = l2 = 0
        for c1, c2 in zip_longest(s1, s2, fillvalue=_MISSING):
            has1 = c1 is not _MISSING
            has2 = c2 is not _MISSING
            l1 += has1
            l2 += has2
            if has1 and has2:
                mismatches += c1 != c2
            elif not self.truncate:
                mismatches += 1
        return _sized_result(int(mismatches), l1, l2, is_distance=True)

    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> DistanceResult:
        return self.for_iter(s1, s2)