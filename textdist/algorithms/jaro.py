"""Jaro similarity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.result import NormalizedResult


@dataclass
class Jaro(Algorithm[NormalizedResult]):
    """Similarity based on matching items and transpositions between them.

    The value is always normalized on the interval from 0.0 to 1.0.
    """

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        l1, l2 = len(s1), len(s2)

        def result(value: float) -> NormalizedResult:
            return NormalizedResult(
                value=value, is_distance=False, max=1.0, len1=l1, len2=l2
            )

        if l1 == 0 or l2 == 0:
            return result(1.0 if l1 == l2 else 0.0)
        if l1 == 1 and l2 == 1:
            return result(1.0 if s1[0] == s2[0] else 0.0)

        search_range = max(l1, l2) // 2 - 1
        consumed = [False] * l2
        matches = 0
        n_trans = 0
        b_match_index = 0

        for i, a_elem in enumerate(s1):
            min_bound = max(0, i - search_range)
            max_bound = min(l2 - 1, i + search_range)
            for j in range(min_bound, max_bound + 1):
                if not consumed[j] and a_elem == s2[j]:
                    consumed[j] = True
                    matches += 1
                    if j < b_match_index:
                        n_trans += 1
                    b_match_index = j
                    break

        if matches == 0:
            return result(0.0)
        ms = float(matches)
        return result((ms / l1 + ms / l2 + (ms - n_trans) / ms) / 3.0)