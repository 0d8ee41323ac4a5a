"""Gestalt pattern matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.result import DistanceResult


def _longest_match(
    part1: Sequence[Hashable], part2: Sequence[Hashable]
) -> tuple[int, int, int]:
    """Return (end in part1, end in part2, length) of the first longest match."""
    end1 = end2 = length = 0
    prev = [0] * (len(part2) + 1)
    for i1, c1 in enumerate(part1):
        row = [0] * (len(part2) + 1)
        for i2, c2 in enumerate(part2):
            if c1 == c2:
                row[i2 + 1] = prev[i2] + 1
                if row[i2 + 1] > length:
                    length = row[i2 + 1]
                    end1, end2 = i1 + 1, i2 + 1
        prev = row
    return end1, end2, length


@dataclass
class RatcliffObershelp(Algorithm[DistanceResult]):
    """Longest common substring applied recursively to the unmatched regions.

    The raw value is twice the number of matched items; it is normalized by
    the sum of the input lengths.
    """

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> DistanceResult:
        l1, l2 = len(s1), len(s2)
        stack = [(0, l1, 0, l2)]
        matched = 0
        while stack:
            start1, len1, start2, len2 = stack.pop()
            end1, end2, match_len = _longest_match(
                s1[start1 : start1 + len1], s2[start2 : start2 + len2]
            )
            if match_len == 0:
                continue
            prefix1, prefix2 = end1 - match_len, end2 - match_len
            if prefix1 and prefix2:
                stack.append((start1, prefix1, start2, prefix2))
            suffix1, suffix2 = len1 - end1, len2 - end2
            if suffix1 and suffix2:
                stack.append((start1 + end1, suffix1, start2 + end2, suffix2))
            matched += match_len

        return DistanceResult(
            value=2 * matched, is_distance=False, max=l1 + l2, len1=l1, len2=l2
        )