"""Sift4 distance, the "common" variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.result import DistanceResult


@dataclass(slots=True)
class _Offset:
    c1: int
    c2: int
    trans: bool


@dataclass
class Sift4Common(Algorithm[DistanceResult]):
    """Fast, approximate edit distance that also counts transpositions.

    ``max_offset`` is how far ahead to look for matching items.
    ``max_distance``, when non-zero, stops the computation as soon as the
    running distance exceeds it.
    """

    max_offset: int = 5
    max_distance: int = 0

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> DistanceResult:
        l1, l2 = len(s1), len(s2)
        longest = max(l1, l2)

        c1 = c2 = 0
        lcss = 0
        local_cs = 0
        trans = 0
        offsets: list[_Offset] = []
        while c1 < l1 and c2 < l2:
            if s1[c1] == s2[c2]:
                local_cs += 1
                is_trans = False
                kept: list[_Offset] = []
                for pos, ofs in enumerate(offsets):
                    if c1 <= ofs.c1 or c2 <= ofs.c2:
                        # when two matches cross, the one with the larger
                        # offset difference is the transposition
                        is_trans = abs(c1 - c2) >= abs(ofs.c1 - ofs.c2)
                        if is_trans:
                            trans += 1
                        elif not ofs.trans:
                            ofs.trans = True
                            trans += 1
                        kept.extend(offsets[pos:])
                        break
                    if c1 > ofs.c2 and c2 > ofs.c1:
                        continue
                    kept.append(ofs)
                offsets = kept
                offsets.append(_Offset(c1, c2, is_trans))
            else:
                lcss += local_cs
                local_cs = 0
                if c1 != c2:
                    c1 = c2 = min(c1, c2)
                if self.max_distance:
                    running = max(c1, c2) - lcss + trans
                    if running > self.max_distance:
                        return DistanceResult(
                            value=running,
                            is_distance=True,
                            max=longest,
                            len1=l1,
                            len2=l2,
                        )
                # on a match, step both cursors back by one so that the
                # increment below lands them on the matching items
                for i in range(self.max_offset):
                    if c1 + i >= l1 and c2 + i >= l2:
                        break
                    if c1 + i < l1 and s1[c1 + i] == s2[c2]:
                        c1 += i - 1
                        c2 -= 1
                        break
                    if c2 + i < l2 and s1[c1] == s2[c2 + i]:
                        c1 -= 1
                        c2 += i - 1
                        break
            c1 += 1
            c2 += 1
            if c1 >= l1 or c2 >= l2:
                lcss += local_cs
                local_cs = 0
                c1 = c2 = min(c1, c2)

        return DistanceResult(
            value=longest - lcss - local_cs + trans,
            is_distance=True,
            max=longest,
            len1=l1,
            len2=l2,
        )