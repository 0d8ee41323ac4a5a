"""Damerau-Levenshtein distance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.result import DistanceResult


@dataclass
class DamerauLevenshtein(Algorithm[DistanceResult]):
    """Edit distance that also counts transpositions of adjacent items.

    With ``restricted`` set, the optimal string alignment variant is used,
    where no substring is edited more than once.
    """

    restricted: bool = False
    del_cost: int = 1
    ins_cost: int = 1
    sub_cost: int = 1
    trans_cost: int = 1

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> DistanceResult:
        if self.restricted:
            value = self._restricted(s1, s2)
        else:
            value = self._unrestricted(s1, s2)
        l1, l2 = len(s1), len(s2)
        return DistanceResult(
            value=value, is_distance=True, max=max(l1, l2), len1=l1, len2=l2
        )

    def _unrestricted(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
        l1, l2 = len(s1), len(s2)
        max_dist = l1 + l2

        mat = [[0] * (l2 + 2) for _ in range(l1 + 2)]
        mat[0][0] = max_dist
        for i in range(l1 + 1):
            mat[i + 1][0] = max_dist
            mat[i + 1][1] = i
        for i in range(l2 + 1):
            mat[0][i + 1] = max_dist
            mat[1][i + 1] = i

        last_row: dict[Hashable, int] = {}
        for i1, c1 in enumerate(s1, start=1):
            db = 0
            for i2, c2 in enumerate(s2, start=1):
                last = last_row.get(c2, 0)
                sub_cost = 0 if c1 == c2 else self.sub_cost
                mat[i1 + 1][i2 + 1] = min(
                    mat[i1][i2] + sub_cost,
                    mat[i1 + 1][i2] + self.del_cost,
                    mat[i1][i2 + 1] + self.ins_cost,
                    mat[last][db] + i1 + i2 - 2 + self.trans_cost - last - db,
                )
                if c1 == c2:
                    db = i2
            last_row[c1] = i1

        return mat[l1 + 1][l2 + 1]

    def _restricted(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
        l1, l2 = len(s1), len(s2)

        mat = [[0] * (l2 + 1) for _ in range(l1 + 1)]
        for i in range(l1 + 1):
            mat[i][0] = i
        for i in range(l2 + 1):
            mat[0][i] = i

        for i1, c1 in enumerate(s1):
            for i2, c2 in enumerate(s2):
                sub_cost = 0 if c1 == c2 else self.sub_cost
                cell = min(
                    mat[i1][i2 + 1] + self.del_cost,
                    mat[i1 + 1][i2] + self.ins_cost,
                    mat[i1][i2] + sub_cost,
                )
                if i1 and i2 and c1 == s2[i2 - 1] and s1[i1 - 1] == c2:
                    trans_cost = 0 if c1 == c2 else self.trans_cost
                    cell = min(cell, mat[i1 - 1][i2 - 1] + trans_cost)
                mat[i1 + 1][i2 + 1] = cell

        return mat[l1][l2]