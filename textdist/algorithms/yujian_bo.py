"""Yujian-Bo distance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.levenshtein import Levenshtein
from textdist.result import NormalizedResult


@dataclass
class YujianBo(Algorithm[NormalizedResult]):
    """Normalized Levenshtein distance that is itself a metric."""

    levenshtein: Levenshtein = field(default_factory=Levenshtein)

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        lev = self.levenshtein.for_seq(s1, s2)
        lval = lev.val()
        if lval == 0:
            value = 0.0
        else:
            denom = (
                lev.len1 * self.levenshtein.del_cost
                + lev.len2 * self.levenshtein.ins_cost
                + lval
            )
            value = 2 * lval / denom
        return NormalizedResult(
            value=value, is_distance=True, max=1.0, len1=lev.len1, len2=lev.len2
        )