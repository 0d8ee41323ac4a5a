"""LIG3 similarity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.hamming import Hamming
from textdist.algorithms.levenshtein import Levenshtein
from textdist.result import NormalizedResult


@dataclass
class LIG3(Algorithm[NormalizedResult]):
    """Normalization of Hamming similarity by Levenshtein distance."""

    levenshtein: Levenshtein = field(default_factory=Levenshtein)
    hamming: Hamming = field(default_factory=lambda: Hamming(truncate=False))

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        lev_res = self.levenshtein.for_seq(s1, s2)
        edits = lev_res.dist()
        agree = self.hamming.for_seq(s1, s2).sim()
        score = 1.0 if edits == 0 and agree == 0 else 2 * agree / (2 * agree + edits)
        return NormalizedResult(
            value=score,
            is_distance=False,
            max=1.0,
            len1=lev_res.len1,
            len2=lev_res.len2,
        )