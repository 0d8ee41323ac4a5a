"""Jaro-Winkler similarity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.algorithms.jaro import Jaro
from textdist.result import NormalizedResult


@dataclass
class JaroWinkler(Algorithm[NormalizedResult]):
    """Jaro similarity boosted for sequences sharing a common prefix.

    ``prefix_weight`` scales the boost and should not exceed
    ``1 / max_prefix``; ``max_prefix`` caps the counted prefix length.
    """

    jaro: Jaro = field(default_factory=Jaro)
    prefix_weight: float = 0.1
    max_prefix: int = 4

    def _winklerize(
        self, jaro: float, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> float:
        prefix_len = 0
        for e1, e2 in zip(s1, s2):
            if e1 != e2:
                break
            prefix_len += 1
            if prefix_len == self.max_prefix:
                break
        return jaro + self.prefix_weight * prefix_len * (1.0 - jaro)

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        jaro = self.jaro.for_seq(s1, s2).nval()
        return NormalizedResult(
            value=self._winklerize(jaro, s1, s2),
            is_distance=False,
            max=1.0,
            len1=len(s1),
            len2=len(s2),
        )