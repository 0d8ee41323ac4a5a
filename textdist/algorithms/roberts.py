"""Roberts similarity."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.result import NormalizedResult


@dataclass
class Roberts(Algorithm[NormalizedResult]):
    """Roberts similarity of two multisets.

    The value is always normalized on the interval from 0.0 to 1.0.
    """

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        c1, c2 = Counter(s1), Counter(s2)
        n1, n2 = len(s1), len(s2)
        if n1 == 0 and n2 == 0:
            value = 1.0
        else:
            common = sum(
                (c1[key] + c2[key]) * min(c1[key], c2[key]) / max(c1[key], c2[key])
                for key in c1.keys() & c2.keys()
            )
            value = common / (n1 + n2)
        return NormalizedResult(
            value=value, is_distance=False, max=1.0, len1=n1, len2=n2
        )