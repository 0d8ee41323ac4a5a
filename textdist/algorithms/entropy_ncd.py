"""Entropy-based normalized compression distance."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

from textdist.algorithm import Algorithm
from textdist.result import NormalizedResult


@dataclass
class EntropyNCD(Algorithm[NormalizedResult]):
    """Normalized compression distance that uses entropy as compressed size.

    ``base`` is the logarithm base for the entropy. ``correction`` is a
    non-negative amount added to every entropy, standing for the fixed
    header that real compressors produce.
    """

    base: int = 2
    correction: float = 1.0

    def compress(self, counter: Counter[Hashable]) -> float:
        """Entropy of the multiset plus the correction."""
        total = sum(counter.values())
        entropy = 0.0
        for count in counter.values():
            p = count / total
            entropy -= p * math.log(p, self.base)
        return self.correction + entropy

    def for_seq(
        self, s1: Sequence[Hashable], s2: Sequence[Hashable]
    ) -> NormalizedResult:
        c1, c2 = Counter(s1), Counter(s2)
        cl1 = self.compress(c1)
        cl2 = self.compress(c2)
        if cl1 == 0 and cl2 == 0:
            value = 0.0
        else:
            clt = self.compress(c1 + c2)
            value = (clt - min(cl1, cl2)) / max(cl1, cl2)
        return NormalizedResult(
            value=value, is_distance=True, max=1.0, len1=len(s1), len2=len(s2)
        )