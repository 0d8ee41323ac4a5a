"""Result types returned by the distance and similarity algorithms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class DistanceResult:
    """Integer-valued outcome of a distance or similarity algorithm.

    ``value`` is the raw value of the metric, ``max`` the largest value
    possible for inputs of the given lengths.
    """

    value: int
    max: int
    len1: int
    len2: int
    is_distance: bool

    def val(self) -> int:
        """Raw value: the distance for distance metrics, else the similarity."""
        return self.value

    def dist(self) -> int:
        """Absolute distance; 0 for identical sequences."""
        return self.value if self.is_distance else self.max - self.value

    def sim(self) -> int:
        """Absolute similarity; 0 for completely different sequences."""
        return self.max - self.value if self.is_distance else self.value

    def nval(self) -> float:
        """Normalized raw value."""
        return self.ndist() if self.is_distance else self.nsim()

    def ndist(self) -> float:
        """Distance normalized to the interval from 0.0 to 1.0."""
        if self.max == 0:
            return float(self.dist())
        return self.dist() / self.max

    def nsim(self) -> float:
        """Similarity normalized to the interval from 0.0 to 1.0."""
        if self.max == 0:
            return 1.0
        return self.sim() / self.max


@dataclass(frozen=True, kw_only=True)
class NormalizedResult:
    """Outcome of an algorithm whose value is already normalized."""

    value: float
    max: float
    len1: int
    len2: int
    is_distance: bool

    def nval(self) -> float:
        """Normalized raw value."""
        return self.value

    def ndist(self) -> float:
        """Normalized distance."""
        return self.value if self.is_distance else self.max - self.value

    def nsim(self) -> float:
        """Normalized similarity."""
        return self.max - self.value if self.is_distance else self.value