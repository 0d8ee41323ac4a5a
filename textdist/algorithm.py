"""Base class shared by all distance and similarity algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Iterable, Iterator, Sequence, TypeVar

R = TypeVar("R")


def bigrams(s: str) -> Iterator[tuple[str, str]]:
    """Yield pairs of adjacent characters of ``s``."""
    return zip(s, s[1:])


class Algorithm(ABC, Generic[R]):
    """A distance or similarity algorithm over sequences of hashable items.

    Subclasses implement :meth:`for_seq`; the other entry points turn their
    inputs into sequences and delegate to it.
    """

    def for_iter(self, s1: Iterable[Hashable], s2: Iterable[Hashable]) -> R:
        """Compare two iterables."""
        return self.for_seq(list(s1), list(s2))

    @abstractmethod
    def for_seq(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> R:
        """Compare two sequences."""

    def for_str(self, s1: str, s2: str) -> R:
        """Compare two strings character by character."""
        return self.for_iter(iter(s1), iter(s2))

    def for_words(self, s1: str, s2: str) -> R:
        """Compare two strings word by word."""
        return self.for_iter(s1.split(), s2.split())

    def for_bigrams(self, s1: str, s2: str) -> R:
        """Compare two strings by their character bigrams."""
        return self.for_iter(bigrams(s1), bigrams(s2))