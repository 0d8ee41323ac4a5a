"""Multiset arithmetic over :class:`collections.Counter`."""

from __future__ import annotations

from collections import Counter
from typing import Hashable


def intersect_count(lhs: Counter[Hashable], rhs: Counter[Hashable]) -> int:
    """Number of items the two multisets have in common."""
    return sum(min(count, rhs[key]) for key, count in lhs.items() if key in rhs)


def union_count(lhs: Counter[Hashable], rhs: Counter[Hashable]) -> int:
    """Number of items in the union of the two multisets."""
    keys = lhs.keys() | rhs.keys()
    return sum(max(lhs.get(key, 0), rhs.get(key, 0)) for key in keys)


def diff_count(lhs: Counter[Hashable], rhs: Counter[Hashable]) -> int:
    """Number of items in ``lhs`` that are not matched in ``rhs``."""
    return sum(
        count - rhs.get(key, 0)
        for key, count in lhs.items()
        if count > rhs.get(key, 0)
    )