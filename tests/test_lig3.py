import pytest
from hypothesis import given
from hypothesis import strategies as st

from textdist.algorithms.lig3 import LIG3


@pytest.mark.parametrize(
    ("s1", "s2", "expected"),
    [
        ("cat", "hat", 0.8),
        ("Niall", "Neil", 0.5714285714285714),
        ("aluminum", "Catalan", 0.0),
        ("ATCG", "TAGC", 0.0),
        ("Glavin", "Glawyn", 0.8),
        ("Williams", "Vylliems", 0.7692307692307693),
        ("Lewis", "Louis", 0.75),
        ("Alex", "Alexander", 0.6153846153846154),
        ("Wild", "Wildsmith", 0.6153846153846154),
        ("Bram", "Bramberley", 0.5714285714285714),
    ],
)
def test_for_str(s1, s2, expected):
    assert LIG3().for_str(s1, s2).nval() == pytest.approx(expected, abs=1e-5)


def test_empty():
    res = LIG3().for_str("", "")
    assert res.nsim() == 1.0
    assert res.ndist() == 0.0


@given(st.text(max_size=12), st.text(max_size=12))
def test_in_unit_interval(s1, s2):
    res = LIG3().for_str(s1, s2)
    assert 0.0 <= res.nval() <= 1.0
    assert res.nsim() + res.ndist() == pytest.approx(1.0)