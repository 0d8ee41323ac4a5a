import pytest

from textdist.algorithms.jaro import Jaro


@pytest.mark.parametrize(
    ("s1", "s2", "expected"),
    [
        ("", "", 1.0),
        ("a", "a", 1.0),
        ("Jaro-Winkler", "Jaro-Winkler", 1.0),
        ("", "jaro-winkler", 0.0),
        ("distance", "", 0.0),
        ("a", "b", 0.0),
        ("dixon", "dicksonx", 0.76667),
        ("a", "ab", 0.83333),
        ("ab", "a", 0.83333),
        ("dwayne", "duane", 0.82222),
        ("Friedrich Nietzsche", "Jean-Paul Sartre", 0.39189),
    ],
)
def test_for_str(s1, s2, expected):
    assert Jaro().for_str(s1, s2).nval() == pytest.approx(expected, abs=1e-5)


def test_documented_values():
    res = Jaro().for_str("test", "tset")
    assert res.nval() == pytest.approx(0.9166666666666666, abs=1e-12)
    assert res.nsim() == pytest.approx(0.9166666666666666, abs=1e-12)
    assert res.ndist() == pytest.approx(0.08333333333333337, abs=1e-12)


def test_abc_acbd():
    assert Jaro().for_str("abc", "acbd").nval() == pytest.approx(
        0.8055555555555555, abs=1e-12
    )


def test_lengths_recorded():
    res = Jaro().for_str("abc", "acbd")
    assert (res.len1, res.len2) == (3, 4)
    assert res.max == 1.0


def test_works_on_arbitrary_sequences():
    assert Jaro().for_seq([1, 2, 3], [1, 2, 3]).nval() == 1.0
    assert Jaro().for_seq([1, 2], [3, 4]).nval() == 0.0