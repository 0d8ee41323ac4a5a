import pytest

from textdist.algorithms.overlap import Overlap


@pytest.mark.parametrize(
    ("s1", "s2", "expected"),
    [
        ("", "", 1.0),
        ("nelson", "", 0.0),
        ("", "neilsen", 0.0),
        ("test", "text", 3 / 4),
        ("testme", "textthis", 4 / 6),
        ("nelson", "neilsen", 5 / 6),
    ],
)
def test_for_str(s1, s2, expected):
    assert Overlap().for_str(s1, s2).nval() == pytest.approx(expected, abs=1e-5)


def test_result_lengths_and_distance():
    res = Overlap().for_str("test", "text")
    assert (res.len1, res.len2) == (4, 4)
    assert res.ndist() == pytest.approx(0.25)
    assert res.nsim() == pytest.approx(0.75)


def test_subset_is_full_overlap():
    assert Overlap().for_seq([1, 2], [1, 2, 3, 4]).nval() == 1.0