import pytest
from hypothesis import given
from hypothesis import strategies as st

from textdist.algorithms.yujian_bo import YujianBo


@pytest.mark.parametrize(
    ("s1", "s2", "expected"),
    [
        ("", "", 0.0),
        ("a", "", 1.0),
        ("", "a", 1.0),
        ("bc", "", 1.0),
        ("", "bc", 1.0),
        ("bc", "bc", 0.0),
        ("bcd", "fgh", 0.6666666666666666),
        ("ATCG", "TAGC", 0.5454545454545454),
        ("cat", "hat", 0.285714285714),
        ("aluminum", "Catalan", 0.6363636363636364),
    ],
)
def test_for_str(s1, s2, expected):
    assert YujianBo().for_str(s1, s2).nval() == pytest.approx(expected, abs=1e-5)


def test_result_fields():
    res = YujianBo().for_str("cat", "hat")
    assert res.len1 == 3
    assert res.len2 == 3
    assert res.max == 1.0
    assert res.nsim() == pytest.approx(1 - 0.285714285714, abs=1e-9)


@given(st.text(max_size=12))
def test_identical_is_zero(s):
    assert YujianBo().for_str(s, s).ndist() == 0.0


@given(st.text(max_size=12), st.text(max_size=12))
def test_symmetric_and_bounded(s1, s2):
    forward = YujianBo().for_str(s1, s2).nval()
    backward = YujianBo().for_str(s2, s1).nval()
    assert forward == pytest.approx(backward)
    assert 0.0 <= forward <= 1.0