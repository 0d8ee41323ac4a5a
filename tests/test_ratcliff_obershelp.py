import pytest
from hypothesis import given, settings, strategies as st

from textdist.algorithms.ratcliff_obershelp import RatcliffObershelp

GESTALT = "GESTALT PATTERN MATCHING"
PRACTICE = "GESTALT PRACTICE"


@pytest.mark.parametrize(
    "s1, s2, exp",
    [("", "", 1.0), ("abc", "", 0.0), ("", "abc", 0.0), ("abc", "abc", 1.0)],
)
def test_normalized_extremes(s1, s2, exp):
    assert RatcliffObershelp().for_str(s1, s2).nval() == exp


@pytest.mark.parametrize("s1, s2, exp", [(GESTALT, PRACTICE, 24), (PRACTICE, GESTALT, 26)])
def test_raw_value_depends_on_order(s1, s2, exp):
    assert RatcliffObershelp().for_str(s1, s2).val() == exp


def test_documented_value_and_fields():
    res = RatcliffObershelp().for_str("abc", "acbd")
    assert res.nval() == 0.5714285714285714
    assert (res.max, res.len1, res.len2) == (7, 3, 4)


@settings(max_examples=100)
@given(st.text(max_size=20), st.text(max_size=20))
def test_value_even_and_bounded(s1, s2):
    res = RatcliffObershelp().for_str(s1, s2)
    assert 0 <= res.val() <= res.max
    assert res.val() % 2 == 0
    assert abs(res.nsim() + res.ndist() - 1.0) < 1e-9


@settings(max_examples=50)
@given(st.text(max_size=20))
def test_identical_inputs_fully_similar(s):
    assert RatcliffObershelp().for_str(s, s).nsim() == 1.0