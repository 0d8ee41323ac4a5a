import math

from hypothesis import given
from hypothesis import strategies as st

from textdist.result import DistanceResult, NormalizedResult


def test_distance_metric_documented_example():
    res = DistanceResult(value=3, max=4, len1=3, len2=4, is_distance=True)
    assert res.val() == 3
    assert res.dist() == 3
    assert res.sim() == 1
    assert res.nval() == 3.0 / 4.0
    assert res.ndist() == 3.0 / 4.0
    assert res.nsim() == 1.0 / 4.0


def test_similarity_metric_swaps_roles():
    res = DistanceResult(value=1, max=4, len1=3, len2=4, is_distance=False)
    assert res.val() == 1
    assert res.sim() == 1
    assert res.dist() == 3
    assert res.nval() == res.nsim()
    assert res.nsim() == 1.0 / 4.0


def test_zero_max_is_fully_similar():
    res = DistanceResult(value=0, max=0, len1=0, len2=0, is_distance=True)
    assert res.ndist() == 0.0
    assert res.nsim() == 1.0
    assert res.nval() == 0.0


def test_normalized_similarity_documented_example():
    res = NormalizedResult(
        value=0.9166666666666666, max=1.0, len1=4, len2=4, is_distance=False
    )
    assert res.nval() == 0.9166666666666666
    assert res.nsim() == 0.9166666666666666
    assert res.ndist() == 0.08333333333333337


def test_normalized_distance():
    res = NormalizedResult(value=0.3, max=1.0, len1=2, len2=2, is_distance=True)
    assert res.nval() == 0.3
    assert res.ndist() == 0.3
    assert res.nsim() == 1.0 - 0.3


@given(
    st.integers(min_value=0, max_value=1000),
    st.integers(min_value=0, max_value=1000),
    st.booleans(),
)
def test_distance_invariants(a, b, is_distance):
    value, maximum = min(a, b), max(a, b)
    res = DistanceResult(
        value=value, max=maximum, len1=a, len2=b, is_distance=is_distance
    )
    assert res.dist() + res.sim() == maximum
    assert res.val() in (res.dist(), res.sim())
    assert 0.0 <= res.nsim() <= 1.0
    assert 0.0 <= res.ndist() <= 1.0
    if maximum > 0:
        assert math.isclose(res.ndist() + res.nsim(), 1.0)


@given(st.floats(min_value=0.0, max_value=1.0), st.booleans())
def test_normalized_invariants(value, is_distance):
    res = NormalizedResult(
        value=value, max=1.0, len1=1, len2=1, is_distance=is_distance
    )
    assert math.isclose(res.ndist() + res.nsim(), 1.0)
    assert res.nval() == value