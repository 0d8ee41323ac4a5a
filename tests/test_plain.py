import pytest

from textdist import plain


def test_hamming_integration():
    assert plain.hamming("hello", "hi") == 4


@pytest.mark.parametrize(
    ("func", "s1", "s2", "expected"),
    [
        (plain.damerau_levenshtein, "abc", "acbd", 2),
        (plain.damerau_levenshtein_restricted, "abc", "acbd", 2),
        (plain.hamming, "abc", "acbd", 3),
        (plain.lcsseq, "abcdef", "xbcegf", 4),
        (plain.lcsstr, "abcdef", "xbcegf", 2),
        (plain.levenshtein, "abc", "acbd", 2),
        (plain.sift4_simple, "abc", "acbd", 2),
        (plain.sift4_common, "abc", "acbd", 2),
        (plain.mlipns, "abc", "acbd", 0),
        (plain.bag, "abc", "acbd", 1),
        (plain.prefix, "abc", "acbd", 1),
        (plain.suffix, "abcd", "axcd", 2),
        (plain.length, "abcd", "axc", 1),
        (plain.smith_waterman, "abc", "acbd", 1),
    ],
)
def test_integer_results(func, s1, s2, expected):
    assert func(s1, s2) == expected


@pytest.mark.parametrize(
    ("func", "s1", "s2", "expected"),
    [
        (plain.ratcliff_obershelp, "abc", "acbd", 0.5714285714285714),
        (plain.jaro, "abc", "acbd", 0.8055555555555555),
        (plain.jaro_winkler, "abc", "acbd", 0.825),
        (plain.yujian_bo, "abc", "acbd", 0.4444444444444444),
        (plain.lig3, "abc", "acbd", 0.5),
        (plain.jaccard, "abc", "acbd", 0.75),
        (plain.sorensen_dice, "abc", "acbd", 0.8571428571428571),
        (plain.tversky, "abc", "acbd", 0.75),
        (plain.overlap, "abc", "acbd", 1.0),
        (plain.cosine, "abc", "acbd", 0.8660254037844387),
        (plain.entropy_ncd, "abc", "acbd", 0.12174985473119697),
        (plain.roberts, "abc", "acbd", 0.8571428571428571),
    ],
)
def test_float_results(func, s1, s2, expected):
    assert func(s1, s2) == pytest.approx(expected, abs=1e-12)


def test_restricted_differs_from_unrestricted():
    assert plain.damerau_levenshtein("ab", "bca") == 2
    assert plain.damerau_levenshtein_restricted("ab", "bca") == 3