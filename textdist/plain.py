"""Default, non-normalized string comparisons for every algorithm.

Algorithms whose value is always normalized return it as a float.
"""

from __future__ import annotations

from textdist.algorithms.bag import Bag
from textdist.algorithms.cosine import Cosine
from textdist.algorithms.damerau_levenshtein import DamerauLevenshtein
from textdist.algorithms.entropy_ncd import EntropyNCD
from textdist.algorithms.hamming import Hamming
from textdist.algorithms.jaccard import Jaccard
from textdist.algorithms.jaro import Jaro
from textdist.algorithms.jaro_winkler import JaroWinkler
from textdist.algorithms.lcsseq import LCSSeq
from textdist.algorithms.lcsstr import LCSStr
from textdist.algorithms.length import Length
from textdist.algorithms.levenshtein import Levenshtein
from textdist.algorithms.lig3 import LIG3
from textdist.algorithms.mlipns import MLIPNS
from textdist.algorithms.overlap import Overlap
from textdist.algorithms.prefix import Prefix
from textdist.algorithms.ratcliff_obershelp import RatcliffObershelp
from textdist.algorithms.roberts import Roberts
from textdist.algorithms.sift4_common import Sift4Common
from textdist.algorithms.sift4_simple import Sift4Simple
from textdist.algorithms.smith_waterman import SmithWaterman
from textdist.algorithms.sorensen_dice import SorensenDice
from textdist.algorithms.suffix import Suffix
from textdist.algorithms.tversky import Tversky
from textdist.algorithms.yujian_bo import YujianBo


def damerau_levenshtein(s1: str, s2: str) -> int:
    """Unrestricted Damerau-Levenshtein distance."""
    return DamerauLevenshtein().for_str(s1, s2).val()


def damerau_levenshtein_restricted(s1: str, s2: str) -> int:
    """Restricted (optimal string alignment) Damerau-Levenshtein distance."""
    return DamerauLevenshtein(restricted=True).for_str(s1, s2).val()


def hamming(s1: str, s2: str) -> int:
    """Hamming distance."""
    return Hamming().for_str(s1, s2).val()


def lcsseq(s1: str, s2: str) -> int:
    """Length of the longest common subsequence."""
    return LCSSeq().for_str(s1, s2).val()


def lcsstr(s1: str, s2: str) -> int:
    """Length of the longest common substring."""
    return LCSStr().for_str(s1, s2).val()


def levenshtein(s1: str, s2: str) -> int:
    """Levenshtein distance."""
    return Levenshtein().for_str(s1, s2).val()


def ratcliff_obershelp(s1: str, s2: str) -> float:
    """Ratcliff-Obershelp normalized similarity."""
    return RatcliffObershelp().for_str(s1, s2).nval()


def sift4_simple(s1: str, s2: str) -> int:
    """Sift4 distance, "simplest" variant."""
    return Sift4Simple().for_str(s1, s2).val()


def sift4_common(s1: str, s2: str) -> int:
    """Sift4 distance, "common" variant."""
    return Sift4Common().for_str(s1, s2).val()


def jaro(s1: str, s2: str) -> float:
    """Jaro normalized similarity."""
    return Jaro().for_str(s1, s2).nval()


def jaro_winkler(s1: str, s2: str) -> float:
    """Jaro-Winkler normalized similarity."""
    return JaroWinkler().for_str(s1, s2).nval()


def yujian_bo(s1: str, s2: str) -> float:
    """Yujian-Bo normalization of Levenshtein distance."""
    return YujianBo().for_str(s1, s2).nval()


def mlipns(s1: str, s2: str) -> int:
    """MLIPNS similarity, either 0 or 1."""
    return MLIPNS().for_str(s1, s2).val()


def bag(s1: str, s2: str) -> int:
    """Bag distance."""
    return Bag().for_str(s1, s2).val()


def lig3(s1: str, s2: str) -> float:
    """LIG3 normalized similarity."""
    return LIG3().for_str(s1, s2).nval()


def jaccard(s1: str, s2: str) -> float:
    """Jaccard normalized similarity."""
    return Jaccard().for_str(s1, s2).nval()


def sorensen_dice(s1: str, s2: str) -> float:
    """Sørensen-Dice normalized similarity."""
    return SorensenDice().for_str(s1, s2).nval()


def tversky(s1: str, s2: str) -> float:
    """Tversky normalized similarity."""
    return Tversky().for_str(s1, s2).nval()


def overlap(s1: str, s2: str) -> float:
    """Overlap normalized similarity."""
    return Overlap().for_str(s1, s2).nval()


def cosine(s1: str, s2: str) -> float:
    """Cosine normalized similarity."""
    return Cosine().for_str(s1, s2).nval()


def prefix(s1: str, s2: str) -> int:
    """Length of the common prefix."""
    return Prefix().for_str(s1, s2).val()


def suffix(s1: str, s2: str) -> int:
    """Length of the common suffix."""
    return Suffix().for_str(s1, s2).val()


def length(s1: str, s2: str) -> int:
    """Absolute difference of the lengths."""
    return Length().for_str(s1, s2).val()


def smith_waterman(s1: str, s2: str) -> int:
    """Smith-Waterman similarity."""
    return SmithWaterman().for_str(s1, s2).val()


def entropy_ncd(s1: str, s2: str) -> float:
    """Entropy-based normalized compression distance."""
    return EntropyNCD().for_str(s1, s2).nval()


def roberts(s1: str, s2: str) -> float:
    """Roberts normalized similarity."""
    return Roberts().for_str(s1, s2).nval()