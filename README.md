# textdist

A collection of algorithms that measure how similar or how different two
sequences are: strings, word lists, bigrams or any sequences of hashable items.
It has no dependencies beyond the standard library.

## Installation

```
pip install textdist
```

## Quick start

The `textdist.plain` module has one function per algorithm. Each takes two
strings and returns the algorithm's default value: a count for the counting
metrics, and a float between 0.0 and 1.0 for the metrics that are normalized
by nature.

```python
from textdist import plain

plain.hamming("abc", "acbd")            # 3
plain.levenshtein("kitten", "sitting")  # 3
plain.damerau_levenshtein("abc", "acbd")  # 2
plain.lcsseq("abcdef", "xbcegf")        # 4
plain.jaro_winkler("martha", "marhta")  # 0.9611...
plain.ratcliff_obershelp("abc", "acbd") # 0.5714...
```

Functions in `textdist.plain`: `bag`, `cosine`, `damerau_levenshtein`,
`damerau_levenshtein_restricted`, `entropy_ncd`, `hamming`, `jaccard`, `jaro`,
`jaro_winkler`, `lcsseq`, `lcsstr`, `length`, `levenshtein`, `lig3`, `mlipns`,
`overlap`, `prefix`, `ratcliff_obershelp`, `roberts`, `sift4_common`,
`sift4_simple`, `smith_waterman`, `sorensen_dice`, `suffix`, `tversky` and
`yujian_bo`.

## Algorithm objects

Every algorithm is also a dataclass in its own module under
`textdist.algorithms`, whose fields are its settings. Each can be applied to
different kinds of input:

```python
from textdist.algorithms.hamming import Hamming
from textdist.algorithms.damerau_levenshtein import DamerauLevenshtein

h = Hamming()
res = h.for_str("abc", "acbd")
res.val(), res.dist(), res.sim()   # 3, 3, 1
res.ndist(), res.nsim()            # 0.75, 0.25

h.for_words("the first edition", "the second edition").val()  # 1
h.for_seq([1, 2, 3], [1, 3, 2, 4]).val()                        # 3
h.for_iter(range(1, 4), range(1, 6)).val()                     # 2

Hamming(truncate=True).for_str("hi mark", "hi markus").val()   # 0
DamerauLevenshtein(restricted=True).for_str("ab", "bca").val()  # 3
```

The methods are `for_str` (characters), `for_words` (whitespace-separated
words), `for_bigrams` (pairs of adjacent characters), `for_seq` and
`for_iter`.

Counting metrics return a `textdist.result.DistanceResult` with `val()`,
`dist()`, `sim()`, `nval()`, `ndist()` and `nsim()`. Metrics that are
normalized by nature return a `textdist.result.NormalizedResult` with
`nval()`, `ndist()` and `nsim()`. Both also carry `max`, `len1` and `len2`.

| Module | Class | Result |
| --- | --- | --- |
| `bag` | `Bag` | `DistanceResult` |
| `cosine` | `Cosine` | `NormalizedResult` |
| `damerau_levenshtein` | `DamerauLevenshtein` | `DistanceResult` |
| `entropy_ncd` | `EntropyNCD` | `NormalizedResult` |
| `hamming` | `Hamming` | `DistanceResult` |
| `jaccard` | `Jaccard` | `NormalizedResult` |
| `jaro` | `Jaro` | `NormalizedResult` |
| `jaro_winkler` | `JaroWinkler` | `NormalizedResult` |
| `lcsseq` | `LCSSeq` | `DistanceResult` |
| `lcsstr` | `LCSStr` | `DistanceResult` |
| `length` | `Length` | `DistanceResult` |
| `levenshtein` | `Levenshtein` | `DistanceResult` |
| `lig3` | `LIG3` | `NormalizedResult` |
| `mlipns` | `MLIPNS` | `DistanceResult` |
| `overlap` | `Overlap` | `NormalizedResult` |
| `prefix` | `Prefix` | `DistanceResult` |
| `ratcliff_obershelp` | `RatcliffObershelp` | `DistanceResult` |
| `roberts` | `Roberts` | `NormalizedResult` |
| `sift4_common` | `Sift4Common` | `DistanceResult` |
| `sift4_simple` | `Sift4Simple` | `DistanceResult` |
| `smith_waterman` | `SmithWaterman` | `DistanceResult` |
| `sorensen_dice` | `SorensenDice` | `NormalizedResult` |
| `suffix` | `Suffix` | `DistanceResult` |
| `tversky` | `Tversky` | `NormalizedResult` |
| `yujian_bo` | `YujianBo` | `NormalizedResult` |

The helpers `intersect_count`, `union_count` and `diff_count` in
`textdist.multiset` work on `collections.Counter` objects.

## Command line

```
textdist hamming hello hi
textdist roberts cat hat
```

The command takes an algorithm name (`hamming` or `roberts`, in any letter
case) and two texts, and prints the result. Any other name is reported as an
error.

## What it does not do

There is no module of ready-made normalized string functions: `textdist.plain`
returns each algorithm's default value only. For a normalized value, call
`nval()`, `ndist()` or `nsim()` on the result of an algorithm object, for
example `Hamming().for_str("abc", "acbd").nval()`, which gives 0.75.

## Running the tests

```
pip install -e ".[test]"
pytest
```