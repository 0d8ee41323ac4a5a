"""Command line entry point: compare two texts with a named algorithm."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from textdist import plain

_ALGORITHMS: dict[str, Callable[[str, str], float]] = {
    "hamming": lambda s1, s2: float(plain.hamming(s1, s2)),
    "roberts": plain.roberts,
}


def _format(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textdist", description="Compare two texts with the given algorithm."
    )
    parser.add_argument("algorithm", help="algorithm name")
    parser.add_argument("s1", help="first text")
    parser.add_argument("s2", help="second text")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result of comparing two texts with the named algorithm."""
    parser = _parser()
    args = parser.parse_args(argv)
    func = _ALGORITHMS.get(args.algorithm.lower())
    if func is None:
        parser.error("unknown algorithm name")
    print(_format(func(args.s1, args.s2)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())