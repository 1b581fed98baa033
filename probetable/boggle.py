"""Boggle board generation and straight-line word search."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence, Set

from probetable.mt19937 import MT19937

Board = list[list[str]]

# Scrabble letter frequencies for A-Z.
_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
_LETTERS = [
    letter
    for letter, count in zip("ABCDEFGHIJKLMNOPQRSTUVWXYZ", _FREQUENCIES)
    for _ in range(count)
]

_DIRECTIONS = ((0, 1), (1, 0), (1, 1))


def gen_board(n: int, seed: int) -> Board:
    """Build an n-by-n board of letters drawn with Scrabble frequencies."""
    if n < 0:
        raise ValueError("board size must not be negative")
    rng = MT19937(seed & 0xFFFFFFFF)
    return [[_LETTERS[rng() % len(_LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render the board, each cell right-aligned in a width of two."""
    n = len(board)
    return "".join(
        "".join(f"{board[i][j]:>2}" for j in range(n)) + "\n" for i in range(n)
    )


def print_board(board: Sequence[Sequence[str]]) -> None:
    """Write the board to standard output."""
    print(format_board(board), end="")


def parse_dict(fname: str | os.PathLike[str]) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return the words and all their proper prefixes.

    The prefix set always contains the empty string.
    """
    try:
        with open(fname, "rb") as fh:
            data = fh.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: set[str] = set()
    prefixes: set[str] = {""}
    for raw in data.split():
        word = raw.decode("utf-8", "surrogateescape")
        words.add(word)
        prefixes.update(word[:i] for i in range(1, len(word)))
    return words, prefixes


def _extend(
    dictionary: Set[str],
    prefixes: Set[str],
    board: Sequence[Sequence[str]],
    word: str,
    result: set[str],
    r: int,
    c: int,
    dr: int,
    dc: int,
) -> bool:
    """Grow word along one direction, recording the longest dictionary word found."""
    if r >= len(board) or c >= len(board[0]):
        return False
    word += board[r][c]
    if word in prefixes:
        if _extend(dictionary, prefixes, board, word, result, r + dr, c + dc, dr, dc):
            return True
        if word in dictionary:
            result.add(word)
            return True
        return False
    if word in dictionary:
        result.add(word)
        return True
    return False


def boggle(
    dictionary: Set[str], prefixes: Set[str], board: Sequence[Sequence[str]]
) -> set[str]:
    """Find the longest words running right, down or diagonally from each cell."""
    result: set[str] = set()
    n = len(board)
    for i in range(n):
        for j in range(n):
            for dr, dc in _DIRECTIONS:
                _extend(dictionary, prefixes, board, "", result, i, j, dr, dc)
    return result


def _atoi(text: str) -> int:
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit() or not ch.isascii():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a board, print it and list the dictionary words found on it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = _atoi(args[0])
    seed = _atoi(args[1])
    board = gen_board(size, seed)
    print_board(board)
    dictionary, prefixes = parse_dict(args[2])
    found = boggle(dictionary, prefixes, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())