"""Boggle board generation and straight-line word search."""

from __future__ import annotations

import sys
from typing import Sequence

from .mt19937 import MT19937

Board = list[list[str]]

# Scrabble letter frequencies, A through Z.
_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
_LETTERS = "".join(
    chr(ord("A") + offset) * count for offset, count in enumerate(_FREQUENCIES)
)

_DIRECTIONS = ((0, 1), (1, 0), (1, 1))


def gen_board(n: int, seed: int) -> Board:
    """Generate an n-by-n board of letters drawn with Scrabble frequencies."""
    rng = MT19937(seed)
    return [[_LETTERS[rng() % len(_LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board: Board) -> str:
    """Render the board, each letter right-aligned in two columns."""
    return "".join(
        "".join(f"{letter:>2}" for letter in row) + "\n" for row in board
    )


def print_board(board: Board) -> None:
    """Print the board to standard output."""
    sys.stdout.write(format_board(board))


def parse_dict(fname: str) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return the words and all their proper prefixes."""
    try:
        with open(fname, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: set[str] = set()
    prefixes: set[str] = {""}
    for word in text.split():
        words.add(word)
        prefixes.update(word[:i] for i in range(1, len(word)))
    return words, prefixes


def _longest_along(
    dictionary: set[str], prefix: set[str], board: Board, row: int, col: int, dr: int, dc: int
) -> str | None:
    n = len(board)
    word = ""
    longest = None
    while row < n and col < n:
        word += board[row][col]
        in_dict = word in dictionary
        if not in_dict and word not in prefix:
            break
        if in_dict:
            longest = word
        row += dr
        col += dc
    return longest


def boggle(dictionary: set[str], prefix: set[str], board: Board) -> set[str]:
    """Find, from every cell, the longest word running right, down or diagonally."""
    n = len(board)
    found: set[str] = set()
    for row in range(n):
        for col in range(n):
            for dr, dc in _DIRECTIONS:
                word = _longest_along(dictionary, prefix, board, row, col, dr, dc)
                if word is not None:
                    found.add(word)
    return found


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a board, search it against a dictionary file and print the words."""
    args = list(sys.argv[1:] if argv is None else argv)
    usage = "Usage: boggle-driver <size> <seed> <dictionary file>"
    if len(args) < 3:
        print(usage)
        return 1
    try:
        size = int(args[0])
        seed = int(args[1])
    except ValueError:
        print(usage)
        return 1
    board = gen_board(size, seed)
    print_board(board)
    try:
        dictionary, prefix = parse_dict(args[2])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    found = boggle(dictionary, prefix, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())