"""Polynomial string hash over base-36 chunks of a key."""

from __future__ import annotations

import sys
import time
from typing import Sequence

from .mt19937 import MT19937

_MASK64 = 0xFFFFFFFFFFFFFFFF
_CHUNK = 6
_MAX_CHUNKS = 5
MAX_KEY_LENGTH = _CHUNK * _MAX_CHUNKS

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


def letter_digit_to_number(letter: str) -> int:
    """Map a-z (any case) to 0-25 and 0-9 to 26-35."""
    if letter in "0123456789":
        return ord(letter) % 48 + 26
    if "A" <= letter <= "Z":
        letter = letter.lower()
    return ord(letter) % 97


def chunk_value(chunk: str) -> int:
    """Base-36 value of a chunk of at most six characters, left-padded with zeros."""
    if len(chunk) > _CHUNK:
        raise ValueError(f"chunk longer than {_CHUNK} characters: {chunk!r}")
    result = 0
    for ch in chunk:
        result = result * 36 + letter_digit_to_number(ch)
    return result & _MASK64


def chunk_values(key: str) -> list[int]:
    """Values of the six-character chunks of key, taken from its end, padded to five."""
    if len(key) > MAX_KEY_LENGTH:
        raise ValueError(f"key longer than {MAX_KEY_LENGTH} characters")
    values = []
    end = len(key)
    while end > 0:
        start = max(0, end - _CHUNK)
        values.append(chunk_value(key[start:end]))
        end = start
    values.extend([0] * (_MAX_CHUNKS - len(values)))
    return values


class StringHash:
    """Hash function h(k) = sum of r[i] * w[4 - i], modulo 2**64."""

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def generate_r_values(self) -> None:
        """Replace the multipliers with values drawn from a clock-seeded generator."""
        generator = MT19937(time.time_ns() & 0xFFFFFFFF)
        self.r_values = [generator() for _ in range(_MAX_CHUNKS)]

    def __call__(self, key: str) -> int:
        w = chunk_values(key)
        total = sum(r * wv for r, wv in zip(self.r_values, reversed(w)))
        return total & _MASK64


def main(argv: Sequence[str] | None = None) -> int:
    """Print the debug-mode hash of the string given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())