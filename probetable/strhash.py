"""String hash over case-insensitive alphanumeric keys."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from probetable.mt19937 import MT19937

_MASK64 = (1 << 64) - 1
_GROUPS = 5
_GROUP_LEN = 6
_BASE = 36

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


def letter_digit_to_number(letter: str | int) -> int:
    """Map 'a'-'z' to 0-25 and '0'-'9' to 26-35.

    Any other character keeps its character code, taken as a 64-bit unsigned
    value (negative codes wrap around).
    """
    code = ord(letter) if isinstance(letter, str) else letter
    x = code & _MASK64
    if 47 < code < 58:
        x -= 22
    elif 96 < x < 123:
        x -= 97
    return x & _MASK64


def _char_codes(key: str) -> list[int]:
    """Byte values of the key as signed chars, lower-cased for ASCII letters."""
    codes = []
    for byte in key.encode("utf-8", "surrogateescape"):
        if 65 <= byte <= 90:
            byte += 32
        codes.append(byte - 256 if byte >= 128 else byte)
    return codes


class StringHash:
    """Hash a string by packing base-36 groups and weighting them by r-values."""

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, key: str) -> int:
        values = [letter_digit_to_number(c) for c in _char_codes(key)]
        w = [0] * _GROUPS
        remaining = values[::-1]
        for group in range(_GROUPS):
            chunk = remaining[group * _GROUP_LEN:(group + 1) * _GROUP_LEN]
            if not chunk:
                break
            total = 0
            mult = 1
            for value in chunk:
                total = (total + value * mult) & _MASK64
                mult = (mult * _BASE) & _MASK64
            w[_GROUPS - 1 - group] = total
        return sum(r * wi for r, wi in zip(self.r_values, w)) & _MASK64

    def generate_r_values(self, seed: int | None = None) -> None:
        """Replace the r-values with random ones, seeded from the clock by default."""
        if seed is None:
            seed = time.time_ns()
        generator = MT19937(seed & 0xFFFFFFFF)
        self.r_values = [generator() for _ in range(_GROUPS)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the hash of the first argument using the fixed r-values."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())