"""Roman numeral conversion and validation."""

from __future__ import annotations

import argparse
import sys

INVALID_MESSAGE = "This is not a valid number"

_SYMBOLS = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# Which larger symbols each symbol may be subtracted from.
_SUBTRACTIVE = {"I": "VX", "X": "LC", "C": "DM"}

_SINGLE_USE = "VLD"


def to_roman(num: int) -> str:
    """Write a positive integer with the greedy Roman symbols; 0 or less gives ''."""
    if num <= 0:
        return ""
    parts = []
    for symbol, value in _SYMBOLS:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def to_decimal(text: str) -> int:
    """Evaluate a Roman numeral, rejecting malformed symbol sequences.

    Raises ValueError for unknown characters, for a repeated V, L or D, for
    illegal subtractive pairs, for four equal symbols in a row and for a
    non-positive total.
    """
    unknown = set(text) - _VALUES.keys()
    if unknown:
        raise ValueError(f"invalid Roman numeral character(s) in {text!r}")

    total = 0
    valid = True
    seen: set[str] = set()
    for index, symbol in enumerate(text):
        following = text[index + 1] if index + 1 < len(text) else None
        if symbol in seen and symbol in _SINGLE_USE:
            valid = False
        seen.add(symbol)
        if following is not None and _VALUES[symbol] < _VALUES[following]:
            if index > 0 and text[index - 1] == symbol:
                valid = False
            if following not in _SUBTRACTIVE.get(symbol, ""):
                valid = False
            total -= _VALUES[symbol]
        else:
            if index >= 3 and text[index - 3 : index + 1] == symbol * 4:
                valid = False
            total += _VALUES[symbol]

    if not valid or total <= 0:
        raise ValueError(f"invalid Roman numeral: {text!r}")
    return total


def parse_roman(text: str) -> int:
    """Return the value of a Roman numeral written in its canonical form."""
    value = to_decimal(text)
    if to_roman(value) != text:
        raise ValueError(f"non-canonical Roman numeral: {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Read Roman numerals from standard input and print their values."""
    parser = argparse.ArgumentParser(
        description="Convert Roman numerals read from standard input to integers."
    )
    parser.parse_args(argv)
    for token in sys.stdin.read().split():
        try:
            print(parse_roman(token))
        except ValueError:
            print(INVALID_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())