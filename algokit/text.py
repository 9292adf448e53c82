"""String problems: mixed comparisons, expansions, LCS and typing errors."""

from __future__ import annotations

from typing import Iterable, Optional


def katastrophic_compare(a: str, b: str) -> str:
    """Compare two 'letters then number' strings; returns '<', '=' or '>'.

    Letter prefixes compare alphabetically; on a tie the numeric parts
    compare by length first and then digit by digit.
    """
    limit = min(len(a), len(b))
    split = next((i for i in range(limit) if a[i] < "a"), None)
    if split is None:
        letters_a, letters_b = a[:limit], b[:limit]
        number_a = number_b = ""
    else:
        letters_a, letters_b = a[:split], b[:split]
        number_a, number_b = a[split:], b[split:]

    if letters_a != letters_b:
        return ">" if letters_a > letters_b else "<"
    key_a = (len(number_a), number_a)
    key_b = (len(number_b), number_b)
    if key_a == key_b:
        return "="
    return ">" if key_a > key_b else "<"


def _letter_mask(word: str) -> int:
    mask = 0
    for char in word:
        if not "a" <= char <= "z":
            raise ValueError(f"expected lowercase letters, got {char!r}")
        mask |= 1 << (ord(char) - ord("a"))
    return mask


def group_expansions(pairs: Iterable[tuple[str, str]]) -> list[list[int]]:
    """Group 1-based indices of (s, t) pairs that expand to the same string.

    A pair is reduced to s without its trailing letters that occur in t,
    together with the set of letters of t; groups are ordered by that key.
    """
    groups: dict[tuple[str, int], list[int]] = {}
    for index, (s, t) in enumerate(pairs, start=1):
        mask = _letter_mask(t)
        end = len(s)
        while end and mask & _letter_mask(s[end - 1]):
            end -= 1
        groups.setdefault((s[:end], mask), []).append(index)
    return [groups[key] for key in sorted(groups)]


def longest_common_subsequence(a: str, b: str) -> str:
    """One longest common subsequence of a and b; '' when they share nothing."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, char_a in enumerate(a, start=1):
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    chars = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(chars))


def extra_letters(target: str, typed: str) -> Optional[int]:
    """Letters to delete from typed to obtain target, or None if impossible."""
    if not target:
        raise ValueError("target must not be empty")
    matched = 0
    for char in typed:
        if char == target[matched]:
            matched += 1
            if matched == len(target):
                return len(typed) - len(target)
    return None