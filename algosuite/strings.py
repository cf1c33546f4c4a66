"""Algorithms over strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import zip_longest
from math import comb

_CLOSERS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_CLOSERS.values())


def is_valid_parentheses(s: str) -> bool:
    """Whether brackets in ``s`` are balanced and properly nested.

    Any character that is not an opening bracket closes the innermost one.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        opener = stack.pop()
        if char in _CLOSERS and _CLOSERS[char] != opener:
            return False
    return not stack


def add_binary(a: str, b: str) -> str:
    """Sum of two binary numerals as a binary numeral."""
    for text in (a, b):
        if set(text) - {"0", "1"}:
            raise ValueError(f"not a binary numeral: {text!r}")
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry += int(x) + int(y)
        digits.append(str(carry % 2))
        carry //= 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def decode_string(s: str) -> str:
    """Expand ``k[text]`` repetitions, nested ones included."""
    stack: list[tuple[str, int]] = []
    current = ""
    count = 0
    for char in s:
        if char == "[":
            stack.append((current, count))
            current, count = "", 0
        elif char == "]":
            if not stack:
                raise ValueError("unbalanced ']'")
            prefix, repeat = stack.pop()
            current = prefix + current * repeat
        elif char.isdigit():
            count = count * 10 + int(char)
        else:
            current += char
    if stack:
        raise ValueError("unclosed '['")
    return current


def score_of_parentheses(s: str) -> int:
    """Score a balanced string: ``()`` is 1, ``AB`` is A + B, ``(A)`` is 2A."""
    stack: list[int] = []
    current = 0
    for char in s:
        if char == "(":
            stack.append(current)
            current = 0
        else:
            if not stack:
                raise ValueError("unbalanced ')'")
            current = stack.pop() + (current * 2 if current else 1)
    return current


def num_tile_possibilities(tiles: str) -> int:
    """Number of distinct non-empty sequences that can be formed from ``tiles``."""
    by_length = [1]
    for count in Counter(tiles).values():
        extended = by_length + [0] * count
        for length, ways in enumerate(by_length):
            for used in range(1, count + 1):
                extended[length + used] += ways * comb(length + used, used)
        by_length = extended
    return sum(by_length) - 1


def get_happy_string(n: int, k: int) -> str:
    """The k-th happy string of length n over 'abc', or '' if there are fewer."""
    prefix = ""
    for position in range(n):
        block = 1 << (n - position - 1)
        for char in "abc":
            if prefix and prefix[-1] == char:
                continue
            if block >= k:
                prefix += char
                break
            k -= block
        else:
            return ""
    return prefix


def find_different_binary_string(nums: Sequence[str]) -> str:
    """A binary string of length ``len(nums)`` that differs from every item."""
    return "".join("1" if text[i] == "0" else "0" for i, text in enumerate(nums))