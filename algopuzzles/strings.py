"""Classic puzzles over strings."""

from __future__ import annotations

from collections import Counter
from itertools import zip_longest
from typing import Sequence

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_CLOSERS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_CLOSERS.values())


def add_binary(a: str, b: str) -> str:
    """Sum of two binary strings, as long as the longer operand or one digit more."""
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(int(x) + int(y) + carry, 2)
        digits.append(str(bit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def fizz_buzz(n: int) -> list[str]:
    """The FizzBuzz sequence from 1 to ``n``."""
    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word, ignoring trailing spaces."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def longest_common_prefix(strs: Sequence[str]) -> str:
    """The longest prefix shared by every string."""
    if not strs:
        return ""
    prefix = strs[0]
    for text in strs[1:]:
        while not text.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; unknown characters count as zero."""
    values = [_ROMAN.get(ch, 0) for ch in s]
    total = 0
    for current, following in zip_longest(values, values[1:]):
        if following is not None and current < following:
            total -= current
        else:
            total += current
    return total


def is_anagram(s: str, t: str) -> bool:
    """True when ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_palindrome_text(s: str) -> bool:
    """Palindrome test over ASCII letters and digits, ignoring case."""
    kept = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return kept == kept[::-1]


def is_valid_parentheses(s: str) -> bool:
    """True when every bracket is closed by its partner in the right order.

    Any character that is not an opening bracket closes the innermost open one;
    only the three closing brackets must match it.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        top = stack.pop()
        if ch in _CLOSERS and _CLOSERS[ch] != top:
            return False
    return not stack