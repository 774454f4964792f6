"""Puzzles over single integers."""

from __future__ import annotations

from typing import Callable


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    a, b = 1, 2
    for _ in range(3, n + 1):
        a, b = b, a + b
    return b


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number; values up to 1 are returned as they are."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """Smallest version in 1..n for which ``is_bad`` holds, given it is monotone."""
    left, right = 1, n
    while left < right:
        mid = (left + right) // 2
        if is_bad(mid):
            right = mid
        else:
            left = mid + 1
    return left


def is_palindrome_number(x: int) -> bool:
    """True when the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_power_of_three(n: int) -> bool:
    """True when ``n`` is 3 raised to a non-negative power."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def integer_sqrt(x: int) -> int:
    """Floor of the square root of ``x``; negative input gives 0."""
    if x in (0, 1):
        return x
    left, right, result = 1, x, 0
    while left <= right:
        mid = (left + right) // 2
        if mid <= x // mid:
            result = mid
            left = mid + 1
        else:
            right = mid - 1
    return result