"""Classic puzzles over lists of integers and characters."""

from __future__ import annotations

import heapq
import math
import operator
from collections import Counter
from functools import reduce
from itertools import accumulate, pairwise
from typing import MutableSequence, Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in the sorted ``nums``, or -1 when absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def contains_duplicate(nums: Sequence[int]) -> bool:
    """True when some value appears more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Multiset intersection, in the order the values occur in ``nums2``."""
    counts = Counter(nums1)
    result = []
    for num in nums2:
        if counts[num] > 0:
            result.append(num)
            counts[num] -= 1
    return result


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore vote; the candidate is 0 for an empty sequence."""
    count = 0
    candidate = 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    current = 0
    best = nums[0]
    for num in nums:
        current = max(num, current + num)
        best = max(best, current)
    return best


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def missing_number(nums: Sequence[int]) -> int:
    """The one value of 0..len(nums) that is absent."""
    size = len(nums)
    return size * (size + 1) // 2 - sum(nums)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    non_zero = [num for num in nums if num != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def pascals_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for size in range(1, num_rows + 1):
        if triangle:
            inner = [a + b for a, b in pairwise(triangle[-1])]
            row = [1, *inner, 1] if size > 1 else [1]
        else:
            row = [1]
        triangle.append(row)
    return triangle


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other value."""
    prefix = [1, *accumulate(nums, operator.mul)][:-1] if nums else []
    suffix = [1, *accumulate(reversed(nums), operator.mul)][:-1][::-1] if nums else []
    return [left * right for left, right in zip(prefix, suffix)]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact the sorted ``nums`` so its first k values are unique; return k."""
    if not nums:
        return 0
    k = 1
    for previous, current in pairwise(list(nums)):
        if current != previous:
            nums[k] = current
            k += 1
    return k


def reverse_in_place(chars: MutableSequence[str]) -> None:
    """Reverse ``chars`` in place."""
    chars.reverse()


def single_number(nums: Sequence[int]) -> int:
    """The value that appears once when every other appears twice."""
    return reduce(operator.xor, nums, 0)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two values adding up to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return [seen[complement], index]
        seen[num] = index
    return []


__all__ = [
    "max_profit",
    "binary_search",
    "contains_duplicate",
    "intersect",
    "majority_element",
    "max_subarray",
    "merge_sorted",
    "missing_number",
    "move_zeroes",
    "pascals_triangle",
    "plus_one",
    "product_except_self",
    "remove_duplicates",
    "reverse_in_place",
    "single_number",
    "two_sum",
]

_ = math  # kept for callers that expect math-backed helpers alongside