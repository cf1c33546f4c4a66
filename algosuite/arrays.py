"""Algorithms over integer sequences."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations, pairwise

MODULUS = 1_000_000_007


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the given walls."""
    low, high = 0, len(height) - 1
    best = 0
    while low < high:
        best = max(best, min(height[low], height[high]) * (high - low))
        if height[low] <= height[high]:
            low += 1
        else:
            high -= 1
    return best


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Binary search a matrix whose rows, read in order, form a sorted sequence."""
    if not matrix:
        raise ValueError("matrix has no rows")
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def merge_sorted_into(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` items of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def tuple_same_product(nums: Sequence[int]) -> int:
    """Count tuples (a, b, c, d) of distinct items with a*b == c*d."""
    seen: Counter[int] = Counter()
    total = 0
    for a, b in combinations(nums, 2):
        product = a * b
        total += 8 * seen[product]
        seen[product] += 1
    return total


def num_odd_sum_subarrays(arr: Sequence[int]) -> int:
    """Number of subarrays with an odd sum, modulo 1e9+7."""
    odd = sum(prefix % 2 for prefix in accumulate(arr))
    even = len(arr) - odd
    return (odd + even * odd) % MODULUS


def max_absolute_sum(nums: Iterable[int]) -> int:
    """Largest absolute value of the sum of any subarray (the empty one included)."""
    prefixes = list(accumulate(nums, initial=0))
    return max(prefixes) - min(prefixes)


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Whether ``nums`` is a rotation of a non-decreasing sequence."""
    if not nums:
        return True
    wrapped = [*nums[1:], nums[0]]
    return sum(a > b for a, b in zip(nums, wrapped)) <= 1


def max_ascending_sum(nums: Sequence[int]) -> int:
    """Largest sum of a strictly ascending run."""
    if not nums:
        raise ValueError("nums is empty")
    best = current = nums[0]
    for previous, value in pairwise(nums):
        current = current + value if value > previous else value
        best = max(best, current)
    return best


def count_bad_pairs(nums: Sequence[int]) -> int:
    """Count pairs i < j with j - i != nums[j] - nums[i]."""
    seen: Counter[int] = Counter()
    good = 0
    for index, value in enumerate(nums):
        key = value - index
        good += seen[key]
        seen[key] += 1
    n = len(nums)
    return n * (n - 1) // 2 - good


def max_equal_digit_sum_pair(nums: Iterable[int]) -> int:
    """Largest sum of two items with equal digit sums, or -1 if there is none."""
    best: dict[int, int] = {}
    answer = -1
    for value in nums:
        if value < 0:
            raise ValueError(f"negative value: {value}")
        digits = sum(map(int, str(value)))
        previous = best.get(digits, 0)
        if previous:
            answer = max(answer, value + previous)
        best[digits] = max(previous, value)
    return answer


def longest_monotonic_subarray(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing or strictly decreasing run."""
    if len(nums) == 1:
        return 1
    best = 0
    increasing = decreasing = 1
    for previous, value in pairwise(nums):
        if value > previous:
            increasing, decreasing = increasing + 1, 1
        elif value < previous:
            increasing, decreasing = 1, decreasing + 1
        else:
            increasing = decreasing = 1
        best = max(best, increasing, decreasing)
    return best


def is_array_special(nums: Iterable[int]) -> bool:
    """Whether every pair of neighbours differs in parity."""
    return all(a % 2 != b % 2 for a, b in pairwise(nums))


def query_results(limit: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Number of distinct colours after each (ball, colour) query.

    ``limit`` bounds the ball labels and does not affect the result.
    """
    ball_colour: dict[int, int] = {}
    colour_count: Counter[int] = Counter()
    distinct = 0
    results: list[int] = []
    for ball, colour in queries:
        if ball in ball_colour:
            old = ball_colour[ball]
            colour_count[old] -= 1
            if colour_count[old] == 0:
                distinct -= 1
        ball_colour[ball] = colour
        colour_count[colour] += 1
        if colour_count[colour] == 1:
            distinct += 1
        results.append(distinct)
    return results


def sum_of_good_numbers(nums: Sequence[int], k: int) -> int:
    """Sum of items strictly greater than the items ``k`` places away on either side."""
    n = len(nums)
    return sum(
        value
        for i, value in enumerate(nums)
        if not (i - k >= 0 and value <= nums[i - k])
        and not (i + k < n and value <= nums[i + k])
    )