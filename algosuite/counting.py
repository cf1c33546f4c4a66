"""Counting and combinatorial construction."""

from __future__ import annotations

from math import comb


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` stairs taking one or two steps at a time."""
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(3, n + 1):
        previous, current = current, previous + current
    return current


def num_trees(n: int) -> int:
    """Number of structurally distinct binary search trees on ``n`` keys."""
    if n < 0:
        return 0
    return comb(2 * n, n) // (n + 1)


def construct_distanced_sequence(n: int) -> list[int]:
    """The lexicographically largest sequence where 1 appears once and each
    ``i`` in 2..n appears twice, exactly ``i`` places apart."""
    if n < 1:
        raise ValueError("n must be at least 1")
    size = 2 * n - 1
    result = [0] * size
    used = [False] * (n + 1)

    def place(index: int) -> bool:
        while index < size and result[index]:
            index += 1
        if index == size:
            return True
        for value in range(n, 0, -1):
            if used[value]:
                continue
            partner = index if value == 1 else index + value
            if partner >= size or result[partner]:
                continue
            result[index] = result[partner] = value
            used[value] = True
            if place(index + 1):
                return True
            result[index] = result[partner] = 0
            used[value] = False
        return False

    place(0)
    return result


def _splits_to(x: int, target: int) -> bool:
    """Whether the digits of ``x`` cut into pieces can sum to ``target``."""
    if x == target:
        return True
    if x == 0:
        return target == 0
    limit = min(x, 1000)
    divisor = 10
    while divisor <= limit:
        if _splits_to(x // divisor, target - x % divisor):
            return True
        divisor *= 10
    return False


def punishment_number(n: int) -> int:
    """Sum of ``i*i`` over 1..n where the digits of ``i*i`` split to sum to ``i``."""
    return sum(i * i for i in range(1, n + 1) if _splits_to(i * i, i))