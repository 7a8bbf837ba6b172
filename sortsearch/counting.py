"""Counting problems over sequences of values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007


def count_distinct(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    return len(set(values))


def collecting_rounds(permutation: Sequence[int]) -> int:
    """Return the rounds needed to collect 1..n in order, scanning left to right each round."""
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("input must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(permutation)}
    return 1 + sum(position[value] < position[value - 1] for value in range(2, n + 1))


def count_distinct_subarrays(values: Iterable[int]) -> int:
    """Return the number of subarrays whose values are all distinct."""
    last_seen: dict[int, int] = {}
    window_start = 0
    total = 0
    for index, value in enumerate(values):
        if value in last_seen:
            window_start = max(window_start, last_seen[value] + 1)
        total += index - window_start + 1
        last_seen[value] = index
    return total


def count_distinct_subsequences(values: Iterable[int]) -> int:
    """Return, modulo ``MOD``, the non-empty subsequences whose values are all distinct."""
    product = 1
    for frequency in Counter(values).values():
        product = product * (frequency + 1) % MOD
    return (product - 1) % MOD


def longest_distinct_run(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive distinct values."""
    last_seen: dict[int, int] = {}
    window_start = 0
    longest = 1
    for index, value in enumerate(values):
        if value in last_seen:
            window_start = max(window_start, last_seen[value] + 1)
        longest = max(longest, index - window_start + 1)
        last_seen[value] = index
    return longest


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not values:
        raise ValueError("at least one value is required")
    best = current = values[-1]
    for value in reversed(values[:-1]):
        current = value + max(0, current)
        best = max(best, current)
    return best