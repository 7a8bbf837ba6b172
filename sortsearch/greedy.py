"""Greedy and two-pointer answers to classic sorting problems."""

from __future__ import annotations

from collections.abc import Iterable


def count_apartment_assignments(
    desired: Iterable[int], apartments: Iterable[int], tolerance: int
) -> int:
    """Count applicants who can get an apartment within ``tolerance`` of their wish.

    Each applicant and each apartment is used at most once.
    """
    wishes = sorted(desired)
    sizes = sorted(apartments)
    i = j = assigned = 0
    while i < len(wishes) and j < len(sizes):
        if wishes[i] - tolerance > sizes[j]:
            j += 1
        elif wishes[i] + tolerance < sizes[j]:
            i += 1
        else:
            i += 1
            j += 1
            assigned += 1
    return assigned


def min_gondolas(weights: Iterable[int], max_weight: int) -> int:
    """Return the fewest gondolas of capacity ``max_weight`` carrying at most two people each."""
    ordered = sorted(weights)
    lo, hi = 0, len(ordered) - 1
    pairs = 0
    while lo < hi:
        if ordered[lo] + ordered[hi] <= max_weight:
            lo += 1
            pairs += 1
        hi -= 1
    return len(ordered) - pairs


def max_movies(movies: Iterable[tuple[int, int]]) -> int:
    """Return how many whole movies, given as ``(start, end)``, one person can watch."""
    watched = 0
    last_end = -1
    for start, end in sorted(movies, key=lambda movie: (movie[1], movie[0])):
        if start >= last_end:
            watched += 1
            last_end = end
    return watched


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Return the smallest positive sum that no subset of ``coins`` adds up to."""
    missing = 1
    for coin in sorted(coins):
        if coin <= missing:
            missing += coin
    return missing


def min_stick_cost(lengths: Iterable[int]) -> int:
    """Return the least total change that makes all sticks the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("at least one stick is required")
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def max_customers(visits: Iterable[tuple[int, int]]) -> int:
    """Return the most customers present at once, visits given as ``(arrival, departure)``.

    All arrival and departure times must be distinct.
    """
    pairs = list(visits)
    arrivals = sorted(arrival for arrival, _ in pairs)
    departures = sorted(departure for _, departure in pairs)
    i = j = present = most = 0
    while i < len(arrivals) and j < len(departures):
        if arrivals[i] < departures[j]:
            present += 1
            i += 1
        elif arrivals[i] > departures[j]:
            present -= 1
            j += 1
        else:
            raise ValueError(f"time {arrivals[i]} is both an arrival and a departure")
        most = max(most, present)
    return most