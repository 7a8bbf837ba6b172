"""Problems solved with ordered multisets, queues and two pointers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


def assign_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int | None]:
    """Sell each customer the dearest remaining ticket not above their offer.

    Customers are served in order. The result holds the price each one paid,
    or ``None`` when no ticket was cheap enough.
    """
    available = SortedList(prices)
    sold: list[int | None] = []
    for offer in offers:
        index = available.bisect_right(offer)
        sold.append(available.pop(index - 1) if index else None)
    return sold


def count_towers(cubes: Iterable[int]) -> int:
    """Return the number of towers built by placing each cube, in order.

    A cube goes on the tower with the smallest top strictly larger than it,
    or starts a new tower when there is none.
    """
    tops = SortedList()
    for cube in cubes:
        index = tops.bisect_right(cube)
        if index < len(tops):
            del tops[index]
        tops.add(cube)
    return len(tops)


def longest_passages(length: int, positions: Iterable[int]) -> list[int]:
    """Return the longest unlit passage after each traffic light is added.

    The street runs from 0 to ``length``; every position must lie strictly
    inside it and appear only once.
    """
    lights = SortedList([0, length])
    gaps = SortedList([length])
    longest: list[int] = []
    for position in positions:
        if not 0 < position < length:
            raise ValueError(f"position {position} is outside the street (0, {length})")
        index = lights.bisect_left(position)
        right = lights[index]
        if right == position:
            raise ValueError(f"a light is already at position {position}")
        left = lights[index - 1]
        gaps.remove(right - left)
        gaps.add(position - left)
        gaps.add(right - position)
        lights.add(position)
        longest.append(gaps[-1])
    return longest


def josephus_order(n: int) -> list[int]:
    """Return the order in which children 1..n leave when every second one is removed."""
    circle = deque(range(1, n + 1))
    order: list[int] = []
    while circle:
        circle.rotate(-1)
        order.append(circle.popleft())
    return order


def find_pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return zero-based positions ``(i, j)``, ``i < j``, of two values adding up to ``target``.

    Returns ``None`` when no such pair exists.
    """
    ordered = sorted((value, index) for index, value in enumerate(values))
    lo, hi = 0, len(ordered) - 1
    while lo < hi:
        total = ordered[lo][0] + ordered[hi][0]
        if total == target:
            first, second = ordered[lo][1], ordered[hi][1]
            return (min(first, second), max(first, second))
        if total > target:
            hi -= 1
        else:
            lo += 1
    return None