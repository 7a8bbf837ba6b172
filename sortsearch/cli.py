"""Command line front end: reads a problem's input from stdin or a file and prints the answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from sortsearch.counting import (
    collecting_rounds,
    count_distinct,
    count_distinct_subarrays,
    count_distinct_subsequences,
    longest_distinct_run,
    max_subarray_sum,
)
from sortsearch.greedy import (
    count_apartment_assignments,
    max_customers,
    max_movies,
    min_gondolas,
    min_stick_cost,
    smallest_missing_sum,
)
from sortsearch.multisets import (
    assign_tickets,
    count_towers,
    find_pair_with_sum,
    josephus_order,
    longest_passages,
)


class _Tokens:
    """Whitespace-separated integers read one after another."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def next_int(self) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not an integer: {word!r}") from None

    def take(self, count: int) -> list[int]:
        return [self.next_int() for _ in range(count)]

    def take_pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.next_int(), self.next_int()) for _ in range(count)]

    def take_list(self) -> list[int]:
        return self.take(self.next_int())


def _apartments(tokens: _Tokens) -> str:
    n, m, k = tokens.take(3)
    desired = tokens.take(n)
    apartments = tokens.take(m)
    return str(count_apartment_assignments(desired, apartments, k))


def _concert_tickets(tokens: _Tokens) -> str:
    n, m = tokens.take(2)
    prices = tokens.take(n)
    offers = tokens.take(m)
    sold = assign_tickets(prices, offers)
    return "\n".join("-1" if paid is None else str(paid) for paid in sold)


def _ferris_wheel(tokens: _Tokens) -> str:
    n, limit = tokens.take(2)
    return str(min_gondolas(tokens.take(n), limit))


def _josephus(tokens: _Tokens) -> str:
    return " ".join(map(str, josephus_order(tokens.next_int())))


def _movie_festival(tokens: _Tokens) -> str:
    return str(max_movies(tokens.take_pairs(tokens.next_int())))


def _restaurant_customers(tokens: _Tokens) -> str:
    return str(max_customers(tokens.take_pairs(tokens.next_int())))


def _sum_of_two_values(tokens: _Tokens) -> str:
    n, target = tokens.take(2)
    pair = find_pair_with_sum(tokens.take(n), target)
    if pair is None:
        return "IMPOSSIBLE"
    return f"{pair[0] + 1} {pair[1] + 1}"


def _traffic_lights(tokens: _Tokens) -> str:
    length, n = tokens.take(2)
    return "\n".join(map(str, longest_passages(length, tokens.take(n))))


def _on_list(solve: Callable[[list[int]], int]) -> Callable[[_Tokens], str]:
    return lambda tokens: str(solve(tokens.take_list()))


_PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "apartments": _apartments,
    "collecting-numbers": _on_list(collecting_rounds),
    "concert-tickets": _concert_tickets,
    "distinct-numbers": _on_list(count_distinct),
    "distinct-subarrays": _on_list(count_distinct_subarrays),
    "distinct-subsequences": _on_list(count_distinct_subsequences),
    "ferris-wheel": _ferris_wheel,
    "josephus": _josephus,
    "max-subarray-sum": _on_list(max_subarray_sum),
    "missing-coin-sum": _on_list(smallest_missing_sum),
    "movie-festival": _movie_festival,
    "playlist": _on_list(longest_distinct_run),
    "restaurant-customers": _restaurant_customers,
    "stick-lengths": _on_list(min_stick_cost),
    "sum-of-two-values": _sum_of_two_values,
    "towers": _on_list(count_towers),
    "traffic-lights": _traffic_lights,
}


def main(argv: list[str] | None = None) -> int:
    """Solve one problem from its whitespace-separated integer input."""
    parser = argparse.ArgumentParser(
        prog="sortsearch", description="Solve a sorting and searching problem."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument("-i", "--input", help="read input from this file instead of stdin")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        output = _PROBLEMS[args.problem](_Tokens(text))
    except ValueError as exc:
        print(f"sortsearch: error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())