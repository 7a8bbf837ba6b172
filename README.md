# sortsearch

Solutions to a family of classic sorting and searching problems: greedy
matching, sliding windows, interval sweeps and ordered-multiset queries.
Every function takes plain Python sequences of integers and returns plain
Python values.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library overview

### `sortsearch.greedy`

| Function | Answers |
| --- | --- |
| `count_apartment_assignments(desired, apartments, tolerance)` | How many applicants get an apartment within `tolerance` of their desired size, each used at most once |
| `min_gondolas(weights, max_weight)` | Fewest gondolas when each holds at most two people and at most `max_weight` |
| `max_movies(movies)` | Most whole `(start, end)` movies one person can watch |
| `smallest_missing_sum(coins)` | Smallest positive sum that no subset of the coins makes |
| `min_stick_cost(lengths)` | Least total change to make all sticks the same length |
| `max_customers(visits)` | Most customers present at once, given `(arrival, departure)` pairs |

```python
from sortsearch.greedy import (
    count_apartment_assignments, min_gondolas, max_movies,
    smallest_missing_sum, min_stick_cost, max_customers,
)

count_apartment_assignments([60, 45, 80, 60], [30, 60, 75], 5)  # 2
min_gondolas([7, 2, 3, 9], 10)                                  # 3
max_movies([(3, 5), (4, 9), (5, 8)])                            # 2
smallest_missing_sum([2, 9, 1, 2, 7])                           # 6
min_stick_cost([2, 3, 1, 5, 2])                                 # 5
max_customers([(5, 8), (2, 4), (3, 9)])                         # 2
```

`min_stick_cost` raises `ValueError` for an empty input. `max_customers`
expects all times to be distinct and raises `ValueError` when a time is both
an arrival and a departure.

### `sortsearch.counting`

| Function | Answers |
| --- | --- |
| `count_distinct(values)` | Number of distinct values |
| `collecting_rounds(permutation)` | Rounds needed to collect 1..n in order, scanning left to right each round |
| `count_distinct_subarrays(values)` | Subarrays whose elements are all distinct |
| `count_distinct_subsequences(values)` | Non-empty subsequences with distinct elements, modulo `MOD` (10^9 + 7) |
| `longest_distinct_run(values)` | Longest contiguous run without a repeated value |
| `max_subarray_sum(values)` | Largest sum of a non-empty contiguous subarray |

```python
from sortsearch.counting import (
    count_distinct, collecting_rounds, count_distinct_subarrays,
    count_distinct_subsequences, longest_distinct_run, max_subarray_sum,
)

count_distinct([2, 3, 2, 2, 3])                     # 2
collecting_rounds([4, 2, 1, 5, 3])                  # 3
count_distinct_subarrays([1, 2, 1, 3])              # 8
count_distinct_subsequences([1, 2, 1, 3])           # 11
longest_distinct_run([1, 2, 1, 3, 2, 7, 4, 2])      # 5
max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2])       # 9
```

`collecting_rounds` raises `ValueError` unless its input is a permutation of
1..n; `max_subarray_sum` raises `ValueError` for an empty input.

### `sortsearch.multisets`

| Function | Answers |
| --- | --- |
| `assign_tickets(prices, offers)` | For each customer in turn, the dearest remaining ticket not above their offer, or `None` |
| `count_towers(cubes)` | Number of towers when each cube goes on the tower with the smallest top strictly larger than it |
| `longest_passages(length, positions)` | Longest unlit passage after each traffic light is added |
| `josephus_order(n)` | Removal order when every second child of 1..n is removed |
| `find_pair_with_sum(values, target)` | Zero-based positions `(i, j)`, `i < j`, of two values summing to `target`, or `None` |

```python
from sortsearch.multisets import (
    assign_tickets, count_towers, longest_passages, josephus_order,
    find_pair_with_sum,
)

assign_tickets([5, 3, 7, 8, 5], [4, 8, 3])   # [3, 8, None]
count_towers([3, 8, 2, 1, 5])                # 2
longest_passages(8, [3, 6, 2])               # [5, 3, 3]
josephus_order(7)                            # [2, 4, 6, 1, 5, 3, 7]
find_pair_with_sum([2, 7, 5, 1], 8)          # (1, 3)
find_pair_with_sum([1, 2], 10)               # None
```

`longest_passages` raises `ValueError` for a position outside the open
interval `(0, length)` or one that already holds a light.

## Command line

Installing the package provides a `sortsearch` command. It takes the name of
a problem, reads that problem's whitespace-separated integer input from
standard input (or from a file given with `-i`/`--input`) and prints the
answer.

```
sortsearch --help
echo "5 2 3 2 2 3" | sortsearch distinct-numbers        # 2
sortsearch sum-of-two-values -i input.txt
```

Problems: `apartments`, `collecting-numbers`, `concert-tickets`,
`distinct-numbers`, `distinct-subarrays`, `distinct-subsequences`,
`ferris-wheel`, `josephus`, `max-subarray-sum`, `missing-coin-sum`,
`movie-festival`, `playlist`, `restaurant-customers`, `stick-lengths`,
`sum-of-two-values`, `towers`, `traffic-lights`.

Input layouts:

- Single-list problems (`collecting-numbers`, `distinct-numbers`,
  `distinct-subarrays`, `distinct-subsequences`, `max-subarray-sum`,
  `missing-coin-sum`, `playlist`, `stick-lengths`, `towers`): `n` followed by
  `n` values.
- `apartments`: `n m k`, then `n` desired sizes, then `m` apartment sizes.
- `concert-tickets`: `n m`, then `n` prices, then `m` offers. Prints one line
  per customer, `-1` when no ticket was sold.
- `ferris-wheel`: `n x`, then `n` weights.
- `josephus`: `n`. Prints the removal order on one line.
- `movie-festival`, `restaurant-customers`: `n`, then `n` pairs.
- `sum-of-two-values`: `n target`, then `n` values. Prints two one-based
  positions, or `IMPOSSIBLE`.
- `traffic-lights`: `length n`, then `n` positions. Prints one line per light.

Malformed input, or input a function rejects, makes the command print an
error to standard error and exit with status 1.

## Scope

The package solves each problem from a complete input held in memory. It
does not stream input, keep state between runs, or offer any server or
interactive interface.