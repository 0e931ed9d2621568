# algokit

Compact, dependency-free algorithms on integer lists, strings, integers,
sorted data and graphs. Everything is plain functions over built-in types,
plus one union-find class.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.arrays`

Queries and in-place rearrangements of integer lists:
`two_sum`, `remove_duplicates`, `remove_element`, `trap`, `max_subarray`,
`sort_colors`, `merge_sorted`, `single_number`, `rotate`, `contains_duplicate`,
`move_zeroes`, `find_duplicate`, `reverse_in_place`, `intersection`,
`third_max`, `find_disappeared_numbers`, `find_max_consecutive_ones`,
`can_place_flowers`, `merge_sort`, `is_sorted_and_rotated`, `divide_array`,
`longest_nice_subarray`, `min_operations`.

`remove_duplicates`, `remove_element`, `sort_colors`, `merge_sorted`,
`rotate`, `move_zeroes` and `reverse_in_place` change the list they are given;
`remove_duplicates` and `remove_element` return how many leading elements hold
the result. `two_sum` returns a pair of indices, or `None` when no pair adds up
to the target. `merge_sort` returns a new sorted list.

### `algokit.strings`

`length_of_longest_substring`, `longest_palindrome`, `is_valid_parentheses`,
`first_occurrence`, `longest_valid_parentheses`, `multiply_strings`,
`length_of_last_word`, `is_alphanumeric_palindrome`, `reverse_words`,
`is_anagram`, `add_strings`, `number_of_substrings`, `smallest_number`.

`multiply_strings` and `add_strings` work on non-negative decimal strings of
any length. `number_of_substrings` accepts only the characters `a`, `b` and `c`.

### `algokit.numbers`

`reverse_integer` (returns 0 when the result leaves the 32-bit signed range),
`is_palindrome_number`, `plus_one`, `climb_stairs`, `missing_number`,
`is_power_of_three`, `is_perfect_number`, `fib`.

### `algokit.search`

`find_median_sorted_arrays`, `search_rotated`, `search_range`, `search_insert`,
`maximum_candies`, `max_frequency`, `maximum_count`, `repair_cars`,
`min_zero_array`.

### `algokit.graphs`

- `DisjointSet(n)` – union-find over `0..n-1` with `find(x)`,
  `union(x, y, weight)` and `cost(x)`, the bitwise AND of every edge weight
  joined into the component of `x`.
- `construct_distanced_sequence`, `find_all_recipes`,
  `count_complete_components`, `minimum_cost`.

## Errors

Inputs with no meaningful answer raise `ValueError`: for example an empty list
passed to `max_subarray`, `third_max`, `maximum_candies` or `repair_cars`, two
empty lists passed to `find_median_sorted_arrays`, `climb_stairs(0)`,
`construct_distanced_sequence(0)`, and recipe and ingredient lists of
different lengths in `find_all_recipes`.

## Examples

```python
from algokit.arrays import two_sum, merge_sort
from algokit.strings import longest_palindrome, multiply_strings
from algokit.search import search_range
from algokit.graphs import minimum_cost

two_sum([2, 7, 11, 15], 9)                  # (0, 1)
merge_sort([5, 2, 3, 1])                    # [1, 2, 3, 5]
longest_palindrome("babad")                 # "bab"
multiply_strings("123", "456")              # "56088"
search_range([5, 7, 7, 8, 8, 10], 8)        # (3, 4)
minimum_cost(5, [[0, 1, 7], [1, 3, 7], [1, 2, 1]], [[0, 3], [3, 4]])  # [1, -1]
```

## What it does not do

algokit is a library only: it has no command-line program, reads no input
files and keeps no state between calls beyond the `DisjointSet` you create.