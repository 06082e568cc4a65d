# algosolve

Solutions to classic algorithm exercises, as plain Python functions grouped
by the kind of data they work on. The package has no dependencies beyond the
standard library.

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

### `algosolve.arrays`

Functions over sequences of integers:

- `two_sum`, `three_sum`, `four_sum`, `smallest_range_i`, `subarray_bitwise_ors`
- `binary_search` (index or -1) and `search_insert` (index or insertion point)
- `array_pair_sum`, `find_content_children`, `distribute_candies`,
  `contains_nearby_duplicate`, `find_length_of_lcis`, `find_lhs`,
  `majority_element`, `find_max_consecutive_ones`, `find_max_average`,
  `next_greater_element`, `plus_one`, `pascal_row`, `max_count`,
  `find_relative_ranks`, `find_error_nums`, `single_number`, `summary_ranges`

Some functions change the list they are given instead of returning a new one:
`merge_sorted(nums1, m, nums2, n)` and `move_zeroes(nums)` return `None`, and
`remove_duplicates(nums)` moves the distinct values of a sorted list to its
front and returns how many there are.

`majority_element` raises `ValueError` on an empty sequence, and
`find_max_average` raises `ValueError` unless `0 < k <= len(nums)`.

### `algosolve.strings`

`add_binary`, `count_binary_substrings`, `convert_to_title`, `str_str`,
`fizz_buzz`, `find_words`, `length_of_last_word`, `longest_common_prefix`,
`longest_palindrome`, `find_lus_length`, `repeated_substring_pattern`,
`reverse_str`, `reverse_vowels`, `reverse_words`, `judge_circle`,
`roman_to_int`, `check_record`, `is_anagram`, `valid_palindrome`,
`is_valid_parentheses`.

`reverse_string(chars)` reverses a list of characters in place.
`repeated_substring_pattern` raises `ValueError` on an empty string and
`reverse_str` raises `ValueError` when `k` is not positive.

### `algosolve.integers`

`has_alternating_bits`, `climb_stairs`, `to_hex` (32-bit two's complement for
negative input), `hamming_distance`, `is_happy`, `find_complement`,
`hamming_weight` (set bits of the 32-bit value), `is_palindrome_number`,
`is_power_of_three`, `is_power_of_two`, `self_dividing_numbers`, `is_ugly`.
`climb_stairs` raises `ValueError` for a negative `n`.

### `algosolve.grid`

- `count_battleships(board)`: ships counted by their top-left `"X"` cell.
- `image_smoother(img)`: each cell replaced by the truncated mean of its 3x3
  neighbourhood; raises `ValueError` on an empty image.
- `matrix_reshape(mat, r, c)`: row-major reshape, or `mat` itself when the
  sizes do not match.
- `valid_square(p1, p2, p3, p4)`: whether four points form a square of
  positive size.

### `algosolve.linked_list`

`ListNode` is a singly linked list node with `val` and `next`; iterating over
a node yields the values from it to the end of the list. `from_values` builds
a list (or `None` for no values) and `to_values` turns one back into a Python
list. The operations are `add_two_numbers`, `get_intersection_node`,
`merge_two_lists` (which reuses the input nodes) and `remove_elements`.

### `algosolve.tree`

`TreeNode` has `val`, `left` and `right`; `NaryNode` has `val` and
`children`. `from_level_order` builds a binary tree from a level-order list
in which `None` marks a missing child.

Binary tree functions: `average_of_levels`, `is_balanced`, `find_tilt`,
`sorted_array_to_bst`, `count_nodes` (for complete trees),
`diameter_of_binary_tree`, `max_depth`, `min_depth`, `get_minimum_difference`
(returns `2**31 - 1` for fewer than two nodes), `has_path_sum`,
`is_same_tree`, `search_bst`, `find_second_minimum_value` (-1 when there is
none), `is_subtree`, `find_target`. For n-ary trees, `preorder` lists the
values in preorder.

### `algosolve.hashmap`

`HashMap(num_buckets=10000)` maps integer keys to integer values using
separate-chaining buckets. It offers `put(key, value)`, `get(key, default=-1)`,
`remove(key)`, `key in table` and `len(table)`. A non-positive bucket count
raises `ValueError`.

## Examples

```python
from algosolve.arrays import two_sum, three_sum
from algosolve.strings import roman_to_int, convert_to_title
from algosolve.linked_list import from_values, to_values, add_two_numbers
from algosolve.tree import from_level_order, max_depth
from algosolve.hashmap import HashMap

two_sum([2, 7, 11, 15], 9)           # [0, 1]
three_sum([-1, 0, 1, 2, -1, -4])     # [[-1, -1, 2], [-1, 0, 1]]
roman_to_int("MCMXCIV")              # 1994
convert_to_title(28)                 # "AB"

total = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
to_values(total)                     # [7, 0, 8]

root = from_level_order([3, 9, 20, None, None, 15, 7])
max_depth(root)                      # 3

table = HashMap()
table.put(1, 10)
table.get(1)                         # 10
```

## What it does not do

The package is a library only: it installs no command-line program, and it
reads no input files. Each function is called directly from Python.