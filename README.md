# leetsolve

A small library of solutions to well-known algorithm puzzles. The solutions
are grouped by the kind of data they work on. Each one is a plain function
that takes ordinary Python values (ints, strings, lists) and returns a result.
The library has no dependencies beyond the standard library and needs
Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `leetsolve.trees`

Binary trees are built from `TreeNode` objects, a dataclass with `val`,
`left` and `right`. Two trees compare equal when their shapes and values
match. `from_level_order(values)` builds a tree from a level-order list,
where `None` marks a missing child. An empty list, or one that starts with
`None`, gives `None`.

- `bst_to_gst(root)`: turns a binary search tree into a greater-sum tree. Each value becomes the sum of all values greater than or equal to it. The tree is changed in place and returned.
- `average_of_subtree(root)`: counts the nodes whose value equals the average of their subtree, with the average truncated toward zero.
- `range_sum_bst(root, low, high)`: adds up the node values that lie between `low` and `high`, inclusive.
- `reverse_odd_levels(root)`: reverses the values on every odd level of a perfect binary tree. The tree is changed in place and returned.

```python
from leetsolve.trees import from_level_order, range_sum_bst

root = from_level_order([10, 5, 15, 3, 7, None, 18])
range_sum_bst(root, 7, 15)  # 32
```

### `leetsolve.arrays`

- `count_pairs(nums, target)`: counts the pairs whose sum is less than `target`.
- `decode(encoded, first)`: rebuilds an array from its pairwise XOR encoding and its first element.
- `get_final_state(nums, k, multiplier)`: `k` times, multiplies the first smallest element by `multiplier`.
- `find_center(edges)`: finds the centre of a star graph.
- `find_the_prefix_common_array(a, b)`: for each prefix length, counts the numbers that appear in both prefixes.
- `largest_local(grid)`: finds the maximum of every 3x3 window of a square grid.
- `left_right_difference(nums)`: gives the absolute difference between the sums to the left and to the right of each element.
- `max_matrix_sum(matrix)`: finds the largest sum you can reach by negating adjacent pairs.
- `min_moves_to_seat(seats, students)`: finds the fewest total moves to seat every student. Raises `ValueError` when there are fewer seats than students.
- `count_points(points, queries)`: for each circle `(x, y, r)`, counts the points on or inside it.
- `smaller_numbers_than_current(nums)` and `smaller_numbers_than_current_sorted(nums)`: for each element, count the elements strictly smaller than it. The second version sorts first.
- `subset_xor_sum(nums)`: adds up the XOR totals of every subset.
- `transform_array(nums)`: replaces each value with its parity, even values first.
- `two_sum(nums, target)`: gives the indices of the first pair that adds up to `target`, or `[]` if there is none.
- `max_width_of_vertical_area(points)`: finds the widest gap between consecutive x coordinates.

```python
from leetsolve.arrays import two_sum, decode

two_sum([2, 7, 11, 15], 9)  # [0, 1]
decode([1, 2, 3], 1)        # [1, 0, 2, 1]
```

### `leetsolve.strings`

- `count_consistent_strings(allowed, words)`: counts the words made only of characters in `allowed`.
- `convert_date_to_binary(date)`: writes each dash-separated number of a date in binary.
- `interpret(command)`: interprets a goal-parser command. `G` becomes `G`, `()` becomes `o` and `(al)` becomes `al`.
- `find_permutation_difference(s, t)`: adds up how far each character of `t` is from its position in `s`.
- `remove_outer_parentheses(s)`: removes the outer pair of parentheses from each primitive group.
- `reverse_degree(s)`: adds up each letter's reversed alphabet position times its 1-based index.
- `reverse_prefix(s, k)`: reverses the first `k` characters. Raises `ValueError` if `k` is outside `0..len(s)`.
- `balanced_string_split(s)`: counts the points where the `L` and `R` counts seen so far are equal.

```python
from leetsolve.strings import convert_date_to_binary, interpret

convert_date_to_binary("2080-02-29")  # "100000100000-10-11101"
interpret("G()(al)")                  # "Goal"
```

### `leetsolve.integers`

- `min_bit_flips(start, goal)`: counts the bits that differ between the 32-bit forms of the two numbers.
- `mirror_distance(n)`: gives the absolute difference between `n` and `n` with its digits reversed.
- `xor_operation(n, start)`: XORs together `start + 2 * i` for `i` from `0` to `n - 1`.

```python
from leetsolve.integers import min_bit_flips, mirror_distance

min_bit_flips(10, 7)   # 3
mirror_distance(25)    # 27
```

## What it does not do

This package is a library only. It has no command-line tool, and it does
not read puzzle input from files or standard input. Call the functions from
your own Python code.