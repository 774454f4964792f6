# algopuzzles

Solutions to a set of classic algorithm puzzles. Each one is a plain function
that works on ordinary Python values: lists, strings and integers. Binary trees
and singly linked lists use two small node classes, `TreeNode` and `ListNode`.

## Installation

```
pip install algopuzzles
```

Python 3.10 or newer is needed. The package has no runtime dependencies.

## Modules

### `algopuzzles.arrays`

- `max_profit(prices)`: best profit from one buy and one later sell, or 0.
  Raises `ValueError` for an empty list.
- `binary_search(nums, target)`: index of `target` in a sorted list, or -1.
- `contains_duplicate(nums)`: whether any value repeats.
- `intersect(nums1, nums2)`: multiset intersection, in `nums2` order.
- `majority_element(nums)`: Boyer-Moore vote; 0 for an empty list.
- `max_subarray(nums)`: largest sum of a non-empty contiguous run. Raises
  `ValueError` for an empty list.
- `merge_sorted(nums1, m, nums2, n)`: merges the first `n` values of `nums2`
  into the first `m` of `nums1`, in place. Raises `ValueError` if `nums1` is
  shorter than `m + n` or `nums2` holds fewer than `n` values.
- `missing_number(nums)`: the one value of `0..len(nums)` that is absent.
- `move_zeroes(nums)`: moves zeros to the end in place, keeping order.
- `pascals_triangle(num_rows)`: the first rows of Pascal's triangle.
- `plus_one(digits)`: adds one to a number given as decimal digits and
  returns a new list.
- `product_except_self(nums)`: for each position, the product of all others.
- `remove_duplicates(nums)`: compacts a sorted list in place so its first `k`
  values are unique, and returns `k`.
- `reverse_in_place(chars)`: reverses a list in place.
- `single_number(nums)`: the value that appears once when the rest appear twice.
- `two_sum(nums, target)`: indices of two values adding up to `target`, or `[]`.

### `algopuzzles.strings`

- `add_binary(a, b)`: sum of two binary strings.
- `fizz_buzz(n)`: the FizzBuzz sequence from 1 to `n`.
- `length_of_last_word(s)`: length of the last space-separated word.
- `longest_common_prefix(strs)`: longest prefix shared by every string.
- `roman_to_int(s)`: value of a Roman numeral; unknown characters count as 0.
- `is_anagram(s, t)`: whether `t` is a rearrangement of `s`.
- `is_palindrome_text(s)`: palindrome test over ASCII letters and digits,
  ignoring case.
- `is_valid_parentheses(s)`: whether brackets are properly closed. Any
  character that is not an opening bracket closes the innermost open one;
  only `)`, `}` and `]` must match it.

### `algopuzzles.arithmetic`

- `climb_stairs(n)`: ways to climb `n` steps one or two at a time.
- `fib(n)`: the `n`-th Fibonacci number.
- `first_bad_version(n, is_bad)`: smallest version in `1..n` for which the
  monotone predicate `is_bad` holds.
- `is_palindrome_number(x)`: whether the decimal digits read the same both
  ways; negative numbers are not.
- `is_power_of_three(n)`: whether `n` is a power of three.
- `integer_sqrt(x)`: floor of the square root.

### `algopuzzles.trees`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `build_tree(values)`: builds a tree from level-order values, with `None`
  for a missing child.
- `is_balanced`, `max_depth`, `min_depth`, `has_path_sum(root, target_sum)`,
  `is_same_tree(p, q)`, `is_symmetric`.
- `invert_tree(root)`: mirrors the tree in place and returns the root.

### `algopuzzles.linked_lists`

- `ListNode(val=0, next=None)`: a singly linked list node.
- `build_list(values)`: builds a list from values in order.
- `list_values(head)`: the values of a list; raises `ValueError` if it has a
  cycle.
- `has_cycle(head)`: cycle detection with two pointers.
- `merge_two_lists(list1, list2)`: splices two sorted lists into one; on equal
  values the node from `list2` comes first.
- `reverse_list(head)`: reverses the list in place and returns the new head.

## Examples

```python
from algopuzzles.arrays import two_sum, move_zeroes
from algopuzzles.strings import add_binary, roman_to_int
from algopuzzles.arithmetic import first_bad_version
from algopuzzles.trees import build_tree, max_depth
from algopuzzles.linked_lists import build_list, list_values, reverse_list

two_sum([2, 7, 11, 15], 9)          # [0, 1]

nums = [0, 1, 0, 3, 12]
move_zeroes(nums)
nums                                # [1, 3, 12, 0, 0]

add_binary("11", "1")               # "100"
roman_to_int("MCMXCIV")             # 1994

first_bad_version(10, lambda v: v >= 4)   # 4

root = build_tree([3, 9, 20, None, None, 15, 7])
max_depth(root)                     # 3

list_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
```

## Changing arguments in place

`merge_sorted`, `move_zeroes`, `remove_duplicates`, `reverse_in_place` and
`invert_tree` change what they are given. `merge_two_lists` and
`reverse_list` relink the nodes they are given rather than copying them.
`plus_one` leaves its argument alone and returns a new list.

## What it does not do

The package is a library of functions only. It has no command-line program
and reads or writes no files.

## Running the tests

```
pip install "algopuzzles[test]"
pytest
```