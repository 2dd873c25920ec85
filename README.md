# dsakit

A small library of classic data-structure and algorithm routines written in
plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.tree` | `TreeNode` with `balance_bst`, `bst_from_preorder`, `build_tree`, `diameter`, `distance_k`, `flatten`, `good_nodes`, `invert_tree`, `is_cousins`, `is_symmetric`, `is_valid_bst`, `level_order`, `lowest_common_ancestor`, `max_path_sum`, `num_trees`, `right_side_view`, `zigzag_level_order` |
| `dsakit.codec` | `serialize` / `deserialize` for binary trees, in a breadth-first, comma-terminated form with `#` for a missing child |
| `dsakit.sums` | `two_sum`, `three_sum`, `four_sum` |
| `dsakit.backtracking` | `solve_n_queens`, `total_n_queens`, `combination_sum`, `generate_parenthesis`, `letter_combinations`, `permute`, `remove_invalid_parentheses`, `word_break` |
| `dsakit.sudoku` | `solve_sudoku`, `is_valid_sudoku` |
| `dsakit.grid` | `exist`, `find_words`, `num_islands`, `rotate` |
| `dsakit.bits` | `ones_complement`, `twos_complement`, `subsets`, `count_set_bits`, `flip_bit`, `is_odd`, `is_power_of_two`, `largest_power_of_two`, `is_bit_set`, `rightmost_one_position`, `set_bit`, `xor_swap`, `toggle_case`, `unset_bit` |
| `dsakit.number_theory` | `catalan`, `factors`, `power`, `gcd`, `is_prime`, `ncr`, `prime_factors`, `primes_up_to` |
| `dsakit.structures` | `DirectAddressMap`, `KthLargest`, `MedianFinder`, `LRUCache` |
| `dsakit.frequency` | `top_k_frequent`, `first_uniq_char`, `group_anagrams`, `frequency_sort` |
| `dsakit.sequences` | `max_sliding_window`, `assign_tasks`, `max_profit`, `max_area`, `longest_common_prefix`, `max_sub_array`, `is_valid_parentheses` |
| `dsakit.linked_list` | `ListNode`, `LinkedList`, `list_from_values`, `values_of`, `merge_k_lists`, `merge_two_lists`, `reverse_list` |

## Examples

```python
from dsakit.codec import deserialize, serialize
from dsakit.tree import level_order

root = deserialize("3,9,20,#,#,15,7,#,#,#,#,")
print(level_order(root))        # [[3], [9, 20], [15, 7]]
print(serialize(root))          # "3,9,20,#,#,15,7,#,#,#,#,"
```

```python
from dsakit.backtracking import generate_parenthesis
from dsakit.number_theory import primes_up_to

print(generate_parenthesis(2))  # ['(())', '()()']
print(primes_up_to(20))         # [2, 3, 5, 7, 11, 13, 17, 19]
```

```python
from dsakit.structures import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)        # 1
cache.put(3, 3)     # evicts key 2
cache.get(2)        # -1
```

```python
from dsakit.linked_list import LinkedList

items = LinkedList()
for value in (5, 10, 15):
    items.append(value)
items.reverse()
print(list(items))  # [15, 10, 5]
print(items)        # 15->10->5->NULL
```

## Behaviour worth knowing

- Some functions change what they are given in place: `solve_sudoku` fills
  the board (and returns `False`, leaving it unchanged, when no solution
  exists), `rotate` turns the square matrix a quarter turn clockwise,
  `flatten` and `invert_tree` rework the tree, and `reverse_list`,
  `merge_two_lists` and `LinkedList.reverse` relink existing nodes.
  `num_islands` does not modify its grid; `balance_bst` and `merge_k_lists`
  build new nodes.
- Errors are raised rather than signalled by special return values where
  there is no sensible answer: `two_sum` raises `ValueError` when no pair
  adds up to the target, `max_path_sum` on an empty tree, `max_sub_array`
  and `longest_common_prefix` on empty input, `MedianFinder.find_median` on an
  empty stream, and the bit helpers for positions below 1 (positions are
  1-based). `LinkedList` positional operations raise `IndexError`.
- Lookups that miss return `-1`: `DirectAddressMap.get`, `LRUCache.get`,
  `first_uniq_char` and `rightmost_one_position(0)`.
  `DirectAddressMap` only accepts keys in `range(capacity)` (by default
  `0..1000000`) and raises `ValueError` outside it.
- `TreeNode` and `ListNode` compare by identity, so
  `lowest_common_ancestor` and `distance_k` take the nodes themselves.

## What it does not do

This is a library only: it installs no command-line program, and every
routine works on in-memory Python values with nothing read from or written
to files.