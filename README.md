# dsakit

A collection of classic data structures and algorithms written as plain
Python, with no dependencies outside the standard library.

## Installation

```
pip install dsakit
```

## Modules

### `dsakit.sorting`

- `heap_sort(values)` and `insertion_sort(values)` return a new ascending list.
- `radix_sort(values)` sorts non-negative integers least significant digit
  first; `counting_sort_by_digit(values, place)` is its stable single-digit
  pass (`place` is 1, 10, 100, ...). Negative numbers raise `ValueError`.
- `randomized_quick_sort(values, rng=None)` picks a random pivot in every
  partition and returns a `QuickSortResult` with `values` and `comparisons`.
  Pass a `random.Random` for reproducible runs.

### `dsakit.searching`

- `binary_search(values, target)`: an index of `target` in an ascending
  sequence, or `-1`.
- `search_sorted_matrix(matrix, target)`: whether `target` is in a matrix
  whose rows and columns ascend.
- `max_subarray_sum(values)`: largest sum of a non-empty contiguous run.
- `second_largest_and_smallest(values)`: a pair of the second largest and
  second smallest entries.
- `satisfy_equation(values)`: the lexicographically smallest indices
  `[a, b, c, d]` with `values[a] + values[b] == values[c] + values[d]`
  over two disjoint pairs, or `[-1, -1, -1, -1]`.
- `maximum_toys(costs, budget)`: how many items can be bought, cheapest first.

### `dsakit.trees`

- `BinarySearchTree`: `insert`, `delete` (returns whether the key was
  present), `inorder` (ascending list), `min`, plus `len`, `in` and
  iteration in order. Equal keys go to the right.
- `Trie`: `insert`, `search` and `starts_with` over words of any characters.

### `dsakit.dynamic`

- `lcs_length(x, y)` and `lcs(x, y)`: longest common subsequence length and
  one such subsequence.
- `longest_palindromic_subsequence_length(text)`.
- `common_suffix_length(x, y)`: length of the longest common run ending at
  the end of both inputs.
- `knapsack(weights, values, capacity)`: 0/1 knapsack best value.
- `coin_change_ways(coins, total)`: number of coin combinations.
- `subset_sum(values, total)`: whether a subset adds up to `total`.

### `dsakit.expressions`

- `infix_to_postfix(expression)` and `infix_to_prefix(expression)` for
  single-character operands and `+ - * / ^` with parentheses.
- `evaluate_postfix(expression)` for single-digit operands and
  `+ - * / % ^`; division and remainder truncate toward zero, spaces and
  tabs are ignored.
- `precedence(operator)`.
- Malformed input raises `ExpressionError` (a `ValueError`).

### `dsakit.matrix`

- `spiral_fill(values, rows, cols)`, `sorted_spiral(matrix)`,
  `add_matrices(first, second)` and `format_matrix(matrix)`, which returns
  the matrix as text, one row per line.

### `dsakit.containers`

- `LRUCache(capacity)`: `get` (returns `-1` for a missing key) and `put`.
- `BoundedQueue(capacity=5)` and `LinkedQueue`: `enqueue`, `dequeue`,
  `is_empty`; the bounded queue also has `front` and `is_full`.
- `BoundedStack(capacity=5)` and `QueueStack`: `push`, `pop`, `top`,
  `is_empty`.
- `SnapshotArray(length)`: `set`, `snap` and `get(index, snap_id)`.
- Adding to a full container raises `ContainerFullError`; reading from an
  empty one raises `ContainerEmptyError`.

### `dsakit.misc`

- `celsius_to_fahrenheit`, `multiplication_table(n, upto=10)`,
  `fibonacci(count)`, `reverse_each_word(text)`.
- `hanoi_moves(disks, source="A", auxiliary="B", target="C")` returns a
  list of `Move` records.
- `booth_multiply(multiplicand, multiplier, width=4)` and `booth_trace`,
  which returns each register state as a `BoothStep`.

### `dsakit.linked_lists`

- `SinglyLinkedList` and `DoublyLinkedList`: `insert_at_head`,
  `insert_at_tail`, `insert_at_position` and `delete_at` with 1-based
  positions; `DoublyLinkedList.merge_sort` sorts in place.
- `CircularLinkedList`: `insert_after`, `delete` and `is_circular`.
- `merge_sorted(first, second)` splices two ascending singly linked lists
  into one, leaving the inputs empty.

## Examples

```python
from dsakit.sorting import heap_sort, radix_sort
from dsakit.dynamic import lcs, knapsack
from dsakit.expressions import infix_to_postfix, evaluate_postfix
from dsakit.containers import LRUCache
from dsakit.trees import BinarySearchTree

heap_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
radix_sort([170, 45, 75, 90, 802, 24])  # [24, 45, 75, 90, 170, 802]

lcs("abcdefg", "abefhk")                # "abef"
knapsack([10, 20, 30], [60, 100, 120], 50)  # 220

infix_to_postfix("a+b*(c^d-e)")         # "abcd^e-*+"
evaluate_postfix("23*4+")               # 10

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                            # 1

tree = BinarySearchTree([8, 3, 1, 6, 7, 10, 14, 4])
tree.delete(10)
tree.inorder()                          # [1, 3, 4, 6, 7, 8, 14]
```

## What it does not do

dsakit is a library only. It has no command-line program and no
interactive menus: functions return values instead of printing them, and
reading input is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```