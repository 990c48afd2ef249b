# algokit

A collection of classic data structures and algorithms, written as plain,
readable Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.linked_list` | `SinglyLinkedList` with insertion, deletion, search, reversal and removal of nodes that have a greater value to their right; `main` runs an interactive menu |
| `algokit.two_stacks` | `TwoStacks`: two stacks sharing one fixed-size array |
| `algokit.deque_array` | `CircularDeque`: a bounded deque on a circular array (at most 100 slots) |
| `algokit.bst_merge` | `Node`, `inorder`, `merge_sorted`, `sorted_to_bst`, `merge_trees` for merging binary search trees into a balanced one |
| `algokit.sorting` | `insertion_sort`, `merge_sort`, `selection_sort`, `move_negatives_left`, `reverse_array` |
| `algokit.searching` | `binary_search`, `exponential_search`, `search_sorted_matrix`, `prefix_table`, `kmp_search`, `count_anagrams`, `min_max`, `bits_equal` |
| `algokit.arrays` | `longest_increasing_subsequence`, `replace_with_size_minus_frequency`, `sliding_window_max`, `count_triplets_below`, `min_refuels` |
| `algokit.backtracking` | `is_safe`, `solve_sudoku`, `place_queens`, `rat_in_maze`, `tower_of_hanoi` |
| `algokit.combinatorics` | `binomial`, `catalan`, `sieve_of_eratosthenes`, `count_decodings` |
| `algokit.expressions` | `is_balanced`, `evaluate_postfix` |
| `algokit.crc` | `crc_remainder`, `encode`, `check` for bitwise cyclic redundancy checks |
| `algokit.rover` | `Orientation` and `Rover` for grid navigation by `L`/`R`/move commands |
| `algokit.graphs` | `DisjointSet`, `connected_components`, `kruskal_mst`, `prim_mst` |
| `algokit.concurrency` | `run_demo`: two background threads printing at their own pace while the main loop runs |

Sorting and rearranging functions return new lists and leave their input
unchanged. Errors are raised as exceptions: stacks and deques raise
`OverflowError` when full and `IndexError` when empty, and invalid arguments
raise `ValueError`.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.searching import kmp_search
from algokit.combinatorics import catalan
from algokit.rover import Rover

merge_sort([6, 5, 12, 10, 9, 1])           # [1, 5, 6, 9, 10, 12]
kmp_search("ABABCABAB", "ABABDABACDABABCABAB")  # [10]
[catalan(n) for n in range(6)]             # [1, 1, 2, 5, 14, 42]

rover = Rover(1, 2, "N")
rover.process("LMLMLMLMM")
print(rover)                               # 1 3 N
```

```python
from algokit.graphs import kruskal_mst

edges = [(0, 1, 1), (1, 3, 3), (3, 2, 4), (2, 0, 2), (0, 3, 2), (1, 2, 2)]
kruskal_mst(4, edges)                      # 5
```

```python
from algokit.backtracking import tower_of_hanoi

list(tower_of_hanoi(2))   # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

## Command-line tools

An interactive, menu-driven singly linked list of integers read from standard
input; choose 9 (or end the input) to leave:

```
algokit-linked-list
```

A demonstration of threads printing at different intervals while the main
thread runs. The options `--iterations`, `--main-interval`, `--foo-interval`
and `--bar-interval` change the defaults (3 iterations, 2, 1 and 0.5 seconds):

```
algokit-threads
```