# cpalgos

A small library of classic algorithms and data structures of the kind used in
programming contests. It is pure Python and depends on nothing outside the
standard library.

## Installation

```
pip install cpalgos
```

To run the test suite, install the test extra and run pytest from the
project directory:

```
pip install "cpalgos[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `cpalgos.bst` | `BinarySearchTree` (`insert`, `search`, `remove`, `in`, `len`, in-order iteration of keys), `BSTNode`, `remove_root` |
| `cpalgos.binary_tree` | `TreeNode` (`insert_left`, `insert_right`), `height`, `in_order`, `pre_order`, `post_order`, `in_order_iterative` |
| `cpalgos.union_find` | `UnionFind` over elements 1..n (`find`, `union`, `connected`), `process_operations` |
| `cpalgos.dynamic` | `knapsack`, `unbounded_knapsack`, `min_coins`, `longest_increasing_subsequence` |
| `cpalgos.shortest_paths` | `has_negative_cycle`, `dijkstra_dense`, `dijkstra`, `floyd_warshall`, `format_distance_matrix` |
| `cpalgos.traversal` | `region_sizes`, `smallest_region`, `has_cycle`, `reachable`, `is_reachable` |
| `cpalgos.graph_problems` | `is_graphic` (Erdős–Gallai), `prim_mst_cost`, `tsp_min_tour` |
| `cpalgos.number_theory` | `gcd`, `lcm`, `is_prime`, `primes_up_to`, `mulmod`, `powmod`, `miller_rabin` |
| `cpalgos.combinatorics` | `is_set`, `union_bits`, `intersect_bits`, `complement`, `catalan`, `divisibility`, `hanoi_moves`, `josephus` |
| `cpalgos.geometry` | `haversine_distance`, `manhattan`, `classify_triangle`, `TriangleKind`, `deg2rad`, `rad2deg` |
| `cpalgos.sequences` | `max_subarray_sum`, `binary_search`, `merge_sort_inversions` |
| `cpalgos.strings` | `longest_common_subsequence`, `longest_common_substring`, `levenshtein` |

## Examples

```python
from cpalgos.bst import BinarySearchTree
from cpalgos.dynamic import knapsack, min_coins
from cpalgos.strings import levenshtein
from cpalgos.union_find import UnionFind, process_operations

knapsack(15, [4, 2, 10, 1, 2], [12, 1, 4, 1, 2])   # 15
min_coins(17, [2, 5, 10])                          # 3
min_coins(3, [2])                                  # None: cannot be made
levenshtein("rosettacode", "raisethysword")        # 8

uf = UnionFind(5)
uf.union(1, 2)
uf.connected(1, 2)                                 # True
process_operations(3, [("F", 1, 2), ("C", 1, 2), ("C", 1, 3)])  # ["S", "N"]

tree = BinarySearchTree()
for key in (50, 30, 70, 20, 40):
    tree.insert(key, None)
tree.remove(30)
list(tree)                                         # [20, 40, 50, 70]
```

## Notes on behaviour

- `dijkstra`, `dijkstra_dense` and `min_coins` return `None` when there is no
  answer; `binary_search` returns `None` when the target is absent.
- `prim_mst_cost` raises `ValueError` when the graph is not connected.
- `merge_sort_inversions` returns a pair: the sorted list and the inversion count.
- `catalan(n)` returns term `n` (counting from 1) of the sequence
  1, 2, 2, 3, 4, 5, 7, ..., where each term after the fourth is the sum of the
  terms two and three places before it; it is not the Catalan numbers.
- `miller_rabin` runs a single round with a random base; pass an object with
  a `randrange` method as `rng` to make it deterministic.
- `divisibility` takes a decimal numeral as a string and returns three
  booleans: divisible by 2, by 3 and by 5.
- Invalid input raises an ordinary Python exception, usually `ValueError`
  (`KeyError` from `BinarySearchTree.remove`, `IndexError` from `UnionFind`
  for elements outside 1..n). Nothing prints or returns a status code.

## What the package does not do

This is a library only. It ships no command-line programs: nothing reads
problem input from standard input or prints answers. Parsing input and
formatting output are left to the caller; the one exception is
`format_distance_matrix`, which renders a distance matrix as text.