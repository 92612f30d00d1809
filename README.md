# algokit

A collection of classic algorithms and data structures written in plain
Python. The only runtime dependency is `sortedcontainers`.

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
| `algokit.containers` | `IdMap`, `MinHeap`, `MaxHeap`, `find_nearest`, `merge_sorted`, `get_min`, `get_max`, `erase_min`, `erase_max`, `split`, `unique_sorted`, `random_between` |
| `algokit.structures` | `DSU`, `MinQueue`, `PrefixSum`, `PrefixSum2D`, `SegmentTree`, `LazySegmentTree`, `SparseTable`, `IndexedSet`, `IndexedMultiset`, `NIL` |
| `algokit.graph` | `bfs`, `dijkstra`, `bellman_ford`, `floyd_warshall`, `articulation_points`, `bridges`, `scc_kosaraju`, `scc_tarjan`, `topological_sort_dfs`, `KahnTopoSort`, `CycleError`, `INF` |
| `algokit.trees` | `BinaryLifting`, `distinct_colors`, `tree_diameter`, `path_counts`, `euler_tour`, `subtree_ranges` |
| `algokit.matching` | `prefix_function`, `kmp`, `z_function`, `AhoCorasick`, `Trie` |
| `algokit.suffixes` | `StringHash`, `suffix_array`, `lcp_array`, `manacher`, `palindromes`, `minimum_rotation` |
| `algokit.numbertheory` | `gcd`, `lcm`, `extgcd`, `diophantine`, `divisors`, `phi`, `is_prime`, `prime_factors`, `sieve`, `quotient_blocks` |
| `algokit.linalg` | `Matrix`, `identity`, `linear_recurrence` |
| `algokit.modular` | `mod_add`, `mod_sub`, `mod_mul`, `mod_pow`, `mod_inverse`, `mod_div`, `fastpow`, `compare`, `ceiling_division`, `distance_divisible`, `MOD` |
| `algokit.bits` | `zeros_left`, `zeros_right`, `count_ones`, `parity`, `lsb`, `hamming`, `set_bits`, `submasks` |
| `algokit.combinatorics` | `combinations`, `n_choose_r`, `kth_permutation`, `kth_permutation_range`, `kth_perm_string`, `next_combination`, `all_combinations` |
| `algokit.dp` | `count_paths`, `min_path`, `edit_distance`, `elevator_rides`, `knapsack`, `lcs`, `lis_recursive`, `lis_length`, `lis` |
| `algokit.search` | `binary_search_first`, `binary_search_jump`, `binary_search_real`, `binary_search_real_fixed`, `merge_sort`, `ternary_search`, `ternary_search_eps`, `ternary_search_int` |
| `algokit.techniques` | `Query`, `mo_order`, `mos_algorithm`, `Event`, `max_overlap`, `estimate_pi` |

## Conventions

- Graphs and trees are adjacency lists indexed by node, with nodes numbered
  `0..n-1`. Weighted graphs hold `(neighbour, cost)` pairs; edge lists hold
  `(from, to, cost)` triples.
- Unreachable distances in `algokit.graph` are reported as `INF` (`10**18`);
  `bfs` reports `-1` for unreachable nodes.
- `SegmentTree` and `LazySegmentTree` answer range minimum queries and return
  `NIL` (`10**18`) for a range that lies outside the tree.
- Modular arithmetic in `algokit.modular` and `Matrix` products work modulo
  `MOD = 10**9 + 7`.

## Examples

Union–find:

```python
from algokit.structures import DSU

dsu = DSU(5)
dsu.unite(0, 1)
dsu.unite(3, 4)
assert dsu.find(0) == dsu.find(1)
assert dsu.count(3) == 2
assert len(dsu) == 3  # number of disjoint sets
```

Pattern search:

```python
from algokit.matching import kmp

assert kmp("ABABABAB", "ABA") == [0, 2, 4]
```

Suffix array:

```python
from algokit.suffixes import suffix_array

assert suffix_array("banana") == [5, 3, 1, 0, 4, 2]
```

Shortest paths on a weighted graph; `dijkstra` returns the distances and
each node's predecessor on its shortest path (`-1` for the source and for
unreached nodes):

```python
from algokit.graph import dijkstra

adj = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []]
dist, previous = dijkstra(adj, 0)
assert dist == [0, 3, 1, 4]
assert previous == [-1, 2, 0, 1]
```

Number theory:

```python
from algokit.numbertheory import is_prime, prime_factors

assert is_prime(1_000_000_007)
assert prime_factors(100) == {2: 2, 5: 2}
```

## Errors

Errors are raised as Python exceptions rather than returned as status
values: popping or peeking at an empty heap or queue raises `IndexError`,
out-of-range prefix-sum, sparse-table and order-statistic queries raise
`IndexError`, and `topological_sort_dfs` raises `CycleError` on a cyclic
graph. `KahnTopoSort.sort` instead returns an empty list for a cyclic graph,
and `KahnTopoSort.is_cyclic` reports whether that happened.

## What it does not do

`algokit` is a library only: it has no command-line program and reads or
writes no files. The modulus used by `algokit.modular` and `Matrix` is fixed
at `10**9 + 7`.