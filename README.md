# contestkit

Classic data structures and algorithms for competitive programming and
algorithm study, in plain Python with no dependencies beyond the standard
library.

## Installation

```
pip install contestkit
```

To run the test suite:

```
pip install "contestkit[test]"
pytest
```

## What is inside

**Range structures**

- `contestkit.fenwick`: `FenwickTree` (point add, prefix and range sums),
  `FenwickTree2D` (point add, rectangle sums), `count_inversions`
- `contestkit.segment_tree`: `SegmentTree` (point assignment, range sum)
- `contestkit.lazy_segment_tree`: `LazySegmentTree` (range maximum with lazy
  range assignment; pending values pushed to a child add to what the child
  already has pending)
- `contestkit.segment_tree_2d`: `SegmentTree2D` (point assignment, rectangle sum
  on a square grid)
- `contestkit.lazy_segment_tree_2d`: `LazySegmentTree2D` (rectangle assignment,
  rectangle sum on a square grid)
- `contestkit.persistent`: `PersistentSegmentTree`, `PersistentNode`,
  `RangeSummary` (sum, minimum and maximum per version)
- `contestkit.sparse_table`: `SparseTable` (any idempotent combine, `min` by
  default), `MinMaxSparseTable`
- `contestkit.merge_sort_tree`: `MergeSortTree` (count values `<=` a bound in a range)
- `contestkit.prefix_sum`: `build_prefix_sum`, `submatrix_sum`
- `contestkit.mo`: `DistinctCountQueries`, `MoQuery` (offline distinct-value
  counts over subarrays)

**Disjoint sets**

- `contestkit.dsu`: `DSU` (union by size), `RankDSU` (union by rank),
  `RollbackDSU` (undo the latest merge with `rollback`)

**Strings**

- `contestkit.z_function`: `z_function`
- `contestkit.kmp`: `prefix_function`, `kmp_search`
- `contestkit.manacher`: `Manacher` with `is_palindrome`
- `contestkit.hashing`: `SimpleHash`, `DoubleHash` (forward and reverse
  substring hashes)
- `contestkit.aho_corasick`: `AhoCorasick` (lowercase `a`–`z` only)
- `contestkit.trie`: `Trie` (words), `BinaryTrie` (32-bit unsigned values,
  XOR queries), `subarray_xor_extremes`, `count_subarrays_xor_less`
- `contestkit.suffix_array`: `SuffixArray` (LCP of suffixes, substring search,
  substring comparison, k-th distinct substring, longest palindrome),
  `longest_common_substring`

**Trees and graphs**

- `contestkit.graph`: `Graph` (BFS, DFS post-order, farthest node, diameter,
  directed cycles, undirected cycle check, Kahn and DFS topological sorts,
  strongly connected components, bridges and articulation points)
- `contestkit.shortest_path`: `ShortestPath` on an undirected weighted graph
  (Dijkstra, path recovery, Bellman–Ford with negative-cycle flags,
  Floyd–Warshall)
- `contestkit.lca`: `BinaryLiftingLCA` (LCA, k-th ancestor, distance, k-th node
  on a path, ancestor at a depth)
- `contestkit.heavy_light`: `HeavyLightDecomposition` (range add and sum over
  vertex paths, edge paths and subtrees), `RangeAddSegmentTree`
- `contestkit.centroid`: `CentroidDecomposition` (mark and unmark vertices,
  distance to the nearest marked vertex)
- `contestkit.flow`: `FordFulkerson`, `EdmondsKarp`, `Dinic`, `MinCostMaxFlow`,
  `UnitMaxFlow` (with `min_cut`), `DisjointPaths`, `HopcroftKarp`
- `contestkit.two_sat`: `TwoSat`

**Mathematics**

- `contestkit.number_theory`: `gcd`, `lcm`, `ext_gcd` / `ExtGcd`, `mod_inverse`,
  `mod_inverse_fermat`, `mod_mul`, `mod_pow`, `prime_factors`, `divisors`,
  `totients_up_to`, `chinese_remainder`, and `Sieve` (smallest-factor
  factorisation, segmented sieve, Euler's phi, divisor sums and counts)
- `contestkit.combinatorics`: `Combinatorics` (factorials, inverses, nCr, nPr,
  Catalan, multinomial, derangements, Stirling numbers; modulo 1 000 000 007
  by default)
- `contestkit.convex_hull`: `DynamicConvexHull` (maximum of lines at a point)
- `contestkit.bits`: 64-bit bit helpers such as `count_set`, `submasks`,
  `highest_set_bit`, `bit_pattern`

Most structures use 1-based positions and vertices, as is usual in contest
code; `SparseTable`, `MinMaxSparseTable`, `prefix_sum`, `mo`, the string
modules and `bits` are 0-based. Each class's docstring states its convention.
Invalid positions, empty inputs and operations before the required setup
step (`build`, `preprocess`, `decompose`) raise exceptions.

## Examples

```python
from contestkit.fenwick import FenwickTree, count_inversions

tree = FenwickTree(5)
tree.update(2, 10)
tree.update(4, 5)
print(tree.range_query(2, 4))       # 15

print(count_inversions([3, 1, 2]))  # 2
```

```python
from contestkit.segment_tree import SegmentTree

seg = SegmentTree([1, 2, 3, 4, 5])
print(seg.query(2, 4))  # 9
seg.update(3, 10)
print(seg.query(2, 4))  # 16
```

```python
from contestkit.dsu import DSU

dsu = DSU(4)
dsu.merge(1, 2)
print(dsu.same(1, 2), dsu.size(1))  # True 2
```

```python
from contestkit.kmp import kmp_search
from contestkit.z_function import z_function

print(kmp_search("abababa", "aba"))  # [0, 2, 4]
print(z_function("aaab"))            # [4, 2, 1, 0]
```

```python
from contestkit.flow import Dinic

net = Dinic(4)
net.add_edge(1, 2, 3)
net.add_edge(1, 3, 2)
net.add_edge(2, 4, 2)
net.add_edge(3, 4, 3)
print(net.max_flow(1, 4))  # 4
```

```python
from contestkit.two_sat import TwoSat

sat = TwoSat(2)
sat.add_xor(1, 2)
sat.force_true(1)
print(sat.satisfiable(), sat.value(2))  # True False
```

```python
from contestkit.number_theory import Sieve, mod_pow

print(mod_pow(2, 10, 1000))   # 24
sieve = Sieve()
print(sieve.factorize(360))   # [(2, 3), (3, 2), (5, 1)]
```

## What it does not do

contestkit is a library only. It has no command-line program and does not
read problem input from standard input or print answers; parsing input and
calling the structures is left to your own code.