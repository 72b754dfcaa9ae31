# contestlib

Algorithms and data structures for programming contests and algorithmic
work in general: graphs, trees, strings, geometry and range queries. Almost
everything is a library to import; one small command is included.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `sortedcontainers`.

## Modules

### Sets, spanning trees and range queries

- `contestlib.dsu.DisjointSet(n)`: union–find over `0 .. n-1` with `find(v)`
  and `union(a, b)` (returns False if the two were already joined).
- `contestlib.kruskal.kruskal(n, edges)`: minimum spanning forest of `Edge(u, v, weight)`
  values; returns `(total_weight, chosen_edges)`.
- `contestlib.segment_tree.SegmentTree(values)`: `update(pos, value)` sets an
  element, `query(left, right)` sums the inclusive range.
- `contestlib.segment_tree.LazySegmentTree(values)`: `add(left, right, value)`
  and `query(left, right)`, both on inclusive ranges.
- `contestlib.li_chao.LiChaoTree(lo, hi)`: `insert(m, b)` adds the line
  `y = m*x + b`; `query(x)` gives the maximum at an integer `x` in `[lo, hi)`.
- `contestlib.convex_hull_trick.ConvexHullDynamic(is_max)`: `add_line(a, b)`
  and `get_best(x)`, the maximum (or minimum) of the lines at `x`.

### Sequences

- `contestlib.treap.ImplicitTreap(values, mod=998244353)`: a sequence with
  `insert`, `delete`, `reverse`, `apply_affine` (`a -> w*a + b`), `range_sum`
  and `move_to_end`. Ranges are 0-based and half-open; values are kept
  modulo `mod`, or exactly when `mod` is None.
- `contestlib.order_set.OrderedSet`: a sorted set with `order_of_key(x)`
  (items strictly smaller than `x`) and `find_by_order(k)`;
  `count_covering_pairs(pairs)` counts nested intervals with it.
- `contestlib.lis.longest_increasing_subsequence(nums)`: the tails list of
  the patience method; its length is the length of the longest strictly
  increasing subsequence.
- `contestlib.ternary_search.ternary_search(f, lo, hi, eps=1e-9)`: maximum of
  a function that increases and then decreases.
- `contestlib.ranking.contest_rank(limit, times)`: 1-based rank of
  participant 0 when everyone solves problems shortest first within `limit`.

### Strings

- `contestlib.trie.Trie`: `insert(word)`, `word in trie`, `len(trie)`,
  `has_prefix(prefix)` and `node_count`.
- `contestlib.hashing`: `compute_hash(s)` (base 31, modulo 1e9+9),
  `count_unique_substrings(s)`, and `Hasher`, a pair of residues modulo
  1e9+9 and 1e9+7 supporting `+`, `-`, `*` and a packed `value`; `SEED` is
  `Hasher(31, 131)`.
- `contestlib.palindromes`: Manacher's algorithm as `manacher_odd(s)`,
  `manacher(s)` (all `2n - 1` centres) and `palindrome_radii(s)` (odd and
  even radii per position).
- `contestlib.palindromic_tree.PalindromicTree`: an eertree with
  `append(ch)` and `pop()`, exposing `distinct` and `total` palindrome
  counts; `distinct_palindrome_counts(s)` and `palindrome_counts(ops)` (where
  `"-"` removes the last character) run it over a whole input.

### Graphs

- `contestlib.shortest_paths`: `bfs01`, `bellman_ford` with
  `negative_cycle`, `dijkstra` with `restore_path`, and `floyd_warshall`.
  Adjacency lists hold `(vertex, weight)` pairs; unreachable distances are
  `math.inf`.
- `contestlib.cycles`: `find_directed_cycle(adj)`, `find_undirected_cycle(adj)`
  (each a list `[v0, ..., v0]` or None), `functional_graph_cycles(succ)` and
  `floyd_cycle(succ, start)`, which returns the first cycle vertex reached and
  the cycle length.
- `contestlib.bipartite.is_bipartite(adj)`.
- `contestlib.matrix`: `mat_mul`, `mat_pow` and `count_walks(adj, k)`, the
  number of walks of exactly `k` edges, all modulo 1e9+7 by default.

### Trees

Trees are given as undirected adjacency lists.

- `contestlib.tree_paths`: `longest_paths(adj, root=0)` (longest path from
  every vertex) and `tree_diameter(adj, root=0)`, both counted in edges.
- `contestlib.lca`: `BinaryLiftingLCA` and `TourLCA`, each with `lca` and
  `jump`; `TourLCA.is_ancestor`; `AncestorJumper(parents)` for forests given
  by parent links, whose `jump` returns None past a root.
- `contestlib.euler_tour.euler_tour(adj, root=0)`: entry and end times; the
  subtree of `v` is `start[v] .. end[v] - 1`.
- `contestlib.hld.HeavyLightDecomposition`: `pos`, `head`, `path_ranges(a, b)`
  and `query(a, b, range_query)`, the maximum of `range_query` over the
  ranges of the path.
- `contestlib.centroid.centroid_decomposition(adj)`: parent of every vertex in
  the centroid tree.

### Number theory

- `contestlib.modular`: `pow_mod`, `mod_inverse`, `Binomial(limit, mod)` with
  `choose(n, k)`, and `card_game_outcomes(n)` for even `n` from 2 to 60.
  The default modulus is 998244353.

### Geometry

- `contestlib.convex_hull`: `Point`, `cross`, `dot`, `norm`, `area`,
  `orientation`, `convex_hull(points, include_collinear=False)`,
  `reorder_polygon` and `minkowski_sum(p, q)`.
- `contestlib.half_plane`: `Halfplane(a, b)` (the left side of `a -> b`) and
  `hp_intersect(halfplanes)`, clipped to a box of half-width 1e9.
- `contestlib.sweep_line`: `segments_intersect`, `find_intersecting_pair` and
  `segment_to_remove` for segments `(x1, y1, x2, y2)`.
- `contestlib.planar_faces`: `Point` and `Segment` with tolerant comparisons,
  `intersect_lines`, `intersect_segments`, `build_graph(segments)` (crossing
  points and their neighbours) and `find_faces(points, adj)`.

## Example

```python
from contestlib.segment_tree import LazySegmentTree
from contestlib.shortest_paths import dijkstra, restore_path
from contestlib.treap import ImplicitTreap

tree = LazySegmentTree([1, 2, 3, 4])
tree.add(1, 2, 10)
print(tree.query(0, 3))  # 30

adj = [[(1, 4), (2, 1)], [], [(1, 2)]]
dist, parent = dijkstra(adj, 0)
print(dist[1], restore_path(0, 1, parent))  # 3 [0, 2, 1]

seq = ImplicitTreap([1, 2, 3, 4, 5])
seq.reverse(1, 4)             # 1 4 3 2 5
seq.apply_affine(0, 2, 2, 1)  # 3 9 3 2 5
print(seq.range_sum(0, 5), list(seq))  # 22 [3, 9, 3, 2, 5]
```

## Command line

`contestlib-cowjump` reads segments and writes the 1-based index of the
segment whose removal can leave the rest disjoint:

```
contestlib-cowjump [input] [output]
```

The input file (default `cowjump.in`) holds a count `n` followed by `n`
lines of four integers `x1 y1 x2 y2`; the answer goes to the output file
(default `cowjump.out`). If no two segments intersect, it fails with an
error.

## Scope

Apart from that one command, the package has no command-line interface and
reads no input on its own; every other algorithm is used by importing it.