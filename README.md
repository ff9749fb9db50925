# dsakit

Classic data structures and algorithms in plain Python: sorting, number
theory, graphs, hashing problems, linked lists, heaps, binary trees, string
matching, tries, tree ancestor queries, segment trees and a top-k multiset.

## Installation

```
pip install .
```

The only runtime dependency is `sortedcontainers` (used by `dsakit.topk`).

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `optimized_bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `count_inversions`, `counting_sort`, `radix_sort`, `cycle_sort`, `cycle_sort_distinct`, `bucket_sort`, `naive_partition`, `lomuto_partition`, `hoare_partition`, `quick_sort_lomuto`, `quick_sort_hoare` |
| `dsakit.numtheory` | `MOD`, `ALT_MOD`, `power_mod`, `matrix_multiply`, `fibonacci`, `prime_sieve`, `BinomialTable` (`ncr`, `choose`) |
| `dsakit.graphs` | `Graph` (`add_edge`, `bfs`, `dfs`, `contains_cycle`, `contains_cycle_directed`), `BfsResult`, `longest_path`, `find_cycle`, `floyd_warshall`, `has_negative_cycle`, `max_area_of_island`, `knight_shortest_path`, `shortest_grid_path` |
| `dsakit.hashing` | `group_anagrams`, `k_closest`, `geometric_triplets`, `min_bars` |
| `dsakit.linkedlist` | `Node`, `from_iterable`, `to_list`, `insert_at_head`, `insert_at`, `delete_node`, `contains`, `reverse_recursive`, `reverse_iterative`, `reverse_k_groups`, `merge_sorted`, `midpoint`, `merge_sort`, `break_chain` |
| `dsakit.heaps` | `MinHeap`, `BoundedMinHeap`, `heap_sort`, `MedianFinder`, `merge_k_lists` |
| `dsakit.recursion` | `count_subsets_with_sum`, `max_window_sum`, `max_sum_up_to_k` |
| `dsakit.binarytree` | `TreeNode`; traversals (`inorder`, `preorder`, `postorder`, `breadth_first`, `level_order`, `spiral_order`, and the stack-based `iterative_inorder`, `iterative_preorder`, `iterative_postorder`); `height`, `size`, `maximum`, `nodes_at_distance`, `left_view`, `maximum_width`, `diameter`, `children_sum_property`, `is_balanced`, `build_from_inorder_preorder`, `lowest_common_ancestor`, `count_complete_nodes`, `serialize`, `deserialize` |
| `dsakit.kmp` | `prefix_function`, `smallest_period` |
| `dsakit.trie` | `Trie`, `SuffixTrie`, `XorTrie`, `max_xor_pair`, `document_search` |
| `dsakit.tree_queries` | `AncestorTable`, `RootedTree`, `WeightedTree`, `tree_diameter` |
| `dsakit.segtree` | `SumSegmentTree` (`query`, `update`) |
| `dsakit.topk` | `TopKSum` (`insert`, `remove`, `top_k_sum`) |

## Examples

```python
from dsakit.sorting import merge_sort, count_inversions
from dsakit.numtheory import power_mod, fibonacci
from dsakit.trie import Trie, max_xor_pair
from dsakit.segtree import SumSegmentTree
from dsakit.topk import TopKSum

merge_sort([5, 2, 9, 1])            # [1, 2, 5, 9]
count_inversions([1, 2, 5, 4])      # 1
power_mod(2, 10, 1_000_000_007)     # 1024
fibonacci(10)                       # 55
max_xor_pair([3, 10, 5, 25, 9, 2])  # 28

trie = Trie()
trie.insert("apple")
"apple" in trie                     # True

tree = SumSegmentTree([1, 2, 3, 4, 5, 6, 7, 8])
tree.query(2, 5)                    # 18
tree.update(2, 10)
tree.query(2, 5)                    # 25

top = TopKSum(2)
for value in (5, 1, 7):
    top.insert(value)
top.top_k_sum()                     # 12
```

## Conventions

- The whole-sequence sorts in `dsakit.sorting` return new lists and leave
  their input untouched. `bucket_sort` returns the list of sorted buckets,
  which concatenated give the sorted input. `radix_sort` accepts only
  non-negative integers. The partition functions (`naive_partition`,
  `lomuto_partition`, `hoare_partition`) work in place on the slice
  `values[low..high]` and return an index.
- Graph and tree functions number their nodes `1..n`. `longest_path` returns
  `-1` when a cycle of positive weight is reachable from node 1, and raises
  `ValueError` when node `n` cannot be reached. `floyd_warshall` returns a
  nested dict with `math.inf` for unreachable pairs.
- `fibonacci(n)` counts from `F0 = 0, F1 = 1` and reduces modulo `MOD`
  (1 000 000 007). `BinomialTable` uses `MOD` unless another prime modulus is
  given; `ncr` returns 0 outside `0 <= r <= n`, while `choose` raises
  `ValueError` there.
- Linked-list functions relink the nodes they are given and return the new
  head; `merge_k_lists` builds a new list instead.
- `XorTrie` holds unsigned 32-bit integers.
- Invalid arguments raise `ValueError`; empty heaps raise `IndexError`, and
  `BoundedMinHeap.insert` on a full heap raises `OverflowError`.

## What it does not do

`dsakit` is a library only. It installs no command-line program and reads no
problem input from standard input; every routine is called from Python with
ordinary arguments and returns its answer as a value.