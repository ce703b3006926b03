# algobox

A library of classic algorithms written in plain Python, with no
third-party dependencies. Functions that sort or rearrange data return new
lists unless their name says they partition in place; searches return
`None` when a value is absent.

## Modules

### `algobox.sorting`

- `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`,
  `quick_sort` (middle-element pivot), `quick_sort_lomuto`, `heap_sort`,
  `cycle_sort`: take any iterable and return a sorted list.
- `counting_sort(values, k)`: stable sort of integers in `0 .. k - 1`.
- `radix_sort(values)`: non-negative integers, one decimal digit per pass.
- `bucket_sort(values, k)`: non-negative integers spread over `k` buckets.
- `merge_sorted(a, b)`: merge two sorted sequences.
- `hoare_partition`, `lomuto_partition`, `naive_partition`: partition a
  slice `low .. high` of a list in place and return the split index.

### `algobox.array_ops`

- `kth_smallest(values, k)`: quickselect, `k` is 1-based.
- `count_inversions_naive`, `count_inversions`: pairs out of order.
- `min_difference`: smallest gap between any two values.
- `chocolate_distribution(values, m)`: smallest spread over `m` packets.
- `max_guests(arrivals, departures)`: most guests present at once.
- `Interval` and `merge_intervals(intervals)`: merge overlapping intervals.
- `intersection(a, b)`, `union(a, b)`: distinct common / combined values
  of two sorted sequences.
- `sort_three_way(values)`: one-pass sort of 0s, 1s and 2s.

### `algobox.searching`

- `first_occurrence`, `last_occurrence`, `count_occurrences`,
  `linear_first_occurrence`.
- `count_ones` in a run of zeros followed by ones.
- `count_pairs_with_sum(values, k)`.
- `peak_naive` (a peak value), `peak_index` (a peak index by binary search).
- `search_rotated` for a rotated sorted sequence, `search_unbounded` for a
  sorted iterable that may never end.
- `isqrt_floor(x)`: integer square root.
- `min_pages_naive`, `min_pages`, `is_feasible`: allocate contiguous books
  to `k` readers, minimising the largest page count.
- `median_of_sorted(a, b)`: median of two sorted sequences.
- `find_repeating_naive`, `find_repeating` (cycle detection for values in
  `0 .. n - 2`).

### `algobox.recursion`

`josephus`, `factorial`, `fibonacci`, `power`, `fast_power`,
`hanoi_moves` (a list of `(disc, from_peg, to_peg)`), `count_down`,
`count_up` and `contains` (sort, then binary search).

### `algobox.matrix`

Matrices are lists of rows. `filled`, `flatten`, `transpose`,
`rotate_clockwise`, `rotate_anticlockwise`, `snake_order`,
`boundary_elements`, `spiral_order`, `search_sorted` (returns
`(row, column)` or `None`) and `median` (lower median of an integer matrix
whose rows are sorted). Jagged input raises `ValueError`, except in
`flatten` and `snake_order`.

### `algobox.graphs`

`Graph(vertices)` is undirected with vertices `0 .. vertices - 1`:
`add_edge`, `bfs`, `dfs`, `dfs_iterative` (explicit stack, marks on push)
and `describe`. `connected_components(adjacency, nodes)` counts components
of a graph with vertices `1 .. nodes`, where `adjacency[0]` is unused.

### `algobox.linked_list`

`LinkedList(first)` is a singly linked list that always holds at least one
value: `push_front`, `append`, `insert_after(value, position)`, iteration,
`len()`, and `str()` giving `a->b->c->`.

### `algobox.strings`

`longest_palindrome`, `count_jewels(jewels, stones)` and
`missing_characters(target, text)`: how many characters of `target` are
left unmatched when it is matched greedily as a subsequence of `text`.

### `algobox.problems`

`concatenated_binary(n)` (modulo 1e9+7), `closest_elements(values, k, x)`,
`majority_element` (Boyer-Moore vote), `scholarship(rank)` and
`fibonacci_series(n)`.

### `algobox.sudoku`

`solve(grid)` returns a solved copy of a 9x9 grid (0 marks an empty cell)
or `None`; `is_valid_placement` and `format_grid` are also available.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algobox.sorting import merge_sort
from algobox.searching import first_occurrence
from algobox.matrix import spiral_order

merge_sort([5, 2, 9, 1])                          # [1, 2, 5, 9]
first_occurrence([1, 2, 2, 3], 2)                 # 1
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

```python
from algobox.graphs import Graph

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(2, 3)
g.bfs(0)      # [0, 1, 2, 3]
```

## Command-line tools

`algobox-graph` reads from standard input a vertex count, then pairs of
vertices to connect, each pair followed by `y` to enter another edge or any
other word to stop. It prints the adjacency lists and the BFS, recursive
DFS and stack-based DFS orders from vertex 0. Bad or missing input prints
an error and exits with status 1.

```
algobox-graph
```

`algobox-sudoku` solves the puzzle built into `algobox.sudoku` and prints
the grid:

```
algobox-sudoku
```

## What it does not do

- `algobox-sudoku` only solves its built-in puzzle; to solve another grid,
  call `algobox.sudoku.solve` from Python.
- There is no command for the linked list or the other modules; they are
  used as a library.