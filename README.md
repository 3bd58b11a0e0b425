# algocollection

A compact library of classic algorithms written in plain Python, with no
third-party dependencies. Functions take ordinary Python values (lists,
tuples, sequences of edges) and return new values; inputs are not modified.
Bad arguments raise `ValueError` or `IndexError`.

## Modules

### Graphs

- `algocollection.connectivity`
  - `articulation_points(vertex_count, edges)` – cut vertices of an
    undirected graph, ascending.
  - `bridges(vertex_count, edges)` – bridges as `(parent, child)` pairs in
    the order a depth-first search finds them.
  - `strongly_connected_components(vertex_count, edges)` – Kosaraju's
    algorithm on a directed graph.
- `algocollection.euler`
  - `euler_kind(vertex_count, edges)` – returns an `EulerKind`
    (`NOT_EULERIAN`, `PATH` or `CYCLE`) for an undirected graph.
  - `eulerian_circuit(adjacency)` – Hierholzer's algorithm on a directed
    adjacency list, starting at vertex 0.
  - `format_circuit(circuit)` – renders a circuit as `0 -> 1 -> 2 -> 0`.
- `algocollection.shortest_paths`
  - `bellman_ford(vertex_count, edges, source)` – edges are `Edge` tuples
    (or plain `(source, target, weight)` tuples); unreachable vertices get
    `math.inf`; raises `NegativeCycleError` on a reachable negative cycle.
  - `dijkstra(matrix, source)` – over a square adjacency matrix where `0`
    means "no edge".
- `algocollection.coloring`
  - `color_graph(vertex_count, edges, colors)` – first colouring with colours
    `1..colors` found by backtracking, or `None`.
  - `can_color(vertex_count, edges, colors)` – whether such a colouring exists.

### Sorting and arrays

- `algocollection.sorting` – `heap_sort`, `bubble_sort`, `insertion_sort`,
  `merge_sort`, `selection_sort`; each returns a new sorted list.
- `algocollection.arrays`
  - `max_subarray_sum(values)` – Kadane's algorithm.
  - `min_chocolate_difference(packets, students)` – smallest spread when
    each student gets one packet.
  - `three_sum(values, target)` – distinct ascending triplets summing to
    `target`.
  - `next_permutation(values)` – the next lexicographic permutation,
    wrapping the last one round to the first.
  - `common_elements(first, second, third)` – distinct values present in
    three ascending sequences.
  - `rotate_left(values, shift)` and `rotate_clockwise(matrix)`.
- `algocollection.rain` – `trapped_water(heights)`.
- `algocollection.dynamic` – 0/1 `knapsack(capacity, weights, values)` and
  `matrix_chain_cost(dimensions)`.

### Numbers

- `algocollection.numbers` – `factorial`, `is_prime`, `digit_sum`,
  `reverse_digits`, `count_set_bits`, `primes_up_to` (sieve of
  Eratosthenes), `xor_subset` and `xor_of_range`.
- `algocollection.cheer` – `window_max_sum(scores, k)` sums the maxima of
  every window of `k` consecutive scores; `will_cheer(scores, k)` tells
  whether that sum is prime.

### Puzzles, data structures and text

- `algocollection.hanoi` – Tower of Hanoi: `hanoi_moves(n, source="S",
  target="D", auxiliary="A")` (recursive), `hanoi_moves_iterative(n)`,
  the `Move` tuple and `format_move(move)`.
- `algocollection.linked_list` – `Node`, a `LinkedList` with `append`,
  `insert_first`, `insert_at`, `pop_first`, `pop_last` and `pop_at`
  (positions are 1-based), plus `make_loop`, `has_loop` and `remove_loop`
  for raw node chains.
- `algocollection.text` – `count_words`, `is_all_digits`, `diamond(n)`
  (a list of `2n` lines) and `permutations(text)`.
- `algocollection.cipher` – additive byte-shift cipher: `shift_encrypt`,
  `shift_decrypt`, `encrypt_file(source, target, key)`,
  `decrypt_file(source, target, key)`.
- `algocollection.grid` – `detour_distance(start, end, obstacle)` on a grid
  with one blocked cell.
- `algocollection.student` – a `Student` dataclass (`roll`, `name`, five
  `marks`) with `percentage()`.

## Examples

```python
from algocollection.sorting import heap_sort
from algocollection.rain import trapped_water
from algocollection.shortest_paths import dijkstra
from algocollection.hanoi import hanoi_moves, format_move

heap_sort([12, 11, 13, 5, 6, 7])                    # [5, 6, 7, 11, 12, 13]
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6

graph = [
    [0, 1, 2, 0, 0, 0],
    [1, 0, 0, 5, 1, 0],
    [2, 0, 0, 2, 3, 0],
    [0, 5, 2, 0, 2, 2],
    [0, 1, 3, 2, 0, 1],
    [0, 0, 0, 2, 1, 0],
]
dijkstra(graph, 0)                                  # [0, 1, 2, 4, 2, 3]

print(format_move(hanoi_moves(1)[0]))               # Move the disk 1 from S to D
```

## Interactive linked list

A menu-driven session for building and editing a linked list reads from
standard input until you choose Quit or input ends:

```
algocollection-list
```

## What is not included

Apart from `algocollection-list`, the package has no command-line programs:
every other algorithm is used by calling its function from Python.

## Running the tests

```
pip install -e .[test]
pytest
```