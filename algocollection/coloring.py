"""M-colouring of an undirected graph by backtracking."""

from __future__ import annotations

from collections.abc import Iterable


def color_graph(
    vertex_count: int, edges: Iterable[tuple[int, int]], colors: int
) -> list[int] | None:
    """Colour the vertices with colours ``1..colors`` so no edge joins equal colours.

    Returns the first colouring found in lexicographic order, or None if
    there is none. Self-loops are ignored.
    """
    neighbours: list[set[int]] = [set() for _ in range(vertex_count)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(
                    f"vertex {vertex} out of range for {vertex_count} vertices"
                )
        if u != v:
            neighbours[u].add(v)
            neighbours[v].add(u)

    assignment = [0] * vertex_count
    node = 0
    while 0 <= node < vertex_count:
        candidate = assignment[node] + 1
        taken = {assignment[k] for k in neighbours[node]}
        while candidate <= colors and candidate in taken:
            candidate += 1
        if candidate <= colors:
            assignment[node] = candidate
            node += 1
        else:
            assignment[node] = 0
            node -= 1
    return assignment if node == vertex_count else None


def can_color(vertex_count: int, edges: Iterable[tuple[int, int]], colors: int) -> bool:
    """Tell whether the graph can be coloured with at most ``colors`` colours."""
    return color_graph(vertex_count, edges, colors) is not None