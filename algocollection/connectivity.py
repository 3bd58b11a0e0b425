"""Articulation points, bridges and strongly connected components."""

from __future__ import annotations

from collections.abc import Iterable


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} out of range for {vertex_count} vertices")


def _undirected(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _directed(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
    return adjacency


def articulation_points(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the articulation points of an undirected graph in ascending order."""
    adjacency = _undirected(vertex_count, edges)
    disc = [0] * vertex_count
    low = [0] * vertex_count
    visited = [False] * vertex_count
    is_cut = [False] * vertex_count
    time = 0

    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        time += 1
        disc[root] = low[root] = time
        root_children = 0
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    time += 1
                    disc[nxt] = low[nxt] = time
                    if node == root:
                        root_children += 1
                    stack.append((nxt, node, iter(adjacency[nxt])))
                    break
                if nxt != parent:
                    low[node] = min(low[node], disc[nxt])
            else:
                stack.pop()
                if stack:
                    up, up_parent, _ = stack[-1]
                    low[up] = min(low[up], low[node])
                    if up_parent != -1 and low[node] >= disc[up]:
                        is_cut[up] = True
        if root_children > 1:
            is_cut[root] = True

    return [vertex for vertex, cut in enumerate(is_cut) if cut]


def bridges(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the bridges of an undirected graph in the order a DFS finds them.

    Each bridge is given as ``(parent, child)`` in the DFS tree.
    """
    adjacency = _undirected(vertex_count, edges)
    tin = [-1] * vertex_count
    low = [-1] * vertex_count
    timer = 0
    found: list[tuple[int, int]] = []

    for root in range(vertex_count):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt == parent:
                    continue
                if tin[nxt] == -1:
                    tin[nxt] = low[nxt] = timer
                    timer += 1
                    stack.append((nxt, node, iter(adjacency[nxt])))
                    break
                low[node] = min(low[node], tin[nxt])
            else:
                stack.pop()
                if stack:
                    up = stack[-1][0]
                    low[up] = min(low[up], low[node])
                    if low[node] > tin[up]:
                        found.append((up, node))
    return found


def strongly_connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the strongly connected components of a directed graph (Kosaraju).

    Components come in the order they are found; vertices within one are in
    the DFS visiting order on the transposed graph.
    """
    edge_list = list(edges)
    adjacency = _directed(vertex_count, edge_list)

    visited = [False] * vertex_count
    finish_order: list[int] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                finish_order.append(node)

    transposed: list[list[int]] = [[] for _ in range(vertex_count)]
    for node in range(vertex_count):
        for nxt in adjacency[node]:
            transposed[nxt].append(node)

    visited = [False] * vertex_count
    components: list[list[int]] = []
    for start in reversed(finish_order):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        stack = [iter(transposed[start])]
        while stack:
            for nxt in stack[-1]:
                if not visited[nxt]:
                    visited[nxt] = True
                    component.append(nxt)
                    stack.append(iter(transposed[nxt]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components