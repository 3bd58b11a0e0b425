"""Eulerian path/cycle classification and Hierholzer's circuit construction."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum


class EulerKind(IntEnum):
    """How an undirected graph relates to Euler paths."""

    NOT_EULERIAN = 0
    PATH = 1
    CYCLE = 2


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} out of range for {vertex_count} vertices")


def _non_zero_degree_connected(adjacency: list[list[int]]) -> bool:
    start = next((v for v, nbrs in enumerate(adjacency) if nbrs), None)
    if start is None:
        return True
    visited = {start}
    todo = [start]
    while todo:
        for nxt in adjacency[todo.pop()]:
            if nxt not in visited:
                visited.add(nxt)
                todo.append(nxt)
    return all(v in visited for v, nbrs in enumerate(adjacency) if nbrs)


def euler_kind(vertex_count: int, edges: Iterable[tuple[int, int]]) -> EulerKind:
    """Classify an undirected graph as having an Euler cycle, path, or neither."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)

    if not _non_zero_degree_connected(adjacency):
        return EulerKind.NOT_EULERIAN
    odd = sum(1 for nbrs in adjacency if len(nbrs) % 2)
    if odd > 2:
        return EulerKind.NOT_EULERIAN
    return EulerKind.PATH if odd else EulerKind.CYCLE


def eulerian_circuit(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return an Eulerian circuit of a directed graph, starting at vertex 0.

    ``adjacency[v]`` lists the targets of edges leaving ``v``. The input is
    not modified. An empty graph gives an empty circuit.
    """
    remaining = [list(targets) for targets in adjacency]
    for targets in remaining:
        for target in targets:
            _check_vertex(target, len(remaining))
    if not remaining:
        return []

    path = [0]
    current = 0
    circuit: list[int] = []
    while path:
        if remaining[current]:
            path.append(current)
            current = remaining[current].pop()
        else:
            circuit.append(current)
            current = path.pop()
    circuit.reverse()
    return circuit


def format_circuit(circuit: Iterable[int]) -> str:
    """Render a circuit as ``a -> b -> c``."""
    return " -> ".join(str(vertex) for vertex in circuit)