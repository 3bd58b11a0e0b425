"""Single-source shortest paths: Bellman-Ford and Dijkstra."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple


class Edge(NamedTuple):
    """A directed, weighted edge."""

    source: int
    target: int
    weight: float


class NegativeCycleError(ValueError):
    """Raised when a graph holds a negative-weight cycle reachable from the source."""


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} out of range for {vertex_count} vertices")


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, float]], source: int
) -> list[float]:
    """Return distances from ``source``; unreachable vertices get ``math.inf``.

    Raises NegativeCycleError if a negative cycle can be reached.
    """
    edge_list = [Edge(*edge) for edge in edges]
    _check_vertex(source, vertex_count)
    for edge in edge_list:
        _check_vertex(edge.source, vertex_count)
        _check_vertex(edge.target, vertex_count)

    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, weight in edge_list:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight

    for u, v, weight in edge_list:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph contains negative weight cycle")
    return dist


def dijkstra(matrix: Sequence[Sequence[float]], source: int) -> list[float]:
    """Return distances from ``source`` over an adjacency matrix.

    A zero entry means no edge. Unreachable vertices get ``math.inf``.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    _check_vertex(source, size)

    dist: list[float] = [math.inf] * size
    dist[source] = 0
    done = [False] * size
    for _ in range(size):
        current = min((k for k in range(size) if not done[k]), key=dist.__getitem__)
        done[current] = True
        if dist[current] == math.inf:
            continue
        for k, weight in enumerate(matrix[current]):
            if not done[k] and weight and dist[current] + weight < dist[k]:
                dist[k] = dist[current] + weight
    return dist