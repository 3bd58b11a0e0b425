import math

import pytest

from algocollection.shortest_paths import Edge, NegativeCycleError, bellman_ford, dijkstra

BF_EDGES = [
    Edge(0, 1, -1),
    Edge(0, 2, 4),
    Edge(1, 2, 3),
    Edge(1, 3, 2),
    Edge(1, 4, 2),
    Edge(3, 2, 5),
    Edge(3, 1, 1),
    Edge(4, 3, -3),
]

MATRIX = [
    [0, 1, 2, 0, 0, 0],
    [1, 0, 0, 5, 1, 0],
    [2, 0, 0, 2, 3, 0],
    [0, 5, 2, 0, 2, 2],
    [0, 1, 3, 2, 0, 1],
    [0, 0, 0, 2, 1, 0],
]


def test_bellman_ford_example():
    assert bellman_ford(5, BF_EDGES, 0) == [0, -1, 2, -2, 1]


def test_bellman_ford_accepts_tuples():
    tuples = [tuple(edge) for edge in BF_EDGES]
    assert bellman_ford(5, tuples, 0) == bellman_ford(5, BF_EDGES, 0)


def test_bellman_ford_unreachable_is_infinite():
    dist = bellman_ford(3, [Edge(0, 1, 7)], 0)
    assert dist[1] == 7
    assert dist[2] == math.inf


def test_bellman_ford_negative_cycle():
    edges = [Edge(0, 1, 1), Edge(1, 2, -2), Edge(2, 0, -1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, edges, 0)


def test_bellman_ford_unreachable_negative_cycle_is_ignored():
    edges = [Edge(1, 2, -2), Edge(2, 1, -1)]
    assert bellman_ford(3, edges, 0)[0] == 0


def test_bellman_ford_rejects_bad_source():
    with pytest.raises(ValueError):
        bellman_ford(2, [], 3)


def test_dijkstra_example():
    assert dijkstra(MATRIX, 0) == [0, 1, 2, 4, 2, 3]


def test_dijkstra_matches_bellman_ford():
    edges = [
        Edge(u, v, w)
        for u, row in enumerate(MATRIX)
        for v, w in enumerate(row)
        if w
    ]
    for source in range(len(MATRIX)):
        assert dijkstra(MATRIX, source) == bellman_ford(len(MATRIX), edges, source)


def test_dijkstra_unreachable_is_infinite():
    assert dijkstra([[0, 0], [0, 0]], 0)[1] == math.inf


def test_dijkstra_rejects_non_square():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)