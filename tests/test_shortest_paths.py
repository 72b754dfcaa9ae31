import pytest
from hypothesis import given, strategies as st

from contestlib.shortest_paths import (
    INF,
    bellman_ford,
    bfs01,
    dijkstra,
    floyd_warshall,
    negative_cycle,
    restore_path,
)


@st.composite
def weighted_graphs(draw, min_weight=0, max_weight=20):
    n = draw(st.integers(1, 8))
    edges = draw(
        st.lists(
            st.tuples(
                st.integers(0, n - 1),
                st.integers(0, n - 1),
                st.integers(min_weight, max_weight),
            ),
            max_size=20,
        )
    )
    return n, edges


def to_adj(n, edges):
    adj = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
    return adj


def min_weights(edges):
    best = {}
    for u, v, w in edges:
        best[(u, v)] = min(w, best.get((u, v), w))
    return best


@given(weighted_graphs(max_weight=1))
def test_bfs01_agrees_with_dijkstra(graph):
    n, edges = graph
    adj = to_adj(n, edges)
    assert bfs01(adj, 0) == dijkstra(adj, 0)[0]


def test_bfs01_rejects_other_weights():
    with pytest.raises(ValueError):
        bfs01([[(1, 2)], []], 0)


@given(weighted_graphs())
def test_dijkstra_paths_match_distances(graph):
    n, edges = graph
    dist, parent = dijkstra(to_adj(n, edges), 0)
    weights = min_weights(edges)
    assert dist[0] == 0
    for t in range(n):
        if dist[t] == INF:
            continue
        path = restore_path(0, t, parent)
        assert path[0] == 0 and path[-1] == t
        assert sum(weights[(a, b)] for a, b in zip(path, path[1:])) == dist[t]


def test_dijkstra_small_graph():
    adj = [[(1, 4), (2, 1)], [], [(1, 2)]]
    dist, parent = dijkstra(adj, 0)
    assert dist == [0, 3, 1]
    assert parent[1] == 2
    assert restore_path(0, 1, parent) == [0, 2, 1]


def test_unreachable_vertex():
    dist, parent = dijkstra([[], []], 0)
    assert dist[1] == INF
    with pytest.raises(ValueError):
        restore_path(0, 1, parent)


def test_dijkstra_bad_source():
    with pytest.raises(IndexError):
        dijkstra([[]], 3)


@given(weighted_graphs())
def test_bellman_ford_agrees_with_dijkstra(graph):
    n, edges = graph
    dist, _, last = bellman_ford(n, edges, 0)
    assert last is None
    assert dist == dijkstra(to_adj(n, edges), 0)[0]


def test_negative_cycle_found():
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1), (2, 3, 1)]
    _, parent, last = bellman_ford(4, edges, 0)
    assert last is not None
    cycle = negative_cycle(4, parent, last)
    assert set(cycle) == {1, 2}
    weights = min_weights(edges)
    closed = cycle + cycle[:1]
    assert sum(weights[(a, b)] for a, b in zip(closed, closed[1:])) < 0


@given(weighted_graphs())
def test_floyd_warshall_agrees_with_dijkstra(graph):
    n, edges = graph
    matrix = [[INF] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
    for (u, v), w in min_weights(edges).items():
        if u != v:
            matrix[u][v] = w
    dist, _ = floyd_warshall(matrix)
    adj = to_adj(n, edges)
    for s in range(n):
        assert dist[s] == dijkstra(adj, s)[0]


def test_floyd_warshall_records_intermediate():
    matrix = [[0, 1, 5], [INF, 0, 1], [INF, INF, 0]]
    dist, via = floyd_warshall(matrix)
    assert dist[0][2] == 2
    assert via[0][2] == 1
    assert via[0][1] is None


def test_floyd_warshall_negative_cycle():
    matrix = [[0, 1], [-3, 0]]
    dist, _ = floyd_warshall(matrix)
    assert dist[0][0] < 0 and dist[1][1] < 0


def test_floyd_warshall_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1]])