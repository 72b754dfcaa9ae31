from hypothesis import given, strategies as st

from contestlib.cycles import (
    find_directed_cycle,
    find_undirected_cycle,
    floyd_cycle,
    functional_graph_cycles,
)
from contestlib.dsu import DisjointSet


@st.composite
def directed_graphs(draw):
    n = draw(st.integers(1, 7))
    edges = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=15)
    )
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
    return adj


@st.composite
def simple_undirected(draw):
    n = draw(st.integers(1, 8))
    pairs = draw(
        st.sets(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)).filter(
                lambda e: e[0] < e[1]
            ),
            max_size=12,
        )
    )
    return n, sorted(pairs)


successors = st.integers(1, 10).flatmap(
    lambda n: st.lists(st.integers(0, n - 1), min_size=n, max_size=n)
)


def is_acyclic(adj):
    indeg = [0] * len(adj)
    for row in adj:
        for v in row:
            indeg[v] += 1
    ready = [v for v, d in enumerate(indeg) if d == 0]
    seen = 0
    while ready:
        u = ready.pop()
        seen += 1
        for v in adj[u]:
            indeg[v] -= 1
            if indeg[v] == 0:
                ready.append(v)
    return seen == len(adj)


def assert_valid_cycle(adj, cycle, min_distinct):
    assert cycle[0] == cycle[-1]
    inner = cycle[:-1]
    assert len(set(inner)) == len(inner) >= min_distinct
    for a, b in zip(cycle, cycle[1:]):
        assert b in adj[a]


@given(directed_graphs())
def test_directed_cycle_matches_acyclicity(adj):
    cycle = find_directed_cycle(adj)
    if cycle is None:
        assert is_acyclic(adj)
    else:
        assert_valid_cycle(adj, cycle, 1)


def test_directed_dag_has_no_cycle():
    assert find_directed_cycle([[1, 2], [2], []]) is None


def test_directed_triangle():
    adj = [[1], [2], [0]]
    cycle = find_directed_cycle(adj)
    assert_valid_cycle(adj, cycle, 3)
    assert set(cycle) == {0, 1, 2}


@given(simple_undirected())
def test_undirected_cycle_iff_not_forest(graph):
    n, pairs = graph
    adj = [[] for _ in range(n)]
    ds = DisjointSet(n)
    forest = True
    for u, v in pairs:
        adj[u].append(v)
        adj[v].append(u)
        forest = ds.union(u, v) and forest
    cycle = find_undirected_cycle(adj)
    if forest:
        assert cycle is None
    else:
        assert_valid_cycle(adj, cycle, 3)


def test_undirected_square():
    adj = [[1, 3], [0, 2], [1, 3], [2, 0]]
    cycle = find_undirected_cycle(adj)
    assert_valid_cycle(adj, cycle, 4)


@given(successors)
def test_functional_graph_cycles_invariants(succ):
    n = len(succ)
    ids, cycles = functional_graph_cycles(succ)
    assert sum(len(c) for c in cycles) == sum(1 for i in ids if i >= 0)
    for v in range(n):
        if ids[v] >= 0:
            cycle = cycles[ids[v]]
            assert cycle[succ[v]] == (cycle[v] + 1) % len(cycle)
        else:
            assert ids[v] == -1
            w = v
            for _ in range(n):
                w = succ[w]
                assert w != v
        w = v
        for _ in range(n):
            w = succ[w]
        assert ids[w] >= 0


def test_functional_graph_rejects_bad_successor():
    import pytest

    with pytest.raises(ValueError):
        functional_graph_cycles([1, 5])


def test_floyd_cycle_example():
    succ = [1, 2, 3, 4, 5, 6, 2]
    assert floyd_cycle(succ, 0) == (2, 5)


@given(successors, st.data())
def test_floyd_cycle_agrees_with_cycle_listing(succ, data):
    start = data.draw(st.integers(0, len(succ) - 1))
    first, length = floyd_cycle(succ, start)
    ids, cycles = functional_graph_cycles(succ)
    assert ids[first] >= 0
    assert length == len(cycles[ids[first]])
    w = start
    reached = {w}
    for _ in range(len(succ)):
        w = succ[w]
        reached.add(w)
    assert first in reached