import pytest
from hypothesis import given, strategies as st

from contestlib.hld import HeavyLightDecomposition


@st.composite
def parent_lists(draw):
    n = draw(st.integers(1, 40))
    return [-1] + [draw(st.integers(0, v - 1)) for v in range(1, n)]


def to_adj(parents):
    adj = [[] for _ in parents]
    for v, p in enumerate(parents):
        if p >= 0:
            adj[v].append(p)
            adj[p].append(v)
    return adj


def path_nodes(hld, a, b):
    nodes = []
    while a != b:
        if hld.depth[a] < hld.depth[b]:
            a, b = b, a
        nodes.append(a)
        a = hld.parent[a]
    nodes.append(a)
    return nodes


def test_chain_is_one_heavy_path():
    n = 5
    adj = [[] for _ in range(n)]
    for v in range(1, n):
        adj[v].append(v - 1)
        adj[v - 1].append(v)
    hld = HeavyLightDecomposition(adj, 0)
    assert hld.pos == list(range(n))
    assert hld.head == [0] * n
    assert hld.path_ranges(4, 2) == [(2, 4)]


def test_query_max_on_chain():
    adj = [[1], [0, 2], [1, 3], [2, 4], [3]]
    values = [5, 1, 4, 2, 3]
    hld = HeavyLightDecomposition(adj, 0)
    flat = [0] * len(values)
    for v, x in enumerate(values):
        flat[hld.pos[v]] = x
    assert hld.query(4, 2, lambda lo, hi: max(flat[lo:hi + 1])) == max(values[2:5])


@given(parent_lists(), st.data())
def test_ranges_cover_path_exactly(parents, data):
    hld = HeavyLightDecomposition(to_adj(parents), 0)
    n = len(parents)
    assert sorted(hld.pos) == list(range(n))
    a = data.draw(st.integers(0, n - 1))
    b = data.draw(st.integers(0, n - 1))
    covered = []
    ranges = hld.path_ranges(a, b)
    for lo, hi in ranges:
        assert lo <= hi
        covered.extend(range(lo, hi + 1))
    assert len(covered) == len(set(covered))
    assert set(covered) == {hld.pos[v] for v in path_nodes(hld, a, b)}
    assert len(ranges) <= 2 * n.bit_length() + 1


@given(parent_lists(), st.data())
def test_query_matches_path_max(parents, data):
    n = len(parents)
    values = data.draw(st.lists(st.integers(-100, 100), min_size=n, max_size=n))
    hld = HeavyLightDecomposition(to_adj(parents), 0)
    flat = [0] * n
    for v, x in enumerate(values):
        flat[hld.pos[v]] = x
    a = data.draw(st.integers(0, n - 1))
    b = data.draw(st.integers(0, n - 1))
    result = hld.query(a, b, lambda lo, hi: max(flat[lo:hi + 1]))
    assert result == max(values[v] for v in path_nodes(hld, a, b))


@given(parent_lists())
def test_heavy_path_structure(parents):
    hld = HeavyLightDecomposition(to_adj(parents), 0)
    for v, p in enumerate(parents):
        if p < 0:
            assert hld.head[v] == v
        elif hld.heavy[p] == v:
            assert hld.head[v] == hld.head[p]
            assert hld.pos[v] == hld.pos[p] + 1
        else:
            assert hld.head[v] == v


def test_errors():
    with pytest.raises(IndexError):
        HeavyLightDecomposition([[]], 2)
    with pytest.raises(ValueError):
        HeavyLightDecomposition([[1, 2], [0, 2], [0, 1]], 0)