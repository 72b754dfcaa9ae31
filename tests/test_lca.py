import pytest
from hypothesis import given, strategies as st

from contestlib.lca import AncestorJumper, BinaryLiftingLCA, TourLCA


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


FIXED = [-1, 0, 0, 1, 1, 2]


@pytest.mark.parametrize("cls", [BinaryLiftingLCA, TourLCA])
def test_fixed_tree(cls):
    t = cls(to_adj(FIXED), 0)
    assert t.lca(3, 4) == 1
    assert t.lca(3, 5) == 0
    assert t.lca(4, 1) == 1


@given(parent_lists())
def test_implementations_agree(parents):
    adj = to_adj(parents)
    binary = BinaryLiftingLCA(adj, 0)
    tour = TourLCA(adj, 0)
    n = len(parents)
    for a in range(n):
        for b in range(0, n, 3):
            lca = binary.lca(a, b)
            assert tour.lca(a, b) == lca
            assert tour.is_ancestor(lca, a)
            assert tour.is_ancestor(lca, b)
        assert binary.lca(a, a) == a
        assert tour.lca(0, a) == 0


@given(parent_lists())
def test_jumps_agree(parents):
    adj = to_adj(parents)
    binary = BinaryLiftingLCA(adj, 0)
    tour = TourLCA(adj, 0)
    jumper = AncestorJumper(parents)
    for v, p in enumerate(parents):
        depth = binary.depth[v]
        if p >= 0:
            assert binary.jump(v, 1) == p
        for d in range(depth + 1):
            assert tour.jump(v, d) == binary.jump(v, d)
            assert jumper.jump(v, d) == binary.jump(v, d)
        assert binary.jump(v, depth) == 0
        assert binary.jump(v, depth + 5) == 0
        assert tour.jump(v, depth + 5) == 0
        assert jumper.jump(v, depth + 1) is None


@given(parent_lists(), st.data())
def test_lca_via_jump(parents, data):
    binary = BinaryLiftingLCA(to_adj(parents), 0)
    n = len(parents)
    a = data.draw(st.integers(0, n - 1))
    b = data.draw(st.integers(0, n - 1))
    lca = binary.lca(a, b)
    assert binary.jump(a, binary.depth[a] - binary.depth[lca]) == lca
    assert binary.jump(b, binary.depth[b] - binary.depth[lca]) == lca


def test_other_root():
    adj = to_adj(FIXED)
    binary = BinaryLiftingLCA(adj, 2)
    tour = TourLCA(adj, 2)
    for v in range(len(FIXED)):
        assert binary.lca(v, 2) == 2
        assert tour.lca(v, 2) == 2
    assert binary.depth[2] == 0


def test_errors():
    adj = to_adj(FIXED)
    with pytest.raises(IndexError):
        BinaryLiftingLCA(adj, 6)
    with pytest.raises(ValueError):
        TourLCA([[1, 2], [0, 2], [0, 1]], 0)
    with pytest.raises(ValueError):
        BinaryLiftingLCA(adj).jump(3, -1)
    jumper = AncestorJumper(FIXED)
    with pytest.raises(IndexError):
        jumper.jump(6, 0)
    with pytest.raises(ValueError):
        AncestorJumper([-1, 5])