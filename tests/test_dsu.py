import pytest
from hypothesis import given, strategies as st

from contestlib.dsu import DisjointSet


def test_initially_separate():
    ds = DisjointSet(4)
    assert [ds.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_union_joins_sets():
    ds = DisjointSet(5)
    assert ds.union(0, 1) is True
    assert ds.union(3, 4) is True
    assert ds.find(0) == ds.find(1)
    assert ds.find(3) == ds.find(4)
    assert ds.find(0) != ds.find(3)


def test_union_of_same_set_returns_false():
    ds = DisjointSet(3)
    ds.union(0, 1)
    ds.union(1, 2)
    assert ds.union(0, 2) is False


def test_out_of_range():
    ds = DisjointSet(2)
    with pytest.raises(IndexError):
        ds.find(2)
    with pytest.raises(IndexError):
        ds.find(-1)


def test_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


@given(st.lists(st.tuples(st.integers(0, 9), st.integers(0, 9)), max_size=30))
def test_matches_naive_components(pairs):
    ds = DisjointSet(10)
    label = list(range(10))
    for a, b in pairs:
        ds.union(a, b)
        la, lb = label[a], label[b]
        label = [la if x == lb else x for x in label]
    for i in range(10):
        for j in range(10):
            assert (ds.find(i) == ds.find(j)) == (label[i] == label[j])