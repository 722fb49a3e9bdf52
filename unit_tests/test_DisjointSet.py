import pytest
from pygraphtools.DisjointSet import DisjointSet


@pytest.mark.parametrize("policy", ["size", "depth"])
def test_initial_sets(policy):
    ds = DisjointSet(5, union_policy=policy)
    assert len(ds) == 5
    for i in range(5):
        assert ds.find(i) == i
        assert ds.is_connected(i, i)
        assert ds.component_size(i) == 1
        assert ds.depth(i) == 0


@pytest.mark.parametrize("policy", ["size", "depth"])
def test_union_merges_sets(policy):
    ds = DisjointSet(4, union_policy=policy)
    assert ds.union(0, 1) is True
    assert ds.is_connected(0, 1)
    assert not ds.is_connected(0, 2)
    assert len(ds) == 3
    assert ds.component_size(1) == 2


@pytest.mark.parametrize("policy", ["size", "depth"])
def test_union_of_joined_nodes_is_noop(policy):
    ds = DisjointSet(3, union_policy=policy)
    ds.union(0, 1)
    ds.union(1, 2)
    assert ds.union(2, 0) is False
    assert len(ds) == 1
    assert ds.component_size(0) == 3


@pytest.mark.parametrize("policy", ["size", "depth"])
def test_len_reflects_set_count(policy):
    ds = DisjointSet(6, union_policy=policy)
    ds.union(0, 1)
    ds.union(1, 2)
    ds.union(3, 4)
    assert len(ds) == 3
    ds.union(2, 3)
    assert len(ds) == 2
    assert ds.groups() == {ds.find(0): [0, 1, 2, 3, 4], ds.find(5): [5]}


def test_size_policy_hangs_smaller_under_larger():
    ds = DisjointSet(5)
    ds.union(0, 1)
    ds.union(0, 2)
    root = ds.find(0)
    ds.union(3, 0)
    assert ds.find(3) == root
    assert ds.component_size(3) == 4


def test_size_policy_long_chain_stays_shallow():
    n = 200000
    ds = DisjointSet(n)
    for i in range(1, n):
        ds.union(i - 1, i)
    assert len(ds) == 1
    assert max(ds.depth(i) for i in range(0, n, 997)) <= 2
    assert ds.component_size(n - 1) == n


def test_depth_policy_attaches_under_deeper_node():
    ds = DisjointSet(4, union_policy="depth")
    # equal depth: root of the first node goes under the second node
    ds.union(0, 1)
    assert ds.parent[0] == 1
    # depth(0) == 1 > depth(2) == 0: root of 2 goes under node 0 itself
    ds.union(0, 2)
    assert ds.parent[2] == 0
    assert ds.depth(2) == 2
    assert ds.find(2) == 1
    assert ds.component_size(2) == 3


def test_depth_policy_deep_chain_has_no_recursion_limit():
    n = 50000
    ds = DisjointSet(n, union_policy="depth")
    for i in range(n - 1, 0, -1):
        ds.union(i, i - 1)
    assert len(ds) == 1
    assert ds.is_connected(0, n - 1)


def test_invalid_policy():
    with pytest.raises(ValueError):
        DisjointSet(3, union_policy="rank")


def test_out_of_range_nodes():
    ds = DisjointSet(2)
    with pytest.raises(IndexError):
        ds.find(2)
    with pytest.raises(IndexError):
        ds.union(-1, 0)


def test_empty():
    ds = DisjointSet(0)
    assert len(ds) == 0
    assert ds.groups() == {}


def test_size_policy_find_halves_paths():
    ds = DisjointSet(5)
    ds.parent = [0, 0, 1, 2, 3]  # chain 4 -> 3 -> 2 -> 1 -> 0
    assert ds.find(4) == 0
    assert ds.parent == [0, 0, 0, 2, 2]
    assert ds.depth(4) == 2


def test_depth_policy_find_leaves_tree_alone():
    ds = DisjointSet(5, union_policy="depth")
    ds.parent = [0, 0, 1, 2, 3]
    assert ds.find(4) == 0
    assert ds.is_connected(4, 1)
    assert ds.parent == [0, 0, 1, 2, 3]
    assert ds.depth(4) == 4


@pytest.mark.parametrize("policy", ["size", "depth"])
def test_set_count_only_drops_on_merging_union(policy):
    ds = DisjointSet(4, union_policy=policy)
    ds.union(0, 1)
    ds.union(1, 0)
    ds.is_connected(0, 3)
    assert len(ds) == 3
    assert len(ds) == len(ds.groups())
