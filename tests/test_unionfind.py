from sigcluster.clustering.unionfind import UnionFind


def test_initial_elements_are_their_own_roots():
    uf = UnionFind(4)
    assert [uf.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert len(uf) == 4


def test_union_merges_and_repeated_union_is_noop():
    uf = UnionFind(3)
    assert uf.union(0, 1) is True
    assert uf.find(0) == uf.find(1)
    assert uf.union(1, 0) is False
    assert uf.find(2) == 2


def test_union_by_rank_keeps_first_root_on_tie_and_attaches_lower_rank():
    uf = UnionFind(4)
    uf.union(0, 1)
    assert uf.find(1) == 0
    assert uf.rank[0] == 1

    uf.union(2, 0)
    assert uf.find(2) == 0
    assert uf.rank[0] == 1


def test_find_compresses_long_chains_iteratively():
    n = 100_000
    uf = UnionFind(n)
    uf.parent = [max(i - 1, 0) for i in range(n)]

    assert uf.find(n - 1) == 0
    assert uf.parent[n - 1] == 0
    assert uf.parent[n // 2] == 0
