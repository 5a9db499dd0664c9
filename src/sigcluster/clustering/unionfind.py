from __future__ import annotations


class UnionFind:
    """Disjoint sets over the indices ``0..n-1``.

    Union by rank with iterative path compression, so adversarial chains
    cannot exhaust the recursion limit.
    """

    def __init__(self, n: int) -> None:
        self.parent: list[int] = list(range(n))
        self.rank: list[int] = [0] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        current = x
        while self.parent[current] != root:
            next_parent = self.parent[current]
            self.parent[current] = root
            current = next_parent
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding *a* and *b*; False if they already match."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        return True
