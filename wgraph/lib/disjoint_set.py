from __future__ import annotations

from typing import Generic, Hashable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSetNode(Generic[T]):
    """
    A single element of a union-find forest.

    Attributes:
        value: The element stored in this node.
        parent: The parent node; a root points at itself.
        rank: Upper bound on the height of the subtree rooted here.
    """

    __slots__ = ("value", "parent", "rank")

    def __init__(self, value: T) -> None:
        self.value = value
        self.parent: DisjointSetNode[T] = self
        self.rank = 0

    def __repr__(self) -> str:
        return f"DisjointSetNode({self.value!r}, rank={self.rank})"


class DisjointSet(Generic[T]):
    """
    Union-find structure with union by rank and path compression.

    Nodes are created with make_set() and identified by object identity,
    so two nodes holding equal values are still distinct sets.
    """

    def __init__(self) -> None:
        self._nodes: List[DisjointSetNode[T]] = []
        self._set_count = 0

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._set_count

    def make_set(self, value: T) -> DisjointSetNode[T]:
        """
        Create a new singleton set.

        Args:
            value: The element to store.

        Returns:
            The node representing the new set.
        """
        node = DisjointSetNode(value)
        self._nodes.append(node)
        self._set_count += 1
        return node

    def find(self, node: DisjointSetNode[T]) -> DisjointSetNode[T]:
        """
        Return the representative of the set containing node.

        Every node visited on the way to the root is re-pointed directly at
        the root.
        """
        root = node
        while root.parent is not root:
            root = root.parent

        while node.parent is not root:
            node.parent, node = root, node.parent
        return root

    def union(self, a: DisjointSetNode[T], b: DisjointSetNode[T]) -> bool:
        """
        Merge the sets containing a and b.

        Returns:
            True if two sets were merged, False if a and b already shared one.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a is root_b:
            return False

        if root_a.rank < root_b.rank:
            root_a, root_b = root_b, root_a
        root_b.parent = root_a
        if root_a.rank == root_b.rank:
            root_a.rank += 1

        self._set_count -= 1
        return True

    def same_set(self, a: DisjointSetNode[T], b: DisjointSetNode[T]) -> bool:
        return self.find(a) is self.find(b)
