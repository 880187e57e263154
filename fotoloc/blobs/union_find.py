"""
Union-Find (disjoint set) registry over blob labels.

- add(x): Register x as its own singleton set
- join(x, y): Merge the sets containing x and y
- find(x): Representative of the set containing x, or the not-found
  sentinel if x was never added

find() compresses paths and join() unions by rank, so both are
amortized near-constant time.
"""

from typing import Dict, Generic, TypeVar

Label = TypeVar("Label")


class UnionFind(Generic[Label]):
    """
    Union-Find with path compression and union by rank.

    Unlike a lazily-initialized union-find, find() on an element that was
    never added does not create it. It returns the sentinel given at
    construction instead.

    Example:
        >>> uf = UnionFind[int](not_found=0)
        >>> uf.add(1); uf.add(2); uf.add(3)
        >>> _ = uf.join(1, 2)
        >>> uf.find(1) == uf.find(2)
        True
        >>> uf.find(7)
        0
    """

    def __init__(self, not_found: Label) -> None:
        self._not_found = not_found
        self._parent: Dict[Label, Label] = {}
        self._rank: Dict[Label, int] = {}

    @property
    def not_found(self) -> Label:
        """Sentinel returned by find() for unknown elements."""
        return self._not_found

    def add(self, element: Label) -> None:
        """Register element as a singleton set. No-op if already present."""
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def find(self, element: Label) -> Label:
        """
        Find the representative of the set containing element.

        Flattens the path so every node visited points directly at the root.
        """
        if element not in self._parent:
            return self._not_found

        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def join(self, x: Label, y: Label) -> Label:
        """
        Merge the sets containing x and y.

        Elements not yet added are added first. Returns the representative
        of the merged set.
        """
        self.add(x)
        self.add(y)

        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return root_x

        # Attach the shorter tree under the taller one
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
            return root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
            return root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
            return root_x

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)
