from __future__ import annotations

from typing import Dict, Generic, Hashable, List, TypeVar


T = TypeVar("T", bound=Hashable)


class ArrayDisjointSet(Generic[T]):
    """Union-find over hashable items, stored as one signed cell per item.

    A negative cell marks a representative and holds ``-(rank + 1)``, so a
    fresh singleton is ``-1``. A non-negative cell is the index of the parent.
    """

    def __init__(self) -> None:
        self._pointers: List[int] = []
        self._index: Dict[T, int] = {}

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def make_set(self, item: T) -> None:
        if item in self._index:
            raise ValueError(f"{item!r} is already registered.")
        self._index[item] = len(self._pointers)
        self._pointers.append(-1)

    def find_set(self, item: T) -> int:
        """Return the index of the representative of the set holding ``item``."""
        try:
            cell = self._index[item]
        except KeyError:
            raise ValueError(f"{item!r} is not registered.") from None

        while self._pointers[cell] >= 0:
            cell = self._pointers[cell]
        return cell

    def connected(self, first: T, second: T) -> bool:
        return self.find_set(first) == self.find_set(second)

    def union(self, first: T, second: T) -> None:
        """Merge the sets holding ``first`` and ``second``.

        Joining two items that already share a set is a caller error.
        """
        root_first = self.find_set(first)
        root_second = self.find_set(second)
        if root_first == root_second:
            raise ValueError(f"{first!r} and {second!r} are already in the same set.")

        pointers = self._pointers
        rank_first = -pointers[root_first] - 1
        rank_second = -pointers[root_second] - 1

        if rank_first < rank_second:
            pointers[root_first] = root_second
        elif rank_second < rank_first:
            pointers[root_second] = root_first
        else:
            pointers[root_second] = root_first
            pointers[root_first] -= 1
