from __future__ import annotations

from typing import Generic, Iterable, List, Optional, TypeVar

from errors import EmptyContainerError


T = TypeVar("T")

NUM_CHILDREN = 4


class ArrayHeap(Generic[T]):
    """Array-backed min-heap where every node has up to four children.

    Elements only need to support ``<``. There is no decrease-key; callers
    that need one push a fresh entry and skip the outdated copy when it is
    popped.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._heap: List[T] = []
        if items is not None:
            for item in items:
                self.insert(item)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, item: T) -> None:
        if item is None:
            raise ValueError("Cannot insert None into a priority queue.")
        self._heap.append(item)
        self._percolate_up(len(self._heap) - 1)

    def peek_min(self) -> T:
        if not self._heap:
            raise EmptyContainerError("peek_min on an empty priority queue.")
        return self._heap[0]

    def remove_min(self) -> T:
        if not self._heap:
            raise EmptyContainerError("remove_min on an empty priority queue.")
        heap = self._heap
        smallest = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._percolate_down(0)
        return smallest

    @staticmethod
    def parent_of(index: int) -> int:
        return (index - 1) // NUM_CHILDREN

    @staticmethod
    def child_of(index: int, k: int) -> int:
        return NUM_CHILDREN * index + k + 1

    def _percolate_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = self.parent_of(index)
            if not heap[index] < heap[parent]:
                return
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _percolate_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            first_child = self.child_of(index, 0)
            if first_child >= size:
                return

            # Pick the smallest of up to NUM_CHILDREN children.
            smallest = first_child
            for child in range(first_child + 1, min(first_child + NUM_CHILDREN, size)):
                if heap[child] < heap[smallest]:
                    smallest = child

            if not heap[smallest] < heap[index]:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest
