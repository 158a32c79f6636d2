from __future__ import annotations

from typing import Iterable, List, TypeVar

from priority_queue import ArrayHeap


T = TypeVar("T")


def top_k_sort(k: int, items: Iterable[T]) -> List[T]:
    """Return the ``k`` largest items in ascending order.

    Fewer than ``k`` items yields all of them, sorted. The input is left
    untouched; the heap never holds more than ``k`` elements.
    """
    if items is None:
        raise TypeError("top_k_sort expects an iterable, got None.")
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}.")
    if k == 0:
        return []

    heap: ArrayHeap[T] = ArrayHeap()
    for item in items:
        if heap.size() < k:
            heap.insert(item)
        elif heap.peek_min() < item:
            heap.remove_min()
            heap.insert(item)

    result: List[T] = []
    while heap:
        result.append(heap.remove_min())
    return result
