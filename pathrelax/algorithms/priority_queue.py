"""Indexed binary min-heap with decrease-key.

`IndexedMinHeap` keeps at most one live entry per vertex and an auxiliary
vertex -> position index that is updated on every swap, so ``push``, ``pop``
and ``decrease_key`` all run in O(log n).

Entries are ``[key, sequence, vertex]`` lists. ``sequence`` is a monotonically
increasing insertion counter: equal keys pop in insertion order and vertices
are never compared with each other.
"""

from __future__ import annotations

from itertools import count
from typing import Dict, List, Tuple

from pathrelax.config import Cost
from pathrelax.exceptions import MisuseError
from pathrelax.graph.strict_graph import NodeID

_KEY = 0
_SEQ = 1
_VERTEX = 2


class IndexedMinHeap:
    """Min-heap over (vertex, key) pairs with O(log n) decrease-key."""

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._position: Dict[NodeID, int] = {}
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._position

    def __repr__(self) -> str:
        return f"IndexedMinHeap({[(e[_VERTEX], e[_KEY]) for e in self._heap]!r})"

    def is_empty(self) -> bool:
        return not self._heap

    def push(self, vertex: NodeID, key: Cost) -> None:
        """Insert ``vertex`` with ``key``.

        Raises:
            MisuseError: If the vertex already has a live entry.
        """
        if vertex in self._position:
            raise MisuseError(f"Vertex {vertex!r} is already in the queue.")
        idx = len(self._heap)
        self._heap.append([key, next(self._counter), vertex])
        self._position[vertex] = idx
        self._sift_up(idx)

    def pop(self) -> NodeID:
        """Remove and return the vertex with the minimum key.

        Raises:
            MisuseError: If the queue is empty.
        """
        if not self._heap:
            raise MisuseError("Cannot pop from an empty queue.")
        last = len(self._heap) - 1
        self._swap(0, last)
        entry = self._heap.pop()
        del self._position[entry[_VERTEX]]
        if self._heap:
            self._sift_down(0)
        return entry[_VERTEX]

    def peek(self) -> Tuple[NodeID, Cost]:
        """Return ``(vertex, key)`` of the minimum entry without removing it.

        Raises:
            MisuseError: If the queue is empty.
        """
        if not self._heap:
            raise MisuseError("Cannot peek into an empty queue.")
        entry = self._heap[0]
        return entry[_VERTEX], entry[_KEY]

    def key(self, vertex: NodeID) -> Cost:
        """Return the current key of ``vertex``.

        Raises:
            MisuseError: If the vertex has no live entry.
        """
        try:
            return self._heap[self._position[vertex]][_KEY]
        except KeyError:
            raise MisuseError(f"Vertex {vertex!r} is not in the queue.") from None

    def decrease_key(self, vertex: NodeID, old_key: Cost, new_key: Cost) -> None:
        """Lower the key of the live entry for ``vertex`` from ``old_key`` to ``new_key``.

        The entry keeps its place in the insertion order, so among equal keys it
        still pops according to when it was first pushed.

        Raises:
            MisuseError: If the vertex has no live entry, its key is not
                ``old_key``, or ``new_key`` is greater than ``old_key``.
        """
        idx = self._position.get(vertex)
        if idx is None:
            raise MisuseError(f"Vertex {vertex!r} is not in the queue.")
        entry = self._heap[idx]
        if entry[_KEY] != old_key:
            raise MisuseError(
                f"Vertex {vertex!r} has key {entry[_KEY]!r}, expected {old_key!r}."
            )
        if new_key > old_key:
            raise MisuseError(
                f"Cannot raise key of vertex {vertex!r} from {old_key!r} to {new_key!r}."
            )
        entry[_KEY] = new_key
        self._sift_up(idx)

    def vertices(self) -> List[NodeID]:
        """Snapshot of the live vertices in heap-array order."""
        return [entry[_VERTEX] for entry in self._heap]

    def _less(self, i: int, j: int) -> bool:
        a = self._heap[i]
        b = self._heap[j]
        return (a[_KEY], a[_SEQ]) < (b[_KEY], b[_SEQ])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i][_VERTEX]] = i
        self._position[heap[j][_VERTEX]] = j

    def _sift_up(self, idx: int) -> None:
        while idx > 0:
            parent = (idx - 1) >> 1
            if not self._less(idx, parent):
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * idx + 1
            if left >= size:
                break
            child = left
            right = left + 1
            if right < size and self._less(right, left):
                child = right
            if not self._less(child, idx):
                break
            self._swap(idx, child)
            idx = child
