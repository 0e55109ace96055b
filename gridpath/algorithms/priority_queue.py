"""Fixed-capacity binary min-heap for grid search."""
import logging
from typing import Dict, List, Optional

import numpy as np

from ..domain.models.node import Node

logger = logging.getLogger(__name__)


class BoundedPriorityQueue:
    """Binary min-heap of Nodes keyed by a float priority.

    The heap lives in a preallocated numpy priority array with a parallel
    slot list of Nodes. Inserting into a full queue is a silent no-op, so
    callers size the capacity to the grid's cell count.

    Each Node occupies at most one slot: inserting a node that is already
    queued lowers its priority in place instead of adding a second entry.
    Entries with equal priority come out in no particular order.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._priorities = np.empty(capacity, dtype=np.float64)
        self._nodes: List[Optional[Node]] = [None] * capacity
        self._slots: Dict[Node, int] = {}
        self._size = 0
        self.dropped = 0

    def insert(self, node: Node, priority: float) -> bool:
        """Add a node, or lower its priority if it is already queued.

        Returns:
            True if the queue changed, False if the insert was dropped
        """
        if node in self._slots:
            return self.decrease_key(node, priority)

        if self._size >= self.capacity:
            self.dropped += 1
            logger.debug(f"Queue full ({self.capacity}), dropping {node}")
            return False

        index = self._size
        self._size += 1
        self._place(index, node, priority)
        self._sift_up(index)
        return True

    def decrease_key(self, node: Node, priority: float) -> bool:
        """Lower the priority of a queued node.

        Returns:
            True if the priority was lowered, False if the node is not queued
            or the new priority is not lower
        """
        index = self._slots.get(node)
        if index is None or priority >= self._priorities[index]:
            return False
        self._priorities[index] = priority
        self._sift_up(index)
        return True

    def peek_min(self) -> Optional[Node]:
        """Node with the lowest priority, without removing it; None if empty."""
        if self._size == 0:
            return None
        return self._nodes[0]

    def peek_priority(self) -> Optional[float]:
        if self._size == 0:
            return None
        return float(self._priorities[0])

    def delete_min(self) -> Optional[Node]:
        """Remove and return the node with the lowest priority; None if empty."""
        if self._size == 0:
            return None

        root = self._nodes[0]
        del self._slots[root]
        self._size -= 1

        if self._size > 0:
            last = self._size
            self._place(0, self._nodes[last], self._priorities[last])
            self._sift_down(0)
        self._nodes[self._size] = None
        return root

    def priority_of(self, node: Node) -> Optional[float]:
        index = self._slots.get(node)
        return None if index is None else float(self._priorities[index])

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size >= self.capacity

    def __len__(self) -> int:
        return self._size

    def __contains__(self, node: Node) -> bool:
        return node in self._slots

    def __repr__(self) -> str:
        return f"BoundedPriorityQueue(size={self._size}, capacity={self.capacity})"

    # ------------------------------------------------------------------
    # Heap internals

    def _place(self, index: int, node: Node, priority: float):
        self._nodes[index] = node
        self._priorities[index] = priority
        self._slots[node] = index

    def _swap(self, i: int, j: int):
        node_i, node_j = self._nodes[i], self._nodes[j]
        priority_i = self._priorities[i]
        self._place(i, node_j, self._priorities[j])
        self._place(j, node_i, priority_i)

    def _sift_up(self, index: int):
        while index > 0:
            parent = (index - 1) // 2
            if self._priorities[parent] <= self._priorities[index]:
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int):
        size = self._size
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._priorities[left] < self._priorities[smallest]:
                smallest = left
            if right < size and self._priorities[right] < self._priorities[smallest]:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest
