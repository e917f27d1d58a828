"""
Indexed binary min-heap with decrease-key.

The heap stores (priority, id) pairs in a dense array using the usual
implicit binary tree (children of position p at 2p+1 and 2p+2). A second
array maps each id in 0..capacity-1 to its current array position, which
makes get_priority O(1) and decrease_priority O(log n).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6.5 (priority queues).
"""

from dataclasses import dataclass
from typing import List, Optional

from ..diagnostics.core import assert_heap_property, assert_position_index
from ..diagnostics.debug_mode import is_debug_enabled

NOTHING = -1


@dataclass(frozen=True)
class HeapNode:
    """
    Heap entry. Ordering compares priority only.

    Attributes:
        priority: Integer priority; smaller is extracted first.
        id: Vertex id.
    """

    priority: int
    id: int

    def __lt__(self, other: "HeapNode") -> bool:
        return self.priority < other.priority

    def __le__(self, other: "HeapNode") -> bool:
        return self.priority <= other.priority


def _parent(pos: int) -> int:
    return (pos - 1) // 2


class IndexedMinHeap:
    """
    Array-backed binary min-heap keyed by vertex id.

    Invariants:
        - heap order: for every live position p > 0,
          nodes[parent(p)].priority <= nodes[p].priority
        - index: for every present id, nodes[positions[id]].id == id;
          absent ids map to NOTHING

    Ties are broken deterministically: sift-up stops on equal priorities
    and sift-down prefers the left child when both children are equal.

    Complexity:
        - insert: O(log n)
        - get_min: O(1)
        - extract_min: O(log n)
        - get_priority: O(1)
        - decrease_priority: O(log n)

    Example:
        >>> heap = IndexedMinHeap(3)
        >>> heap.insert(5, 0)
        >>> heap.insert(2, 1)
        >>> heap.decrease_priority(0, 1)
        >>> heap.extract_min()
        HeapNode(priority=1, id=0)
    """

    def __init__(self, capacity: int):
        """
        Create an empty heap for ids 0..capacity-1.

        Args:
            capacity: Maximum number of entries (and size of the id range).
        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.size = 0
        self.nodes: List[Optional[HeapNode]] = [None] * capacity
        self.positions: List[int] = [NOTHING] * capacity

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.size > 0

    def __contains__(self, vertex_id: int) -> bool:
        return 0 <= vertex_id < self.capacity and self.positions[vertex_id] != NOTHING

    def __repr__(self) -> str:
        return f"IndexedMinHeap(size={self.size}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self.size == 0

    def snapshot(self) -> List[HeapNode]:
        """Return the live entries in array order."""
        return list(self.nodes[: self.size])

    def _validate(self) -> None:
        if is_debug_enabled():
            assert_heap_property(self)
            assert_position_index(self)

    def _swap(self, i: int, j: int) -> None:
        nodes = self.nodes
        nodes[i], nodes[j] = nodes[j], nodes[i]
        self.positions[nodes[i].id] = i
        self.positions[nodes[j].id] = j

    def _sift_up(self, pos: int) -> None:
        nodes = self.nodes
        while pos > 0:
            parent = _parent(pos)
            if nodes[parent].priority <= nodes[pos].priority:
                break
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        nodes = self.nodes
        while True:
            left = 2 * pos + 1
            if left >= self.size:
                break
            smallest = left
            right = left + 1
            if right < self.size and nodes[right].priority < nodes[left].priority:
                smallest = right
            if nodes[smallest].priority >= nodes[pos].priority:
                break
            self._swap(pos, smallest)
            pos = smallest

    def insert(self, priority: int, vertex_id: int) -> None:
        """
        Add vertex_id with the given priority.

        Args:
            priority: Priority of the new entry.
            vertex_id: Id in 0..capacity-1 not already present.

        Raises:
            ValueError: If vertex_id is out of range or already present.
        """
        if not 0 <= vertex_id < self.capacity:
            raise ValueError(
                f"Vertex id {vertex_id} out of range for heap of capacity {self.capacity}"
            )
        if self.positions[vertex_id] != NOTHING:
            raise ValueError(f"Vertex {vertex_id} is already in the heap")

        # Ids are unique and below capacity, so a free slot always exists here.
        pos = self.size
        self.nodes[pos] = HeapNode(priority, vertex_id)
        self.positions[vertex_id] = pos
        self.size += 1
        self._sift_up(pos)
        self._validate()

    def get_min(self) -> HeapNode:
        """
        Return the minimum entry without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if self.size == 0:
            raise IndexError("get_min from an empty heap")
        return self.nodes[0]

    def extract_min(self) -> HeapNode:
        """
        Remove and return the minimum entry.

        The last array entry moves to the root and is sifted down.

        Raises:
            IndexError: If the heap is empty.
        """
        if self.size == 0:
            raise IndexError("extract_min from an empty heap")

        root = self.nodes[0]
        last = self.size - 1
        self._swap(0, last)
        self.nodes[last] = None
        self.positions[root.id] = NOTHING
        self.size = last
        self._sift_down(0)
        self._validate()
        return root

    def get_priority(self, vertex_id: int) -> int:
        """
        Return the current priority of vertex_id.

        Raises:
            KeyError: If vertex_id is not in the heap.
        """
        if vertex_id not in self:
            raise KeyError(vertex_id)
        return self.nodes[self.positions[vertex_id]].priority

    def decrease_priority(self, vertex_id: int, new_priority: int) -> None:
        """
        Lower the priority of vertex_id and restore heap order.

        Args:
            vertex_id: Id currently in the heap.
            new_priority: Strictly smaller than the current priority.

        Raises:
            KeyError: If vertex_id is not in the heap.
            ValueError: If new_priority is not strictly smaller.
        """
        current = self.get_priority(vertex_id)
        if new_priority >= current:
            raise ValueError(
                f"New priority {new_priority} for vertex {vertex_id} is not "
                f"smaller than current priority {current}"
            )
        pos = self.positions[vertex_id]
        self.nodes[pos] = HeapNode(new_priority, vertex_id)
        self._sift_up(pos)
        self._validate()


def is_empty(heap: Optional[IndexedMinHeap]) -> bool:
    """Return True if heap is None or holds no entries."""
    return heap is None or heap.size <= 0
