"""Invariant checks for the indexed min-heap."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from ..graphs.heap import IndexedMinHeap


def heap_property_violations(heap: "IndexedMinHeap") -> List[Tuple[int, int]]:
    """
    Return every (parent, child) array position pair that breaks heap order.

    Only the live portion of the array (positions below ``heap.size``) is
    inspected.

    Parameters
    ----------
    heap:
        Heap to inspect.

    Returns
    -------
    list of tuple
        ``(parent_position, child_position)`` pairs with
        ``priority(parent) > priority(child)``. Empty when the heap is valid.
    """
    nodes = heap.snapshot()
    bad = []
    for child in range(1, len(nodes)):
        parent = (child - 1) // 2
        if nodes[parent].priority > nodes[child].priority:
            bad.append((parent, child))
    return bad


def assert_heap_property(heap: "IndexedMinHeap") -> None:
    """
    Assert that every parent's priority is <= each of its children's.

    Raises
    ------
    ValueError
        If some parent/child pair is out of order.
    """
    bad = heap_property_violations(heap)
    if bad:
        raise ValueError(f"Heap order violated at (parent, child) positions {bad}.")


def assert_position_index(heap: "IndexedMinHeap") -> None:
    """
    Assert that the position index agrees with the heap array.

    Every id stored in the live array must map back to its own position,
    and every id the index marks as present must sit inside the live array.

    Raises
    ------
    ValueError
        If the index and the array disagree.
    """
    nodes = heap.snapshot()
    for pos, node in enumerate(nodes):
        if heap.positions[node.id] != pos:
            raise ValueError(
                f"Vertex {node.id} is at position {pos} but indexed at "
                f"{heap.positions[node.id]}."
            )

    present = sum(1 for p in heap.positions if p >= 0)
    if present != len(nodes):
        raise ValueError(
            f"Position index marks {present} ids present, heap holds {len(nodes)}."
        )


def is_valid_heap(heap: "IndexedMinHeap") -> bool:
    """Return True if both heap invariants hold."""
    try:
        assert_heap_property(heap)
        assert_position_index(heap)
    except ValueError:
        return False
    return True
