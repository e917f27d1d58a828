"""
Per-run bookkeeping shared by Prim's and Dijkstra's algorithms.

A Records instance lives for exactly one algorithm invocation. It owns the
priority queue, the finished flags, the predecessor array and the growing
list of tree edges. When the run ends every structure is released except the
tree, which is handed to the caller.
"""

import math
from contextlib import contextmanager
from typing import Iterator, List, Optional

import numpy as np

from ..logging import get_logger
from .core import Edge, Graph
from .heap import NOTHING, IndexedMinHeap

logger = get_logger(__name__)

# Priority of every vertex other than the start vertex before it is reached.
# Compares above every integer key, however large.
INFINITY = math.inf


class AllocationError(MemoryError):
    """Raised when the structures for an algorithm run cannot be allocated."""


class Records:
    """
    State of one Prim/Dijkstra run.

    Attributes:
        num_vertices: Number of vertices; ids are 0..num_vertices-1.
        start_vertex: Vertex the run starts from.
        heap: Priority queue over all vertices not yet finished.
        finished: finished[id] is True once id has been extracted.
        predecessors: predecessors[id] is the vertex that last lowered id's
            key, or NOTHING.
        tree: Tree edges in the order they were added.
    """

    def __init__(self, num_vertices: int, start_vertex: int, heap: IndexedMinHeap):
        self.num_vertices = num_vertices
        self.start_vertex = start_vertex
        self.heap: Optional[IndexedMinHeap] = heap
        self.finished: Optional[np.ndarray] = np.zeros(num_vertices, dtype=bool)
        self.predecessors: Optional[np.ndarray] = np.full(num_vertices, NOTHING, dtype=np.int64)
        self.tree: Optional[List[Edge]] = []

    def __repr__(self) -> str:
        return (
            f"Records(num_vertices={self.num_vertices}, "
            f"start_vertex={self.start_vertex}, num_tree_edges={self.num_tree_edges})"
        )

    @property
    def num_tree_edges(self) -> int:
        return len(self.tree) if self.tree is not None else 0

    def has_predecessor(self, vertex_id: int) -> bool:
        return self.predecessors[vertex_id] != NOTHING

    def is_reached(self, vertex_id: int) -> bool:
        """Return True if vertex_id is the start vertex or has been relaxed into."""
        return vertex_id == self.start_vertex or self.has_predecessor(vertex_id)

    def add_tree_edge(self, from_vertex: int, to_vertex: int, weight: int) -> None:
        self.tree.append(Edge(int(from_vertex), int(to_vertex), int(weight)))

    def take_tree(self) -> List[Edge]:
        """Transfer ownership of the tree edges to the caller."""
        tree, self.tree = self.tree, None
        return tree

    def release(self) -> None:
        """Drop every owned structure; the tree too unless it was taken."""
        self.heap = None
        self.finished = None
        self.predecessors = None
        self.tree = None


def init_heap(graph: Graph, start_vertex: int) -> IndexedMinHeap:
    """
    Build the priority queue for a run starting at start_vertex.

    The start vertex gets priority 0 and every other vertex INFINITY;
    ids are inserted in increasing order.

    Args:
        graph: Graph to run on.
        start_vertex: Valid vertex id.

    Returns:
        Heap holding every vertex of the graph.
    """
    heap = IndexedMinHeap(graph.num_vertices)
    for vertex_id in range(graph.num_vertices):
        heap.insert(0 if vertex_id == start_vertex else INFINITY, vertex_id)
    return heap


def init_records(graph: Graph, start_vertex: int) -> Records:
    """
    Create the records for a run on graph starting at start_vertex.

    Args:
        graph: Graph to run on.
        start_vertex: Valid vertex id.

    Returns:
        Fresh Records with a seeded heap, nothing finished, no
        predecessors and an empty tree.

    Raises:
        AllocationError: If memory runs out while building the records.
    """
    try:
        return Records(graph.num_vertices, start_vertex, init_heap(graph, start_vertex))
    except MemoryError as exc:
        logger.error("Unable to allocate records for %d vertices", graph.num_vertices)
        raise AllocationError(
            f"Unable to allocate records for {graph.num_vertices} vertices"
        ) from exc


@contextmanager
def records_scope(graph: Graph, start_vertex: int) -> Iterator[Records]:
    """
    Context manager yielding fresh records and releasing them on exit.

    Example:
        >>> with records_scope(graph, 0) as records:
        ...     run_loop(records)
        ...     tree = records.take_tree()
    """
    records = init_records(graph, start_vertex)
    try:
        yield records
    finally:
        records.release()
