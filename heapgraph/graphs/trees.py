"""
Spanning-tree and shortest-path-tree construction: Prim and Dijkstra.

Both algorithms share one loop: seed the heap with the start vertex at
priority 0, repeatedly extract the minimum, record the tree edge to its
predecessor, and relax the edges leaving it. They differ only in the key
offered to a neighbour: Prim offers the raw edge weight, Dijkstra the
cumulative distance through the extracted vertex.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.2 (Prim) and 24.3 (Dijkstra).
"""

from typing import Callable, List, Optional

from ..logging import get_logger
from .core import Edge, Graph
from .heap import is_empty
from .records import records_scope

logger = get_logger(__name__)

# (priority the vertex was extracted with, edge weight) -> candidate key
KeyFunction = Callable[[int, int], int]


def _edge_weight_key(priority: int, weight: int) -> int:
    return weight


def _path_length_key(priority: int, weight: int) -> int:
    return priority + weight


def _grow_tree(
    graph: Optional[Graph], start_vertex: int, key: KeyFunction, name: str
) -> Optional[List[Edge]]:
    if graph is None or not 0 <= start_vertex < graph.num_vertices:
        logger.debug("%s: invalid start vertex %r", name, start_vertex)
        return None

    logger.debug(
        "%s: start vertex %d on graph with %d vertices",
        name,
        start_vertex,
        graph.num_vertices,
    )
    unreached = 0

    with records_scope(graph, start_vertex) as records:
        heap = records.heap
        while not is_empty(heap):
            node = heap.extract_min()
            u = node.id
            records.finished[u] = True

            if not records.is_reached(u):
                # Extracted at INFINITY: nothing finished leads here.
                unreached += 1
                continue
            if u != start_vertex:
                records.add_tree_edge(u, records.predecessors[u], node.priority)

            for edge in graph.neighbors(u):
                v = edge.to_vertex
                if records.finished[v]:
                    continue
                candidate = key(node.priority, edge.weight)
                # The first offer to an unreached vertex always wins.
                if not records.is_reached(v) or candidate < heap.get_priority(v):
                    heap.decrease_priority(v, candidate)
                    records.predecessors[v] = u

        tree = records.take_tree()

    if unreached:
        logger.warning(
            "%s: %d of %d vertices unreachable from vertex %d",
            name,
            unreached,
            graph.num_vertices,
            start_vertex,
        )
    return tree


def prim_mst(graph: Optional[Graph], start_vertex: int) -> Optional[List[Edge]]:
    """
    Prim's algorithm for a minimum spanning tree.

    Each tree edge is Edge(u, predecessor(u), w) where w is the weight of
    the edge that connected u to the tree. Edges appear in the order their
    first endpoint was extracted.

    Args:
        graph: Graph with each connection stored in both directions.
        start_vertex: Root of the tree.

    Returns:
        List of tree edges (num_vertices - 1 of them when the graph is
        connected), or None if graph is None or start_vertex is out of range.
        Vertices unreachable from start_vertex contribute no edges.

    Complexity: O(E log V).

    Example:
        >>> G = Graph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
        >>> prim_mst(G, 0)
        [Edge(from_vertex=1, to_vertex=0, weight=1), Edge(from_vertex=2, to_vertex=1, weight=2)]
    """
    return _grow_tree(graph, start_vertex, _edge_weight_key, "prim")


def dijkstra_tree(graph: Optional[Graph], start_vertex: int) -> Optional[List[Edge]]:
    """
    Dijkstra's algorithm for a shortest-path (distance) tree.

    Each tree edge is Edge(u, predecessor(u), d) where d is the shortest
    distance from start_vertex to u. Edge weights must be non-negative.

    Args:
        graph: Graph to search.
        start_vertex: Source vertex.

    Returns:
        List of tree edges in order of increasing distance, or None if graph
        is None or start_vertex is out of range. Vertices unreachable from
        start_vertex contribute no edges.

    Complexity: O(E log V).

    Example:
        >>> G = Graph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])
        >>> dijkstra_tree(G, 0)
        [Edge(from_vertex=1, to_vertex=0, weight=1), Edge(from_vertex=2, to_vertex=1, weight=3)]
    """
    return _grow_tree(graph, start_vertex, _path_length_key, "dijkstra")
