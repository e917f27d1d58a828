"""
Graph algorithms package for heapgraph.

This package provides:
- Graph data structures (Edge, Vertex, Graph)
- An indexed binary min-heap with decrease-key (IndexedMinHeap)
- Per-run algorithm records (Records)
- Minimum spanning trees (Prim) and shortest-path trees (Dijkstra)
- Shortest-path reconstruction from a distance tree

All algorithms break ties deterministically, so equal inputs give equal trees.
"""

from .core import Edge, Graph, Vertex
from .heap import NOTHING, HeapNode, IndexedMinHeap, is_empty
from .paths import reconstruct_shortest_paths
from .records import INFINITY, AllocationError, Records, init_heap, init_records, records_scope
from .trees import dijkstra_tree, prim_mst

__all__ = [
    "Edge",
    "Vertex",
    "Graph",
    "HeapNode",
    "IndexedMinHeap",
    "is_empty",
    "NOTHING",
    "INFINITY",
    "Records",
    "AllocationError",
    "init_heap",
    "init_records",
    "records_scope",
    "prim_mst",
    "dijkstra_tree",
    "reconstruct_shortest_paths",
]

# Example usage:
# from heapgraph.graphs import Graph, dijkstra_tree, reconstruct_shortest_paths
#
# G = Graph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])
# tree = dijkstra_tree(G, 0)
# paths = reconstruct_shortest_paths(tree, G.num_vertices, 0)
# paths[2]  # [Edge(2, 1, 2), Edge(1, 0, 1)]
