"""
Shortest-path reconstruction from a Dijkstra distance tree.
"""

from typing import Dict, List, Optional, Sequence

from .core import Edge


def reconstruct_shortest_paths(
    dist_tree: Optional[Sequence[Edge]], num_vertices: int, start_vertex: int
) -> Optional[Dict[int, Optional[List[Edge]]]]:
    """
    Expand a distance tree into one path per vertex, leading back to the start.

    A distance tree holds one edge Edge(v, p, d) per reached vertex v, where p
    is v's predecessor and d its distance from the start. The path for v
    follows predecessors until start_vertex is reached:

        [Edge(v, p1, w1), Edge(p1, p2, w2), ..., Edge(pn, start, wn)]

    Each w is the weight of a single hop, recovered as the difference of the
    two endpoints' distances, so w1 + ... + wn == d.

    Args:
        dist_tree: Edges returned by dijkstra_tree.
        num_vertices: Number of vertices of the graph the tree came from.
        start_vertex: Start vertex of the Dijkstra run.

    Returns:
        Dict mapping every id in 0..num_vertices-1 to its path: [] for the
        start vertex, None for vertices absent from the tree. Returns None if
        dist_tree is None or start_vertex is out of range.

    Raises:
        ValueError: If the tree's predecessor links form a cycle or lead to a
            vertex that is neither in the tree nor the start vertex.

    Example:
        >>> tree = [Edge(1, 0, 1), Edge(2, 1, 3)]
        >>> reconstruct_shortest_paths(tree, 3, 0)[2]
        [Edge(from_vertex=2, to_vertex=1, weight=2), Edge(from_vertex=1, to_vertex=0, weight=1)]
    """
    if dist_tree is None or not 0 <= start_vertex < num_vertices:
        return None

    tree_edge: Dict[int, Edge] = {edge.from_vertex: edge for edge in dist_tree}

    def distance(vertex_id: int) -> int:
        return 0 if vertex_id == start_vertex else tree_edge[vertex_id].weight

    paths: Dict[int, Optional[List[Edge]]] = {}
    for vertex_id in range(num_vertices):
        if vertex_id == start_vertex:
            paths[vertex_id] = []
            continue
        if vertex_id not in tree_edge:
            paths[vertex_id] = None
            continue

        path: List[Edge] = []
        seen = {vertex_id}
        current = vertex_id
        while current != start_vertex:
            parent = tree_edge[current].to_vertex
            if parent != start_vertex and parent not in tree_edge:
                raise ValueError(
                    f"Vertex {parent} on the path from {vertex_id} has no tree edge"
                )
            if parent in seen:
                raise ValueError(f"Predecessor cycle through vertex {parent}")
            seen.add(parent)
            path.append(Edge(current, parent, distance(current) - distance(parent)))
            current = parent
        paths[vertex_id] = path

    return paths
