"""Plain-text dumps of graphs, heaps and algorithm records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from ..graphs.core import Edge, Graph, Vertex
    from ..graphs.heap import IndexedMinHeap
    from ..graphs.records import Records


def format_edge(edge: Optional["Edge"]) -> str:
    if edge is None:
        return "None"
    return f"({edge.from_vertex} -- {edge.to_vertex}, {edge.weight})"


def format_edge_list(edges: Iterable["Edge"]) -> str:
    return " --> ".join([format_edge(edge) for edge in edges] + ["None"])


def format_vertex(vertex: Optional["Vertex"]) -> str:
    if vertex is None:
        return "None"
    return f"{vertex.id}: {format_edge_list(vertex.adj_list)}"


def format_graph(graph: Optional["Graph"]) -> str:
    """
    Render a graph as a header line followed by one line per vertex slot.

    Parameters
    ----------
    graph:
        Graph to render, or None.

    Returns
    -------
    str
        Multi-line description.
    """
    if graph is None:
        return "None"
    lines = [
        f"Number of vertices: {graph.num_vertices}. Number of edges: {graph.num_edges}.",
        "",
    ]
    lines.extend(format_vertex(vertex) for vertex in graph.vertices)
    return "\n".join(lines)


def format_heap(heap: Optional["IndexedMinHeap"]) -> str:
    """
    Render the heap array and the position index.

    Parameters
    ----------
    heap:
        Heap to render, or None.

    Returns
    -------
    str
        Multi-line description listing ``position: (priority, id)`` for the
        live array followed by ``id: position`` for the index.
    """
    if heap is None:
        return "None"
    lines = [f"Heap with size {heap.size} and capacity {heap.capacity}."]
    lines.append("Array:")
    for pos, node in enumerate(heap.snapshot()):
        lines.append(f"\t{pos}: (priority {node.priority}, id {node.id})")
    lines.append("Positions:")
    for vertex_id, pos in enumerate(heap.positions):
        lines.append(f"\t{vertex_id}: {pos}")
    return "\n".join(lines)


def format_records(records: Optional["Records"]) -> str:
    """Render every field of an algorithm run's records."""
    if records is None:
        return "None"
    lines = [f"Records on {records.num_vertices} vertices:"]
    lines.append("The PQ is:")
    lines.append(format_heap(records.heap))
    lines.append("The finished array is:")
    if records.finished is not None:
        lines.extend(f"\t{i}: {int(flag)}" for i, flag in enumerate(records.finished))
    lines.append("The predecessors array is:")
    if records.predecessors is not None:
        lines.extend(f"\t{i}: {int(pred)}" for i, pred in enumerate(records.predecessors))
    lines.append("The tree edges are:")
    lines.extend(f"\t{format_edge(edge)}" for edge in records.tree or [])
    return "\n".join(lines)
