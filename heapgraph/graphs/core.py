"""
Core graph data structures.

Provides Edge, Vertex and Graph. A Graph owns a fixed-size list of vertex
slots indexed by vertex id; each Vertex owns its outgoing edges in insertion
order. An undirected connection is stored as two directed edges, one in each
endpoint's adjacency list.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Edge:
    """
    Directed weighted edge.

    Attributes:
        from_vertex: Source vertex id.
        to_vertex: Target vertex id.
        weight: Integer edge weight.
    """

    from_vertex: int
    to_vertex: int
    weight: int

    def __iter__(self):
        return iter((self.from_vertex, self.to_vertex, self.weight))


@dataclass
class Vertex:
    """
    Graph vertex with an optional payload and its adjacency list.

    Attributes:
        id: Vertex id; equal to the vertex's slot in Graph.vertices.
        value: Opaque payload, not inspected by the algorithms.
        adj_list: Outgoing edges in insertion order. Duplicates allowed.
    """

    id: int
    value: Any = None
    adj_list: List[Edge] = field(default_factory=list)


class Graph:
    """
    Weighted graph over the dense id range 0..num_vertices-1.

    The vertex list never grows after construction; slots start out empty
    and are filled on demand by add_vertex/add_edge.

    Attributes:
        num_vertices: Number of vertex slots.
        num_edges: Number of connections added (an undirected connection
            counts once).
        vertices: List of Vertex or None, indexed by id.

    Complexity:
        - add_vertex: O(1)
        - add_edge: O(1) amortized
        - neighbors: O(1)
        - edges: O(V + E)
        - weight_matrix: O(V^2 + E)
    """

    def __init__(self, num_vertices: int):
        """
        Initialize a graph with empty vertex slots.

        Args:
            num_vertices: Number of vertex slots (>= 0).

        Raises:
            ValueError: If num_vertices is negative.
        """
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be non-negative, got {num_vertices}")
        self.num_vertices = num_vertices
        self.num_edges = 0
        self.vertices: List[Optional[Vertex]] = [None] * num_vertices

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"

    def _check_id(self, vertex_id: int) -> None:
        if not 0 <= vertex_id < self.num_vertices:
            raise ValueError(
                f"Vertex id {vertex_id} out of range for graph with "
                f"{self.num_vertices} vertices"
            )

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Iterable[Tuple[int, int, int]],
        directed: bool = False,
    ) -> "Graph":
        """
        Build a graph from (u, v, weight) triples.

        Every vertex slot is populated, including isolated ones.

        Args:
            num_vertices: Number of vertices.
            edges: Iterable of (u, v, weight) tuples.
            directed: If False, each triple is stored in both directions.

        Returns:
            New Graph.

        Example:
            >>> G = Graph.from_edges(3, [(0, 1, 4), (1, 2, 1)])
            >>> [e.to_vertex for e in G.neighbors(1)]
            [0, 2]
        """
        graph = cls(num_vertices)
        for vertex_id in range(num_vertices):
            graph.add_vertex(vertex_id)
        for u, v, weight in edges:
            if directed:
                graph.add_edge(u, v, weight)
            else:
                graph.add_undirected_edge(u, v, weight)
        return graph

    def add_vertex(self, vertex_id: int, value: Any = None) -> Vertex:
        """
        Populate slot vertex_id, or return the vertex already there.

        Args:
            vertex_id: Vertex id in range.
            value: Optional payload for a newly created vertex.

        Returns:
            The vertex stored at vertex_id.

        Raises:
            ValueError: If vertex_id is out of range.
        """
        self._check_id(vertex_id)
        vertex = self.vertices[vertex_id]
        if vertex is None:
            vertex = Vertex(vertex_id, value)
            self.vertices[vertex_id] = vertex
        return vertex

    def _append_edge(self, u: int, v: int, weight: int) -> None:
        self._check_id(u)
        self._check_id(v)
        self.add_vertex(v)
        self.add_vertex(u).adj_list.append(Edge(u, v, weight))

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """
        Add a directed edge u -> v.

        Args:
            u: Source vertex id.
            v: Target vertex id.
            weight: Edge weight.

        Raises:
            ValueError: If either id is out of range.
        """
        self._append_edge(u, v, weight)
        self.num_edges += 1

    def add_undirected_edge(self, u: int, v: int, weight: int) -> None:
        """
        Add an undirected connection as the edges u -> v and v -> u.

        Args:
            u: First endpoint.
            v: Second endpoint.
            weight: Edge weight.

        Raises:
            ValueError: If either id is out of range.
        """
        self._append_edge(u, v, weight)
        self._append_edge(v, u, weight)
        self.num_edges += 1

    def neighbors(self, vertex_id: int) -> List[Edge]:
        """
        Return the outgoing edges of a vertex in insertion order.

        An empty slot has no edges.
        """
        vertex = self.vertices[vertex_id]
        if vertex is None:
            return []
        return vertex.adj_list

    def edges(self) -> List[Edge]:
        """Return every stored directed edge, ordered by source id then insertion."""
        return [
            edge
            for vertex_id in range(self.num_vertices)
            for edge in self.neighbors(vertex_id)
        ]

    def weight_matrix(self) -> np.ndarray:
        """
        Return the dense weight matrix of the graph.

        Entry (u, v) is the smallest weight among edges u -> v, inf where
        no such edge exists, and 0 on the diagonal.

        Returns:
            Float array with shape (num_vertices, num_vertices).
        """
        n = self.num_vertices
        matrix = np.full((n, n), np.inf)
        np.fill_diagonal(matrix, 0.0)
        for edge in self.edges():
            u, v = edge.from_vertex, edge.to_vertex
            if u != v:
                matrix[u, v] = min(matrix[u, v], edge.weight)
        return matrix
