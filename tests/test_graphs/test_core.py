"""Tests for core graph data structures."""

import numpy as np
import pytest

from heapgraph.graphs import Edge, Graph, Vertex


class TestEdge:
    """Tests for Edge."""

    def test_edge_fields(self):
        edge = Edge(0, 1, 5)
        assert edge.from_vertex == 0
        assert edge.to_vertex == 1
        assert edge.weight == 5

    def test_edge_is_immutable(self):
        edge = Edge(0, 1, 5)
        with pytest.raises(AttributeError):
            edge.weight = 3

    def test_edge_unpacks(self):
        u, v, w = Edge(2, 3, 4)
        assert (u, v, w) == (2, 3, 4)


class TestGraph:
    """Tests for Graph."""

    def test_empty_graph(self):
        """Test graph creation with no vertices."""
        G = Graph(0)
        assert G.num_vertices == 0
        assert G.num_edges == 0
        assert G.vertices == []
        assert G.edges() == []

    def test_negative_size(self):
        with pytest.raises(ValueError):
            Graph(-1)

    def test_slots_start_empty(self):
        G = Graph(3)
        assert G.vertices == [None, None, None]
        assert G.neighbors(1) == []

    def test_add_vertex(self):
        """Test that add_vertex populates the slot matching the id."""
        G = Graph(3)
        vertex = G.add_vertex(2, value="payload")
        assert isinstance(vertex, Vertex)
        assert G.vertices[2] is vertex
        assert vertex.id == 2
        assert vertex.value == "payload"
        assert vertex.adj_list == []

    def test_add_vertex_existing(self):
        G = Graph(2)
        first = G.add_vertex(0, value="a")
        second = G.add_vertex(0, value="b")
        assert first is second
        assert second.value == "a"

    def test_add_vertex_out_of_range(self):
        G = Graph(2)
        with pytest.raises(ValueError):
            G.add_vertex(2)
        with pytest.raises(ValueError):
            G.add_vertex(-1)

    def test_add_edge_directed(self):
        """Test that add_edge stores one directed edge."""
        G = Graph(3)
        G.add_edge(0, 1, 4)

        assert G.num_edges == 1
        assert G.neighbors(0) == [Edge(0, 1, 4)]
        assert G.neighbors(1) == []
        # Target vertex is created on demand
        assert G.vertices[1] is not None
        assert G.vertices[2] is None

    def test_add_undirected_edge(self):
        """Test that an undirected connection is stored in both directions."""
        G = Graph(2)
        G.add_undirected_edge(0, 1, 7)

        assert G.num_edges == 1
        assert G.neighbors(0) == [Edge(0, 1, 7)]
        assert G.neighbors(1) == [Edge(1, 0, 7)]

    def test_add_edge_out_of_range(self):
        """Test that invalid ids leave the graph untouched."""
        G = Graph(2)
        with pytest.raises(ValueError):
            G.add_edge(0, 5, 1)
        with pytest.raises(ValueError):
            G.add_undirected_edge(5, 0, 1)
        assert G.num_edges == 0
        assert G.edges() == []

    def test_adjacency_keeps_insertion_order_and_duplicates(self):
        G = Graph(3)
        G.add_edge(0, 2, 5)
        G.add_edge(0, 1, 3)
        G.add_edge(0, 2, 5)

        assert [e.to_vertex for e in G.neighbors(0)] == [2, 1, 2]
        assert G.num_edges == 3

    def test_from_edges_undirected(self):
        G = Graph.from_edges(4, [(0, 1, 1), (1, 2, 2)])

        assert G.num_vertices == 4
        assert G.num_edges == 2
        assert all(vertex is not None for vertex in G.vertices)
        assert G.neighbors(1) == [Edge(1, 0, 1), Edge(1, 2, 2)]
        assert G.neighbors(3) == []

    def test_from_edges_directed(self):
        G = Graph.from_edges(3, [(0, 1, 1), (1, 2, 2)], directed=True)
        assert G.edges() == [Edge(0, 1, 1), Edge(1, 2, 2)]

    def test_vertex_ids_match_slots(self):
        G = Graph.from_edges(5, [(0, 4, 1), (2, 3, 1)])
        for index, vertex in enumerate(G.vertices):
            assert vertex.id == index

    def test_weight_matrix(self):
        """Test dense weight matrix export."""
        G = Graph(3)
        G.add_edge(0, 1, 4)
        G.add_edge(0, 1, 2)  # parallel edge, smaller weight wins
        G.add_edge(1, 2, 3)

        W = G.weight_matrix()
        assert W.shape == (3, 3)
        assert np.all(np.diag(W) == 0.0)
        assert W[0, 1] == 2.0
        assert W[1, 2] == 3.0
        assert np.isinf(W[1, 0])
        assert np.isinf(W[2, 0])

    def test_repr(self):
        G = Graph.from_edges(2, [(0, 1, 1)])
        assert repr(G) == "Graph(num_vertices=2, num_edges=1)"
