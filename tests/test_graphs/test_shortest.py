"""Tests for Dijkstra's shortest-path tree."""

import numpy as np
import pytest

from heapgraph.graphs import Edge, Graph, dijkstra_tree


def floyd_warshall_distances(graph):
    """All-pairs shortest distances from the dense weight matrix."""
    dist = graph.weight_matrix()
    for k in range(graph.num_vertices):
        dist = np.minimum(dist, dist[:, k : k + 1] + dist[k : k + 1, :])
    return dist


def distances_from_tree(tree, start):
    dist = {start: 0}
    dist.update({edge.from_vertex: edge.weight for edge in tree})
    return dist


@pytest.fixture
def diamond():
    return Graph.from_edges(4, [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 5), (2, 3, 1)])


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_dijkstra_reference_example(self, diamond):
        """Test Dijkstra on the four-vertex reference graph."""
        tree = dijkstra_tree(diamond, 0)

        assert tree == [Edge(1, 0, 1), Edge(2, 1, 3), Edge(3, 2, 4)]
        dist = distances_from_tree(tree, 0)
        assert [dist[v] for v in range(4)] == [0, 1, 3, 4]

    def test_dijkstra_prefers_longer_cheaper_path(self):
        G = Graph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)], directed=True)

        tree = dijkstra_tree(G, 0)

        assert tree == [Edge(1, 0, 1), Edge(2, 1, 3)]

    def test_tree_weights_are_cumulative(self, diamond):
        """Test that tree edge weights add up along predecessor links."""
        tree = dijkstra_tree(diamond, 0)
        dist = distances_from_tree(tree, 0)
        W = diamond.weight_matrix()
        for edge in tree:
            hop = dist[edge.from_vertex] - dist[edge.to_vertex]
            assert hop == W[edge.to_vertex, edge.from_vertex]

    def test_tree_in_nondecreasing_distance_order(self, rng):
        n = 12
        edges = [(i, i + 1, int(rng.integers(0, 10))) for i in range(n - 1)]
        for _ in range(15):
            u, v = (int(x) for x in rng.integers(0, n, size=2))
            edges.append((u, v, int(rng.integers(0, 10))))
        G = Graph.from_edges(n, edges)

        weights = [edge.weight for edge in dijkstra_tree(G, 0)]
        assert weights == sorted(weights)

    def test_dijkstra_matches_floyd_warshall(self, rng):
        """Test Dijkstra against brute-force all-pairs distances."""
        for _ in range(20):
            n = int(rng.integers(2, 9))
            edges = [(i, i + 1, int(rng.integers(0, 10))) for i in range(n - 1)]
            for _ in range(int(rng.integers(0, 2 * n))):
                u, v = (int(x) for x in rng.choice(n, size=2, replace=False))
                edges.append((u, v, int(rng.integers(0, 10))))
            G = Graph.from_edges(n, edges)
            reference = floyd_warshall_distances(G)
            start = int(rng.integers(0, n))

            tree = dijkstra_tree(G, start)

            assert len(tree) == n - 1
            dist = distances_from_tree(tree, start)
            for v in range(n):
                assert dist[v] == reference[start, v]

    def test_dijkstra_directed_reachability(self):
        """Test that edges are followed in their stored direction only."""
        G = Graph.from_edges(3, [(1, 0, 1), (1, 2, 1)], directed=True)

        assert dijkstra_tree(G, 0) == []
        assert dijkstra_tree(G, 1) == [Edge(0, 1, 1), Edge(2, 1, 1)]

    def test_dijkstra_zero_weight_edges(self):
        G = Graph.from_edges(3, [(0, 1, 0), (1, 2, 0)])
        assert dijkstra_tree(G, 0) == [Edge(1, 0, 0), Edge(2, 1, 0)]

    def test_dijkstra_deterministic_tie_breaking(self):
        """Test that an equal-length alternative never replaces the first path found."""
        G = Graph.from_edges(4, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)])

        tree = dijkstra_tree(G, 0)

        assert tree == [Edge(1, 0, 1), Edge(2, 0, 1), Edge(3, 1, 2)]

    def test_dijkstra_disconnected(self):
        """Test that unreachable vertices add no edges and do not loop."""
        G = Graph.from_edges(5, [(0, 1, 3), (2, 3, 1), (3, 4, 1)])

        tree = dijkstra_tree(G, 0)

        assert tree == [Edge(1, 0, 3)]
        assert len(tree) < G.num_vertices - 1

    def test_dijkstra_distances_beyond_machine_integers(self):
        """Test that distances past the 64-bit range are still recorded."""
        G = Graph.from_edges(3, [(0, 1, 2**62), (1, 2, 2**62)])

        tree = dijkstra_tree(G, 0)

        assert tree == [Edge(1, 0, 2**62), Edge(2, 1, 2**63)]
        assert len(tree) == G.num_vertices - 1

    def test_dijkstra_unreached_edges_not_relaxed(self):
        """Test that large weights next to unreached vertices cannot fake a path."""
        G = Graph(3)
        G.add_vertex(0)
        G.add_edge(1, 2, 5)

        assert dijkstra_tree(G, 0) == []

    def test_dijkstra_single_vertex(self):
        G = Graph(1)
        assert dijkstra_tree(G, 0) == []

    @pytest.mark.parametrize("start", [-1, 4])
    def test_dijkstra_invalid_start(self, diamond, start):
        assert dijkstra_tree(diamond, start) is None

    def test_dijkstra_none_graph(self):
        assert dijkstra_tree(None, 0) is None

    def test_repeated_runs_on_same_graph(self, diamond):
        """Test that the graph can be reused across invocations."""
        first = dijkstra_tree(diamond, 0)
        from_three = dijkstra_tree(diamond, 3)
        again = dijkstra_tree(diamond, 0)
        assert first == again
        assert from_three != first
