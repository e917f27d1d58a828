"""Minimum spanning tree and shortest paths on a small road network.

Builds a six-vertex undirected graph, runs Prim and Dijkstra from vertex 0,
and prints the trees and the reconstructed shortest paths.
"""

from __future__ import annotations

import logging

import heapgraph as hg
from heapgraph.diagnostics import format_edge_list


def build_graph() -> hg.Graph:
    edges = [
        (0, 1, 7),
        (0, 2, 9),
        (0, 5, 14),
        (1, 2, 10),
        (1, 3, 15),
        (2, 3, 11),
        (2, 5, 2),
        (3, 4, 6),
        (4, 5, 9),
    ]
    return hg.Graph.from_edges(6, edges)


def main() -> None:
    hg.configure_logging(level=logging.INFO)

    graph = build_graph()
    print(hg.format_graph(graph))

    mst = hg.prim_mst(graph, 0)
    print("Minimum spanning tree:", format_edge_list(mst))
    print("Total MST weight:", sum(edge.weight for edge in mst))

    dist_tree = hg.dijkstra_tree(graph, 0)
    print("Distance tree:", format_edge_list(dist_tree))

    paths = hg.reconstruct_shortest_paths(dist_tree, graph.num_vertices, 0)
    for vertex_id, path in paths.items():
        length = sum(edge.weight for edge in path)
        print(f"Shortest path from {vertex_id} to 0 (length {length}): {format_edge_list(path)}")


if __name__ == "__main__":
    main()
