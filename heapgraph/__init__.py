"""heapgraph - Prim and Dijkstra trees over an indexed binary min-heap."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_heap_property,
    assert_position_index,
    debug_context,
    format_graph,
    format_heap,
    format_records,
    is_debug_enabled,
    is_valid_heap,
)

# Graph algorithms
from .graphs import (
    INFINITY,
    NOTHING,
    AllocationError,
    Edge,
    Graph,
    HeapNode,
    IndexedMinHeap,
    Records,
    Vertex,
    dijkstra_tree,
    init_heap,
    init_records,
    is_empty,
    prim_mst,
    reconstruct_shortest_paths,
    records_scope,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    # Version
    "__version__",
    # Graph store
    "Edge",
    "Vertex",
    "Graph",
    # Heap
    "HeapNode",
    "IndexedMinHeap",
    "is_empty",
    "NOTHING",
    # Records
    "INFINITY",
    "Records",
    "AllocationError",
    "init_heap",
    "init_records",
    "records_scope",
    # Algorithms
    "prim_mst",
    "dijkstra_tree",
    "reconstruct_shortest_paths",
    # Diagnostics
    "assert_heap_property",
    "assert_position_index",
    "is_valid_heap",
    "is_debug_enabled",
    "debug_context",
    "format_graph",
    "format_heap",
    "format_records",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
