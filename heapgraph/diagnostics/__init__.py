"""Diagnostics and debugging utilities for heapgraph."""

from .core import (
    assert_heap_property,
    assert_position_index,
    heap_property_violations,
    is_valid_heap,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
)
from .dump import (
    format_edge,
    format_edge_list,
    format_graph,
    format_heap,
    format_records,
    format_vertex,
)

__all__ = [
    "assert_heap_property",
    "assert_position_index",
    "heap_property_violations",
    "is_valid_heap",
    "is_debug_enabled",
    "debug_context",
    "format_edge",
    "format_edge_list",
    "format_vertex",
    "format_graph",
    "format_heap",
    "format_records",
]
