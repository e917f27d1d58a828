"""
Switch for heap self-checks.

While debug mode is on, IndexedMinHeap re-validates heap order and its
position index after every insert, extract_min and decrease_priority.
The initial state comes from the HEAPGRAPH_DEBUG environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


_heap_checks = _env_flag("HEAPGRAPH_DEBUG")


def is_debug_enabled() -> bool:
    """Return True if heap operations currently validate their invariants."""
    return _heap_checks


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Turn heap self-checks on or off for the duration of a block.

    The previous setting is restored on exit, so contexts nest.

    Example:
        >>> with debug_context():
        ...     tree = prim_mst(graph, 0)
    """
    global _heap_checks
    saved, _heap_checks = _heap_checks, bool(enabled)
    try:
        yield
    finally:
        _heap_checks = saved
