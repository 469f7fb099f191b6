"""Graph primitives.

This package provides the `AdjacencyGraph` protocol consumed by the shortest-path
engine, and the networkx-backed `StrictGraph` / `StrictDiGraph` types.
"""

from pathrelax.graph.strict_graph import (
    AdjacencyGraph,
    AttrDict,
    NodeID,
    StrictDiGraph,
    StrictGraph,
    from_edge_pairs,
)

__all__ = [
    "AdjacencyGraph",
    "AttrDict",
    "NodeID",
    "StrictDiGraph",
    "StrictGraph",
    "from_edge_pairs",
]
