"""pathrelax: visitor-driven shortest paths over non-negative weighted graphs.

Primary API:
    dijkstra_shortest_path() - Shortest path between two vertices
    dijkstra_shortest_paths() - Shortest paths from a source to every vertex
    DijkstraAlgorithm - Engine with access to the per-run visitor state
    DijkstraVisitor - Run state plus event hooks
    StrictGraph, StrictDiGraph - networkx-backed adjacency graphs

Example:
    from collections import defaultdict
    from pathrelax import from_edge_pairs, dijkstra_shortest_path

    graph = from_edge_pairs(1, 2, 2, 3, 1, 3)
    weights = {(1, 2): 1, (2, 3): 1, (1, 3): 5}
    dijkstra_shortest_path(graph, weights, 1, 3)  # [1, 2, 3]

    # Unit weights for every edge
    dijkstra_shortest_path(graph, defaultdict(lambda: 1), 1, 3)  # [1, 3]
"""

from __future__ import annotations

from pathrelax import logging
from pathrelax.algorithms import (
    Color,
    DijkstraAlgorithm,
    DijkstraVisitor,
    EdgeWeightsMap,
    GraphAttributeWeights,
    IndexedMinHeap,
    NonNegativeEdgeWeightsMap,
    TracingVisitor,
    VisitorEvent,
    dijkstra_shortest_path,
    dijkstra_shortest_paths,
)
from pathrelax.config import DijkstraConfig, default_distance_combinator
from pathrelax.exceptions import InvalidWeightError, MisuseError, PathRelaxError
from pathrelax.graph import AdjacencyGraph, StrictDiGraph, StrictGraph, from_edge_pairs
from pathrelax.paths import PathBuilder

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Algorithms
    "dijkstra_shortest_path",
    "dijkstra_shortest_paths",
    "DijkstraAlgorithm",
    "DijkstraVisitor",
    "TracingVisitor",
    "VisitorEvent",
    "Color",
    "IndexedMinHeap",
    # Weights
    "EdgeWeightsMap",
    "NonNegativeEdgeWeightsMap",
    "GraphAttributeWeights",
    # Graphs
    "AdjacencyGraph",
    "StrictGraph",
    "StrictDiGraph",
    "from_edge_pairs",
    # Paths
    "PathBuilder",
    # Configuration
    "DijkstraConfig",
    "default_distance_combinator",
    # Errors
    "PathRelaxError",
    "InvalidWeightError",
    "MisuseError",
    # Utilities
    "logging",
]
