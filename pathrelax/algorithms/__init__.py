"""Shortest-path algorithms and their building blocks."""

from pathrelax.algorithms.dijkstra import (
    DijkstraAlgorithm,
    dijkstra_shortest_path,
    dijkstra_shortest_paths,
)
from pathrelax.algorithms.edge_weights import (
    EdgeWeightsMap,
    GraphAttributeWeights,
    NonNegativeEdgeWeightsMap,
    build_edge_weights_map,
)
from pathrelax.algorithms.priority_queue import IndexedMinHeap
from pathrelax.algorithms.visitor import (
    Color,
    DijkstraVisitor,
    TracingVisitor,
    VisitorEvent,
)

__all__ = [
    "Color",
    "DijkstraAlgorithm",
    "DijkstraVisitor",
    "EdgeWeightsMap",
    "GraphAttributeWeights",
    "IndexedMinHeap",
    "NonNegativeEdgeWeightsMap",
    "TracingVisitor",
    "VisitorEvent",
    "build_edge_weights_map",
    "dijkstra_shortest_path",
    "dijkstra_shortest_paths",
]
