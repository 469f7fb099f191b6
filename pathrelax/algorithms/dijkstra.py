"""Dijkstra shortest paths driven through a visitor.

`DijkstraAlgorithm` pops the vertex with the smallest tentative distance,
relaxes the edges to its unfinished neighbors and finalizes it. Every step is
reported to a `DijkstraVisitor`, which also owns the color, distance and parent
maps of the run.

Notes:
    When a target is given, the run stops as soon as the target is popped. The
    target is not expanded: with non-negative weights no remaining vertex can
    improve its distance.

    Candidate distances are produced by the configured distance combinator
    (addition by default), so the loop does not depend on a particular cost
    model as long as the combinator never decreases the accumulated distance.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pathrelax.algorithms.edge_weights import build_edge_weights_map
from pathrelax.algorithms.priority_queue import IndexedMinHeap
from pathrelax.algorithms.visitor import Color, DijkstraVisitor
from pathrelax.config import DijkstraConfig, DistanceCombinator
from pathrelax.graph.strict_graph import AdjacencyGraph, NodeID
from pathrelax.logging import get_logger
from pathrelax.paths.builder import PathBuilder

logger = get_logger(__name__)


class DijkstraAlgorithm:
    """Single-source shortest paths over non-negative edge weights.

    Args:
        graph: Adjacency provider; any networkx graph works.
        edge_weights_map: `EdgeWeightsMap`, mapping ``{(u, v): weight}`` or
            callable ``f(u, v)``. Anything but an `EdgeWeightsMap` is wrapped in
            a `NonNegativeEdgeWeightsMap`.
        visitor: Receives the run state and events. A fresh `DijkstraVisitor`
            is used if omitted.
        config: Distance combinator and source distance.
    """

    def __init__(
        self,
        graph: AdjacencyGraph,
        edge_weights_map: Any,
        visitor: Optional[DijkstraVisitor] = None,
        config: Optional[DijkstraConfig] = None,
    ) -> None:
        self.graph = graph
        self.edge_weights_map = build_edge_weights_map(
            edge_weights_map, graph.is_directed()
        )
        self.visitor = visitor if visitor is not None else DijkstraVisitor()
        self.config = config if config is not None else DijkstraConfig()
        self._queue = IndexedMinHeap()

    def shortest_path(self, source: NodeID, target: NodeID) -> Optional[List[NodeID]]:
        """Find the shortest path from ``source`` to ``target``.

        Returns:
            The path as a list of vertices, or None if ``target`` is unreachable.

        Raises:
            KeyError: If ``source`` is not in the graph.
            InvalidWeightError: If a consulted edge weight is negative or undefined.
        """
        self._init(source)
        self._relax_edges(target, break_on_target=True)
        return PathBuilder(source, self.visitor.parents_map).path(target)

    def shortest_paths(self, source: NodeID) -> Dict[NodeID, Optional[List[NodeID]]]:
        """Find the shortest paths from ``source`` to every vertex of the graph.

        Returns:
            Mapping of each graph vertex to its path, None when unreachable.
            The source maps to ``[source]``.
        """
        self.find_shortest_paths(source)
        return PathBuilder(source, self.visitor.parents_map).paths(self.graph)

    def find_shortest_paths(self, source: NodeID) -> None:
        """Run to completion, leaving the results in the visitor's maps."""
        self._init(source)
        self._relax_edges()

    def _init(self, source: NodeID) -> None:
        if source not in self.graph:
            raise KeyError(f"Source node '{source}' is not in the graph.")
        logger.debug("Dijkstra run from source %r", source)
        self.visitor.set_source(source, self.config.source_distance)
        self._queue = IndexedMinHeap()
        self._queue.push(source, self.config.source_distance)

    def _relax_edges(
        self, target: Optional[NodeID] = None, break_on_target: bool = False
    ) -> None:
        queue = self._queue
        visitor = self.visitor
        finished = 0
        while queue:
            u = queue.pop()
            if break_on_target and u == target:
                logger.debug("Target %r reached after %d vertices", u, finished)
                return

            visitor.examine_vertex(u)
            for v in self.graph.neighbors(u):
                if not visitor.finished_vertex(v):
                    self._relax_edge(u, v)
                else:
                    # No hooks and no update; the weight is only validated
                    self.edge_weights_map.edge_property(u, v)

            visitor.set_color(u, Color.FINISHED)
            visitor.finish_vertex(u)
            finished += 1
        logger.debug("Dijkstra run finished %d vertices", finished)

    def _relax_edge(self, u: NodeID, v: NodeID) -> None:
        visitor = self.visitor
        visitor.examine_edge(u, v)

        new_v_distance = self.config.distance_combinator(
            visitor.distance(u), self.edge_weights_map.edge_property(u, v)
        )
        old_v_distance = visitor.distance(v)
        if new_v_distance < old_v_distance:
            visitor.update_distance(v, new_v_distance, u)

            color = visitor.color(v)
            if color == Color.UNVISITED:
                visitor.set_color(v, Color.FRONTIER)
                self._queue.push(v, new_v_distance)
            elif color == Color.FRONTIER:
                self._queue.decrease_key(v, old_v_distance, new_v_distance)

            visitor.edge_relaxed(u, v)
        else:
            visitor.edge_not_relaxed(u, v)


def dijkstra_shortest_path(
    graph: AdjacencyGraph,
    edge_weights_map: Any,
    source: NodeID,
    target: NodeID,
    visitor: Optional[DijkstraVisitor] = None,
    distance_combinator: Optional[DistanceCombinator] = None,
) -> Optional[List[NodeID]]:
    """Find the shortest path from ``source`` to ``target`` in ``graph``.

    Returns:
        The path as a list of vertices, or None if it does not exist.

    Raises:
        InvalidWeightError: If a consulted edge weight is negative or undefined.
    """
    config = DijkstraConfig().with_combinator(distance_combinator)
    return DijkstraAlgorithm(graph, edge_weights_map, visitor, config).shortest_path(
        source, target
    )


def dijkstra_shortest_paths(
    graph: AdjacencyGraph,
    edge_weights_map: Any,
    source: NodeID,
    visitor: Optional[DijkstraVisitor] = None,
    distance_combinator: Optional[DistanceCombinator] = None,
) -> Dict[NodeID, Optional[List[NodeID]]]:
    """Find the shortest paths from ``source`` to each vertex of ``graph``.

    Returns:
        Mapping of each vertex to its path as a list of vertices. Unreachable
        vertices map to None; the source maps to ``[source]``.

    Raises:
        InvalidWeightError: If a consulted edge weight is negative or undefined.
    """
    config = DijkstraConfig().with_combinator(distance_combinator)
    return DijkstraAlgorithm(graph, edge_weights_map, visitor, config).shortest_paths(
        source
    )
