"""Visitor protocol for Dijkstra's algorithm.

A `DijkstraVisitor` owns the per-run color, distance and parent maps and is
notified at every event point of the run. Hooks do nothing by default; callers
either subclass and override them, or register callbacks with `on`.

Untouched vertices read as `Color.UNVISITED`, distance ``math.inf`` and no
parent.
"""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pathrelax.config import Cost
from pathrelax.graph.strict_graph import NodeID
from pathrelax.logging import get_logger

logger = get_logger(__name__)


class Color(IntEnum):
    """Per-vertex state during a run."""

    UNVISITED = 1
    FRONTIER = 2
    FINISHED = 3


class VisitorEvent(str, Enum):
    """Event points of a Dijkstra run."""

    EXAMINE_VERTEX = "examine_vertex"
    FINISH_VERTEX = "finish_vertex"
    EXAMINE_EDGE = "examine_edge"
    EDGE_RELAXED = "edge_relaxed"
    EDGE_NOT_RELAXED = "edge_not_relaxed"


class DijkstraVisitor:
    """Run state and event hooks for `DijkstraAlgorithm`.

    Attributes:
        color_map: Vertex -> `Color` for every touched vertex.
        distance_map: Vertex -> best known distance from the source.
        parents_map: Vertex -> predecessor on the best known path.
    """

    def __init__(self) -> None:
        self.color_map: Dict[NodeID, Color] = {}
        self.distance_map: Dict[NodeID, Cost] = {}
        self.parents_map: Dict[NodeID, NodeID] = {}
        self._handlers: Dict[VisitorEvent, List[Callable[..., Any]]] = {
            event: [] for event in VisitorEvent
        }

    def on(
        self, event: Union[VisitorEvent, str], handler: Callable[..., Any]
    ) -> DijkstraVisitor:
        """Register ``handler`` to be called with the hook's arguments on ``event``.

        Returns:
            The visitor itself, so registrations can be chained.

        Raises:
            ValueError: If ``event`` is not a known event name.
        """
        self._handlers[VisitorEvent(event)].append(handler)
        return self

    def set_source(self, source: NodeID, distance: Cost = 0) -> None:
        """Reset all maps for a new run rooted at ``source``."""
        self.color_map.clear()
        self.distance_map.clear()
        self.parents_map.clear()
        self.color_map[source] = Color.FRONTIER
        self.distance_map[source] = distance

    #
    # Readers
    #
    def color(self, v: NodeID) -> Color:
        return self.color_map.get(v, Color.UNVISITED)

    def distance(self, v: NodeID) -> Cost:
        return self.distance_map.get(v, math.inf)

    def parent(self, v: NodeID) -> Optional[NodeID]:
        return self.parents_map.get(v)

    def finished_vertex(self, v: NodeID) -> bool:
        return self.color(v) == Color.FINISHED

    #
    # State updates
    #
    def set_color(self, v: NodeID, color: Color) -> None:
        self.color_map[v] = color

    def update_distance(self, v: NodeID, distance: Cost, parent: NodeID) -> None:
        self.distance_map[v] = distance
        self.parents_map[v] = parent

    #
    # Hooks
    #
    def examine_vertex(self, u: NodeID) -> None:
        """Called when ``u`` is popped from the queue, before its edges are relaxed."""
        self._dispatch(VisitorEvent.EXAMINE_VERTEX, u)

    def finish_vertex(self, u: NodeID) -> None:
        """Called after all edges of ``u`` were examined and ``u`` is finished."""
        self._dispatch(VisitorEvent.FINISH_VERTEX, u)

    def examine_edge(self, u: NodeID, v: NodeID) -> None:
        """Called before edge (u, v) is relaxed."""
        self._dispatch(VisitorEvent.EXAMINE_EDGE, u, v)

    def edge_relaxed(self, u: NodeID, v: NodeID) -> None:
        """Called when edge (u, v) improved the distance of ``v``."""
        self._dispatch(VisitorEvent.EDGE_RELAXED, u, v)

    def edge_not_relaxed(self, u: NodeID, v: NodeID) -> None:
        """Called when edge (u, v) did not improve the distance of ``v``."""
        self._dispatch(VisitorEvent.EDGE_NOT_RELAXED, u, v)

    def _dispatch(self, event: VisitorEvent, *args: NodeID) -> None:
        for handler in self._handlers[event]:
            handler(*args)


class TracingVisitor(DijkstraVisitor):
    """Visitor that logs every event at DEBUG level and records it.

    Attributes:
        events: ``(event, args)`` tuples in the order they occurred.
    """

    def __init__(self) -> None:
        super().__init__()
        self.events: List[Tuple[VisitorEvent, Tuple[NodeID, ...]]] = []

    def set_source(self, source: NodeID, distance: Cost = 0) -> None:
        super().set_source(source, distance)
        self.events.clear()
        logger.debug("source: %r", source)

    def _dispatch(self, event: VisitorEvent, *args: NodeID) -> None:
        self.events.append((event, args))
        if event is VisitorEvent.EDGE_RELAXED:
            logger.debug(
                "%s: %r distance=%r", event.value, args, self.distance(args[-1])
            )
        else:
            logger.debug("%s: %r", event.value, args)
        super()._dispatch(event, *args)
