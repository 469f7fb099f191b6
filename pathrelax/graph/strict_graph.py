"""Strict adjacency graphs with shortest-path convenience APIs.

`StrictGraph` and `StrictDiGraph` extend `networkx.Graph` and
`networkx.DiGraph` to enforce explicit node management and predictable error
handling. Both expose the Dijkstra entry points as methods, so a graph can be
queried directly with an edge-weights map.

The engine itself only relies on the `AdjacencyGraph` protocol, which every
networkx graph satisfies.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

import networkx as nx

if TYPE_CHECKING:
    from pathrelax.algorithms.visitor import DijkstraVisitor

NodeID = Hashable
AttrDict = Dict[str, Any]


@runtime_checkable
class AdjacencyGraph(Protocol):
    """Anything that can enumerate vertices and the neighbors of a vertex."""

    def __iter__(self) -> Iterator[NodeID]: ...

    def __contains__(self, node: object) -> bool: ...

    def neighbors(self, n: NodeID) -> Iterator[NodeID]: ...

    def is_directed(self) -> bool: ...


class _StrictMixin:
    """Shared strict node/edge rules for the networkx-backed graphs.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - Removing non-existent nodes or edges raises ValueError.
    """

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Args:
            node_for_adding: The node to add.
            **attr: Arbitrary attributes for this node.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:  # type: ignore[operator]
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)  # type: ignore[misc]

    def remove_node(self, n: NodeID) -> None:
        """Remove a single node and all incident edges.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if n not in self:  # type: ignore[operator]
            raise ValueError(f"Node '{n}' does not exist.")
        super().remove_node(n)  # type: ignore[misc]

    #
    # Edge management
    #
    def add_edge(self, u_for_edge: NodeID, v_for_edge: NodeID, **attr: Any) -> None:
        """Add an edge from u_for_edge to v_for_edge.

        Both nodes must already exist. Adding an edge that is already present
        updates its attributes, as networkx does.

        Raises:
            ValueError: If either node does not exist.
        """
        if u_for_edge not in self:  # type: ignore[operator]
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:  # type: ignore[operator]
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")
        super().add_edge(u_for_edge, v_for_edge, **attr)  # type: ignore[misc]

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """Remove the edge between u and v.

        Raises:
            ValueError: If the nodes or the edge do not exist.
        """
        if u not in self:  # type: ignore[operator]
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self:  # type: ignore[operator]
            raise ValueError(f"Target node '{v}' does not exist.")
        if not self.has_edge(u, v):  # type: ignore[attr-defined]
            raise ValueError(f"No edge from '{u}' to '{v}' to remove.")
        super().remove_edge(u, v)  # type: ignore[misc]

    #
    # Shortest paths
    #
    def dijkstra_shortest_path(
        self,
        edge_weights_map: Any,
        source: NodeID,
        target: NodeID,
        visitor: Optional[DijkstraVisitor] = None,
    ) -> Optional[List[NodeID]]:
        """Find the shortest path from ``source`` to ``target``.

        Returns:
            The path as a list of vertices, or None if ``target`` is unreachable.

        Raises:
            InvalidWeightError: If a consulted edge weight is negative or undefined.
        """
        from pathrelax.algorithms.dijkstra import dijkstra_shortest_path

        return dijkstra_shortest_path(
            self, edge_weights_map, source, target, visitor=visitor
        )

    def dijkstra_shortest_paths(
        self,
        edge_weights_map: Any,
        source: NodeID,
        visitor: Optional[DijkstraVisitor] = None,
    ) -> Dict[NodeID, Optional[List[NodeID]]]:
        """Find the shortest paths from ``source`` to every vertex of the graph.

        Returns:
            Mapping of vertex to its shortest path, None for unreachable
            vertices and ``[source]`` for the source itself.

        Raises:
            InvalidWeightError: If a consulted edge weight is negative or undefined.
        """
        from pathrelax.algorithms.dijkstra import dijkstra_shortest_paths

        return dijkstra_shortest_paths(self, edge_weights_map, source, visitor=visitor)


class StrictGraph(_StrictMixin, nx.Graph):
    """Undirected adjacency graph with strict node and edge rules."""


class StrictDiGraph(_StrictMixin, nx.DiGraph):
    """Directed adjacency graph with strict node and edge rules."""


def from_edge_pairs(
    *vertices: NodeID, directed: bool = False
) -> Union[StrictGraph, StrictDiGraph]:
    """Build a graph from a flat sequence of edge endpoints.

    ``from_edge_pairs(1, 2, 2, 3)`` creates the edges ``1-2`` and ``2-3``.
    Vertices are created as they are first seen.

    Args:
        *vertices: Edge endpoints ``u1, v1, u2, v2, ...``.
        directed: Build a `StrictDiGraph` instead of a `StrictGraph`.

    Returns:
        The populated graph.

    Raises:
        ValueError: If an odd number of vertices is given.
    """
    if len(vertices) % 2:
        raise ValueError(
            f"Expected an even number of vertices to form edges, got {len(vertices)}."
        )
    graph = StrictDiGraph() if directed else StrictGraph()
    for u, v in _pairs(vertices):
        for node in (u, v):
            if node not in graph:
                graph.add_node(node)
        graph.add_edge(u, v)
    return graph


def _pairs(vertices: Iterable[NodeID]) -> Iterator[tuple]:
    it = iter(vertices)
    return zip(it, it)
