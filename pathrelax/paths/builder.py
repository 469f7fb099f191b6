"""Turn a parent map into vertex paths."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from pathrelax.graph.strict_graph import NodeID


class PathBuilder:
    """Walk parent links from a target back to ``source``.

    Args:
        source: Root of the shortest-path tree.
        parents_map: Vertex -> predecessor, as left by a completed run.
    """

    def __init__(self, source: NodeID, parents_map: Mapping[NodeID, NodeID]) -> None:
        self.source = source
        self.parents_map = parents_map

    def path(self, target: NodeID) -> Optional[List[NodeID]]:
        """Return the path from the source to ``target``, or None if there is none."""
        path = [target]
        vertex = target
        while vertex != self.source:
            if vertex not in self.parents_map:
                return None
            vertex = self.parents_map[vertex]
            path.append(vertex)
        path.reverse()
        return path

    def paths(self, vertices: Iterable[NodeID]) -> Dict[NodeID, Optional[List[NodeID]]]:
        """Return a path (or None) for every vertex in ``vertices``."""
        return {vertex: self.path(vertex) for vertex in vertices}
