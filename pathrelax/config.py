"""Configuration classes for pathrelax algorithms."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

Cost = Union[int, float]
DistanceCombinator = Callable[[Cost, Cost], Cost]


def default_distance_combinator(distance: Cost, edge_weight: Cost) -> Cost:
    """Return the distance to a neighbor reached over an edge of ``edge_weight``."""
    return distance + edge_weight


@dataclass(frozen=True)
class DijkstraConfig:
    """Configuration for a Dijkstra run.

    Attributes:
        distance_combinator: Merges the accumulated distance of a vertex with
            the weight of an outgoing edge into the candidate distance of the
            neighbor. Must not decrease the accumulated distance for
            non-negative weights.
        source_distance: Distance assigned to the source at the start of a run.
    """

    distance_combinator: DistanceCombinator = default_distance_combinator
    source_distance: Cost = 0

    def with_combinator(
        self, distance_combinator: Optional[DistanceCombinator]
    ) -> DijkstraConfig:
        """Return a copy using ``distance_combinator``, or self when it is None."""
        if distance_combinator is None:
            return self
        return replace(self, distance_combinator=distance_combinator)
