"""Edge weight lookup for shortest-path algorithms.

Weights are resolved lazily, one ordered vertex pair at a time, so only the
edges a run actually traverses are validated. For undirected graphs a lookup of
``(u, v)`` falls back to ``(v, u)``.
"""

from __future__ import annotations

import math
from collections import defaultdict
from numbers import Real
from typing import Any, Callable, Mapping, Optional, Union

from pathrelax.config import Cost
from pathrelax.exceptions import InvalidWeightError
from pathrelax.graph.strict_graph import NodeID

WeightSource = Union[Mapping[Any, Cost], Callable[[NodeID, NodeID], Optional[Cost]]]


class EdgeWeightsMap:
    """Resolve the weight of an edge from a mapping or a callable.

    ``weights`` is either a mapping keyed by ``(u, v)`` tuples or a callable
    ``f(u, v)`` returning the weight (None when undefined). Mappings with a
    default, such as ``collections.defaultdict(lambda: 1)``, yield it for edges
    missing in both directions; the mapping itself is never modified.
    """

    def __init__(self, weights: WeightSource, directed: bool) -> None:
        self.weights = weights
        self.directed = directed

    def edge_property(self, u: NodeID, v: NodeID) -> Cost:
        """Return the weight of edge (u, v).

        Raises:
            InvalidWeightError: If the weight is not defined.
        """
        value = self._lookup(u, v)
        if value is None and not self.directed:
            value = self._lookup(v, u)
        if value is None:
            value = self._default(u, v)
        return self.validate(u, v, value)

    weight = edge_property

    def validate(self, u: NodeID, v: NodeID, value: Optional[Cost]) -> Cost:
        if value is None:
            raise InvalidWeightError(f"Weight of edge ({u!r}, {v!r}) is not defined.")
        return value

    def _lookup(self, u: NodeID, v: NodeID) -> Optional[Cost]:
        if isinstance(self.weights, Mapping):
            return self.weights.get((u, v))
        return self.weights(u, v)

    def _default(self, u: NodeID, v: NodeID) -> Optional[Cost]:
        """Default weight of a mapping, without inserting ``(u, v)`` into it."""
        if isinstance(self.weights, defaultdict):
            factory = self.weights.default_factory
            return factory() if factory is not None else None
        missing = getattr(self.weights, "__missing__", None)
        if missing is None:
            return None
        try:
            return missing((u, v))
        except KeyError:
            return None


class NonNegativeEdgeWeightsMap(EdgeWeightsMap):
    """Edge weights that must be defined, numeric and non-negative."""

    def validate(self, u: NodeID, v: NodeID, value: Optional[Cost]) -> Cost:
        value = super().validate(u, v, value)
        if (
            isinstance(value, bool)
            or not isinstance(value, Real)
            or math.isnan(value)
        ):
            raise InvalidWeightError(
                f"Weight of edge ({u!r}, {v!r}) is not a number: {value!r}."
            )
        if value < 0:
            raise InvalidWeightError(
                f"Weight of edge ({u!r}, {v!r}) is negative: {value!r}."
            )
        return value


class GraphAttributeWeights(NonNegativeEdgeWeightsMap):
    """Read weights from networkx edge attributes.

    For multigraphs the weight of ``(u, v)`` is the minimum over the parallel
    edges carrying the attribute.

    Args:
        graph: A networkx graph.
        attr: Name of the edge attribute holding the weight.
        default: Weight used for edges without the attribute; None makes such
            edges invalid.
    """

    def __init__(
        self, graph: Any, attr: str = "weight", default: Optional[Cost] = None
    ) -> None:
        super().__init__(self._edge_attr, graph.is_directed())
        self.graph = graph
        self.attr = attr
        self.default = default

    def _edge_attr(self, u: NodeID, v: NodeID) -> Optional[Cost]:
        edge_data = self.graph.get_edge_data(u, v)
        if edge_data is None:
            return None
        if self.graph.is_multigraph():
            values = [
                attrs.get(self.attr, self.default) for attrs in edge_data.values()
            ]
            values = [value for value in values if value is not None]
            return min(values) if values else None
        return edge_data.get(self.attr, self.default)


def build_edge_weights_map(
    weights: Union[EdgeWeightsMap, WeightSource], directed: bool
) -> EdgeWeightsMap:
    """Return ``weights`` as an `EdgeWeightsMap`.

    Instances of `EdgeWeightsMap` are returned unchanged; anything else is
    wrapped in a `NonNegativeEdgeWeightsMap`.
    """
    if isinstance(weights, EdgeWeightsMap):
        return weights
    return NonNegativeEdgeWeightsMap(weights, directed)
