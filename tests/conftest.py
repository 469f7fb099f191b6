"""Shared pytest fixtures: small sample graphs with their edge weights.

Each fixture returns ``(graph, weights)`` where ``weights`` maps ``(u, v)``
tuples to non-negative numbers.
"""

from __future__ import annotations

from collections import defaultdict

import pytest

from pathrelax.graph import StrictDiGraph, from_edge_pairs


@pytest.fixture
def tree16():
    # Unit weights, undirected; the two stars around 1 and 9 meet at 6-11:
    #
    #   8 ── 3 ── 1 ── 2 ── 6 ── 11 ── 9 ── 10 ── 14
    #            / \                    \
    #           4   5 ── 7               12 ── 13 ── 16
    graph = from_edge_pairs(
        1, 2, 1, 3, 1, 4, 1, 5, 2, 6, 3, 8, 5, 7,
        9, 10, 9, 11, 9, 12, 10, 14, 11, 6, 12, 13, 13, 16,
    )  # fmt: skip
    return graph, defaultdict(lambda: 1)


@pytest.fixture
def triangle_decrease():
    # A reaches C directly at 5, then through B at 2; C must be re-keyed.
    #
    #        [1]      [1]
    #   A ───────► B ──────► C
    #   │                    ▲
    #   └────────────────────┘
    #            [5]
    graph = from_edge_pairs("A", "B", "B", "C", "A", "C", directed=True)
    weights = {("A", "B"): 1, ("B", "C"): 1, ("A", "C"): 5}
    return graph, weights


@pytest.fixture
def square_bottleneck():
    # Sum prefers A-B-D (11), max prefers A-C-D (6).
    #
    #        [1]      [10]
    #   A ───────► B ──────► D
    #   │                    ▲
    #   └──────► C ──────────┘
    #        [6]      [6]
    graph = from_edge_pairs("A", "B", "B", "D", "A", "C", "C", "D", directed=True)
    weights = {("A", "B"): 1, ("B", "D"): 10, ("A", "C"): 6, ("C", "D"): 6}
    return graph, weights


@pytest.fixture
def disconnected():
    # Two directed components; X and Y are unreachable from A.
    graph = StrictDiGraph()
    for node in ("A", "B", "C", "X", "Y"):
        graph.add_node(node)
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    graph.add_edge("X", "Y")
    weights = {("A", "B"): 2, ("B", "C"): 3}
    return graph, weights


@pytest.fixture
def chain_many_decreases():
    # Every vertex is first reached from S at a high cost and later improved
    # along the cheap chain S-1-2-3-4, exercising repeated decrease-key.
    graph = StrictDiGraph()
    for node in ("S", 1, 2, 3, 4):
        graph.add_node(node)
    weights = {}
    for node in (2, 3, 4):
        graph.add_edge("S", node)
        weights[("S", node)] = 100 - node
    for u, v in (("S", 1), (1, 2), (2, 3), (3, 4)):
        graph.add_edge(u, v)
        weights[(u, v)] = 1
    return graph, weights
