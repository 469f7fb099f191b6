"""Path reconstruction from shortest-path trees.

``PathBuilder`` converts the parent map left by a shortest-path run into
source-to-target vertex lists.
"""

from pathrelax.paths.builder import PathBuilder

__all__ = ["PathBuilder"]
