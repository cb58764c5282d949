from __future__ import annotations

from typing import Hashable


class InfluenceError(Exception):
    """Base class for every error raised by the influence package."""


class InvalidArgument(InfluenceError, ValueError):
    """Edge weight rejected by a weighted graph (negative, NaN, infinite)."""


class NodeNotFound(InfluenceError, KeyError):
    def __init__(self, node: Hashable):
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"node not found in graph: {self.node!r}"


class DivisionDegenerate(InfluenceError, ZeroDivisionError):
    """
    Raised when the distances from a source sum to zero.

    Happens for a single-node graph, or when every other node sits at
    distance 0 through zero-weight edges.
    """
