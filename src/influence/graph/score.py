from __future__ import annotations

from typing import Hashable

from influence.errors import DivisionDegenerate
from influence.graph.paths import UNREACHABLE, DistanceMap


def closeness_score(source: Hashable, distances: DistanceMap, node_count: int) -> float:
    """
    Un-normalized closeness: (n - 1) / sum of distances to every other node.

    Returns 0.0 when some node cannot be reached from source. Raises
    DivisionDegenerate when the distances sum to zero.
    """
    total = 0
    for node, dist in distances.items():
        if node == source:
            continue
        if dist is UNREACHABLE:
            return 0.0
        total += dist

    if total == 0:
        raise DivisionDegenerate(
            f"distances from {source!r} sum to zero ({node_count} node(s)); score is undefined"
        )

    return (node_count - 1) / total
