from __future__ import annotations

import enum
import logging
import math
import numbers
from typing import Hashable, Iterable, NamedTuple, Union

from influence.config import DEFAULT_UNIT_WEIGHT
from influence.errors import InvalidArgument, NodeNotFound
from influence.graph.paths import DistanceMap, bfs_distances, dijkstra_distances
from influence.graph.score import closeness_score

logger = logging.getLogger(__name__)

Weight = Union[int, float]


class GraphMode(str, enum.Enum):
    WEIGHTED = "weighted"
    UNWEIGHTED = "unweighted"


class Neighbor(NamedTuple):
    node: Hashable
    weight: Weight


_SHORTEST_PATHS = {
    GraphMode.UNWEIGHTED: bfs_distances,
    GraphMode.WEIGHTED: dijkstra_distances,
}


class Graph:
    """
    Undirected graph with a fixed weighted/unweighted mode.

    Nodes exist once an edge mentions them. Parallel edges and self-loops
    are kept as separate adjacency entries.
    """

    def __init__(self, weighted: bool) -> None:
        self.mode = GraphMode.WEIGHTED if weighted else GraphMode.UNWEIGHTED
        self._adjacency: dict[Hashable, list[Neighbor]] = {}
        self._edge_count = 0

    @property
    def weighted(self) -> bool:
        return self.mode is GraphMode.WEIGHTED

    @property
    def nodes(self) -> set[Hashable]:
        return set(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __repr__(self) -> str:
        return f"Graph(mode={self.mode.value}, nodes={len(self)}, edges={self._edge_count})"

    # ----------------------------
    # Mutation
    # ----------------------------

    def _checked_weight(self, weight: Weight) -> Weight:
        if not self.weighted:
            return DEFAULT_UNIT_WEIGHT
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise InvalidArgument(f"edge weight must be a number, got {weight!r}")
        if not math.isfinite(weight):
            raise InvalidArgument(f"edge weight must be finite, got {weight!r}")
        if weight < 0:
            raise InvalidArgument(f"edge weight must be non-negative, got {weight!r}")
        return weight

    def add_edge(self, u: Hashable, v: Hashable, weight: Weight = DEFAULT_UNIT_WEIGHT) -> None:
        # validate before touching adjacency so a rejected edge leaves no trace
        final_weight = self._checked_weight(weight)

        self._adjacency.setdefault(u, []).append(Neighbor(v, final_weight))
        self._adjacency.setdefault(v, []).append(Neighbor(u, final_weight))
        self._edge_count += 1
        logger.debug("edge %r -- %r (weight=%r)", u, v, final_weight)

    def add_edges(self, edges: Iterable[tuple]) -> None:
        """Add (u, v) or (u, v, weight) tuples in order."""
        for edge in edges:
            self.add_edge(*edge)

    # ----------------------------
    # Queries
    # ----------------------------

    def neighbors(self, node: Hashable) -> tuple[Neighbor, ...]:
        if node not in self._adjacency:
            raise NodeNotFound(node)
        return tuple(self._adjacency[node])

    def shortest_distances(self, source: Hashable) -> DistanceMap:
        if source not in self._adjacency:
            raise NodeNotFound(source)
        strategy = _SHORTEST_PATHS[self.mode]
        logger.debug("shortest paths from %r via %s", source, strategy.__name__)
        return strategy(self._adjacency, source)

    def calculate_influence_score(self, source: Hashable) -> float:
        distances = self.shortest_distances(source)
        score = closeness_score(source, distances, len(self._adjacency))
        logger.info("influence score for %r: %s", source, score)
        return score
