from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Hashable, Iterable, Mapping, Optional, Union

Distance = Union[int, float]

# Marker for "no path found". Kept apart from any numeric value so sums of
# large finite weights can never be mistaken for it.
UNREACHABLE: None = None

Adjacency = Mapping[Hashable, Iterable[tuple[Hashable, Distance]]]
DistanceMap = dict[Hashable, Optional[Distance]]


def _initial_distances(adjacency: Adjacency, source: Hashable) -> DistanceMap:
    distances: DistanceMap = {node: UNREACHABLE for node in adjacency}
    distances[source] = 0
    return distances


def bfs_distances(adjacency: Adjacency, source: Hashable) -> DistanceMap:
    """
    Hop counts from source, every edge counted as 1.

    A node's distance is fixed the first time it is reached; it is never
    enqueued twice.
    """
    distances = _initial_distances(adjacency, source)
    queue = deque([source])

    while queue:
        current = queue.popleft()
        here = distances[current]
        for neighbor, _ in adjacency[current]:
            if distances[neighbor] is UNREACHABLE:
                distances[neighbor] = here + 1
                queue.append(neighbor)

    return distances


def dijkstra_distances(adjacency: Adjacency, source: Hashable) -> DistanceMap:
    """
    Weighted shortest distances from source. Weights must be >= 0.

    The heap may hold several entries for one node; an entry whose priority
    is worse than the recorded best is stale and skipped.
    """
    distances = _initial_distances(adjacency, source)
    # seq breaks ties so node labels are never compared
    seq = itertools.count()
    heap: list[tuple[Distance, int, Hashable]] = [(0, next(seq), source)]

    while heap:
        dist, _, current = heapq.heappop(heap)
        if dist > distances[current]:
            continue

        for neighbor, weight in adjacency[current]:
            candidate = dist + weight
            best = distances[neighbor]
            if best is UNREACHABLE or candidate < best:
                distances[neighbor] = candidate
                heapq.heappush(heap, (candidate, next(seq), neighbor))

    return distances
