from influence.graph.model import Graph
from influence.graph.paths import UNREACHABLE, bfs_distances, dijkstra_distances
from influence.datasets import UNWEIGHTED_NETWORK, WEIGHTED_NETWORK


def test_bfs_counts_hops():
    adjacency = {
        "a": [("b", 1)],
        "b": [("a", 1), ("c", 1)],
        "c": [("b", 1)],
        "d": [],
    }
    dist = bfs_distances(adjacency, "a")
    assert dist == {"a": 0, "b": 1, "c": 2, "d": UNREACHABLE}


def test_dijkstra_prefers_cheaper_longer_path():
    g = Graph(weighted=True)
    g.add_edge("a", "b", 1)
    g.add_edge("b", "c", 2)
    g.add_edge("a", "c", 4)

    dist = g.shortest_distances("a")
    assert dist == {"a": 0, "b": 1, "c": 3}


def test_dijkstra_skips_stale_heap_entries():
    # c is pushed first at 10, then improved to 3 via b; the stale entry
    # must not relax d from 10
    g = Graph(weighted=True)
    g.add_edge("a", "c", 10)
    g.add_edge("a", "b", 1)
    g.add_edge("b", "c", 2)
    g.add_edge("c", "d", 1)

    dist = g.shortest_distances("a")
    assert dist["c"] == 3
    assert dist["d"] == 4


def test_dijkstra_parallel_edges_use_cheapest():
    g = Graph(weighted=True)
    g.add_edge("a", "b", 5)
    g.add_edge("a", "b", 2)
    g.add_edge("b", "b", 0)

    assert g.shortest_distances("a")["b"] == 2


def test_dijkstra_unreachable_marker():
    adjacency = {"a": [("b", 2)], "b": [("a", 2)], "x": [("y", 1)], "y": [("x", 1)]}
    dist = dijkstra_distances(adjacency, "a")
    assert dist["b"] == 2
    assert dist["x"] is UNREACHABLE
    assert dist["y"] is UNREACHABLE


def test_dijkstra_handles_mixed_label_types():
    g = Graph(weighted=True)
    g.add_edge(1, "b", 1)
    g.add_edge(1, ("t", 2), 1)
    g.add_edge("b", ("t", 2), 1)

    assert g.shortest_distances(1) == {1: 0, "b": 1, ("t", 2): 1}


def test_weighted_demo_distances_satisfy_triangle_inequality():
    g = WEIGHTED_NETWORK.build_graph()
    dist = g.shortest_distances("A")

    assert dist == {
        "A": 0, "B": 1, "C": 1, "E": 2, "G": 2, "H": 2,
        "F": 3, "D": 4, "I": 5, "J": 8,
    }
    for u in g.nodes:
        for v, w in g.neighbors(u):
            assert dist[v] <= dist[u] + w


def test_unweighted_demo_distances_from_edward():
    g = UNWEIGHTED_NETWORK.build_graph()
    dist = g.shortest_distances("Edward")

    assert dist == {
        "Edward": 0,
        "Harry": 1,
        "Gloria": 1,
        "Fred": 1,
        "Diana": 1,
        "Claire": 2,
        "Britney": 3,
        "Alicia": 4,
    }
    assert sum(dist.values()) == 13
