import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from influence.datasets import DEMO_NETWORKS, UNWEIGHTED_NETWORK, WEIGHTED_NETWORK
from influence.domain.models import EdgeSpec, NetworkSpec, load_network


def write_network(p: Path, payload: dict) -> Path:
    p.write_text(json.dumps(payload), encoding="utf-8")
    return p


def test_demo_networks_match_the_literal_datasets():
    assert set(DEMO_NETWORKS) == {"weighted", "unweighted"}

    assert WEIGHTED_NETWORK.weighted is True
    assert WEIGHTED_NETWORK.source == "A"
    assert len(WEIGHTED_NETWORK.edges) == 17
    assert WEIGHTED_NETWORK.edges[2].as_tuple() == ("A", "E", 5)
    assert WEIGHTED_NETWORK.edges[-1].as_tuple() == ("I", "J", 3)

    assert UNWEIGHTED_NETWORK.weighted is False
    assert UNWEIGHTED_NETWORK.source == "Edward"
    assert len(UNWEIGHTED_NETWORK.edges) == 10
    assert len(UNWEIGHTED_NETWORK.build_graph()) == 8


def test_load_network_from_json(tmp_path: Path):
    f = write_network(
        tmp_path / "net.json",
        {
            "name": "ring",
            "weighted": True,
            "source": 1,
            "edges": [
                {"u": 1, "v": 2, "weight": 2.5},
                {"u": 2, "v": 3},
                {"u": 3, "v": 1, "weight": 4},
            ],
        },
    )
    spec = load_network(f)

    assert spec.name == "ring"
    assert spec.source == "1"
    assert spec.edges[1].weight == 1

    g = spec.build_graph()
    assert g.shortest_distances("1") == {"1": 0, "2": 2.5, "3": 3.5}


def test_weighted_network_rejects_negative_weight():
    with pytest.raises(ValidationError):
        NetworkSpec(weighted=True, edges=[EdgeSpec(u="a", v="b", weight=-1)])


def test_unweighted_network_ignores_negative_weight():
    spec = NetworkSpec(weighted=False, source="a", edges=[EdgeSpec(u="a", v="b", weight=-3)])
    g = spec.build_graph()

    assert g.neighbors("a")[0].weight == 1
    assert g.calculate_influence_score("a") == 1.0


def test_network_spec_rejects_unknown_source():
    with pytest.raises(ValidationError):
        NetworkSpec(source="z", edges=[EdgeSpec(u="a", v="b")])


def test_network_spec_without_source():
    spec = NetworkSpec(edges=[{"u": "a", "v": "b"}])
    assert spec.source is None
    assert spec.build_graph().nodes == {"a", "b"}
