from __future__ import annotations

from influence.domain.models import EdgeSpec, NetworkSpec


def _edges(rows) -> list[EdgeSpec]:
    out: list[EdgeSpec] = []
    for row in rows:
        if len(row) == 3:
            out.append(EdgeSpec(u=row[0], v=row[1], weight=row[2]))
        else:
            out.append(EdgeSpec(u=row[0], v=row[1]))
    return out


# Ten-node weighted network, scored from "A"
WEIGHTED_NETWORK = NetworkSpec(
    name="weighted",
    weighted=True,
    source="A",
    edges=_edges(
        [
            ("A", "B", 1),
            ("A", "C", 1),
            ("A", "E", 5),
            ("B", "C", 4),
            ("B", "E", 1),
            ("B", "G", 1),
            ("B", "H", 1),
            ("C", "D", 3),
            ("C", "E", 1),
            ("D", "E", 2),
            ("D", "F", 1),
            ("D", "G", 5),
            ("E", "G", 2),
            ("F", "G", 1),
            ("G", "H", 2),
            ("H", "I", 3),
            ("I", "J", 3),
        ]
    ),
)

# Eight-person social network, scored from "Edward"
UNWEIGHTED_NETWORK = NetworkSpec(
    name="unweighted",
    weighted=False,
    source="Edward",
    edges=_edges(
        [
            ("Alicia", "Britney"),
            ("Britney", "Claire"),
            ("Claire", "Diana"),
            ("Diana", "Edward"),
            ("Diana", "Harry"),
            ("Edward", "Harry"),
            ("Edward", "Gloria"),
            ("Edward", "Fred"),
            ("Gloria", "Fred"),
            ("Harry", "Gloria"),
        ]
    ),
)

DEMO_NETWORKS: dict[str, NetworkSpec] = {
    WEIGHTED_NETWORK.name: WEIGHTED_NETWORK,
    UNWEIGHTED_NETWORK.name: UNWEIGHTED_NETWORK,
}
