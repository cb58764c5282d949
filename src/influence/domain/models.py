from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from influence.config import DEFAULT_UNIT_WEIGHT
from influence.graph.model import Graph


def _label(value: Any) -> Any:
    # JSON files may use numeric node ids; the graph keys everything by str
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class EdgeSpec(BaseModel):
    u: str
    v: str
    # sign is checked by NetworkSpec, only for weighted networks
    weight: float = Field(default=DEFAULT_UNIT_WEIGHT, allow_inf_nan=False)

    @field_validator("u", "v", mode="before")
    @classmethod
    def numeric_label(cls, value: Any) -> Any:
        return _label(value)

    def as_tuple(self) -> tuple[str, str, float]:
        return (self.u, self.v, self.weight)


class NetworkSpec(BaseModel):
    """An edge list plus the node whose influence is wanted."""

    name: str = "network"
    weighted: bool = False
    source: Optional[str] = None
    edges: list[EdgeSpec] = Field(default_factory=list)

    @field_validator("source", mode="before")
    @classmethod
    def numeric_source(cls, value: Any) -> Any:
        return _label(value)

    @model_validator(mode="after")
    def weights_and_source(self) -> "NetworkSpec":
        if self.weighted:
            for e in self.edges:
                if e.weight < 0:
                    raise ValueError(f"edge {e.u!r} -- {e.v!r} has negative weight {e.weight!r}")

        if self.source is None:
            return self
        for e in self.edges:
            if self.source in (e.u, e.v):
                return self
        raise ValueError(f"source {self.source!r} does not appear in any edge")

    def build_graph(self) -> Graph:
        g = Graph(weighted=self.weighted)
        g.add_edges(e.as_tuple() for e in self.edges)
        return g


class ScoreReport(BaseModel):
    network: str
    source: str
    weighted: bool
    node_count: int
    score: float
    # None marks a node with no path from source
    distances: dict[str, Optional[float]] = Field(default_factory=dict)


def load_network(path: Path) -> NetworkSpec:
    return NetworkSpec.model_validate_json(Path(path).read_text(encoding="utf-8"))
