# lib/randgraph/graph/models.py
"""
models.py — The closed set of graph models and their free parameters.

Each variant carries only what its generator needs beyond the shared
SimConfig. draw_model() re-draws those parameters uniformly inside the
configured bounds, which is what a model switch does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Union

from ..config import MODEL_KINDS, SimConfig
from ..errors import InvalidParameter
from ..rng import RandomSource


@dataclass(frozen=True)
class ErdosRenyi:
    edge_prob: float

    kind = "erdos_renyi"
    title = "Erdos Renyi"

    def describe(self) -> List[str]:
        return [f"Edge Prob: {self.edge_prob:.6f}"]


@dataclass(frozen=True)
class BarabasiAlbert:
    num_edges: int

    kind = "barabasi_albert"
    title = "Barabasi Albert"

    def describe(self) -> List[str]:
        return [f"Num Edges: {self.num_edges}"]


@dataclass(frozen=True)
class WattsStrogatz:
    num_neighbors: int
    rewire_prob: float

    kind = "watts_strogatz"
    title = "Watts Strogatz"

    def describe(self) -> List[str]:
        return [
            f"Num Neighbors: {self.num_neighbors}",
            f"Rewire Prob: {self.rewire_prob:.6f}",
        ]


Model = Union[ErdosRenyi, BarabasiAlbert, WattsStrogatz]

# keyboard command -> model kind
MODEL_KEYS: Dict[str, str] = {
    "e": "erdos_renyi",
    "b": "barabasi_albert",
    "w": "watts_strogatz",
}

_TITLES = {"erdos_renyi": ErdosRenyi.title,
           "barabasi_albert": BarabasiAlbert.title,
           "watts_strogatz": WattsStrogatz.title}


def resolve_kind(kind_or_key: str) -> str:
    """Accept a model kind or its one-letter key."""
    kind = MODEL_KEYS.get(kind_or_key, kind_or_key)
    if kind not in MODEL_KINDS:
        raise InvalidParameter(
            f"unknown model {kind_or_key!r}; expected one of {MODEL_KINDS} or keys {sorted(MODEL_KEYS)}"
        )
    return kind


def key_legend() -> List[str]:
    return [f"{key}: {_TITLES[kind]}" for key, kind in MODEL_KEYS.items()]


def draw_model(kind_or_key: str, config: SimConfig, rng: RandomSource) -> Model:
    kind = resolve_kind(kind_or_key)
    if kind == "erdos_renyi":
        return ErdosRenyi(edge_prob=rng.uniform(config.edge_prob_min, config.edge_prob_max))
    if kind == "barabasi_albert":
        return BarabasiAlbert(num_edges=rng.uniform_int(config.num_edges_min, config.num_edges_max))
    return WattsStrogatz(
        num_neighbors=rng.uniform_int(config.num_neighbors_min, config.num_neighbors_max),
        rewire_prob=rng.uniform(config.rewire_prob_min, config.rewire_prob_max),
    )
