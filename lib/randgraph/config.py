# lib/randgraph/config.py
"""
Tunables shared by the graph generators and the physics tick.

One frozen SimConfig is passed to each generate/step call. Values can be
read from a YAML file (a `run:` section or a top-level mapping); missing keys
fall back to the defaults below.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path

import yaml

from .errors import InvalidParameter

MODEL_KINDS = ("erdos_renyi", "barabasi_albert", "watts_strogatz")


@dataclass(frozen=True)
class SimConfig:
    num_nodes: int = 100
    radius_mean: float = 100.0
    radius_std: float = 10.0
    edge_prob_min: float = 0.05
    edge_prob_max: float = 0.2
    num_edges_min: int = 2            # m = 1 seeds an edgeless graph
    num_edges_max: int = 10
    num_neighbors_min: int = 10
    num_neighbors_max: int = 20
    rewire_prob_min: float = 0.01
    rewire_prob_max: float = 0.1
    edge_weight_min: float = 0.0
    edge_weight_max: float = 0.1
    noise_norm: float = 10.0
    delta_time: float = 0.1
    noise_seed: int = 0
    uniform_sphere: bool = False
    allow_self_loops: bool = True
    allow_multi_edges: bool = True
    seed: int | None = None
    initial_model: str = "watts_strogatz"

    def validate(self) -> "SimConfig":
        """Raise InvalidParameter on the first out-of-range field; return self."""
        if self.num_nodes < 0:
            raise InvalidParameter(f"num_nodes must be >= 0, got {self.num_nodes}")
        if self.radius_std < 0:
            raise InvalidParameter(f"radius_std must be >= 0, got {self.radius_std}")
        _check_bounds("edge_prob", self.edge_prob_min, self.edge_prob_max, lo=0.0, hi=1.0)
        _check_bounds("rewire_prob", self.rewire_prob_min, self.rewire_prob_max, lo=0.0, hi=1.0)
        _check_bounds("num_edges", self.num_edges_min, self.num_edges_max, lo=1)
        _check_bounds("num_neighbors", self.num_neighbors_min, self.num_neighbors_max, lo=1)
        _check_bounds("edge_weight", self.edge_weight_min, self.edge_weight_max)
        if self.noise_norm < 0:
            raise InvalidParameter(f"noise_norm must be >= 0, got {self.noise_norm}")
        if self.delta_time <= 0:
            raise InvalidParameter(f"delta_time must be > 0, got {self.delta_time}")
        if self.initial_model not in MODEL_KINDS:
            raise InvalidParameter(
                f"initial_model must be one of {MODEL_KINDS}, got {self.initial_model!r}"
            )
        return self

    def replace(self, **overrides) -> "SimConfig":
        return dataclasses.replace(self, **overrides).validate()


def _check_bounds(name: str, vmin, vmax, lo=None, hi=None) -> None:
    if vmin > vmax:
        raise InvalidParameter(f"{name}_min ({vmin}) exceeds {name}_max ({vmax})")
    if lo is not None and vmin < lo:
        raise InvalidParameter(f"{name}_min must be >= {lo}, got {vmin}")
    if hi is not None and vmax > hi:
        raise InvalidParameter(f"{name}_max must be <= {hi}, got {vmax}")


_FIELD_TYPES = {
    f.name: f.type for f in dataclasses.fields(SimConfig)
}


def _coerce(name: str, value):
    kind = _FIELD_TYPES[name]
    if value is None:
        if kind != "int | None":
            raise InvalidParameter(f"{name} may not be null")
        return None
    if kind == "bool":
        if not isinstance(value, bool):
            raise InvalidParameter(f"{name}: expected true or false, got {value!r}")
        return value
    if kind == "str":
        if not isinstance(value, str):
            raise InvalidParameter(f"{name}: expected a string, got {value!r}")
        return value
    if isinstance(value, bool):
        raise InvalidParameter(f"{name}: expected a number, got {value!r}")
    if kind == "float":
        # PyYAML reads exponents without a dot (1e-3) as strings
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise InvalidParameter(f"{name}: expected a number, got {value!r}") from exc
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise InvalidParameter(f"{name}: expected an integer, got {value!r}")
    return value


def config_from_mapping(raw: dict) -> SimConfig:
    if not isinstance(raw, dict):
        raise InvalidParameter(f"configuration must be a mapping, got {type(raw).__name__}")
    unknown = sorted(set(raw) - set(_FIELD_TYPES))
    if unknown:
        raise InvalidParameter(f"unknown configuration keys: {', '.join(unknown)}")
    values = {k: _coerce(k, v) for k, v in raw.items()}
    return SimConfig(**values).validate()


def load_config(path: Path | str) -> SimConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    section = raw.get("run", raw) if isinstance(raw, dict) else raw
    return config_from_mapping(section or {})
