# lib/randgraph/session.py
from __future__ import annotations

import logging
from typing import List

from .config import SimConfig
from .graph import Graph
from .graph.builders import generate
from .graph.models import MODEL_KEYS, Model, draw_model, key_legend
from .noise import PerlinNoise
from .physics import step
from .rng import RandomSource

logger = logging.getLogger(__name__)


class Simulation:
    """
    Owns the current graph and advances it one tick at a time.

    select() builds the replacement graph completely before swapping it in,
    so a tick never sees a half-built graph. A failed generation leaves the
    previous graph and model in place.
    """

    def __init__(self, config: SimConfig | None = None, rng: RandomSource | None = None,
                 noise: PerlinNoise | None = None):
        self.config = (config or SimConfig()).validate()
        self.rng = rng if rng is not None else RandomSource.from_seed(self.config.seed)
        self.noise = noise if noise is not None else PerlinNoise(self.config.noise_seed)
        self.ticks = 0
        self._model: Model | None = None
        self._graph = Graph.empty()

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def model(self) -> Model | None:
        return self._model

    def start(self) -> Graph:
        return self.select(self.config.initial_model)

    def select(self, kind_or_key: str) -> Graph:
        model = draw_model(kind_or_key, self.config, self.rng)
        return self.regenerate(model)

    def regenerate(self, model: Model) -> Graph:
        graph = generate(model, self.config, self.rng)
        self._model, self._graph = model, graph
        self.ticks = 0
        logger.info("%s: %s -> %d nodes, %d edges",
                    model.title, ", ".join(model.describe()), graph.num_nodes, graph.num_edges)
        return graph

    def handle_key(self, key: str) -> bool:
        """Regenerate for a mapped key; unmapped keys are ignored."""
        if key not in MODEL_KEYS:
            return False
        self.select(key)
        return True

    def advance(self, dt: float | None = None) -> None:
        step(self._graph, self.config.delta_time if dt is None else dt,
             self.noise, self.config.noise_norm)
        self.ticks += 1

    def status_lines(self) -> List[str]:
        """Overlay text: model title, its drawn parameters, then the key legend."""
        lines: List[str] = []
        if self._model is not None:
            lines.append(self._model.title)
            lines.extend(self._model.describe())
        lines.extend(key_legend())
        return lines
