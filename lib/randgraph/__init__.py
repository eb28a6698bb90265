"""
Random graphs relaxed in 3D by a noisy mass-spring system.

Three generators (Erdos-Renyi, Barabasi-Albert, Watts-Strogatz) place nodes
on a noisy spherical shell and connect them; the physics tick then pulls
edges toward their rest lengths while a coherent noise field keeps the
layout drifting.

The usual entrypoints are :func:`generate`, :func:`step` and
:class:`Simulation`.
"""

from .config import SimConfig, load_config
from .errors import DegenerateDistribution, InvalidParameter, RandomGraphError
from .graph import Edge, Graph, Node
from .graph.builders import generate
from .graph.models import BarabasiAlbert, ErdosRenyi, WattsStrogatz, draw_model
from .noise import PerlinNoise
from .physics import step
from .rng import RandomSource
from .session import Simulation

__all__ = [
    "BarabasiAlbert",
    "DegenerateDistribution",
    "Edge",
    "ErdosRenyi",
    "Graph",
    "InvalidParameter",
    "Node",
    "PerlinNoise",
    "RandomGraphError",
    "RandomSource",
    "SimConfig",
    "Simulation",
    "WattsStrogatz",
    "draw_model",
    "generate",
    "load_config",
    "step",
]
