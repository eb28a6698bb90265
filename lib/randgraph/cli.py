"""
Command-line runner: generate a graph and relax it for a number of ticks.

    python -m randgraph.cli --config config/default.yaml --model w --steps 200
    python -m randgraph.cli --steps 300 --switch 100:e --switch 200:b --seed 7

Nothing is drawn; after each generation and at the end a one-line summary
of the graph and the node cloud is printed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

import numpy as np

from .config import SimConfig, load_config
from .errors import RandomGraphError
from .graph.guards import assert_rest_lengths
from .graph.models import MODEL_KEYS
from .logging_config import setup_logging
from .progress import tick_meter
from .session import Simulation

logger = logging.getLogger(__name__)


def _parse_switch(text: str) -> tuple[int, str]:
    tick, sep, key = text.partition(":")
    if not sep or not tick.isdigit() or key not in MODEL_KEYS:
        raise argparse.ArgumentTypeError(
            f"expected TICK:KEY with KEY in {sorted(MODEL_KEYS)}, got {text!r}"
        )
    return int(tick), key


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="randgraph",
        description="Generate a random graph and relax it with a noisy spring system.",
    )
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML config path (default: built-in defaults).")
    parser.add_argument("-m", "--model", choices=sorted(MODEL_KEYS), default=None,
                        help="Initial model key: e, b or w (default: initial_model from config).")
    parser.add_argument("-n", "--steps", type=int, default=100,
                        help="Number of physics ticks to run (default: 100).")
    parser.add_argument("-s", "--seed", type=int, default=None,
                        help="Random seed; overrides the config value.")
    parser.add_argument("--switch", type=_parse_switch, action="append", default=[],
                        metavar="TICK:KEY",
                        help="Regenerate with model KEY before tick TICK. Repeatable.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the tick progress bar.")
    return parser.parse_args(argv)


def describe_state(sim: Simulation) -> str:
    g = sim.graph
    s = g.summary()
    if g.num_nodes:
        radius = float(np.linalg.norm(g.positions, axis=1).mean())
        speed = float(np.linalg.norm(g.velocities, axis=1).max())
    else:
        radius = speed = 0.0
    return (
        f"tick={sim.ticks} nodes={s['nodes']} edges={s['edges']} "
        f"avg_degree={s['avg_degree']:.3f} components={s['components']} "
        f"self_loops={s['self_loops']} mean_radius={radius:.3f} max_speed={speed:.3f}"
    )


def run(sim: Simulation, steps: int, switches: Dict[int, str], model_key: str | None,
        show_progress: bool = True) -> Simulation:
    if model_key is None:
        sim.start()
    else:
        sim.select(model_key)
    assert_rest_lengths(sim.graph)
    print(describe_state(sim))

    with tick_meter(steps, sim.model.title, enabled=show_progress) as meter:
        for t in range(steps):
            if t in switches:
                sim.select(switches[t])
                assert_rest_lengths(sim.graph)
                meter.relabel(sim.model.title)
            sim.advance()
            meter.update()

    logger.debug("%d ticks at %.1f ticks/s", meter.ticks, meter.rate)
    print(describe_state(sim))
    return sim


def main(argv: List[str] | None = None) -> int:
    ns = _parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(getattr(logging, ns.log_level), ns.log_file)

    try:
        config = load_config(ns.config) if ns.config is not None else SimConfig().validate()
        if ns.seed is not None:
            config = config.replace(seed=ns.seed)
        sim = Simulation(config)
        run(sim, max(0, ns.steps), dict(ns.switch), ns.model, show_progress=not ns.no_progress)
    except RandomGraphError as exc:
        logger.error("%s", exc)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
