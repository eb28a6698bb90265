# lib/randgraph/graph/builders.py
from __future__ import annotations

import logging
from typing import List, Sequence, Set, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from ..config import SimConfig
from ..rng import RandomSource
from . import Edge, Graph, Node
from .guards import check_fanout, check_probability
from .models import BarabasiAlbert, ErdosRenyi, Model, WattsStrogatz
from .sampling import sample_node

logger = logging.getLogger(__name__)

WeightRange = Tuple[float, float]


def _make_edge(nodes: Sequence[Node], head: int, tail: int, weight: float) -> Edge:
    rest = float(np.linalg.norm(nodes[head].position - nodes[tail].position))
    return Edge(head=head, tail=tail, rest_length=rest, weight=weight)


def _sample_nodes(rng: RandomSource, n: int, radius_mean: float, radius_std: float,
                  uniform_sphere: bool) -> List[Node]:
    return [sample_node(rng, radius_mean, radius_std, uniform_sphere) for _ in range(n)]


def _erdos_renyi_parts(
    rng: RandomSource,
    num_nodes: int,
    radius_mean: float,
    radius_std: float,
    edge_prob: float,
    weight_range: WeightRange,
    uniform_sphere: bool,
) -> Tuple[List[Node], List[Edge]]:
    nodes = _sample_nodes(rng, num_nodes, radius_mean, radius_std, uniform_sphere)
    edges: List[Edge] = []
    for i in range(num_nodes):
        for j in range(i):
            if rng.bernoulli(edge_prob):
                weight = rng.uniform(*weight_range)
                edges.append(_make_edge(nodes, i, j, weight))
    return nodes, edges


def erdos_renyi(
    rng: RandomSource,
    num_nodes: int,
    radius_mean: float,
    radius_std: float,
    edge_prob: float,
    *,
    weight_range: WeightRange = (0.0, 0.1),
    uniform_sphere: bool = False,
) -> Graph:
    """G(n, p): one Bernoulli(edge_prob) trial per unordered pair (i, j), j < i."""
    check_probability("edge_prob", edge_prob)
    if num_nodes <= 0:
        return Graph.empty()
    nodes, edges = _erdos_renyi_parts(
        rng, num_nodes, radius_mean, radius_std, edge_prob, weight_range, uniform_sphere
    )
    logger.debug("erdos_renyi n=%d p=%.4f -> %d edges", num_nodes, edge_prob, len(edges))
    return Graph.from_nodes(nodes, edges)


def barabasi_albert(
    rng: RandomSource,
    num_nodes: int,
    radius_mean: float,
    radius_std: float,
    num_edges: int,
    *,
    weight_range: WeightRange = (0.0, 0.1),
    uniform_sphere: bool = False,
    allow_multi_edges: bool = True,
) -> Graph:
    """
    Preferential attachment grown from a complete graph on `num_edges` nodes.

    Each new node i draws `num_edges` targets with probability proportional to
    the degrees snapshotted before i was added, and gets edges (i, target).
    The new node's own weight is zero, so self-loops never occur. With
    allow_multi_edges the same target may be drawn twice; otherwise each
    drawn target's weight is zeroed for the remaining draws.
    """
    if num_nodes <= 0:
        return Graph.empty()
    check_fanout("num_edges", num_edges, num_nodes)

    nodes, edges = _erdos_renyi_parts(
        rng, num_edges, radius_mean, radius_std, 1.0, weight_range, uniform_sphere
    )
    degrees = np.zeros(num_nodes, dtype=np.float64)
    for e in edges:
        degrees[e.head] += 1
        degrees[e.tail] += 1

    for i in range(num_edges, num_nodes):
        nodes.append(sample_node(rng, radius_mean, radius_std, uniform_sphere))
        # slot i is still zero, so only earlier nodes can be drawn
        weights = degrees[: i + 1].copy()
        for _ in range(num_edges):
            target = rng.weighted_index(weights)
            if not allow_multi_edges:
                weights[target] = 0.0
            weight = rng.uniform(*weight_range)
            edges.append(_make_edge(nodes, i, target, weight))
            degrees[i] += 1
            degrees[target] += 1

    logger.debug("barabasi_albert n=%d m=%d -> %d edges", num_nodes, num_edges, len(edges))
    return Graph.from_nodes(nodes, edges)


def _rewire_target(
    rng: RandomSource,
    source: int,
    num_nodes: int,
    taken: Set[int],
    allow_self_loops: bool,
    allow_multi_edges: bool,
) -> int:
    if allow_self_loops and allow_multi_edges:
        return rng.uniform_int(0, num_nodes - 1)
    candidates = [
        c for c in range(num_nodes)
        if (allow_self_loops or c != source) and (allow_multi_edges or c not in taken)
    ]
    return candidates[rng.uniform_int(0, len(candidates) - 1)]


def watts_strogatz(
    rng: RandomSource,
    num_nodes: int,
    radius_mean: float,
    radius_std: float,
    num_neighbors: int,
    rewire_prob: float,
    *,
    weight_range: WeightRange = (0.0, 0.1),
    uniform_sphere: bool = False,
    allow_self_loops: bool = True,
    allow_multi_edges: bool = True,
) -> Graph:
    """
    Spatial small world: node i links to its `num_neighbors` nearest nodes
    (ties broken by index), each link rewired to a uniform random node with
    probability `rewire_prob`.

    With allow_self_loops the nearest "neighbor" of i is usually i itself at
    distance 0, and rewiring may land on i. Without allow_multi_edges a
    rewired link avoids every node i already targets or is about to target.
    """
    check_probability("rewire_prob", rewire_prob)
    if num_nodes <= 0:
        return Graph.empty()
    check_fanout("num_neighbors", num_neighbors, num_nodes)

    nodes = _sample_nodes(rng, num_nodes, radius_mean, radius_std, uniform_sphere)
    pos = np.stack([nd.position for nd in nodes])
    dists = cdist(pos, pos)

    edges: List[Edge] = []
    for i in range(num_nodes):
        order = np.argsort(dists[i], kind="stable")
        if not allow_self_loops:
            order = order[order != i]
        nearest = [int(j) for j in order[:num_neighbors]]

        taken: Set[int] = set()
        for slot in range(num_neighbors):
            weight = rng.uniform(*weight_range)
            if rng.bernoulli(rewire_prob):
                pending = taken | set(nearest[slot + 1:])
                target = _rewire_target(rng, i, num_nodes, pending, allow_self_loops, allow_multi_edges)
            else:
                target = nearest[slot]
            taken.add(target)
            edges.append(_make_edge(nodes, i, target, weight))

    logger.debug(
        "watts_strogatz n=%d k=%d beta=%.4f -> %d edges",
        num_nodes, num_neighbors, rewire_prob, len(edges),
    )
    return Graph.from_nodes(nodes, edges)


def generate(model: Model, config: SimConfig, rng: RandomSource) -> Graph:
    """Build a fresh graph for `model` using the shared tunables in `config`."""
    weight_range = (config.edge_weight_min, config.edge_weight_max)
    shell = (config.num_nodes, config.radius_mean, config.radius_std)

    if isinstance(model, ErdosRenyi):
        return erdos_renyi(
            rng, *shell, model.edge_prob,
            weight_range=weight_range,
            uniform_sphere=config.uniform_sphere,
        )
    if isinstance(model, BarabasiAlbert):
        return barabasi_albert(
            rng, *shell, model.num_edges,
            weight_range=weight_range,
            uniform_sphere=config.uniform_sphere,
            allow_multi_edges=config.allow_multi_edges,
        )
    if isinstance(model, WattsStrogatz):
        return watts_strogatz(
            rng, *shell, model.num_neighbors, model.rewire_prob,
            weight_range=weight_range,
            uniform_sphere=config.uniform_sphere,
            allow_self_loops=config.allow_self_loops,
            allow_multi_edges=config.allow_multi_edges,
        )
    raise TypeError(f"Unsupported model: {model!r}")
