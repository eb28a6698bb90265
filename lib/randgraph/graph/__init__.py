# lib/randgraph/graph/__init__.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import networkx as nx
import numpy as np

from .guards import assert_edge_indices


@dataclass
class Node:
    position: np.ndarray      # shape (3,)
    velocity: np.ndarray      # shape (3,)
    acceleration: np.ndarray  # shape (3,)

    @classmethod
    def at_rest(cls, position) -> "Node":
        return cls(
            position=np.asarray(position, dtype=np.float64).reshape(3).copy(),
            velocity=np.zeros(3),
            acceleration=np.zeros(3),
        )


@dataclass(frozen=True)
class Edge:
    head: int
    tail: int
    rest_length: float
    weight: float


class Graph:
    """
    Ordered nodes plus immutable edges.

    Node state lives in three (N, 3) float64 arrays so the physics tick can
    work on whole columns; `nodes` hands out Node objects whose fields are
    row views into those arrays. Edges never change after construction.
    """

    def __init__(self, positions, edges: Iterable[Edge] = (), velocities=None, accelerations=None):
        self.positions = np.array(positions, dtype=np.float64).reshape(-1, 3)
        n = self.positions.shape[0]
        self.velocities = _state_array(velocities, n)
        self.accelerations = _state_array(accelerations, n)

        self._edges: Tuple[Edge, ...] = tuple(edges)
        self.heads = _frozen(np.fromiter((e.head for e in self._edges), dtype=np.intp, count=len(self._edges)))
        self.tails = _frozen(np.fromiter((e.tail for e in self._edges), dtype=np.intp, count=len(self._edges)))
        self.rest_lengths = _frozen(
            np.fromiter((e.rest_length for e in self._edges), dtype=np.float64, count=len(self._edges))
        )
        self.weights = _frozen(
            np.fromiter((e.weight for e in self._edges), dtype=np.float64, count=len(self._edges))
        )
        assert_edge_indices(self.heads, self.tails, n)

    @classmethod
    def empty(cls) -> "Graph":
        return cls(np.zeros((0, 3)))

    @classmethod
    def from_nodes(cls, nodes: Sequence[Node], edges: Iterable[Edge]) -> "Graph":
        if not nodes:
            return cls(np.zeros((0, 3)), edges)
        return cls(
            np.stack([nd.position for nd in nodes]),
            edges,
            velocities=np.stack([nd.velocity for nd in nodes]),
            accelerations=np.stack([nd.acceleration for nd in nodes]),
        )

    # -- sizes --------------------------------------------------------------

    @property
    def num_nodes(self) -> int:
        return self.positions.shape[0]

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return self.num_nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={self.num_nodes}, edges={self.num_edges})"

    # -- element access -----------------------------------------------------

    @property
    def nodes(self) -> List[Node]:
        return [self.node(i) for i in range(self.num_nodes)]

    def node(self, i: int) -> Node:
        return Node(self.positions[i], self.velocities[i], self.accelerations[i])

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    # -- read-only projections for a renderer -------------------------------

    def node_positions(self) -> np.ndarray:
        view = self.positions.view()
        view.flags.writeable = False
        return view

    def edge_triples(self) -> List[Tuple[int, int, float]]:
        return [(e.head, e.tail, e.weight) for e in self._edges]

    # -- topology -----------------------------------------------------------

    def degrees(self) -> np.ndarray:
        """Edge-endpoint count per node (a self-loop counts twice)."""
        n = self.num_nodes
        return (
            np.bincount(self.heads, minlength=n) + np.bincount(self.tails, minlength=n)
        ).astype(np.int64)

    @property
    def avg_degree(self) -> float:
        return 0.0 if self.num_nodes == 0 else 2.0 * self.num_edges / self.num_nodes

    def to_networkx(self) -> nx.MultiGraph:
        """Undirected multigraph keeping parallel edges and self-loops."""
        G = nx.MultiGraph()
        for i in range(self.num_nodes):
            G.add_node(i, pos=tuple(float(c) for c in self.positions[i]))
        for e in self._edges:
            G.add_edge(e.head, e.tail, weight=e.weight, rest_length=e.rest_length)
        return G

    def summary(self) -> dict:
        G = self.to_networkx()
        return {
            "nodes": self.num_nodes,
            "edges": self.num_edges,
            "avg_degree": self.avg_degree,
            "self_loops": nx.number_of_selfloops(G),
            "components": nx.number_connected_components(G) if self.num_nodes else 0,
        }


def _state_array(values, n: int) -> np.ndarray:
    if values is None:
        return np.zeros((n, 3))
    arr = np.array(values, dtype=np.float64).reshape(-1, 3)
    if arr.shape[0] != n:
        raise ValueError(f"state array has {arr.shape[0]} rows, expected {n}")
    return arr


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr
