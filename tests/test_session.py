import numpy as np
import pytest

from randgraph.config import SimConfig
from randgraph.errors import DegenerateDistribution, InvalidParameter
from randgraph.graph.models import BarabasiAlbert, ErdosRenyi, WattsStrogatz, draw_model, resolve_kind
from randgraph.session import Simulation


def test_start_uses_initial_model(small_config):
    sim = Simulation(small_config)
    g = sim.start()
    assert isinstance(sim.model, WattsStrogatz)
    assert g is sim.graph
    assert g.num_nodes == small_config.num_nodes
    assert g.num_edges == small_config.num_nodes * sim.model.num_neighbors


def test_drawn_parameters_stay_in_bounds(small_config, rng):
    for _ in range(50):
        er = draw_model("e", small_config, rng)
        ba = draw_model("b", small_config, rng)
        ws = draw_model("w", small_config, rng)
        assert small_config.edge_prob_min <= er.edge_prob <= small_config.edge_prob_max
        assert small_config.num_edges_min <= ba.num_edges <= small_config.num_edges_max
        assert small_config.num_neighbors_min <= ws.num_neighbors <= small_config.num_neighbors_max
        assert small_config.rewire_prob_min <= ws.rewire_prob <= small_config.rewire_prob_max


def test_unknown_model_kind(small_config, rng):
    with pytest.raises(InvalidParameter):
        draw_model("lattice", small_config, rng)
    assert resolve_kind("barabasi_albert") == "barabasi_albert"


def test_switching_models_replaces_graph():
    sim = Simulation(SimConfig(num_nodes=100, seed=3))
    sim.select("w")
    for _ in range(5):
        sim.advance()

    g = sim.select("b")
    m = sim.model.num_edges
    assert isinstance(sim.model, BarabasiAlbert)
    assert g.num_nodes == 100
    assert g.num_edges == m * (m - 1) // 2 + (100 - m) * m
    assert int(max(g.heads.max(), g.tails.max())) < 100

    g = sim.select("e")
    assert isinstance(sim.model, ErdosRenyi)
    assert g.num_nodes == 100
    assert sim.ticks == 0


def test_regeneration_shrinks_node_count():
    sim = Simulation(SimConfig(num_nodes=100, seed=4))
    sim.select("w")
    sim.config = sim.config.replace(num_nodes=10, num_neighbors_min=2, num_neighbors_max=3)
    g = sim.select("w")
    assert g.num_nodes == 10
    assert np.all(g.heads < 10) and np.all(g.tails < 10)


def test_failed_generation_keeps_previous_graph():
    cfg = SimConfig(num_nodes=20, num_edges_min=1, num_edges_max=1, seed=1)
    sim = Simulation(cfg)
    before = sim.select("e")
    with pytest.raises(DegenerateDistribution):
        sim.select("b")
    assert sim.graph is before
    assert isinstance(sim.model, ErdosRenyi)


def test_handle_key(small_config):
    sim = Simulation(small_config)
    sim.start()
    g = sim.graph
    assert sim.handle_key("x") is False
    assert sim.graph is g
    assert sim.handle_key("e") is True
    assert isinstance(sim.model, ErdosRenyi)
    assert sim.graph is not g


def test_advance_moves_nodes(small_config):
    sim = Simulation(small_config)
    sim.start()
    before = sim.graph.positions.copy()
    sim.advance()
    sim.advance(dt=0.05)
    assert sim.ticks == 2
    assert not np.allclose(before, sim.graph.positions)


def test_same_seed_same_run(small_config):
    a, b = Simulation(small_config), Simulation(small_config)
    for sim in (a, b):
        sim.start()
        for _ in range(10):
            sim.advance()
    np.testing.assert_array_equal(a.graph.positions, b.graph.positions)


def test_status_lines(small_config):
    sim = Simulation(small_config)
    assert sim.status_lines() == ["e: Erdos Renyi", "b: Barabasi Albert", "w: Watts Strogatz"]
    sim.start()
    lines = sim.status_lines()
    assert lines[0] == "Watts Strogatz"
    assert lines[1].startswith("Num Neighbors: ")
    assert lines[2].startswith("Rewire Prob: ")
