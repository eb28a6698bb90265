from pathlib import Path

import pytest

from randgraph.config import SimConfig, config_from_mapping, load_config
from randgraph.errors import InvalidParameter

ROOT = Path(__file__).resolve().parents[1]


def test_defaults_validate():
    cfg = SimConfig().validate()
    assert cfg.num_nodes == 100
    assert cfg.edge_weight_max == pytest.approx(0.1)
    assert cfg.initial_model == "watts_strogatz"


def test_shipped_default_yaml_matches_defaults():
    assert load_config(ROOT / "config" / "default.yaml") == SimConfig()


def test_load_run_section(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("run:\n  num_nodes: 12\n  noise_norm: 0\n  seed: 5\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.num_nodes == 12
    assert cfg.noise_norm == 0.0
    assert isinstance(cfg.noise_norm, float)
    assert cfg.seed == 5


def test_load_top_level_mapping(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("delta_time: 0.05\nallow_self_loops: false\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.delta_time == pytest.approx(0.05)
    assert cfg.allow_self_loops is False


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == SimConfig()


def test_unknown_key_rejected():
    with pytest.raises(InvalidParameter, match="num_nodez"):
        config_from_mapping({"num_nodez": 3})


def test_null_only_allowed_for_seed():
    with pytest.raises(InvalidParameter):
        config_from_mapping({"num_nodes": None})
    assert config_from_mapping({"seed": None}).seed is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"num_nodes": -1},
        {"edge_prob_max": 1.5},
        {"edge_prob_min": 0.5, "edge_prob_max": 0.1},
        {"rewire_prob_min": -0.1},
        {"num_edges_min": 0},
        {"num_neighbors_min": 30, "num_neighbors_max": 20},
        {"edge_weight_min": 1.0, "edge_weight_max": 0.5},
        {"radius_std": -1.0},
        {"noise_norm": -2.0},
        {"delta_time": 0.0},
        {"initial_model": "lattice"},
    ],
)
def test_invalid_values(overrides):
    with pytest.raises(InvalidParameter):
        SimConfig().replace(**overrides)


def test_replace_returns_new_value():
    base = SimConfig()
    changed = base.replace(num_nodes=7)
    assert changed.num_nodes == 7
    assert base.num_nodes == 100


# ---------------------------------------------------------------------------
# value types

@pytest.mark.parametrize(
    "raw",
    [
        {"allow_self_loops": "false"},
        {"uniform_sphere": 1},
        {"num_nodes": 10.7},
        {"num_nodes": "lots"},
        {"num_nodes": True},
        {"noise_norm": "strong"},
        {"noise_norm": [1, 2]},
        {"seed": 2.5},
        {"initial_model": 3},
    ],
)
def test_wrongly_typed_values_rejected(raw):
    with pytest.raises(InvalidParameter):
        config_from_mapping(raw)


def test_whole_floats_accepted_for_int_fields():
    cfg = config_from_mapping({"num_nodes": 12.0, "seed": 3.0})
    assert cfg.num_nodes == 12 and isinstance(cfg.num_nodes, int)
    assert cfg.seed == 3


def test_numeric_strings_accepted_for_float_fields():
    # PyYAML reads 1e-3 as a string
    assert config_from_mapping({"delta_time": "1e-3"}).delta_time == pytest.approx(0.001)
    assert config_from_mapping({"noise_norm": 2}).noise_norm == 2.0


def test_non_mapping_file_rejected(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(InvalidParameter):
        load_config(path)
