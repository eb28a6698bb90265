import pytest

from randgraph.config import SimConfig
from randgraph.rng import RandomSource


@pytest.fixture
def rng():
    return RandomSource.from_seed(1234)


@pytest.fixture
def small_config():
    return SimConfig(
        num_nodes=30,
        num_edges_min=2,
        num_edges_max=4,
        num_neighbors_min=3,
        num_neighbors_max=6,
        seed=99,
    ).validate()
