import numpy as np
import pytest

from randgraph.errors import DegenerateDistribution, InvalidParameter
from randgraph.rng import RandomSource, make_rng


def test_same_seed_same_sequence():
    a = RandomSource.from_seed(7)
    b = RandomSource.from_seed(7)
    seq_a = [a.uniform(0, 1), a.normal(0, 1), a.uniform_int(0, 9), a.bernoulli(0.5)]
    seq_b = [b.uniform(0, 1), b.normal(0, 1), b.uniform_int(0, 9), b.bernoulli(0.5)]
    assert seq_a == seq_b


def test_uniform_int_is_inclusive(rng):
    seen = {rng.uniform_int(0, 2) for _ in range(300)}
    assert seen == {0, 1, 2}


def test_uniform_int_rejects_empty_range(rng):
    with pytest.raises(InvalidParameter):
        rng.uniform_int(3, 2)


def test_uniform_stays_in_range(rng):
    draws = [rng.uniform(-2.0, 5.0) for _ in range(500)]
    assert min(draws) >= -2.0
    assert max(draws) < 5.0


@pytest.mark.parametrize("p, expected", [(0.0, False), (1.0, True)])
def test_bernoulli_extremes(rng, p, expected):
    assert all(rng.bernoulli(p) is expected for _ in range(200))


def test_weighted_index_only_hits_positive_weights(rng):
    draws = {rng.weighted_index([0, 3, 0, 1]) for _ in range(300)}
    assert draws == {1, 3}


def test_weighted_index_follows_weights(rng):
    counts = np.bincount([rng.weighted_index([1, 3]) for _ in range(4000)], minlength=2)
    assert abs(counts[1] / 4000 - 0.75) < 0.05


@pytest.mark.parametrize("weights", [[0, 0, 0], []])
def test_weighted_index_degenerate(rng, weights):
    with pytest.raises(DegenerateDistribution):
        rng.weighted_index(weights)


def test_weighted_index_rejects_negative(rng):
    with pytest.raises(InvalidParameter):
        rng.weighted_index([1, -1, 2])


def test_entropy_seed_builds_generator():
    assert isinstance(make_rng(None), np.random.Generator)
