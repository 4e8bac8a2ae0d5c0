import math
import random

import pytest

from algonotes.distributions import BetaDistribution, BetaParams, DirichletDistribution


@pytest.fixture
def rng():
    return random.Random(12345)


@pytest.mark.parametrize("a,b", [(1.0, 1.0), (0.1, 1.0), (1.0, 0.1)])
def test_beta_sample_in_unit_interval(rng, a, b):
    dist = BetaDistribution(a, b)
    for _ in range(200):
        x = dist(rng)
        assert dist.min <= x <= dist.max


def test_beta_defaults():
    dist = BetaDistribution()
    assert (dist.alpha, dist.beta) == (1.0, 1.0)
    assert dist.params == BetaParams()


def test_beta_rejects_non_positive_shape():
    with pytest.raises(ValueError):
        BetaDistribution(0.0, 1.0)
    with pytest.raises(ValueError):
        BetaDistribution(1.0, -2.0)


def test_beta_call_with_params_updates_state(rng):
    dist = BetaDistribution()
    dist(rng, BetaParams(2.0, 3.0))
    assert dist.alpha == 2.0
    assert dist.beta == 3.0


def test_beta_set_params():
    dist = BetaDistribution()
    dist.set_params(BetaParams(4.0, 7.0))
    assert dist.params == BetaParams(4.0, 7.0)


def test_beta_equality():
    assert BetaDistribution(2.0, 3.0) == BetaDistribution(2.0, 3.0)
    assert not BetaDistribution(2.0, 3.0) == BetaDistribution(3.0, 2.0)


def test_beta_str_format():
    assert str(BetaDistribution(0.1, 1.0)) == "~Beta(0.1,1)"


def test_beta_parse_round_trip():
    dist = BetaDistribution(2.5, 0.75)
    assert BetaDistribution.parse(str(dist)) == dist


@pytest.mark.parametrize("text", ["Beta(1,2)", "~Beta(1 2)", "~Beta(a,2)", "~Gamma(1,2)"])
def test_beta_parse_rejects(text):
    with pytest.raises(ValueError):
        BetaDistribution.parse(text)


def test_beta_same_seed_same_draws():
    dist = BetaDistribution(2.0, 3.0)
    first = [dist(random.Random(7)) for _ in range(3)]
    second = [dist(random.Random(7)) for _ in range(3)]
    assert first == second


def test_beta_symmetric_mean(rng):
    dist = BetaDistribution(3.0, 3.0)
    mean = sum(dist(rng) for _ in range(20000)) / 20000
    assert abs(mean - 0.5) < 0.02


@pytest.mark.parametrize(
    "alphas",
    [
        10,
        [0.1] * 8,
        [10.0] * 8,
        [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8],
    ],
)
def test_dirichlet_sums_to_one(rng, alphas):
    dist = DirichletDistribution(alphas)
    xs = dist(rng)
    expected_size = alphas if isinstance(alphas, int) else len(alphas)
    assert len(xs) == expected_size
    assert math.isclose(sum(xs), 1.0, rel_tol=1e-9)
    assert all(0.0 <= v <= 1.0 for v in xs)


def test_dirichlet_size_default_alphas():
    dist = DirichletDistribution(4)
    assert dist.size == 4
    assert dist.alphas == (1.0, 1.0, 1.0, 1.0)


def test_dirichlet_set_params_length_mismatch():
    dist = DirichletDistribution(3)
    with pytest.raises(ValueError):
        dist.set_params([1.0, 2.0])


def test_dirichlet_rejects_bad_alphas():
    with pytest.raises(ValueError):
        DirichletDistribution([1.0, 0.0])
    with pytest.raises(ValueError):
        DirichletDistribution(0)
    with pytest.raises(ValueError):
        DirichletDistribution([])


def test_dirichlet_call_with_alphas_updates_state(rng):
    dist = DirichletDistribution(3)
    dist(rng, [2.0, 3.0, 4.0])
    assert dist.alphas == (2.0, 3.0, 4.0)


def test_dirichlet_equality():
    assert DirichletDistribution(3) == DirichletDistribution([1.0, 1.0, 1.0])
    assert not DirichletDistribution(3) == DirichletDistribution([1.0, 2.0, 1.0])