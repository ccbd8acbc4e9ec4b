import numpy as np
import pytest

from bayeswalk.core.errors import ConfigurationError
from bayeswalk.core.state import ChainState
from bayeswalk.proposals.randomwalk import GaussianRandomWalk, UniformRandomWalk, make_proposal


@pytest.fixture
def current_state():
    return ChainState(position=np.array([[1.0], [-0.5]]), density=0.3)


@pytest.mark.parametrize("proposal_cls", [UniformRandomWalk, GaussianRandomWalk])
@pytest.mark.parametrize("bandwidth", [0.0, -0.5])
def test_non_positive_bandwidth_fails_fast(proposal_cls, bandwidth):
    with pytest.raises(ConfigurationError):
        proposal_cls(bandwidth)


def test_uniform_stays_within_window(current_state):
    proposal = UniformRandomWalk(0.25)
    rng = np.random.default_rng(0)
    for _ in range(500):
        proposed = proposal.sample(current_state, rng)
        assert proposed.position.shape == current_state.position.shape
        assert np.all(np.abs(proposed.position - current_state.position) <= 0.25)


def test_uniform_is_centered_on_current_state():
    proposal = UniformRandomWalk(1.0)
    state = ChainState(position=np.array([[3.0]]))
    rng = np.random.default_rng(1)
    draws = np.array([proposal.sample(state, rng).value for _ in range(20000)])
    assert np.mean(draws) == pytest.approx(3.0, abs=0.02)
    # Var of Uniform[-w, w] is w^2 / 3
    assert np.var(draws) == pytest.approx(1.0 / 3.0, abs=0.02)


def test_gaussian_is_centered_with_bandwidth_sd():
    proposal = GaussianRandomWalk(0.5)
    state = ChainState(position=np.array([[-2.0]]))
    rng = np.random.default_rng(2)
    draws = np.array([proposal.sample(state, rng).value for _ in range(20000)])
    assert np.mean(draws) == pytest.approx(-2.0, abs=0.02)
    assert np.std(draws) == pytest.approx(0.5, abs=0.02)


def test_same_generator_seed_gives_same_candidate(current_state):
    proposal = GaussianRandomWalk(1.0)
    a = proposal.sample(current_state, np.random.default_rng(42))
    b = proposal.sample(current_state, np.random.default_rng(42))
    assert np.array_equal(a.position, b.position)


def test_make_proposal():
    assert isinstance(make_proposal("uniform", 1.0), UniformRandomWalk)
    assert isinstance(make_proposal("normal", 1.0), GaussianRandomWalk)
    assert make_proposal("normal", 2.0).bandwidth == 2.0
    with pytest.raises(ConfigurationError):
        make_proposal("laplace", 1.0)
