import pytest
import numpy as np

from bayeswalk.core.errors import ConfigurationError
from bayeswalk.samplers.multi_chain import run_chains
from bayeswalk.samplers.single_chain import run_chain
from bayeswalk.utils.post_processing import gelman_rubin
from bayeswalk.utils.tools import normal_normal_target, spawn_generators

@pytest.fixture
def target():
    return normal_normal_target(0.0, 1.0, 6.25, 0.75)

def test_run_chains_returns_one_result_per_chain(target):
    results = run_chains(4.0, 1.0, target, 500, n_chains=3, seed=1)
    assert len(results) == 3
    for result in results:
        assert len(result.states) == 500
        assert 0 <= result.accepted_count <= 500

def test_run_chains_is_reproducible(target):
    a = run_chains(4.0, 1.0, target, 300, n_chains=2, seed=11)
    b = run_chains(4.0, 1.0, target, 300, n_chains=2, seed=11)
    for ra, rb in zip(a, b):
        assert np.array_equal(ra.states, rb.states)

def test_chains_use_independent_generators(target):
    results = run_chains(4.0, 1.0, target, 300, n_chains=2, seed=11)
    assert not np.array_equal(results[0].states, results[1].states)

def test_chain_k_matches_kth_spawned_generator(target):
    results = run_chains(4.0, 1.0, target, 200, n_chains=3, seed=5)
    generators = spawn_generators(3, 5)
    single = run_chain(4.0, 1.0, target, 200, rng=generators[2])
    assert np.array_equal(results[2].states, single.states)

def test_one_start_per_chain(target):
    results = run_chains([-2.0, 4.0, 10.0], 1.0, target, 100, n_chains=3, seed=0)
    # first proposal is drawn around each start
    assert abs(results[0].states[0] + 2.0) <= 1.0
    assert abs(results[2].states[0] - 10.0) <= 1.0

def test_overdispersed_starts_converge(target):
    results = run_chains([-3.0, 1.0, 6.0, 9.0], 1.0, target, 5000, n_chains=4, seed=21)
    assert gelman_rubin(results, burn_in=1000) == pytest.approx(1.0, abs=0.05)

def test_vector_chains():
    density = lambda x: np.exp(-0.5 * np.sum(x**2))
    starts = np.array([[0.0, 0.0], [1.0, -1.0]])
    results = run_chains(starts, 0.5, density, 100, n_chains=2, seed=3, proposal="normal")
    assert results[0].states.shape == (100, 2)

def test_start_count_mismatch(target):
    with pytest.raises(ConfigurationError):
        run_chains([0.0, 1.0], 1.0, target, 100, n_chains=3)

@pytest.mark.parametrize("n_chains", [0, -1, 2.0])
def test_invalid_chain_count(target, n_chains):
    with pytest.raises(ConfigurationError):
        run_chains(0.0, 1.0, target, 100, n_chains=n_chains)

def test_configuration_error_before_any_chain_runs():
    calls = []

    def density(x):
        calls.append(x)
        return 1.0

    with pytest.raises(ConfigurationError):
        run_chains(0.0, 0.0, density, 100, n_chains=2, seed=0)
    assert calls == []
