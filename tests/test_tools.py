import logging

import numpy as np
import pytest
from scipy import stats

from bayeswalk.core.errors import ConfigurationError
from bayeswalk.samplers.single_chain import run_chain
from bayeswalk.utils.logging import BayeswalkLogger
from bayeswalk.utils.post_processing import summarize
from bayeswalk.utils.tools import (
    beta_binomial_posterior,
    beta_binomial_target,
    gamma_poisson_posterior,
    gamma_poisson_target,
    normal_normal_posterior,
    normal_normal_target,
    posterior_density,
    resolve_rng,
    spawn_generators,
)

# --------------------------------------------------
# Random sources
# --------------------------------------------------
def test_resolve_rng_passes_generator_through():
    rng = np.random.default_rng(0)
    assert resolve_rng(rng) is rng

def test_resolve_rng_from_seed_is_reproducible():
    assert resolve_rng(3).random() == resolve_rng(3).random()
    assert resolve_rng(np.int64(3)).random() == resolve_rng(3).random()
    assert isinstance(resolve_rng(None), np.random.Generator)
    assert isinstance(resolve_rng(np.random.SeedSequence(1)), np.random.Generator)

@pytest.mark.parametrize("bad", [-1, 1.5, "seed", True])
def test_resolve_rng_rejects_bad_sources(bad):
    with pytest.raises(ConfigurationError):
        resolve_rng(bad)

def test_spawn_generators():
    a = [g.random() for g in spawn_generators(3, seed=42)]
    b = [g.random() for g in spawn_generators(3, seed=42)]
    assert a == b
    assert len(set(a)) == 3
    with pytest.raises(ConfigurationError):
        spawn_generators(0)

# --------------------------------------------------
# Densities and conjugate posteriors
# --------------------------------------------------
def test_posterior_density_is_product():
    density = posterior_density(lambda x: 2.0 * x, lambda x: x + 1.0)
    assert density(3.0) == 24.0

def test_normal_normal_target_value():
    f = normal_normal_target(0.0, 1.0, 6.25, 0.75)
    expected = stats.norm(0, 1).pdf(4.0) * stats.norm(4.0, 0.75).pdf(6.25)
    assert f(4.0) == pytest.approx(expected)

def test_normal_normal_posterior_single_observation():
    posterior = normal_normal_posterior(0.0, 1.0, 6.25, 0.75)
    assert posterior.mean() == pytest.approx(4.0)
    assert posterior.std() == pytest.approx(0.6)

def test_normal_normal_posterior_several_observations():
    posterior = normal_normal_posterior(0.0, 1.0, [1.0, 3.0], 1.0)
    assert posterior.mean() == pytest.approx(4.0 / 3.0)
    assert posterior.var() == pytest.approx(1.0 / 3.0)

def test_beta_binomial():
    posterior = beta_binomial_posterior(1, 1, 7, 10)
    assert posterior.args == (8, 4)
    f = beta_binomial_target(1, 1, 7, 10)
    assert f(-0.1) == 0.0
    assert f(1.1) == 0.0
    assert f(0.7) == pytest.approx(stats.binom.pmf(7, 10, 0.7))
    with pytest.raises(ConfigurationError):
        beta_binomial_posterior(1, 1, 11, 10)

def test_gamma_poisson():
    counts = [2, 4, 3]
    posterior = gamma_poisson_posterior(2.0, 1.0, counts)
    assert posterior.mean() == pytest.approx(11.0 / 4.0)
    f = gamma_poisson_target(2.0, 1.0, counts)
    assert f(0.0) == 0.0
    assert f(-1.0) == 0.0
    assert f(3.0) > 0.0

def test_metropolis_recovers_beta_binomial_posterior():
    exact = beta_binomial_posterior(2, 2, 6, 9)
    result = run_chain(0.5, 0.2, beta_binomial_target(2, 2, 6, 9), 20000, rng=17)
    mean, stddev = summarize(result, burn_in=1000)
    assert mean == pytest.approx(exact.mean(), abs=0.02)
    assert stddev == pytest.approx(exact.std(), abs=0.02)

def test_metropolis_recovers_gamma_poisson_posterior():
    counts = [2, 4, 3, 5, 1]
    exact = gamma_poisson_posterior(2.0, 1.0, counts)
    result = run_chain(1.0, 1.0, gamma_poisson_target(2.0, 1.0, counts), 20000, rng=19, proposal="normal")
    mean, stddev = summarize(result, burn_in=1000)
    assert mean == pytest.approx(exact.mean(), abs=0.1)
    assert stddev == pytest.approx(exact.std(), abs=0.1)

# --------------------------------------------------
# Logging
# --------------------------------------------------
def test_logger_adds_single_stream_handler():
    logger = BayeswalkLogger.get_logger("bayeswalk.test_single_handler")
    BayeswalkLogger.get_logger("bayeswalk.test_single_handler")
    assert len(logger.handlers) == 1
    assert logger.propagate is False
    assert logger.level == logging.INFO

def test_logger_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = BayeswalkLogger.get_logger("bayeswalk.test_file_handler", log_file=str(log_file))
    BayeswalkLogger.get_logger("bayeswalk.test_file_handler", log_file=str(log_file))
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1

    logger.info("chain finished")
    file_handlers[0].flush()
    assert "| INFO | bayeswalk.test_file_handler | chain finished" in log_file.read_text()

    for handler in file_handlers:
        logger.removeHandler(handler)
        handler.close()
