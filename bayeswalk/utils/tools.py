"""
Script housing some helper functions
"""

# Imports
import numpy as np
from scipy import stats
from typing import Callable, List, Optional, Sequence, Union

from bayeswalk.core.errors import ConfigurationError

RandomSource = Union[np.random.Generator, np.random.SeedSequence, int, None]


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Turn a random source into a numpy Generator.

    A Generator is returned as is, so the caller keeps control of its stream.
    An int or SeedSequence seeds a new generator, None seeds from OS entropy.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or isinstance(rng, np.random.SeedSequence):
        return np.random.default_rng(rng)
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        if rng < 0:
            raise ConfigurationError(f"Seed must be non-negative, got {rng}.")
        return np.random.default_rng(int(rng))
    raise ConfigurationError(
        f"rng must be a numpy Generator, SeedSequence, int seed or None, got {type(rng).__name__}."
    )


def spawn_generators(n: int, seed: Optional[Union[int, np.random.SeedSequence]] = None) -> List[np.random.Generator]:
    """
    Create n statistically independent generators from one seed.

    Parameters
    ----------
    n : int
        Number of generators, one per chain.
    seed : int, SeedSequence or None
        Root seed. The same seed always gives the same generators.

    Returns
    -------
    generators : list of np.random.Generator
    """
    if n <= 0:
        raise ConfigurationError(f"Number of generators must be positive, got {n}.")
    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in root.spawn(n)]


def posterior_density(prior_pdf: Callable[[float], float], likelihood_fn: Callable[[float], float]) -> Callable[[float], float]:
    """
    Combine a prior density and a likelihood into an unnormalized posterior.

    Returns a callable x -> prior_pdf(x) * likelihood_fn(x).
    """
    def density(x):
        return prior_pdf(x) * likelihood_fn(x)
    return density


def normal_normal_target(prior_mean: float, prior_sd: float, observed: Union[float, Sequence[float]], obs_sd: float) -> Callable[[float], float]:
    """
    Unnormalized posterior of a normal mean with a normal prior and known
    observation noise.

    Parameters
    ----------
    prior_mean, prior_sd : float
        Prior mu ~ Normal(prior_mean, prior_sd).
    observed : float or sequence of float
        Observations y_i ~ Normal(mu, obs_sd).
    obs_sd : float
        Known observation standard deviation.

    Returns
    -------
    density : callable
        mu -> Normal(prior_mean, prior_sd).pdf(mu) * prod_i Normal(mu, obs_sd).pdf(y_i)
    """
    prior = stats.norm(prior_mean, prior_sd)
    y = np.atleast_1d(np.asarray(observed, dtype=float))

    def likelihood(mu):
        return float(np.prod(stats.norm(mu, obs_sd).pdf(y)))

    return posterior_density(prior.pdf, likelihood)


def normal_normal_posterior(prior_mean: float, prior_sd: float, observed: Union[float, Sequence[float]], obs_sd: float):
    """
    Closed-form posterior for normal_normal_target.

    Returns
    -------
    posterior : scipy.stats frozen normal distribution
    """
    y = np.atleast_1d(np.asarray(observed, dtype=float))
    precision = 1.0 / prior_sd**2 + y.size / obs_sd**2
    mean = (prior_mean / prior_sd**2 + np.sum(y) / obs_sd**2) / precision
    return stats.norm(mean, np.sqrt(1.0 / precision))


def beta_binomial_target(alpha: float, beta: float, successes: int, trials: int) -> Callable[[float], float]:
    """
    Unnormalized posterior of a success probability p with a Beta(alpha, beta)
    prior and a Binomial(trials, p) likelihood. Zero outside [0, 1].
    """
    prior = stats.beta(alpha, beta)

    def density(p):
        if not 0.0 <= p <= 1.0:
            return 0.0
        return float(prior.pdf(p) * stats.binom.pmf(successes, trials, p))

    return density


def beta_binomial_posterior(alpha: float, beta: float, successes: int, trials: int):
    """Conjugate posterior Beta(alpha + successes, beta + trials - successes)."""
    if not 0 <= successes <= trials:
        raise ConfigurationError(f"successes must lie in [0, trials], got {successes} of {trials}.")
    return stats.beta(alpha + successes, beta + trials - successes)


def gamma_poisson_target(shape: float, rate: float, counts: Sequence[int]) -> Callable[[float], float]:
    """
    Unnormalized posterior of a Poisson rate with a Gamma(shape, rate) prior.
    Zero for non-positive rates.
    """
    prior = stats.gamma(a=shape, scale=1.0 / rate)
    k = np.atleast_1d(np.asarray(counts))

    def density(lam):
        if lam <= 0.0:
            return 0.0
        return float(prior.pdf(lam) * np.prod(stats.poisson.pmf(k, lam)))

    return density


def gamma_poisson_posterior(shape: float, rate: float, counts: Sequence[int]):
    """Conjugate posterior Gamma(shape + sum(counts), rate + len(counts))."""
    k = np.atleast_1d(np.asarray(counts))
    return stats.gamma(a=shape + np.sum(k), scale=1.0 / (rate + k.size))
