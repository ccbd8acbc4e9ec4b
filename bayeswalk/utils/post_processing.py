"""Markov chain summaries and convergence diagnostics.

Every function works on a completed chain: either a ChainResult or the raw
array of states, shape (N,) for scalar chains or (N, d) for vector chains.
autocorrelation and effective_sample_size use the (d, N) layout.
"""
import numpy as np

from typing import NamedTuple, Sequence, Tuple, Union

from bayeswalk.core.errors import ConfigurationError
from bayeswalk.samplers.single_chain import ChainResult

Chain = Union[ChainResult, np.ndarray, Sequence[float]]


class ChainSummary(NamedTuple):
    """Mean and sample standard deviation of a trimmed chain."""
    mean: Union[float, np.ndarray]
    stddev: Union[float, np.ndarray]


class ChainDiagnostics(NamedTuple):
    """Summary of a trimmed chain plus the acceptance rate of the raw chain."""
    mean: Union[float, np.ndarray]
    stddev: Union[float, np.ndarray]
    acceptance_rate: float
    n_retained: int


def _states(chain: Chain) -> np.ndarray:
    if isinstance(chain, ChainResult):
        return chain.states
    states = np.asarray(chain, dtype=float)
    if states.ndim not in (1, 2):
        raise ConfigurationError(
            f"chain must have shape (N,) or (N, d), got {states.shape}."
        )
    return states


def discard_burn_in_and_thin(chain: Chain, burn_in: int = 0, thin: int = 1) -> np.ndarray:
    """
    Drop the first burn_in states, then keep every thin-th state.

    Parameters
    ----------
    chain : ChainResult or array
        Completed chain.
    burn_in : int
        Number of leading samples to discard. Default is 0.
    thin : int
        Keep every thin-th sample. Default is 1 (keep all).

    Returns
    -------
    retained : np.ndarray
        chain[burn_in::thin]
    """
    states = _states(chain)

    if isinstance(burn_in, bool) or not isinstance(burn_in, (int, np.integer)) or burn_in < 0:
        raise ConfigurationError(f"burn_in must be a non-negative integer, got {burn_in!r}.")
    if isinstance(thin, bool) or not isinstance(thin, (int, np.integer)) or thin < 1:
        raise ConfigurationError(f"thin must be a positive integer, got {thin!r}.")

    retained = states[burn_in::thin]
    if retained.shape[0] == 0:
        raise ConfigurationError(
            f"burn_in={burn_in} leaves no samples from a chain of length {states.shape[0]}."
        )
    return retained


def summarize(chain: Chain, burn_in: int = 0, thin: int = 1) -> ChainSummary:
    """
    Mean and sample standard deviation (ddof=1) of the trimmed chain.

    Vector chains give per-coordinate arrays. A single retained sample has
    standard deviation 0.
    """
    retained = discard_burn_in_and_thin(chain, burn_in, thin)
    mean = np.mean(retained, axis=0)
    if retained.shape[0] > 1:
        stddev = np.std(retained, axis=0, ddof=1)
    else:
        stddev = np.zeros_like(mean)

    if retained.ndim == 1:
        return ChainSummary(mean=float(mean), stddev=float(stddev))
    return ChainSummary(mean=mean, stddev=stddev)


def acceptance_rate(result: ChainResult) -> float:
    """Accepted moves over total iterations of the raw, untrimmed chain."""
    return result.accepted_count / result.iterations


def diagnose(result: ChainResult, burn_in: int = 0, thin: int = 1) -> ChainDiagnostics:
    """Summary of the trimmed chain together with the raw acceptance rate."""
    retained = discard_burn_in_and_thin(result, burn_in, thin)
    summary = summarize(result, burn_in, thin)
    return ChainDiagnostics(
        mean=summary.mean,
        stddev=summary.stddev,
        acceptance_rate=acceptance_rate(result),
        n_retained=retained.shape[0],
    )


def autocorrelation(samples: np.ndarray, maxlag: int = 100, step: int = 1) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the autocorrelation of a set of samples

    Parameters
    ----------
    samples : np.ndarray
        The samples to compute the autocorrelation for. Should be of shape (n_dim, n_samples).
    maxlag : int
        The maximum lag to compute the autocorrelation for (exclusive).
    step : int
        The step size for the lag. Default is 1.

    Returns
    -------
    lags : np.ndarray
        The lags for which the autocorrelation is computed.
    autos : np.ndarray
        The autocorrelation values for each dimension at each lag, shape (n_dim, n_lags).
    """
    if not isinstance(samples, np.ndarray) or samples.ndim != 2:
        raise ValueError("Samples should be a 2D numpy array.")
    if samples.shape[0] > samples.shape[1]:
        raise ValueError("Samples should be in the format (d, N), where d is the number of dimensions and N is the number of samples.")

    ndim, nsamples = samples.shape
    maxlag = min(maxlag, nsamples)

    centered = samples - np.mean(samples, axis=1, keepdims=True)

    # Denominator is the (unnormalized) variance
    denominator = np.sum(centered**2, axis=1)
    if np.any(denominator == 0):
        raise ValueError("Autocorrelation is undefined for a constant chain.")

    lags = np.arange(0, maxlag, step)
    autos = np.zeros((ndim, len(lags)))
    for zz, lag in enumerate(lags):
        # covariance between all samples *lag apart*
        autos[:, zz] = np.sum(centered[:, :nsamples - lag] * centered[:, lag:], axis=1) / denominator

    return lags, autos


def effective_sample_size(auto_corrs: np.ndarray, n_samples: int) -> float:
    """
    Estimate the effective sample size from autocorrelations at lags 0, 1, 2, ...

    Parameters
    ----------
    auto_corrs : np.ndarray
        Autocorrelation values of one dimension at consecutive lags starting
        at 0, as returned by autocorrelation with step=1.
    n_samples : int
        Length of the chain the autocorrelations were computed from.

    Returns
    -------
    ess : float
        The effective sample size.
    """
    if isinstance(n_samples, bool) or not isinstance(n_samples, (int, np.integer)) or n_samples <= 0:
        raise ConfigurationError(f"n_samples must be a positive integer, got {n_samples!r}.")
    auto_corrs = np.asarray(auto_corrs, dtype=float)

    # truncate the sum at first negative autocorrelation
    negative = np.where(auto_corrs < 0)[0]
    first_negative = negative[0] if len(negative) > 0 else len(auto_corrs)

    # lag 0 is 1 by definition and enters the denominator once
    tau = 1 + 2 * np.sum(auto_corrs[1:first_negative])
    return float(n_samples / tau)


def chain_effective_sample_size(chain: Chain, maxlag: int = 100, burn_in: int = 0, thin: int = 1) -> Union[float, np.ndarray]:
    """
    Effective sample size of a trimmed chain.

    Autocorrelations are taken at every lag below maxlag and the ESS is
    scaled by the number of retained states.

    Returns
    -------
    ess : float, or array of shape (d,) for vector chains
    """
    retained = discard_burn_in_and_thin(chain, burn_in, thin)
    samples = retained[np.newaxis, :] if retained.ndim == 1 else retained.T
    n_samples = samples.shape[1]

    _, autos = autocorrelation(samples, maxlag=maxlag, step=1)
    ess = np.array([effective_sample_size(autos[k], n_samples) for k in range(samples.shape[0])])
    return float(ess[0]) if retained.ndim == 1 else ess


def gelman_rubin(chains: Sequence[Chain], burn_in: int = 0, thin: int = 1) -> Union[float, np.ndarray]:
    """
    Gelman-Rubin potential scale reduction factor for independent chains.

    All chains are trimmed, then truncated to the shortest one. Values close
    to 1 indicate the chains agree.

    Parameters
    ----------
    chains : sequence of ChainResult or arrays
        At least two independent chains on the same target.

    Returns
    -------
    r_hat : float, or array of shape (d,) for vector chains
    """
    if len(chains) < 2:
        raise ConfigurationError("gelman_rubin needs at least two chains.")

    trimmed = [discard_burn_in_and_thin(c, burn_in, thin) for c in chains]
    L = min(t.shape[0] for t in trimmed)
    if L < 2:
        raise ConfigurationError("gelman_rubin needs at least two samples per chain.")

    # shape (J, L) or (J, L, d)
    stacked = np.stack([t[:L] for t in trimmed])
    J = stacked.shape[0]

    chain_mean = np.mean(stacked, axis=1)
    grand_mean = np.mean(chain_mean, axis=0)

    B = L / (J - 1) * np.sum((chain_mean - grand_mean) ** 2, axis=0)
    W = np.mean(np.var(stacked, axis=1, ddof=1), axis=0)
    if np.any(W == 0):
        raise ConfigurationError("gelman_rubin is undefined when a chain has zero variance.")

    var_hat = (L - 1) / L * W + B / L
    r_hat = np.sqrt(var_hat / W)

    if np.ndim(r_hat) == 0:
        return float(r_hat)
    return r_hat
