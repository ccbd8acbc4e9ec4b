"""
Independent multi-chain runs.

Each chain gets its own Generator spawned from one SeedSequence, so chains share
no random state and can be compared with gelman_rubin once they have all
finished.
"""

import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from bayeswalk.core.config import SamplerConfig
from bayeswalk.core.density import DensityProtocol
from bayeswalk.core.errors import ConfigurationError
from bayeswalk.samplers.single_chain import ChainResult, run_chain
from bayeswalk.utils.tools import spawn_generators

logger = logging.getLogger(__name__)


def _chain_starts(start, n_chains: int) -> List:
    """One start per chain: a shared start is repeated, a sequence must have n_chains entries."""
    arr = np.asarray(start, dtype=float)
    if arr.ndim == 0:
        return [float(arr)] * n_chains
    if len(arr) != n_chains:
        raise ConfigurationError(
            f"Expected one start per chain ({n_chains}), got {len(arr)}."
        )
    return [a.item() if a.ndim == 0 else a for a in arr]


def run_chains(start: Union[float, Sequence], bandwidth: float, density_fn: DensityProtocol, iterations: int, n_chains: int = 4, seed: Optional[Union[int, np.random.SeedSequence]] = None, proposal: str = "uniform", log_density: bool = False) -> List[ChainResult]:
    """
    Run several independent Metropolis chains on the same target.

    Parameters
    ----------
    start : float or sequence
        A scalar start shared by all chains, or one start per chain. For
        vector chains pass an (n_chains, d) array.
    bandwidth, density_fn, iterations, proposal, log_density
        As for run_chain.
    n_chains : int
        Number of chains.
    seed : int, SeedSequence or None
        Root seed; chain k always gets the k-th spawned generator.

    Returns
    -------
    results : list of ChainResult
        One result per chain, in chain order.
    """
    if isinstance(n_chains, bool) or not isinstance(n_chains, (int, np.integer)) or n_chains <= 0:
        raise ConfigurationError(f"n_chains must be a positive integer, got {n_chains!r}.")

    starts = _chain_starts(start, n_chains)
    # Validate every chain's arguments before any chain starts sampling
    for chain_start in starts:
        SamplerConfig(start=chain_start, bandwidth=bandwidth, iterations=iterations, proposal=proposal, log_density=log_density)

    generators = spawn_generators(n_chains, seed)

    results = []
    for idx, (chain_start, rng) in enumerate(zip(starts, generators)):
        result = run_chain(chain_start, bandwidth, density_fn, iterations, rng=rng, proposal=proposal, log_density=log_density)
        logger.info(f"chain_{idx}: acceptance rate {result.acceptance_rate:.3f}")
        results.append(result)

    return results
