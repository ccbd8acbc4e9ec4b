"""Random-walk Metropolis sampling for teaching Bayesian inference."""

import logging

from bayeswalk.core.errors import ConfigurationError
from bayeswalk.samplers import (
    ChainResult,
    GridPosterior,
    MCMCsampler,
    grid_approximation,
    run_chain,
    run_chains,
    sample_grid_posterior,
)
from bayeswalk.utils.post_processing import (
    ChainDiagnostics,
    ChainSummary,
    acceptance_rate,
    chain_effective_sample_size,
    diagnose,
    gelman_rubin,
    summarize,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "ChainResult",
    "MCMCsampler",
    "run_chain",
    "run_chains",
    "GridPosterior",
    "grid_approximation",
    "sample_grid_posterior",
    "ChainSummary",
    "ChainDiagnostics",
    "summarize",
    "diagnose",
    "acceptance_rate",
    "gelman_rubin",
    "chain_effective_sample_size",
]
