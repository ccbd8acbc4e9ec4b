from bayeswalk.samplers.grid import GridPosterior, grid_approximation, sample_grid_posterior
from bayeswalk.samplers.multi_chain import run_chains
from bayeswalk.samplers.single_chain import ChainResult, MCMCsampler, run_chain

__all__ = [
    "ChainResult",
    "MCMCsampler",
    "run_chain",
    "run_chains",
    "GridPosterior",
    "grid_approximation",
    "sample_grid_posterior",
]
