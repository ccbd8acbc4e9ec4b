"""
Posterior of a normal mean with a normal prior.

Prior mu ~ Normal(0, 1), one observation y = 6.25 with y ~ Normal(mu, 0.75).
The posterior is Normal(4.0, 0.6), so the chain summaries can be checked
against the closed form. Four independent chains are run from dispersed
starting points and compared with the Gelman-Rubin statistic.
"""

import numpy as np

from bayeswalk import diagnose, gelman_rubin, run_chain, run_chains
from bayeswalk.samplers.grid import grid_approximation
from bayeswalk.utils.logging import BayeswalkLogger
from bayeswalk.utils.tools import normal_normal_posterior, normal_normal_target

# Shows progress from the samplers as well as the lines below
logger = BayeswalkLogger.get_logger("bayeswalk")

if __name__ == "__main__":

    target = normal_normal_target(prior_mean=0.0, prior_sd=1.0, observed=6.25, obs_sd=0.75)
    exact = normal_normal_posterior(prior_mean=0.0, prior_sd=1.0, observed=6.25, obs_sd=0.75)

    # Single chain
    result = run_chain(start=4.0, bandwidth=1.0, density_fn=target, iterations=10000, rng=42)
    diagnostics = diagnose(result, burn_in=1000, thin=1)
    logger.info(f"Single chain: mean={diagnostics.mean:.3f}, sd={diagnostics.stddev:.3f}, acceptance={diagnostics.acceptance_rate:.3f}")

    # Multiple chains from dispersed starts
    results = run_chains(start=[-2.0, 2.0, 6.0, 9.0], bandwidth=1.0, density_fn=target, iterations=5000, n_chains=4, seed=7)
    r_hat = gelman_rubin(results, burn_in=1000)
    logger.info(f"Gelman-Rubin over {len(results)} chains: {r_hat:.4f}")

    # Grid approximation
    grid_post = grid_approximation(target, np.linspace(0.0, 8.0, 801))
    logger.info(f"Grid approximation: mean={grid_post.mean:.3f}, sd={grid_post.std:.3f}")

    logger.info(f"Exact posterior: mean={exact.mean():.3f}, sd={exact.std():.3f}")
