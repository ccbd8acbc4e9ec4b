"""
Class file for a single chain Metropolis sampler.
"""

import logging
from typing import NamedTuple, Optional, Union
import numpy as np

from bayeswalk.core.config import SamplerConfig, validate_iterations, validate_print_iteration, validate_start
from bayeswalk.core.density import DensityProtocol, TargetDensity
from bayeswalk.core.kernel import KernelProtocol
from bayeswalk.core.proposal import ProposalProtocol
from bayeswalk.core.state import ChainState, as_position
from bayeswalk.kernels.metropolis import MetropolisKernel
from bayeswalk.proposals.randomwalk import make_proposal
from bayeswalk.utils.tools import RandomSource, resolve_rng

logger = logging.getLogger(__name__)


class ChainResult(NamedTuple):
    """
    Output of a completed run.

    Attributes:
        states (np.ndarray): One state per iteration, shape (N,) for a scalar
            chain and (N, d) for a vector chain. Read-only.
        accepted_count (int): Number of accepted moves.

    Unpacks as ``states, accepted_count = result``.
    """

    states: np.ndarray
    accepted_count: int

    @property
    def iterations(self) -> int:
        return self.states.shape[0]

    @property
    def acceptance_rate(self) -> float:
        return self.accepted_count / self.iterations

    @property
    def samples(self) -> np.ndarray:
        """States in (d, N) format, as expected by autocorrelation and friends."""
        if self.states.ndim == 1:
            return self.states[np.newaxis, :]
        return self.states.T


class MCMCsampler:
    """
    Class for a single chain Metropolis sampler.

    Attributes:
        kernel (KernelProtocol): The transition kernel used for sampling.
        proposal (ProposalProtocol): The proposal distribution used for generating candidate states.
        density (TargetDensity): The target density being sampled.
        initial_state (ChainState): The initial state of the chain.
        n_iterations (int): Number of iterations to run the sampler.
        print_iteration (int): Number of iterations between progress log lines.
        rng (np.random.Generator): Random source owned by this chain.
    """

    def __init__(self, density: TargetDensity, proposal: ProposalProtocol, initial_position: Union[float, np.ndarray], n_iterations: int, rng: RandomSource = None, print_iteration: int = 1000, kernel: Optional[KernelProtocol] = None):

        self.n_iterations = validate_iterations(n_iterations)
        self.density = density
        self.proposal = proposal
        self.kernel = kernel if kernel is not None else MetropolisKernel(density)
        self.rng = resolve_rng(rng)
        self.print_iteration = validate_print_iteration(print_iteration)

        # A scalar start gives a scalar chain
        self.scalar = validate_start(initial_position).ndim == 0
        position = as_position(initial_position)
        self.dim = position.shape[0]
        self.initial_state = ChainState(position=position, metadata={
            'acceptance_probability': 0.0,
            'is_accepted': False,
            'iteration': 0
            })
        self.initial_state.density = density.evaluate(self.initial_state)

    def run(self) -> ChainResult:
        """
        Run the sampler for the configured number of iterations.

        Iteration i+1 always starts from the state produced by iteration i.

        Returns:
        -------
            ChainResult: every retained state, including repeats after
            rejected proposals, and the number of accepted moves.
        """

        current_state = self.initial_state
        samples = np.empty((self.dim, self.n_iterations))
        acceptance_count = 0

        for i in range(1, self.n_iterations + 1):

            current_state, moved = self.kernel.step(self.proposal, current_state, self.rng)
            if moved:
                acceptance_count += 1

            current_state.metadata['iteration'] = i

            # Store the current state
            samples[:, i - 1] = current_state.position[:, 0]

            if i % self.print_iteration == 0:
                logger.debug(f"Iteration {i}/{self.n_iterations}, accepted {acceptance_count}")

        logger.info(f"Finished {self.n_iterations} iterations, acceptance rate {acceptance_count / self.n_iterations:.3f}")

        states = samples[0] if self.scalar else samples.T.copy()
        states.flags.writeable = False
        return ChainResult(states=states, accepted_count=acceptance_count)


def run_chain(start: Union[float, np.ndarray], bandwidth: float, density_fn: DensityProtocol, iterations: int, rng: RandomSource = None, proposal: str = "uniform", log_density: bool = False, print_iteration: int = 1000) -> ChainResult:
    """
    Run one Metropolis chain.

    Parameters
    ----------
    start : float or 1-D array
        Starting state.
    bandwidth : float
        Half-width of the uniform proposal window, or standard deviation when
        proposal="normal". Must be positive.
    density_fn : callable
        Unnormalized posterior density (prior x likelihood). Must return a
        non-negative value, or a log-density when log_density=True.
    iterations : int
        Number of iterations. Must be positive.
    rng : np.random.Generator, int or None
        Random source. An int seeds a fresh generator; None uses OS entropy.
    proposal : str
        "uniform" or "normal".
    log_density : bool
        Whether density_fn returns a log-density.

    Returns
    -------
    ChainResult
        (states, accepted_count) with exactly `iterations` states.

    Raises
    ------
    ConfigurationError
        On invalid bandwidth, iterations or proposal kind (before sampling),
        or when density_fn returns an invalid value.
    """
    config = SamplerConfig(start=start, bandwidth=bandwidth, iterations=iterations, proposal=proposal, log_density=log_density, print_iteration=print_iteration)

    sampler = MCMCsampler(
        density=TargetDensity(density_fn, log=config.log_density),
        proposal=make_proposal(config.proposal, config.bandwidth),
        initial_position=config.start,
        n_iterations=config.iterations,
        rng=rng,
        print_iteration=config.print_iteration,
    )
    return sampler.run()
