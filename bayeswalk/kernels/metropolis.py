"""
Class file for the Metropolis kernel
"""

# Imports
from typing import Tuple

import numpy as np
from bayeswalk.core.state import ChainState
from bayeswalk.core.kernel import KernelProtocol
from bayeswalk.core.proposal import ProposalProtocol
from bayeswalk.core.density import TargetDensity

class MetropolisKernel(KernelProtocol):
    """
    Metropolis kernel for symmetric random-walk proposals.

    The acceptance probability is min(1, f(x') / f(x)). The proposal density
    cancels because the proposal is symmetric, so there is no Hastings term.
    When f(x) is zero the candidate is always accepted.
    """

    def __init__(self, density: TargetDensity):
        """
        Initialize the Metropolis kernel with a target density.
        """
        self.density = density

    def propose(self, proposal: ProposalProtocol, current_state: ChainState, rng: np.random.Generator) -> ChainState:
        """
        Generate a candidate state from the current state using the proposal.
        """
        # Sample a new position using the proposal
        proposed_position = proposal.sample(current_state, rng).position

        # Evaluate the target at the candidate
        proposed_state = ChainState(position=proposed_position, metadata=dict(current_state.metadata or {}))
        proposed_state.density = self.density.evaluate(proposed_state)

        return proposed_state

    def acceptance_probability(self, current: ChainState, proposed: ChainState) -> float:
        """
        Compute the probability of moving to the proposed state.
        """
        return self.density.ratio(current.density, proposed.density)

    def step(self, proposal: ProposalProtocol, current_state: ChainState, rng: np.random.Generator) -> Tuple[ChainState, bool]:
        """
        One proposal + acceptance cycle.

        Returns the next state and whether the chain moved. A rejected proposal
        returns current_state itself.
        """
        proposed_state = self.propose(proposal, current_state, rng)
        ar = self.acceptance_probability(current_state, proposed_state)

        # Bernoulli(ar) draw
        if ar == 1 or rng.random() < ar:
            next_state, moved = proposed_state, True
        else:
            next_state, moved = current_state, False

        if next_state.metadata is None:
            next_state.metadata = {}
        next_state.metadata['acceptance_probability'] = ar
        next_state.metadata['is_accepted'] = moved
        return next_state, moved
