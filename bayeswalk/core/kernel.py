"""
Template class file for the kernel
"""

# Imports
from typing import Protocol, Tuple
import numpy as np
from bayeswalk.core.state import ChainState
from bayeswalk.core.proposal import ProposalProtocol

class KernelProtocol(Protocol):
    """
    Protocol for MCMC transition kernels.
    """

    def propose(self, proposal: ProposalProtocol, state: 'ChainState', rng: np.random.Generator) -> 'ChainState':
        """Generate candidate state from current state"""
        raise NotImplementedError("Implement propose method")

    def acceptance_probability(self, current: 'ChainState', proposed: 'ChainState') -> float:
        """Compute the probability of moving to the proposed state"""
        raise NotImplementedError("Implement acceptance_probability method")

    def step(self, proposal: ProposalProtocol, state: 'ChainState', rng: np.random.Generator) -> Tuple['ChainState', bool]:
        """Run one proposal + acceptance cycle, returning the next state and whether it moved"""
        raise NotImplementedError("Implement step method")
