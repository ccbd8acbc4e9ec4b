"""
Template class file for proposal
"""

# Imports
import numpy as np
from typing import Protocol
from bayeswalk.core.state import ChainState

class ProposalProtocol(Protocol):
    """
    Protocol for symmetric proposal distributions.

    The acceptance step assumes q(x' | x) == q(x | x'), so no Hastings
    correction term is applied. Asymmetric proposals are not supported.
    """

    bandwidth: float

    def sample(self, current_state: 'ChainState', rng: np.random.Generator) -> 'ChainState':
        """Generate candidate state from current state"""
        raise NotImplementedError("Implement sample method")
