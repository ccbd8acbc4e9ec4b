"""
Symmetric random-walk proposals for Metropolis sampling
"""

import numpy as np

from bayeswalk.core.config import validate_bandwidth
from bayeswalk.core.errors import ConfigurationError
from bayeswalk.core.proposal import ProposalProtocol
from bayeswalk.core.state import ChainState


class UniformRandomWalk(ProposalProtocol):
    """Uniform proposal on [x - bandwidth, x + bandwidth] in every coordinate"""

    def __init__(self, bandwidth: float):
        self.bandwidth = validate_bandwidth(bandwidth)

    def sample(self, current_state: ChainState, rng: np.random.Generator) -> ChainState:
        """Generate candidate state from current state"""
        step = rng.uniform(-self.bandwidth, self.bandwidth, size=current_state.position.shape)
        return ChainState(position=current_state.position + step)

    def __repr__(self) -> str:
        return f"UniformRandomWalk(bandwidth={self.bandwidth})"


class GaussianRandomWalk(ProposalProtocol):
    """Normal proposal centered at current state with standard deviation bandwidth"""

    def __init__(self, bandwidth: float):
        self.bandwidth = validate_bandwidth(bandwidth)

    def sample(self, current_state: ChainState, rng: np.random.Generator) -> ChainState:
        """Generate candidate state from current state"""
        step = rng.normal(0.0, self.bandwidth, size=current_state.position.shape)
        return ChainState(position=current_state.position + step)

    def __repr__(self) -> str:
        return f"GaussianRandomWalk(bandwidth={self.bandwidth})"


_PROPOSALS = {
    "uniform": UniformRandomWalk,
    "normal": GaussianRandomWalk,
}


def make_proposal(kind: str, bandwidth: float) -> ProposalProtocol:
    """
    Build a proposal by name.

    Parameters
    ----------
    kind : str
        "uniform" for a uniform window of half-width bandwidth, "normal" for a
        Gaussian step with standard deviation bandwidth.
    bandwidth : float
        Positive proposal scale.
    """
    try:
        proposal_cls = _PROPOSALS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown proposal kind {kind!r}, expected one of {sorted(_PROPOSALS)}."
        ) from None
    return proposal_cls(bandwidth)
