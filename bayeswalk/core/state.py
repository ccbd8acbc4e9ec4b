"""
Chain state representation for Metropolis sampling.

This module provides the ChainState dataclass which holds a single position of
a Markov chain together with the target density evaluated there and a small
amount of per-iteration metadata.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union
import numpy as np


def as_position(value: Union[float, np.ndarray]) -> np.ndarray:
    """
    Convert a scalar or 1-D start value into a (d, 1) column vector.

    Examples:
        >>> as_position(4.0).shape
        (1, 1)
        >>> as_position(np.array([1.0, 2.0])).shape
        (2, 1)
    """
    arr = np.asarray(value, dtype=float)
    if arr.ndim == 0:
        return arr.reshape(1, 1)
    if arr.ndim == 1:
        return arr[:, np.newaxis]
    return arr


@dataclass
class ChainState:
    """
    Represents the state of a Markov chain at a single iteration.

    Attributes:
        position (np.ndarray):
            Current position in parameter space. Must have shape (d, 1); a scalar
            parameter is stored with d = 1.

        density (Optional[float]):
            Target density at the position. A plain non-negative plausibility
            score, or a log-density when the target was built with log=True.
            Default: None (not evaluated yet).

        metadata (Optional[Dict[str, Any]]):
            Additional state information such as:
            - 'iteration': Iteration number
            - 'acceptance_probability': Acceptance probability of the last step
            - 'is_accepted': Whether the last proposal was accepted
            Default: empty dict (None allowed).

    Examples:
        >>> state = ChainState(position=np.array([[4.0]]), density=0.02)
        >>> state.value
        4.0
    """

    position: np.ndarray
    """Current position in parameter space (d, 1)."""

    density: Optional[float] = None
    """Target density (or log-density) at the position."""

    metadata: Optional[Dict[str, Any]] = field(default_factory=dict)
    """Per-iteration information: 'iteration', 'acceptance_probability', 'is_accepted'."""

    def __post_init__(self) -> None:
        if not isinstance(self.position, np.ndarray):
            raise TypeError("position must be a numpy.ndarray with shape (d, 1).")
        if self.position.ndim != 2 or self.position.shape[1] != 1:
            raise ValueError(
                f"position must have shape (d, 1), got {self.position.shape}."
            )
        if self.metadata is not None and not isinstance(self.metadata, dict):
            raise TypeError("metadata must be a dict or None.")

    @property
    def dim(self) -> int:
        """Number of coordinates in the position."""
        return self.position.shape[0]

    @property
    def value(self) -> Union[float, np.ndarray]:
        """
        Position in the form handed to the caller's density function: a float
        for one-dimensional chains, a 1-D array otherwise.
        """
        if self.dim == 1:
            return float(self.position[0, 0])
        return self.position[:, 0].copy()

    def __repr__(self) -> str:
        density_str = (
            f"density={self.density:.4g}" if self.density is not None else "density=?"
        )
        meta_str = f", metadata({len(self.metadata)})" if self.metadata else ""
        return f"ChainState(position_shape={self.position.shape}, {density_str}{meta_str})"
