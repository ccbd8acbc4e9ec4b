"""
Sampler configuration.

SamplerConfig gathers the arguments of a sampling run and checks them up front,
so an invalid bandwidth or iteration count fails before any random draw is made.
"""

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Union

import numpy as np

from bayeswalk.core.errors import ConfigurationError

PROPOSAL_KINDS = ("uniform", "normal")


def validate_bandwidth(bandwidth: float) -> float:
    """Return the bandwidth as a float, raising ConfigurationError unless it is finite and positive."""
    if isinstance(bandwidth, bool) or not isinstance(bandwidth, Real):
        raise ConfigurationError(f"bandwidth must be a real number, got {bandwidth!r}.")
    if not np.isfinite(bandwidth) or bandwidth <= 0:
        raise ConfigurationError(f"bandwidth must be positive and finite, got {bandwidth}.")
    return float(bandwidth)


def validate_iterations(iterations: int) -> int:
    """Return the iteration count, raising ConfigurationError unless it is a positive integer."""
    if isinstance(iterations, bool) or not isinstance(iterations, Integral):
        raise ConfigurationError(f"iterations must be an integer, got {iterations!r}.")
    if iterations <= 0:
        raise ConfigurationError(f"iterations must be positive, got {iterations}.")
    return int(iterations)


def validate_start(start) -> np.ndarray:
    """Return the start as a float array, raising ConfigurationError unless it is a finite scalar or non-empty 1-D array."""
    try:
        arr = np.asarray(start, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"start must be a real number or a 1-D array, got {start!r}.") from exc
    if arr.ndim > 1 or arr.size == 0:
        raise ConfigurationError(
            f"start must be a real number or a non-empty 1-D array, got shape {arr.shape}."
        )
    if not np.all(np.isfinite(arr)):
        raise ConfigurationError(f"start must be finite, got {start!r}.")
    return arr


def validate_print_iteration(print_iteration: int) -> int:
    """Return the progress interval, raising ConfigurationError unless it is a positive integer."""
    if isinstance(print_iteration, bool) or not isinstance(print_iteration, Integral) or print_iteration <= 0:
        raise ConfigurationError(
            f"print_iteration must be a positive integer, got {print_iteration!r}."
        )
    return int(print_iteration)


@dataclass
class SamplerConfig:
    """
    Arguments of a single Metropolis run.

    Attributes:
        start: Starting state, a real number or a 1-D array for vector chains.
        bandwidth: Proposal half-width (uniform) or standard deviation (normal).
        iterations: Number of iterations, one retained state per iteration.
        proposal: Proposal kind, "uniform" or "normal".
        log_density: Whether the density function returns a log-density.
        print_iteration: Number of iterations between progress log lines.
    """

    start: Union[float, np.ndarray]
    bandwidth: float
    iterations: int
    proposal: str = "uniform"
    log_density: bool = False
    print_iteration: int = 1000

    def __post_init__(self) -> None:
        self.bandwidth = validate_bandwidth(self.bandwidth)
        self.iterations = validate_iterations(self.iterations)

        if self.proposal not in PROPOSAL_KINDS:
            raise ConfigurationError(
                f"proposal must be one of {PROPOSAL_KINDS}, got {self.proposal!r}."
            )

        validate_start(self.start)
        self.print_iteration = validate_print_iteration(self.print_iteration)
