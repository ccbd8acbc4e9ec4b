"""
Target density interfaces for Metropolis sampling.

This module provides the DensityProtocol that caller-supplied target densities
satisfy, the TargetDensity wrapper that evaluates and validates them, and
validate_density_value, which every evaluation goes through.
"""

from __future__ import annotations

import math
from typing import Protocol, Union, runtime_checkable

import numpy as np

from bayeswalk.core.errors import ConfigurationError
from bayeswalk.core.state import ChainState


@runtime_checkable
class DensityProtocol(Protocol):
    """
    Protocol for unnormalized posterior densities.

    A density is any pure, deterministic callable taking a parameter value
    (a float for one-dimensional chains, a 1-D array otherwise) and returning a
    non-negative plausibility score, typically prior density times likelihood.

    Examples:
        Function::

            from scipy import stats

            def plausibility(mu: float) -> float:
                return stats.norm(0, 1).pdf(mu) * stats.norm(mu, 0.75).pdf(6.25)

        Class::

            class Plausibility:
                def __call__(self, mu: float) -> float:
                    return stats.norm(0, 1).pdf(mu)
    """

    def __call__(self, value: Union[float, np.ndarray]) -> float:
        ...


def validate_density_value(value: float, log: bool = False) -> float:
    """
    Check a density evaluation and return it as a float.

    Args:
        value: Value returned by the caller's density function.
        log: Whether the value is a log-density.

    Returns:
        The value as a Python float.

    Raises:
        ConfigurationError: If the value is not a real scalar, is NaN, is negative
            (plain densities) or is +inf.
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Density must return a real scalar, got {type(value).__name__}."
        ) from exc

    if math.isnan(value):
        raise ConfigurationError("Density returned NaN.")
    if value == math.inf:
        raise ConfigurationError("Density returned +inf.")
    if not log and value < 0.0:
        raise ConfigurationError(
            f"Density must be non-negative everywhere, got {value}."
        )
    return value


class TargetDensity:
    """
    Wraps a caller-supplied density so the kernel can evaluate states and
    compute acceptance probabilities without knowing the density's form.

    Args:
        fn: Density callable (see DensityProtocol).
        log: If True, fn returns a log-density; -inf then stands for zero density.
    """

    def __init__(self, fn: DensityProtocol, log: bool = False):
        if not callable(fn):
            raise ConfigurationError("Target density must be callable.")
        self.fn = fn
        self.log = log

    def __call__(self, value: Union[float, np.ndarray]) -> float:
        return validate_density_value(self.fn(value), log=self.log)

    def evaluate(self, state: ChainState) -> float:
        """Evaluate the density at a state's position."""
        return self(state.value)

    def is_zero(self, density: float) -> bool:
        """Whether an evaluated density means zero plausibility."""
        if self.log:
            return density == -math.inf
        return density == 0.0

    def ratio(self, current: float, proposed: float) -> float:
        """
        Acceptance probability min(1, f(x') / f(x)).

        A zero-density current state always gives 1 so the chain keeps moving.
        """
        if self.is_zero(current):
            return 1.0

        if self.log:
            check = proposed - current
            if check > 0:
                return 1.0
            return float(np.exp(check))

        return min(1.0, proposed / current)
