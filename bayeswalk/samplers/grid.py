"""
Grid approximation of a one-dimensional posterior
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np

from bayeswalk.core.density import validate_density_value
from bayeswalk.core.errors import ConfigurationError
from bayeswalk.utils.tools import RandomSource, resolve_rng


@dataclass(frozen=True)
class GridPosterior:
    """
    Posterior evaluated on a grid.

    Attributes:
        grid (np.ndarray): Increasing grid points, shape (n,).
        weights (np.ndarray): Normalized posterior mass per grid point, sums to 1.
    """

    grid: np.ndarray
    weights: np.ndarray

    @property
    def mean(self) -> float:
        return float(np.sum(self.grid * self.weights))

    @property
    def std(self) -> float:
        return float(np.sqrt(np.sum(self.weights * (self.grid - self.mean) ** 2)))

    @property
    def mode(self) -> float:
        return float(self.grid[np.argmax(self.weights)])


def grid_approximation(density_fn: Callable[[float], float], grid) -> GridPosterior:
    """
    Evaluate an unnormalized density on a grid and normalize it.

    Parameters
    ----------
    density_fn : callable
        Non-negative unnormalized posterior density.
    grid : array-like
        Strictly increasing grid points, at least two.

    Returns
    -------
    GridPosterior

    Raises
    ------
    ConfigurationError
        If the grid is invalid, the density returns an invalid value, or the
        density is zero on the whole grid.
    """
    grid = np.asarray(grid, dtype=float)
    if grid.ndim != 1 or grid.size < 2:
        raise ConfigurationError("grid must be a 1-D array with at least two points.")
    if not np.all(np.diff(grid) > 0):
        raise ConfigurationError("grid must be strictly increasing.")

    values = np.array([validate_density_value(density_fn(float(x))) for x in grid])
    total = values.sum()
    if total <= 0:
        raise ConfigurationError("Density is zero on the whole grid.")

    return GridPosterior(grid=grid, weights=values / total)


def sample_grid_posterior(posterior: GridPosterior, n_samples: int, rng: RandomSource = None) -> np.ndarray:
    """
    Draw samples from a grid posterior by weighted resampling of grid points.

    Returns
    -------
    samples : (n_samples,) array
    """
    if n_samples <= 0:
        raise ConfigurationError(f"n_samples must be positive, got {n_samples}.")
    rng = resolve_rng(rng)
    return rng.choice(posterior.grid, size=n_samples, replace=True, p=posterior.weights)
