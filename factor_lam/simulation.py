"""
simulation.py - Synthetic Stationary Factor Series

Generates series with a known latent factor structure so the estimator can
be checked against ground truth.

Mathematical Background:
-----------------------
    Y_t = A f_t + e_t
    f_{j,t} = phi_j f_{j,t-1} + u_{j,t},    u ~ N(0, 1),  |phi_j| < 1
    e_{i,t} ~ N(0, sigma_i^2)  (white noise)

Serially correlated factors carry all the autocovariance at lags k >= 1;
the white idiosyncratic term only enters the lag-0 covariance. This is the
setting in which the cumulative covariance recovers span(A).

Example Usage:
-------------
    >>> import numpy as np
    >>> from factor_lam.simulation import FactorSeriesSimulator
    >>>
    >>> rng = np.random.default_rng(42)
    >>> A = rng.standard_normal((30, 3))
    >>> simulator = FactorSeriesSimulator(A, ar_coefficients=[0.9, 0.7, 0.5],
    ...                                   noise_std=0.5, rng=rng)
    >>> results = simulator.simulate(n_periods=500)
    >>> Y = results["series"]                    # (500, 30)
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Union

import numpy as np
from loguru import logger

from .covariance import _check_count
from .exceptions import DomainError, ShapeError


# =============================================================================
# SERIES SIMULATOR
# =============================================================================

class FactorSeriesSimulator:
    """
    Simulator for stationary AR(1) factor series.

    Parameters
    ----------
    loadings : np.ndarray
        Loading matrix A with shape (n, r).
    ar_coefficients : sequence of float
        One AR(1) coefficient per factor, each strictly inside (-1, 1).
    noise_std : float or sequence of float, default=1.0
        Idiosyncratic standard deviation, scalar or one per variable.
    rng : np.random.Generator, optional
        Random number generator. If None, creates a new default RNG.
    burn_in : int, default=100
        Number of initial AR draws discarded so the factors start close to
        their stationary distribution.

    Examples
    --------
    >>> simulator = FactorSeriesSimulator(A, [0.8, 0.5], noise_std=0.3, rng=rng)
    >>> results = simulator.simulate(n_periods=200)
    >>> results["common_component"].shape
    (200, n)
    """

    def __init__(
        self,
        loadings: np.ndarray,
        ar_coefficients: Sequence[float],
        noise_std: Union[float, Sequence[float]] = 1.0,
        rng: Optional[np.random.Generator] = None,
        burn_in: int = 100,
    ):
        loadings = np.asarray(loadings, dtype=float)
        if loadings.ndim != 2:
            raise ShapeError(f"loadings must be 2D (n, r), got shape {loadings.shape}")

        n, r = loadings.shape
        phi = np.asarray(ar_coefficients, dtype=float)
        if phi.shape != (r,):
            raise ShapeError(f"Expected {r} AR coefficients, got shape {phi.shape}")
        if np.any(np.abs(phi) >= 1):
            raise DomainError(f"AR coefficients must satisfy |phi| < 1, got {phi.tolist()}")

        sigma = np.broadcast_to(np.asarray(noise_std, dtype=float), (n,)).copy()
        if np.any(sigma < 0):
            raise DomainError("noise_std must be non-negative")

        if burn_in < 0:
            raise DomainError(f"burn_in must be >= 0, got {burn_in}")

        self.loadings = loadings
        self.ar_coefficients = phi
        self.noise_std = sigma
        self.burn_in = int(burn_in)
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def n_variables(self) -> int:
        return self.loadings.shape[0]

    @property
    def n_factors(self) -> int:
        return self.loadings.shape[1]

    def simulate(self, n_periods: int) -> Dict[str, np.ndarray]:
        """
        Simulate a series from the factor model.

        Parameters
        ----------
        n_periods : int
            Number of observations T to return.

        Returns
        -------
        Dict[str, np.ndarray]
            - "series": (T, n) observed series
            - "factors": (T, r) latent AR(1) factors
            - "common_component": (T, n) factors @ loadings.T
            - "noise": (T, n) idiosyncratic noise
        """
        T = _check_count(n_periods, "n_periods")
        total = T + self.burn_in

        innovations = self.rng.standard_normal((total, self.n_factors))
        factors = np.empty_like(innovations)
        factors[0] = innovations[0]
        for t in range(1, total):
            factors[t] = self.ar_coefficients * factors[t - 1] + innovations[t]
        factors = factors[self.burn_in:]

        noise = self.rng.standard_normal((T, self.n_variables)) * self.noise_std
        common = factors @ self.loadings.T

        logger.debug(
            f"Simulated factor series: T={T}, n={self.n_variables}, r={self.n_factors}"
        )

        return {
            "series": common + noise,
            "factors": factors,
            "common_component": common,
            "noise": noise,
        }


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def simulate_factor_series(
    n_periods: int,
    n_variables: int,
    n_factors: int,
    ar_coefficient: float = 0.8,
    noise_std: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, np.ndarray]:
    """
    Simulate a factor series with random N(0, 1) loadings.

    Parameters
    ----------
    n_periods : int
        Number of observations T.
    n_variables : int
        Number of observed variables n.
    n_factors : int
        Number of latent factors r.
    ar_coefficient : float, default=0.8
        AR(1) coefficient shared by all factors.
    noise_std : float, default=1.0
        Idiosyncratic standard deviation.
    rng : np.random.Generator, optional
        Random number generator.

    Returns
    -------
    Dict[str, np.ndarray]
        Same keys as ``FactorSeriesSimulator.simulate`` plus "loadings".

    Examples
    --------
    >>> results = simulate_factor_series(400, 30, 3, rng=rng)
    >>> Y = results["series"]
    """
    n = _check_count(n_variables, "n_variables")
    r = _check_count(n_factors, "n_factors")

    if rng is None:
        rng = np.random.default_rng()

    loadings = rng.standard_normal((n, r))
    simulator = FactorSeriesSimulator(
        loadings,
        ar_coefficients=np.full(r, ar_coefficient),
        noise_std=noise_std,
        rng=rng,
    )
    results = simulator.simulate(n_periods)
    results["loadings"] = loadings
    return results
