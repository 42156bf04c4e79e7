"""
covariance.py - Lagged and Cumulative Autocovariance Matrices
=============================================================

Builds the matrix whose leading eigenvectors span the factor loading space:

    M_k = 1/(T-k) * Y[k:].T @ Y[:T-k]         (lag-k cross-covariance)
    S   = sum_{k=1}^{k0} M_k @ M_k.T          (cumulative covariance)

M_k correlates the variables at time t+k with the variables at time t and is
in general not symmetric. Squaring each term makes S symmetric positive
semi-definite whatever the M_k look like, and white idiosyncratic noise
contributes nothing to M_k for k >= 1 in population.
"""

from __future__ import annotations

from numbers import Integral

import numpy as np
from loguru import logger

from .exceptions import DomainError, ShapeError


# =============================================================================
# INPUT HELPERS
# =============================================================================

def _as_series(series) -> np.ndarray:
    """View ``series`` as a 2D float array without copying or mutating it."""
    Y = np.asarray(series, dtype=float)
    if Y.ndim != 2:
        raise ShapeError(f"series must be a 2D (T, n) array, got shape {Y.shape}")
    return Y


def _check_count(value, name: str) -> int:
    """Ensure ``value`` is a positive integer (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise DomainError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise DomainError(f"{name} must be >= 1, got {name}={value}")
    return int(value)


# =============================================================================
# COVARIANCE MATRICES
# =============================================================================

def lagged_cross_covariance(series, k: int) -> np.ndarray:
    """
    Lag-k sample cross-covariance of a (T, n) series.

    Parameters
    ----------
    series : array-like (T, n)
        Observed series, T observations of n variables.
    k : int
        Lag, 1 <= k < T.

    Returns
    -------
    M_k : ndarray (n, n)
        ``Y[k:].T @ Y[:T-k] / (T - k)``. Not symmetric in general.

    Raises
    ------
    ShapeError
        If series is not 2D or k >= T.
    DomainError
        If k is not a positive integer.
    """
    Y = _as_series(series)
    k = _check_count(k, "k")
    T = Y.shape[0]
    if k >= T:
        raise ShapeError(f"lag must be < T={T}, got k={k}")

    return (Y[k:].T @ Y[:T - k]) / (T - k)


def cumulative_covariance(series, k0: int) -> np.ndarray:
    """
    Cumulative covariance matrix S over lags 1..k0.

    Parameters
    ----------
    series : array-like (T, n)
        Observed series.
    k0 : int
        Number of lags to accumulate, 1 <= k0 < T.

    Returns
    -------
    S : ndarray (n, n)
        Symmetric positive semi-definite matrix ``sum_k M_k @ M_k.T``.

    Raises
    ------
    ShapeError
        If series is not 2D or k0 >= T.
    DomainError
        If k0 is not a positive integer.
    """
    Y = _as_series(series)
    k0 = _check_count(k0, "k0")
    T, n = Y.shape
    if k0 >= T:
        raise ShapeError(f"k0 must be < T={T}, got k0={k0}")

    S = np.zeros((n, n))
    for k in range(1, k0 + 1):
        M = lagged_cross_covariance(Y, k)
        S += M @ M.T

    # Remove round-off asymmetry before the symmetric solver sees it
    S = 0.5 * (S + S.T)
    logger.debug(f"Cumulative covariance built | n={n}, k0={k0}, trace={np.trace(S):.4g}")
    return S
