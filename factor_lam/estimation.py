"""
estimation.py - Cumulative-Covariance Factor Estimator
======================================================

Estimates a factor model for a stationary multivariate time series

    Y_t = A f_t + e_t,    t = 1..T,  Y_t in R^n,  f_t in R^r

from the leading eigenvectors of the cumulative autocovariance matrix
(Lam, Yao and Bathia, 2011). The number of factors is estimated with the
eigenvalue-ratio method (Lam and Yao, 2012).

References
----------
Lam, C., Yao, Q. and Bathia, N. (2011). Estimation of Latent Factors for
High-Dimensional Time Series. Biometrika, 98(4), 901-918.

Lam, C. and Yao, Q. (2012). Factor Modeling for High-Dimensional Time Series:
Inference for the Number of Factors. The Annals of Statistics, 40(2), 694-726.
"""

from __future__ import annotations

from numbers import Integral
from typing import Union

from loguru import logger

from .covariance import _as_series, _check_count, cumulative_covariance
from .decomposition import (
    compute_explained_variance,
    eigenvalue_ratio_estimate,
    sorted_eigh,
)
from .exceptions import DomainError, ShapeError
from .types import EigenSolver, FactorEstimate


def estimate_factors(
    series,
    k0: int,
    r: int,
    *,
    solver: Union[EigenSolver, str] = EigenSolver.SCIPY,
    demean: bool = False,
) -> FactorEstimate:
    """
    Estimate latent factors, loadings and common component of a series.

    Parameters
    ----------
    series : array-like (T, n)
        Observed stationary series, T observations of n >= 3 variables.
        Never modified.
    k0 : int
        Number of lags accumulated into the cumulative covariance, 1 <= k0 < T.
    r : int
        Number of factors to extract, 1 <= r <= n.
    solver : EigenSolver or str, default='scipy'
        Dense symmetric eigensolver.
    demean : bool, default=False
        Subtract column means before estimation. The factors and common
        component then refer to the centered series.

    Returns
    -------
    estimate : FactorEstimate
        Unpacks as ``(fhat, Ahat, chat, ss, icstar)``:
        fhat (T, r), Ahat (n, r), chat (T, n), ss (n,), icstar int.

    Raises
    ------
    ShapeError
        If series is not 2D, k0 >= T, r is outside [1, n] or n < 3.
    DomainError
        If k0 or r is not a positive integer.

    Notes
    -----
    ``icstar`` is reported for diagnostics only. The extraction always uses
    the caller's ``r``; re-run with ``r=icstar`` to adopt the estimate.
    """
    Y = _as_series(series)
    T, n = Y.shape
    k0 = _check_count(k0, "k0")

    if isinstance(r, bool) or not isinstance(r, Integral):
        raise DomainError(f"r must be an integer, got {type(r).__name__}")
    if r < 1 or r > n:
        raise ShapeError(f"r must be in range [1, {n}], got r={r}")
    r = int(r)

    if n < 3:
        raise ShapeError(
            f"Need at least 3 variables for factor count estimation, got n={n}"
        )
    if k0 >= T:
        raise ShapeError(f"k0 must be < T={T}, got k0={k0}")

    logger.info(f"Starting cumulative-covariance factor estimation: {T} periods, {n} variables, k0={k0}, r={r}")

    if demean:
        Y = Y - Y.mean(axis=0)

    # 1. Cumulative covariance and its ordered spectrum
    S = cumulative_covariance(Y, k0)
    ss, vecs = sorted_eigh(S, solver=solver)

    # 2. Factor count (diagnostic only)
    icstar, ratios = eigenvalue_ratio_estimate(ss)

    # 3. Loadings, factors, common component
    Ahat = vecs[:, :r].copy()
    fhat = Y @ Ahat
    chat = fhat @ Ahat.T

    if icstar != r:
        logger.debug(f"Eigenvalue-ratio estimate icstar={icstar} differs from requested r={r}")

    logger.success(
        f"Factor estimation complete. icstar={icstar}, "
        f"explained share of S: {compute_explained_variance(ss, r):.2%}"
    )

    return FactorEstimate(
        factors=fhat,
        loadings=Ahat,
        common_component=chat,
        eigenvalues=ss,
        estimated_factor_count=icstar,
        ratios=ratios,
        k0=k0,
    )
