"""
decomposition.py - Spectral Ranking and Factor Count Estimation
===============================================================

Eigendecomposes the cumulative covariance matrix, orders the spectrum and
applies the eigenvalue-ratio estimator of Lam and Yao (2012):

    icstar = argmin_{1 <= i <= R} lambda_{i+1} / lambda_i,    R = floor(n/3)

Uses loguru for diagnostics.
"""

from __future__ import annotations

import warnings
from typing import Optional, Tuple, Union

import numpy as np
import scipy.linalg
from loguru import logger

from .exceptions import DomainError, NumericDegeneracyWarning, ShapeError
from .types import EigenSolver


# =============================================================================
# HELPER: SOLVER DISPATCH
# =============================================================================

def _resolve_solver(solver: Union[EigenSolver, str]) -> EigenSolver:
    try:
        return EigenSolver(solver)
    except ValueError:
        valid = [s.value for s in EigenSolver]
        raise DomainError(f"Unknown solver: '{solver}'. Valid solvers are: {valid}") from None


def sorted_eigh(
    matrix: np.ndarray,
    solver: Union[EigenSolver, str] = EigenSolver.SCIPY,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Full eigendecomposition of a symmetric matrix, sorted descending.

    Parameters
    ----------
    matrix : ndarray (n, n)
        Real symmetric matrix.
    solver : EigenSolver or str, default='scipy'
        Dense solver: ``scipy.linalg.eigh`` or ``numpy.linalg.eigh``.

    Returns
    -------
    values : ndarray (n,)
        Eigenvalues, non-increasing.
    vectors : ndarray (n, n)
        Orthonormal eigenvectors as columns, ``vectors[:, j]`` pairs with
        ``values[j]``.

    Raises
    ------
    ShapeError
        If matrix is not square.

    Notes
    -----
    Equal eigenvalues keep the order the solver returned them in (stable
    sort on the negated values), so repeated runs with the same solver give
    the same column order.
    """
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ShapeError(f"matrix must be square, got shape {matrix.shape}")

    solver = _resolve_solver(solver)
    logger.debug(f"Using dense eigensolver ({solver.value}) for n={matrix.shape[0]}")

    try:
        if solver == EigenSolver.SCIPY:
            vals, vecs = scipy.linalg.eigh(matrix)
        else:
            vals, vecs = np.linalg.eigh(matrix)
    except Exception:
        logger.exception("Eigensolver failed. Check for NaNs or infinite values in the series.")
        raise

    idx = np.argsort(-vals, kind="stable")
    return vals[idx], vecs[:, idx]


# =============================================================================
# FACTOR COUNT
# =============================================================================

def eigenvalue_ratio_estimate(
    eigenvalues: np.ndarray,
    max_factors: Optional[int] = None,
) -> Tuple[int, np.ndarray]:
    """
    Eigenvalue-ratio estimate of the number of factors.

    Parameters
    ----------
    eigenvalues : ndarray (n,)
        Spectrum sorted descending.
    max_factors : int, optional
        Largest admissible count R. Defaults to ``floor(n / 3)``.

    Returns
    -------
    icstar : int
        First i in [1, R] minimising ``eigenvalues[i] / eigenvalues[i - 1]``
        (the ratio of the (i+1)-th to the i-th largest eigenvalue).
    ratios : ndarray (R,)
        The R ratios, ``ratios[i - 1]`` belonging to candidate i.

    Raises
    ------
    ShapeError
        If R < 1 or fewer than R + 1 eigenvalues are given.

    Warns
    -----
    NumericDegeneracyWarning
        If a denominator is zero up to round-off. The inf/NaN ratios are
        returned as computed; NaN ratios are skipped when minimising and an
        all-NaN set of ratios yields icstar = 1.
    """
    ss = np.asarray(eigenvalues, dtype=float)
    if ss.ndim != 1:
        raise ShapeError(f"eigenvalues must be 1D, got shape {ss.shape}")

    n = ss.shape[0]
    R = n // 3 if max_factors is None else int(max_factors)
    if R < 1:
        raise ShapeError(
            f"Factor count estimation needs R >= 1 candidate, got R={R} (n={n})"
        )
    if n < R + 1:
        raise ShapeError(f"Need at least {R + 1} eigenvalues for R={R}, got {n}")

    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = ss[1:R + 1] / ss[:R]

    tol = n * np.finfo(float).eps * np.max(np.abs(ss))
    degenerate = np.abs(ss[:R]) <= tol
    if degenerate.any() or not np.all(np.isfinite(ratios)):
        bad = (np.flatnonzero(degenerate | ~np.isfinite(ratios)) + 1).tolist()
        message = (
            f"Near-zero eigenvalue in ratio denominator at candidates {bad}; "
            "ratios contain inf/NaN"
        )
        logger.warning(message)
        warnings.warn(message, NumericDegeneracyWarning, stacklevel=2)

    if np.all(np.isnan(ratios)):
        icstar = 1
    else:
        icstar = int(np.nanargmin(ratios)) + 1

    logger.debug(f"Eigenvalue ratios (R={R}): {np.round(ratios, 6)} -> icstar={icstar}")
    return icstar, ratios


# =============================================================================
# UTILITIES
# =============================================================================

def compute_explained_variance(eigenvalues: np.ndarray, r: int) -> float:
    """
    Share of the cumulative-covariance spectrum captured by the top r terms.

    Ratio = sum(eigenvalues[:r]) / sum(eigenvalues)
    """
    ss = np.asarray(eigenvalues, dtype=float)
    if r < 1 or r > ss.shape[0]:
        raise ShapeError(f"r must be in range [1, {ss.shape[0]}], got r={r}")

    total = np.sum(ss)
    if total == 0:
        return 0.0

    return float(np.sum(ss[:r]) / total)
