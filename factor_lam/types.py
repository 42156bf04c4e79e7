"""
types.py - Core Data Structures for factor_lam

This module defines the result container produced by the estimator:
- EigenSolver: Choice of dense symmetric eigensolver
- FactorEstimate: Factors, loadings, common component and spectrum

Design Principles:
-----------------
1. Immutability (frozen dataclass, arrays are fresh per call)
2. Validation at construction time (fail-fast)
3. Unpacks like the plain five-tuple (fhat, Ahat, chat, ss, icstar)

Example Usage:
-------------
    >>> from factor_lam import estimate_factors
    >>>
    >>> estimate = estimate_factors(Y, k0=2, r=3)
    >>> print(f"{estimate.r} factors, icstar={estimate.estimated_factor_count}")
    >>>
    >>> # Or unpack directly
    >>> fhat, Ahat, chat, ss, icstar = estimate_factors(Y, k0=2, r=3)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

import numpy as np

from .exceptions import ShapeError


# =============================================================================
# SOLVER SELECTION
# =============================================================================

class EigenSolver(str, Enum):
    """Dense symmetric eigensolvers available for the cumulative covariance."""
    SCIPY = "scipy"
    NUMPY = "numpy"


# =============================================================================
# FACTOR ESTIMATE
# =============================================================================

@dataclass(frozen=True)
class FactorEstimate:
    """
    Result of a cumulative-covariance factor estimation.

    The model behind the estimate is
        Y_t = A f_t + e_t
    where A (n, r) spans the factor loading space. The loading space is
    estimated by the top-r eigenvectors of
        S = sum_{k=1}^{k0} M_k M_k'
    with M_k the lag-k sample cross-covariance of Y.

    Parameters
    ----------
    factors : np.ndarray
        Estimated factors ``fhat = Y @ Ahat`` with shape (T, r).
    loadings : np.ndarray
        Estimated loadings ``Ahat`` with shape (n, r), orthonormal columns.
    common_component : np.ndarray
        ``chat = fhat @ Ahat.T`` with shape (T, n).
    eigenvalues : np.ndarray
        Full spectrum of S with shape (n,), sorted descending.
    estimated_factor_count : int
        Eigenvalue-ratio estimate ``icstar`` in [1, floor(n/3)]. Diagnostic
        only: it is not reconciled with ``r``.
    ratios : np.ndarray
        ``ratios[i - 1] = eigenvalues[i] / eigenvalues[i - 1]`` for
        i = 1..floor(n/3). May hold inf/NaN for degenerate spectra.
    k0 : int
        Number of lags accumulated into S.

    Examples
    --------
    >>> est = estimate_factors(Y, k0=2, r=2)
    >>> est.loadings.T @ est.loadings   # ~ identity(2)
    >>> est.explained_variance()        # share of S captured by r directions

    Notes
    -----
    Iterating over an estimate yields the five classic outputs in order,
    so it can be unpacked like the tuple ``(fhat, Ahat, chat, ss, icstar)``.
    """
    factors: np.ndarray           # (T, r)
    loadings: np.ndarray          # (n, r)
    common_component: np.ndarray  # (T, n)
    eigenvalues: np.ndarray       # (n,)
    estimated_factor_count: int
    ratios: np.ndarray            # (floor(n/3),)
    k0: int

    def __post_init__(self):
        """Validate dimensions on construction."""
        self.validate()

    @property
    def n_periods(self) -> int:
        """Number of observations T."""
        return self.factors.shape[0]

    @property
    def n_variables(self) -> int:
        """Number of observed variables n."""
        return self.loadings.shape[0]

    @property
    def r(self) -> int:
        """Number of extracted factors."""
        return self.loadings.shape[1]

    def validate(self) -> None:
        """
        Validate internal consistency of the estimate.

        Raises
        ------
        ShapeError
            If any dimension mismatch is detected.
        """
        if self.loadings.ndim != 2:
            raise ShapeError(f"loadings must be 2D, got shape {self.loadings.shape}")

        n, r = self.loadings.shape
        if self.factors.ndim != 2 or self.factors.shape[1] != r:
            raise ShapeError(
                f"factors shape mismatch: expected (T, {r}), got {self.factors.shape}"
            )

        T = self.factors.shape[0]
        if self.common_component.shape != (T, n):
            raise ShapeError(
                f"common_component shape mismatch: expected ({T}, {n}), "
                f"got {self.common_component.shape}"
            )

        if self.eigenvalues.shape != (n,):
            raise ShapeError(
                f"eigenvalues shape mismatch: expected ({n},), got {self.eigenvalues.shape}"
            )

        if self.ratios.shape != (n // 3,):
            raise ShapeError(
                f"ratios shape mismatch: expected ({n // 3},), got {self.ratios.shape}"
            )

    def explained_variance(self, r: Optional[int] = None) -> float:
        """
        Share of the cumulative-covariance spectrum captured by r directions.

        Parameters
        ----------
        r : int, optional
            Candidate number of factors. Defaults to the extracted ``r``.
        """
        from .decomposition import compute_explained_variance

        return compute_explained_variance(self.eigenvalues, self.r if r is None else r)

    def __iter__(self) -> Iterator[Union[np.ndarray, int]]:
        yield self.factors
        yield self.loadings
        yield self.common_component
        yield self.eigenvalues
        yield self.estimated_factor_count

    def __repr__(self) -> str:
        return (
            f"FactorEstimate(T={self.n_periods}, n={self.n_variables}, "
            f"r={self.r}, k0={self.k0}, icstar={self.estimated_factor_count})"
        )
