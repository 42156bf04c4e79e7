"""
exceptions.py - Error Taxonomy for factor_lam

All errors raised by the package derive from FactorLamError. The concrete
errors also derive from ValueError so that callers written against plain
numpy/scipy conventions (``except ValueError``) keep working.

Hierarchy:
---------
    FactorLamError
    ├── ShapeError     (dimensions inconsistent with k0 / r / n constraints)
    └── DomainError    (a scalar parameter outside its admissible domain)

    NumericDegeneracyWarning (RuntimeWarning)
        Emitted, never raised, when an eigenvalue ratio divides by a
        (near-)zero eigenvalue. The inf/NaN result is still returned.
"""

from __future__ import annotations


class FactorLamError(Exception):
    """Base class for all factor_lam errors."""


class ShapeError(FactorLamError, ValueError):
    """
    Input array has the wrong dimensionality or sizes.

    Raised for non-2D series, k0 >= T, r outside [1, n], n < 3 and
    non-square matrices passed to the eigensolver.
    """


class DomainError(FactorLamError, ValueError):
    """A scalar parameter lies outside its domain (e.g. k0 < 1)."""


class NumericDegeneracyWarning(RuntimeWarning):
    """Eigenvalue ratio computed against a (near-)zero denominator."""
