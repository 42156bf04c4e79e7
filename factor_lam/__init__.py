"""
factor_lam - Latent Factor Estimation for High-Dimensional Time Series
"""

__version__ = "1.0.0"

# =============================================================================
# CORE TYPES
# =============================================================================
from .types import (
    FactorEstimate,
    EigenSolver,
)

# =============================================================================
# ERRORS
# =============================================================================
from .exceptions import (
    FactorLamError,
    ShapeError,
    DomainError,
    NumericDegeneracyWarning,
)

# =============================================================================
# COVARIANCE
# =============================================================================
from .covariance import (
    lagged_cross_covariance,
    cumulative_covariance,
)

# =============================================================================
# DECOMPOSITION
# =============================================================================
from .decomposition import (
    sorted_eigh,
    eigenvalue_ratio_estimate,
    compute_explained_variance,
)

# =============================================================================
# ESTIMATION
# =============================================================================
from .estimation import estimate_factors

# =============================================================================
# SIMULATION
# =============================================================================
from .simulation import (
    FactorSeriesSimulator,
    simulate_factor_series,
)

# PUBLIC API
# =============================================================================
__all__ = [
    "__version__",
    "FactorEstimate",
    "EigenSolver",
    "FactorLamError",
    "ShapeError",
    "DomainError",
    "NumericDegeneracyWarning",
    "lagged_cross_covariance",
    "cumulative_covariance",
    "sorted_eigh",
    "eigenvalue_ratio_estimate",
    "compute_explained_variance",
    "estimate_factors",
    "FactorSeriesSimulator",
    "simulate_factor_series",
]
