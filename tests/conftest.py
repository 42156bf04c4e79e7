"""
conftest.py - Pytest Configuration and Shared Fixtures

This file contains fixtures used across all test modules. Fixtures are
organized by category:
- Random number generators (for reproducibility)
- Synthetic series (known factor structure)
- Tolerances
"""

import pytest
import numpy as np

from factor_lam import FactorSeriesSimulator


# =============================================================================
# RANDOM NUMBER GENERATORS
# =============================================================================

@pytest.fixture
def rng():
    """
    Provide a seeded random number generator for reproducible tests.

    All tests should use this fixture (or derive from it) to ensure
    reproducibility across runs.
    """
    return np.random.default_rng(seed=42)


# =============================================================================
# SYNTHETIC SERIES
# =============================================================================

@pytest.fixture
def white_noise_series(rng):
    """Serially uncorrelated (120, 9) series with no factor structure."""
    return rng.standard_normal((120, 9))


@pytest.fixture
def sinusoidal_panel(rng):
    """
    Two orthogonal periodic factors loaded on six variables plus small noise.

    Structure:
    - Factor 1: 2 sin(2 pi t / 25), loadings (1, 1, 1, 1, 1, 1)
    - Factor 2: 1.5 cos(2 pi t / 9), loadings (1, -1, 1, -1, 1, -1)
    - Noise: N(0, 0.1^2), T = 200

    Returns (series, common_component).
    """
    T = 200
    t = np.arange(T)
    factors = np.column_stack([
        2.0 * np.sin(2 * np.pi * t / 25),
        1.5 * np.cos(2 * np.pi * t / 9),
    ])
    loadings = np.array([
        [1.0, 1.0],
        [1.0, -1.0],
        [1.0, 1.0],
        [1.0, -1.0],
        [1.0, 1.0],
        [1.0, -1.0],
    ])
    common = factors @ loadings.T
    series = common + 0.1 * rng.standard_normal(common.shape)
    return series, common


@pytest.fixture
def ar_factor_sample(rng):
    """
    A (400, 30) series driven by 3 AR(1) factors (phi = 0.9, 0.8, 0.7).

    Returns the simulator output dict plus "loadings".
    """
    n, r = 30, 3
    loadings = rng.standard_normal((n, r))
    simulator = FactorSeriesSimulator(
        loadings,
        ar_coefficients=[0.9, 0.8, 0.7],
        noise_std=0.5,
        rng=rng,
    )
    results = simulator.simulate(n_periods=400)
    results["loadings"] = loadings
    return results


# =============================================================================
# HELPER FIXTURES
# =============================================================================

@pytest.fixture
def tolerance():
    """Standard numerical tolerance for float comparisons."""
    return {"rtol": 1e-5, "atol": 1e-8}
