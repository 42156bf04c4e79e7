"""
test_types.py - Tests for FactorEstimate and EigenSolver
"""

import pytest
import numpy as np

from factor_lam import FactorEstimate, EigenSolver, ShapeError, estimate_factors


def make_estimate(T=20, n=6, r=2, **overrides):
    """Build a consistent FactorEstimate from placeholder arrays."""
    fields = dict(
        factors=np.zeros((T, r)),
        loadings=np.eye(n)[:, :r],
        common_component=np.zeros((T, n)),
        eigenvalues=np.linspace(6.0, 1.0, n),
        estimated_factor_count=1,
        ratios=np.full(n // 3, 0.5),
        k0=2,
    )
    fields.update(overrides)
    return FactorEstimate(**fields)


class TestFactorEstimate:
    """Tests for the FactorEstimate container."""

    def test_properties(self):
        est = make_estimate(T=20, n=6, r=2)

        assert est.n_periods == 20
        assert est.n_variables == 6
        assert est.r == 2

    def test_unpacks_to_five_outputs(self):
        est = make_estimate()

        fhat, Ahat, chat, ss, icstar = est

        assert fhat is est.factors
        assert Ahat is est.loadings
        assert chat is est.common_component
        assert ss is est.eigenvalues
        assert icstar == est.estimated_factor_count

    def test_frozen(self):
        est = make_estimate()

        with pytest.raises(AttributeError):
            est.k0 = 5

    def test_explained_variance(self):
        est = make_estimate(n=3, r=1, eigenvalues=np.array([6.0, 3.0, 1.0]))

        assert np.isclose(est.explained_variance(), 0.6)
        assert np.isclose(est.explained_variance(2), 0.9)

    def test_repr(self):
        assert repr(make_estimate()) == "FactorEstimate(T=20, n=6, r=2, k0=2, icstar=1)"

    @pytest.mark.parametrize("field,value", [
        ("factors", np.zeros((20, 3))),
        ("common_component", np.zeros((20, 5))),
        ("eigenvalues", np.ones(5)),
        ("ratios", np.ones(3)),
        ("loadings", np.ones(6)),
    ])
    def test_shape_mismatch(self, field, value):
        with pytest.raises(ShapeError, match="must be 2D|mismatch"):
            make_estimate(**{field: value})

    def test_from_estimator_is_consistent(self, white_noise_series):
        est = estimate_factors(white_noise_series, k0=2, r=3)

        est.validate()
        assert est.n_periods == white_noise_series.shape[0]


class TestEigenSolver:

    def test_string_values(self):
        assert EigenSolver("scipy") is EigenSolver.SCIPY
        assert EigenSolver("numpy") is EigenSolver.NUMPY
        assert EigenSolver.SCIPY == "scipy"
