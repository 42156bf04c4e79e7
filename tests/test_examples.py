"""
Test Suite for Examples Package
===============================
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# =============================================================================
# PATH SETUP
# =============================================================================
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from examples import run_example, list_examples

from factor_lam import FactorEstimate


class TestRunExample:
    """Test that examples run end-to-end via the wrapper."""

    def test_run_example_estimate_ar_factors(self):
        result = run_example("estimate_ar_factors", T=300, n=18, r_true=2)

        assert isinstance(result, FactorEstimate)
        assert result.r == 2
        assert 1 <= result.estimated_factor_count <= 6

    def test_run_example_sinusoidal_factors(self):
        result = run_example("sinusoidal_factors")

        assert result["icstar"] == 2
        assert result["correlation"] > 0.9
        assert np.all(np.diff(result["eigenvalues"]) <= 0)

    def test_unknown_example(self):
        with pytest.raises(ValueError, match="Unknown example"):
            run_example("does_not_exist")

    def test_list_examples(self):
        assert set(list_examples()) == {"estimate_ar_factors", "sinusoidal_factors"}
