"""
factor_lam Examples Package
===========================

Runnable examples demonstrating cumulative-covariance factor estimation.

Examples
--------
estimate_ar_factors : module
    Estimation on a simulated AR(1) factor series with known loadings.
sinusoidal_factors : module
    Two deterministic periodic factors plus noise; compares icstar with r.

Quick Start
-----------
    $ python examples/estimate_ar_factors.py

Or import as modules:

    >>> from examples import run_example
    >>> estimate = run_example("estimate_ar_factors")
"""

__all__ = [
    "estimate_ar_factors",
    "sinusoidal_factors",
]


def list_examples():
    """
    List all available examples with descriptions.

    Returns
    -------
    dict
        Dictionary mapping example names to their descriptions.
    """
    return {
        "estimate_ar_factors": (
            "Simulate a stationary AR(1) factor series, estimate the factor "
            "count and compare the recovered loading space with the truth."
        ),
        "sinusoidal_factors": (
            "Recover two periodic factors from a noisy six-variable panel "
            "and report the eigenvalue ratios."
        ),
    }


def run_example(name, *args, **kwargs):
    """
    Dynamically import and run an example.

    Parameters
    ----------
    name : str
        Name of the example to run (without .py extension).
    *args, **kwargs
        Arguments to pass to the example's main() function.

    Returns
    -------
    result
        Return value from the example's main() function.
    """
    import importlib

    valid_examples = list_examples().keys()
    if name not in valid_examples:
        raise ValueError(
            f"Unknown example '{name}'. Valid examples: {', '.join(valid_examples)}"
        )

    module = importlib.import_module(f"examples.{name}")

    if hasattr(module, "main"):
        return module.main(*args, **kwargs)
    else:
        raise AttributeError(
            f"Example '{name}' does not have a main() function"
        )


__all__.extend([
    "list_examples",
    "run_example",
])
