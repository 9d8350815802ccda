"""Core financial calculators.

The `calculators` package contains small, focused modules that each implement
one piece of the retirement projection:

* ``formulas`` – closed-form primitives (future/present value, inflation, annuity payments, employer match).
* ``social_security`` – bend-point benefit formula with early/delayed claiming adjustments.
* ``projections`` – year-by-year accumulation model and its summary metrics.
* ``scenarios`` – conservative / moderate / aggressive comparison of the projection.
* ``monte_carlo`` – randomised return trials aggregated into percentiles and a success rate.
* ``optimizer`` – allocation of monthly savings across 401(k), Roth IRA and taxable accounts.

Each module exposes a few public functions with clear parameters and returns.  See
individual docstrings for details.
"""

from . import formulas, social_security, projections, scenarios, monte_carlo, optimizer  # noqa: F401

__all__ = ["formulas", "social_security", "projections", "scenarios", "monte_carlo", "optimizer"]
