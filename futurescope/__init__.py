"""FutureScope retirement projection engine.

The package turns a flat set of financial assumptions
(:class:`~futurescope.inputs.CalculatorInputs`) into year-by-year savings
projections, scenario comparisons, Monte Carlo summaries and contribution
recommendations.  All calculations live in :mod:`futurescope.calculators`;
the remaining modules are small helpers used by the surrounding application
(share links, tabular reports and plain-language insights).
"""

import logging

from .inputs import CalculatorInputs, InputError  # noqa: F401

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["CalculatorInputs", "InputError", "__version__"]
