"""Side-by-side projections under preset market assumptions.

Each scenario reruns :func:`~futurescope.calculators.projections.calculate_projections`
on the same plan with the expected return and inflation rate replaced by the
preset pair from :data:`futurescope.assumptions.SCENARIOS`.  With otherwise
sensible inputs the terminal balances increase from conservative to
aggressive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from ..assumptions import SCENARIOS
from ..inputs import CalculatorInputs
from .projections import ProjectionResults, calculate_projections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioComparison:
    conservative: ProjectionResults
    moderate: ProjectionResults
    aggressive: ProjectionResults

    def as_dict(self) -> Dict[str, ProjectionResults]:
        return {
            "conservative": self.conservative,
            "moderate": self.moderate,
            "aggressive": self.aggressive,
        }


def scenario_inputs(base: CalculatorInputs, name: str) -> CalculatorInputs:
    """Copy of ``base`` with the return/inflation pair of scenario ``name``."""
    expected_return, inflation_rate = SCENARIOS[name]
    return base.replace(expected_return=expected_return, inflation_rate=inflation_rate)


def calculate_scenarios(base: CalculatorInputs, start_year: Optional[int] = None) -> ScenarioComparison:
    results = {
        name: calculate_projections(scenario_inputs(base, name), start_year=start_year)
        for name in ("conservative", "moderate", "aggressive")
    }
    logger.debug(
        "Scenario retirement values: %s",
        ", ".join(f"{name}={res.retirement_value:.2f}" for name, res in results.items()),
    )
    return ScenarioComparison(**results)


__all__ = ["ScenarioComparison", "scenario_inputs", "calculate_scenarios"]
