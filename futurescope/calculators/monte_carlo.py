"""Monte Carlo view of the retirement balance.

Each trial perturbs the expected return by a uniform draw,
``expected_return + (u - 0.5) * volatility`` with ``u`` in [0, 1), runs the
full deterministic projection and keeps the terminal nominal balance.  The
sorted balances are summarised by direct-index percentiles
(``balances[floor(n * p)]``, no interpolation) and a success rate.

Success compares each balance with ``desired monthly income * 12 * years of
retirement``.  The target is not discounted, so it is a rough yardstick and
not a withdrawal simulation.

The random source is a :class:`numpy.random.Generator`; pass ``seed`` (or a
generator) for repeatable results.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..assumptions import DEFAULT_ITERATIONS, MONTE_CARLO_VOLATILITY
from ..inputs import CalculatorInputs
from .projections import calculate_projections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonteCarloSummary:
    median: float
    percentile25: float
    percentile75: float
    percentile95: float
    success_rate: float
    iterations: int
    target_amount: float


def _draw_return(mean: float, volatility: float, rng: np.random.Generator) -> float:
    return mean + (rng.random() - 0.5) * volatility


def success_target(inputs: CalculatorInputs) -> float:
    return inputs.desired_retirement_income * 12 * inputs.years_of_retirement


def simulate_terminal_balances(
    inputs: CalculatorInputs,
    iterations: int = DEFAULT_ITERATIONS,
    rng: Optional[np.random.Generator] = None,
    volatility: float = MONTE_CARLO_VOLATILITY,
) -> np.ndarray:
    """Run ``iterations`` trials and return their terminal balances, sorted ascending."""
    if rng is None:
        rng = np.random.default_rng()

    balances = np.empty(iterations)
    for i in range(iterations):
        trial = inputs.replace(expected_return=_draw_return(inputs.expected_return, volatility, rng))
        balances[i] = calculate_projections(trial).retirement_value
    balances.sort()
    return balances


def _at(balances: np.ndarray, p: float) -> float:
    return float(balances[int(math.floor(len(balances) * p))])


def monte_carlo_simulation(
    inputs: CalculatorInputs,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    volatility: float = MONTE_CARLO_VOLATILITY,
) -> MonteCarloSummary:
    """Summarise ``iterations`` randomised projections.

    Parameters
    ----------
    inputs : CalculatorInputs
        Plan assumptions; only ``expected_return`` varies between trials.
    iterations : int, optional
        Number of trials (default 1000).  Must be at least 1.
    seed : int, optional
        Seed for a fresh generator when ``rng`` is not supplied.
    rng : numpy.random.Generator, optional
        Random source to draw from.  Takes precedence over ``seed``.
    volatility : float, optional
        Width of the uniform return perturbation (default 0.15).

    Returns
    -------
    MonteCarloSummary
        Median, 25th/75th/95th percentiles of the terminal balance and the
        share of trials reaching the success target.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    if rng is None:
        rng = np.random.default_rng(seed)

    balances = simulate_terminal_balances(inputs, iterations, rng, volatility)
    target = success_target(inputs)
    success_rate = float(np.count_nonzero(balances >= target)) / iterations

    summary = MonteCarloSummary(
        median=_at(balances, 0.5),
        percentile25=_at(balances, 0.25),
        percentile75=_at(balances, 0.75),
        percentile95=_at(balances, 0.95),
        success_rate=success_rate,
        iterations=iterations,
        target_amount=target,
    )
    logger.debug(
        "Monte Carlo: %d trials, median %.2f, success rate %.3f against target %.2f",
        iterations,
        summary.median,
        success_rate,
        target,
    )
    return summary


__all__ = ["MonteCarloSummary", "success_target", "simulate_terminal_balances", "monte_carlo_simulation"]
