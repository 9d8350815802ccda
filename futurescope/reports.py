"""Tabular views of projection results for export.

The export collaborators (spreadsheet, CSV, PDF) all start from the same
tables: one row per projected year, the plan inputs and a short Metric/Value
summary.  These helpers build them as pandas DataFrames.  :func:`to_csv`
stitches the yearly and summary tables into a single CSV document with
amounts rounded to cents, and :func:`to_excel` writes the three-sheet
workbook (Projections, Summary, Chart Data).
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd

from .calculators.monte_carlo import MonteCarloSummary
from .calculators.projections import ProjectionResults
from .calculators.scenarios import ScenarioComparison
from .inputs import CalculatorInputs

YEARLY_COLUMNS: Dict[str, str] = {
    "age": "Age",
    "year": "Year",
    "salary": "Salary",
    "monthly_contribution": "Monthly Contribution",
    "employer_match": "Employer Match",
    "total_contribution": "Total Contribution",
    "total_savings": "Total Savings",
    "total_savings_inflation_adjusted": "Inflation Adjusted Savings",
    "interest_earned": "Interest Earned",
}

CHART_COLUMNS: Dict[str, str] = {
    "age": "Age",
    "total_savings": "Total Savings",
    "total_contribution": "Contributions",
    "interest_earned": "Interest",
    "total_savings_inflation_adjusted": "Inflation Adjusted",
}

# every fifth year keeps the chart readable over long horizons
CHART_STEP = 5


def yearly_frame(results: ProjectionResults) -> pd.DataFrame:
    rows = [
        {label: getattr(row, attr) for attr, label in YEARLY_COLUMNS.items()}
        for row in results.yearly_data
    ]
    return pd.DataFrame(rows, columns=list(YEARLY_COLUMNS.values()))


def chart_frame(results: ProjectionResults) -> pd.DataFrame:
    """Thinned series for charting: every fifth year plus the final year."""
    last = len(results.yearly_data) - 1
    rows = [
        {label: getattr(row, attr) for attr, label in CHART_COLUMNS.items()}
        for index, row in enumerate(results.yearly_data)
        if index % CHART_STEP == 0 or index == last
    ]
    return pd.DataFrame(rows, columns=list(CHART_COLUMNS.values()))


def inputs_frame(inputs: CalculatorInputs) -> pd.DataFrame:
    """Plan assumptions as a Metric/Value table (rates as fractions)."""
    metrics = [
        ("Current Age", inputs.current_age),
        ("Retirement Age", inputs.retirement_age),
        ("Life Expectancy", inputs.life_expectancy),
        ("Current Salary", inputs.current_salary),
        ("Salary Growth Rate", inputs.salary_growth_rate),
        ("Current Savings", inputs.current_savings),
        ("Monthly Contribution", inputs.monthly_contribution),
        ("Expected Return", inputs.expected_return),
        ("Inflation Rate", inputs.inflation_rate),
        ("Tax Rate", inputs.tax_rate),
    ]
    return pd.DataFrame(metrics, columns=["Metric", "Value"])


def summary_frame(results: ProjectionResults, monte_carlo: Optional[MonteCarloSummary] = None) -> pd.DataFrame:
    """Headline metrics as a two-column Metric/Value table.

    The replacement ratio and success rate are fractions (0.85 = 85 %).
    ``Retirement Status`` is the only text value: ``"SHORTFALL"`` when the
    projected income misses the goal, otherwise ``"ON TRACK"``.
    """
    metrics = [
        ("Retirement Value", results.retirement_value),
        ("Retirement Value (Inflation Adjusted)", results.retirement_value_inflation_adjusted),
        ("Monthly Retirement Income", results.monthly_retirement_income),
        ("Monthly Retirement Income (Inflation Adjusted)", results.monthly_retirement_income_inflation_adjusted),
        ("Total Contributions", results.total_contributions),
        ("Total Interest Earned", results.total_interest_earned),
        ("Replacement Ratio", results.replacement_ratio),
        ("Years in Retirement", results.years_of_retirement),
        ("Retirement Status", "ON TRACK" if results.on_track else "SHORTFALL"),
        ("Annual Shortfall", results.retirement_shortfall),
        ("Recommended Monthly Savings", results.recommended_monthly_savings),
    ]
    if monte_carlo is not None:
        metrics += [
            ("Monte Carlo Median", monte_carlo.median),
            ("Monte Carlo 25th Percentile", monte_carlo.percentile25),
            ("Monte Carlo 75th Percentile", monte_carlo.percentile75),
            ("Monte Carlo 95th Percentile", monte_carlo.percentile95),
            ("Monte Carlo Success Rate", monte_carlo.success_rate),
        ]
    return pd.DataFrame(metrics, columns=["Metric", "Value"])


def scenario_frame(comparison: ScenarioComparison) -> pd.DataFrame:
    rows = []
    for name, res in comparison.as_dict().items():
        rows.append(
            {
                "Scenario": name.capitalize(),
                "Retirement Value": res.retirement_value,
                "Inflation Adjusted Value": res.retirement_value_inflation_adjusted,
                "Monthly Income": res.monthly_retirement_income,
                "Replacement Ratio": res.replacement_ratio,
            }
        )
    return pd.DataFrame(rows)


def _round_values(frame: pd.DataFrame) -> pd.DataFrame:
    # the Value column mixes numbers and the status text
    rounded = frame.copy()
    rounded["Value"] = [round(v, 2) if isinstance(v, float) else v for v in frame["Value"]]
    return rounded


def to_csv(results: ProjectionResults, monte_carlo: Optional[MonteCarloSummary] = None) -> str:
    yearly = yearly_frame(results).round(2)
    summary = _round_values(summary_frame(results, monte_carlo))
    return yearly.to_csv(index=False) + "\n" + summary.to_csv(index=False)


def to_excel(
    results: ProjectionResults,
    inputs: CalculatorInputs,
    path,
    monte_carlo: Optional[MonteCarloSummary] = None,
) -> None:
    """Write the Projections, Summary and Chart Data sheets to ``path``.

    The Summary sheet holds the input parameters followed by the summary
    metrics.  ``path`` may be a file name or a writable binary buffer.
    """
    summary = pd.concat([inputs_frame(inputs), summary_frame(results, monte_carlo)], ignore_index=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        yearly_frame(results).to_excel(writer, sheet_name="Projections", index=False)
        summary.to_excel(writer, sheet_name="Summary", index=False)
        chart_frame(results).to_excel(writer, sheet_name="Chart Data", index=False)


__all__ = [
    "YEARLY_COLUMNS",
    "CHART_COLUMNS",
    "yearly_frame",
    "chart_frame",
    "inputs_frame",
    "summary_frame",
    "scenario_frame",
    "to_csv",
    "to_excel",
]
