"""Tests for the tabular export helpers."""

import pandas as pd
import pytest

from futurescope import reports
from futurescope.calculators.monte_carlo import monte_carlo_simulation
from futurescope.calculators.projections import calculate_projections
from futurescope.calculators.scenarios import calculate_scenarios
from futurescope.inputs import CalculatorInputs


@pytest.fixture
def results():
    return calculate_projections(CalculatorInputs.default(), start_year=2025)


def _metrics(frame):
    return dict(zip(frame["Metric"], frame["Value"]))


def test_yearly_frame(results):
    df = reports.yearly_frame(results)
    assert list(df.columns) == list(reports.YEARLY_COLUMNS.values())
    assert len(df) == 36
    assert df["Age"].iloc[0] == 30
    assert df["Year"].iloc[-1] == 2060
    assert df["Total Savings"].iloc[-1] == pytest.approx(results.retirement_value)


def test_summary_frame(results):
    df = reports.summary_frame(results)
    assert list(df.columns) == ["Metric", "Value"]
    values = dict(zip(df["Metric"], df["Value"]))
    assert values["Retirement Value"] == pytest.approx(results.retirement_value)
    assert values["Replacement Ratio"] == pytest.approx(results.replacement_ratio)
    assert "Monte Carlo Median" not in values


def test_summary_frame_with_monte_carlo(results):
    mc = monte_carlo_simulation(CalculatorInputs.default(), iterations=20, seed=4)
    df = reports.summary_frame(results, mc)
    values = dict(zip(df["Metric"], df["Value"]))
    assert values["Monte Carlo Median"] == pytest.approx(mc.median)
    assert values["Monte Carlo Success Rate"] == pytest.approx(mc.success_rate)


def test_scenario_frame():
    comparison = calculate_scenarios(CalculatorInputs.default())
    df = reports.scenario_frame(comparison)
    assert list(df["Scenario"]) == ["Conservative", "Moderate", "Aggressive"]
    assert df["Retirement Value"].is_monotonic_increasing


def test_to_csv(results):
    text = reports.to_csv(results)
    lines = text.splitlines()
    assert lines[0] == "Age,Year,Salary,Monthly Contribution,Employer Match,Total Contribution,Total Savings,Inflation Adjusted Savings,Interest Earned"
    assert lines[1].startswith("30,2025,75000.0,500.0,250.0,9000.0,62500.0")
    assert "Metric,Value" in lines
    assert any(line.startswith("Retirement Value,") for line in lines)


def test_summary_frame_status_and_years(results):
    values = _metrics(reports.summary_frame(results))
    assert values["Years in Retirement"] == 25
    assert values["Retirement Status"] == ("ON TRACK" if results.on_track else "SHORTFALL")


def test_summary_frame_flags_shortfall():
    short = calculate_projections(CalculatorInputs.default().replace(desired_retirement_income=50000.0), start_year=2025)
    values = _metrics(reports.summary_frame(short))
    assert values["Retirement Status"] == "SHORTFALL"
    assert values["Annual Shortfall"] == pytest.approx(short.retirement_shortfall)

    covered = calculate_projections(CalculatorInputs.default().replace(desired_retirement_income=0.0), start_year=2025)
    values = _metrics(reports.summary_frame(covered))
    assert values["Retirement Status"] == "ON TRACK"
    assert values["Annual Shortfall"] == 0


def test_inputs_frame():
    inputs = CalculatorInputs.default()
    df = reports.inputs_frame(inputs)
    assert list(df["Metric"]) == [
        "Current Age",
        "Retirement Age",
        "Life Expectancy",
        "Current Salary",
        "Salary Growth Rate",
        "Current Savings",
        "Monthly Contribution",
        "Expected Return",
        "Inflation Rate",
        "Tax Rate",
    ]
    values = dict(zip(df["Metric"], df["Value"]))
    assert values["Current Age"] == 30
    assert values["Current Salary"] == pytest.approx(75000)
    assert values["Expected Return"] == pytest.approx(inputs.expected_return)


def test_chart_frame_keeps_every_fifth_year_and_the_last(results):
    df = reports.chart_frame(results)
    assert list(df.columns) == ["Age", "Total Savings", "Contributions", "Interest", "Inflation Adjusted"]
    # 36 rows: indexes 0, 5, ..., 35 (the last row is already on the stride)
    assert list(df["Age"]) == [30, 35, 40, 45, 50, 55, 60, 65]
    assert df["Total Savings"].iloc[-1] == pytest.approx(results.retirement_value)


def test_chart_frame_appends_final_year_off_stride():
    res = calculate_projections(CalculatorInputs.default().replace(retirement_age=37), start_year=2025)
    df = reports.chart_frame(res)
    assert list(df["Age"]) == [30, 35, 37]


def test_to_csv_includes_status_row(results):
    lines = reports.to_csv(results).splitlines()
    status = "ON TRACK" if results.on_track else "SHORTFALL"
    assert f"Retirement Status,{status}" in lines
    assert "Years in Retirement,25" in lines


def test_to_excel_writes_three_sheets(results, tmp_path):
    path = tmp_path / "projection.xlsx"
    reports.to_excel(results, CalculatorInputs.default(), path)

    sheets = pd.read_excel(path, sheet_name=None)
    assert list(sheets) == ["Projections", "Summary", "Chart Data"]
    assert len(sheets["Projections"]) == len(results.yearly_data)
    summary = dict(zip(sheets["Summary"]["Metric"], sheets["Summary"]["Value"]))
    assert summary["Current Age"] == 30
    assert "Retirement Status" in summary
    assert list(sheets["Chart Data"]["Age"]) == [30, 35, 40, 45, 50, 55, 60, 65]
