"""Tests for the year-by-year projection engine."""

import dataclasses
import math

import pytest

from futurescope.calculators import formulas
from futurescope.calculators.projections import calculate_projections
from futurescope.inputs import CalculatorInputs


def _base_inputs(**overrides) -> CalculatorInputs:
    inputs = CalculatorInputs(
        current_age=30,
        retirement_age=65,
        life_expectancy=90,
        current_salary=75000.0,
        salary_growth_rate=0.03,
        current_savings=50000.0,
        monthly_contribution=500.0,
        contribution_increase_rate=0.03,
        employer_match_percent=0.5,
        employer_match_limit=0.06,
        expected_return=0.07,
        inflation_rate=0.03,
        tax_rate=0.22,
        retirement_tax_rate=0.15,
        desired_retirement_income=5000.0,
        social_security_benefit=2000.0,
    )
    return inputs.replace(**overrides)


def test_complete_projection():
    inputs = _base_inputs()
    result = calculate_projections(inputs)
    assert len(result.yearly_data) == 36
    assert result.retirement_value > inputs.current_savings
    assert result.monthly_retirement_income > 0
    assert result.total_contributions > 0
    assert result.total_interest_earned > 0
    assert 0 < result.replacement_ratio < 2
    assert result.years_of_retirement == 25


def test_retirement_age_equal_to_current_age():
    """The loop still runs once at year 0."""
    inputs = _base_inputs(retirement_age=30)
    result = calculate_projections(inputs)
    assert len(result.yearly_data) == 1
    assert result.retirement_value >= inputs.current_savings


@pytest.mark.parametrize("retirement_age", [30, 31, 45, 67])
def test_row_count_matches_horizon(retirement_age):
    inputs = _base_inputs(retirement_age=retirement_age, life_expectancy=95)
    result = calculate_projections(inputs)
    assert len(result.yearly_data) == retirement_age - 30 + 1


def test_first_year_uses_base_values():
    result = calculate_projections(_base_inputs(), start_year=2025)
    first = result.yearly_data[0]
    assert first.age == 30
    assert first.year == 2025
    assert first.salary == 75000.0
    assert first.monthly_contribution == 500.0
    # 50% of 500 is below the 6% cap on 6250/month
    assert first.employer_match == pytest.approx(250.0)
    assert first.total_contribution == pytest.approx(9000.0)
    # interest only on the opening balance
    assert first.interest_earned == pytest.approx(3500.0)
    assert first.total_savings == pytest.approx(62500.0)
    assert first.total_savings_inflation_adjusted == first.total_savings


def test_second_year_compounds_opening_balance():
    second = calculate_projections(_base_inputs(), start_year=2025).yearly_data[1]
    assert second.year == 2026
    assert second.salary == pytest.approx(77250.0)
    assert second.monthly_contribution == pytest.approx(515.0)
    assert second.interest_earned == pytest.approx(62500.0 * 0.07)
    assert second.total_savings_inflation_adjusted == pytest.approx(second.total_savings / 1.03)


def test_rows_are_computed_from_base_values():
    inputs = _base_inputs()
    rows = calculate_projections(inputs).yearly_data
    for n, row in enumerate(rows):
        assert row.age == inputs.current_age + n
        assert row.salary == pytest.approx(formulas.salary_projection(75000.0, 0.03, n), rel=1e-12)
        assert row.monthly_contribution == pytest.approx(500.0 * 1.03 ** n, rel=1e-12)


def test_totals_match_rows():
    result = calculate_projections(_base_inputs())
    rows = result.yearly_data
    assert result.total_contributions == pytest.approx(sum(r.total_contribution for r in rows))
    assert result.total_interest_earned == pytest.approx(sum(r.interest_earned for r in rows))
    assert result.retirement_value == rows[-1].total_savings
    assert result.retirement_value == pytest.approx(
        50000.0 + result.total_contributions + result.total_interest_earned
    )


def test_employer_match_respects_salary_cap():
    inputs = _base_inputs(monthly_contribution=2000.0, employer_match_percent=1.0)
    for row in calculate_projections(inputs).yearly_data:
        assert row.employer_match <= row.salary / 12 * 0.06 + 1e-9


def test_income_uses_half_return_for_withdrawals():
    inputs = _base_inputs()
    result = calculate_projections(inputs)
    expected = formulas.sustainable_withdrawal_rate(result.retirement_value, 25, 0.035) + 2000.0
    assert result.monthly_retirement_income == pytest.approx(expected)
    assert result.monthly_retirement_income_inflation_adjusted == pytest.approx(expected / 1.03 ** 35)
    assert result.retirement_value_inflation_adjusted == pytest.approx(result.retirement_value / 1.03 ** 35)


def test_replacement_ratio_against_final_salary():
    result = calculate_projections(_base_inputs())
    final_salary = 75000.0 * 1.03 ** 35
    assert result.replacement_ratio == pytest.approx(result.monthly_retirement_income * 12 / final_salary)


def test_goal_met_has_no_shortfall():
    inputs = _base_inputs(desired_retirement_income=100.0)
    result = calculate_projections(inputs)
    assert result.retirement_shortfall == 0
    assert result.on_track
    assert result.recommended_monthly_savings == inputs.monthly_contribution


def test_shortfall_recommendation_uses_full_return():
    inputs = _base_inputs(desired_retirement_income=50000.0)
    result = calculate_projections(inputs)
    assert result.retirement_shortfall > 0
    assert not result.on_track
    expected_shortfall = 50000.0 * 12 - result.monthly_retirement_income * 12
    assert result.retirement_shortfall == pytest.approx(expected_shortfall)
    expected = formulas.calculate_required_savings(
        result.retirement_shortfall * 25 + result.retirement_value,
        50000.0,
        0.07,
        35,
        0.03,
    )
    assert result.recommended_monthly_savings == pytest.approx(expected)


def test_shortfall_with_no_years_left():
    result = calculate_projections(_base_inputs(retirement_age=30, desired_retirement_income=50000.0))
    assert result.retirement_shortfall > 0
    assert math.isfinite(result.recommended_monthly_savings)


def test_zero_salary_does_not_raise():
    result = calculate_projections(_base_inputs(current_salary=0.0))
    assert math.isinf(result.replacement_ratio)
    assert all(row.employer_match == 0 for row in result.yearly_data)


def test_results_are_immutable():
    result = calculate_projections(_base_inputs())
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.retirement_value = 0
    assert isinstance(result.yearly_data, tuple)


def test_inconsistent_ages_log_warning(caplog):
    with caplog.at_level("WARNING", logger="futurescope.calculators.projections"):
        result = calculate_projections(_base_inputs(retirement_age=25))
    assert result.yearly_data == ()
    assert "Inconsistent ages" in caplog.text
