"""Parameter record consumed by every calculator.

A :class:`CalculatorInputs` instance is the flat bag of numbers the input
form produces.  The calculators never mutate it; scenario and Monte Carlo
runs derive modified copies with :meth:`CalculatorInputs.replace`.

Example
-------

>>> inputs = CalculatorInputs.from_mapping({"currentAge": 40, "retirementAge": 67}, defaults=DEFAULT_INPUTS)
>>> inputs.years_to_retirement
27
"""

from __future__ import annotations

import dataclasses
import math
import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .assumptions import DEFAULT_INPUTS


class InputError(ValueError):
    """Raised when a mapping cannot be turned into :class:`CalculatorInputs`."""


AGE_FIELDS = ("current_age", "retirement_age", "life_expectancy")


@dataclass(frozen=True)
class CalculatorInputs:
    # Time horizon (whole years)
    current_age: int
    retirement_age: int
    life_expectancy: int
    # Income
    current_salary: float
    salary_growth_rate: float
    # Savings
    current_savings: float
    monthly_contribution: float
    contribution_increase_rate: float
    # Employer match
    employer_match_percent: float
    employer_match_limit: float
    # Market
    expected_return: float
    inflation_rate: float
    # Tax (retirement_tax_rate is carried for the form but not used by any formula)
    tax_rate: float
    retirement_tax_rate: float
    # Goals (monthly amounts)
    desired_retirement_income: float
    social_security_benefit: float

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age

    @property
    def years_of_retirement(self) -> int:
        return self.life_expectancy - self.retirement_age

    def replace(self, **overrides) -> "CalculatorInputs":
        return dataclasses.replace(self, **overrides)

    def to_dict(self) -> Dict[str, float]:
        return dataclasses.asdict(self)

    @classmethod
    def default(cls) -> "CalculatorInputs":
        return cls.from_mapping(DEFAULT_INPUTS)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, object],
        defaults: Optional[Mapping[str, object]] = None,
    ) -> "CalculatorInputs":
        """Build inputs from a mapping of field names to numbers.

        Keys may be snake_case (``current_age``) or the camelCase names used
        by share links and saved JSON (``currentAge``).  Values missing from
        ``data`` are taken from ``defaults`` when given.  A field that is
        absent from both, whose value is not numeric, or an age that is not a
        whole number of years raises :class:`InputError`.
        """
        values: Dict[str, object] = {}
        if defaults:
            values.update({to_field_name(k): v for k, v in defaults.items()})
        values.update({to_field_name(k): v for k, v in data.items()})

        kwargs = {}
        missing = []
        for name in field_names():
            if name not in values:
                missing.append(name)
                continue
            kwargs[name] = _coerce(name, values[name])
        if missing:
            raise InputError(f"Missing input fields: {', '.join(missing)}")
        return cls(**kwargs)


def field_names():
    return [f.name for f in dataclasses.fields(CalculatorInputs)]


def to_field_name(key: str) -> str:
    """``currentAge`` -> ``current_age``; snake_case keys pass through."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def to_camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _coerce(name: str, value: object):
    if isinstance(value, bool):
        raise InputError(f"{name} must be numeric, got {value!r}")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InputError(f"{name} must be numeric, got {value!r}") from None
    if not math.isfinite(number):
        raise InputError(f"{name} must be finite, got {value!r}")
    if name in AGE_FIELDS:
        if not number.is_integer():
            raise InputError(f"{name} must be a whole number of years, got {value!r}")
        return int(number)
    return number


__all__ = ["AGE_FIELDS", "CalculatorInputs", "InputError", "field_names", "to_field_name", "to_camel_case"]
