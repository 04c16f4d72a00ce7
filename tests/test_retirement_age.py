"""Tests for the full retirement age table."""

import math

import pytest

from claiming_planner.calculators import retirement_age as ra


@pytest.mark.parametrize(
    "birth_year, expected",
    [
        (1954, 66.0),
        (1955, 66 + 2 / 12),
        (1956, 66 + 4 / 12),
        (1957, 66.5),
        (1958, 66 + 8 / 12),
        (1959, 66 + 10 / 12),
        (1960, 67.0),
    ],
)
def test_fra_table(birth_year, expected):
    assert math.isclose(ra.full_retirement_age(birth_year), expected, rel_tol=1e-12)


def test_years_outside_table_are_clamped():
    """Anyone born before 1954 has FRA 66, anyone after 1960 has FRA 67."""
    assert ra.full_retirement_age(1900) == 66.0
    assert ra.full_retirement_age(1943) == 66.0
    assert ra.full_retirement_age(1985) == 67.0
    assert ra.full_retirement_age(2050) == 67.0


def test_fra_never_decreases_in_two_month_steps():
    ages = [ra.full_retirement_age(y) for y in range(1950, 1966)]
    steps = [round((b - a) * 12) for a, b in zip(ages, ages[1:])]
    assert all(s in (0, 2) for s in steps)
    assert ages == sorted(ages)


def test_fra_month_index():
    assert ra.fra_month_index(1954) == 48
    assert ra.fra_month_index(1957) == 54
    assert ra.fra_month_index(1960) == 60


def test_retirement_status():
    assert ra.retirement_status(0, 1960) == "Early"
    assert ra.retirement_status(59, 1960) == "Early"
    assert ra.retirement_status(60, 1960) == "Normal"
    assert ra.retirement_status(61, 1960) == "Late"
    assert ra.retirement_status(48, 1950) == "Normal"
