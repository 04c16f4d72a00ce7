"""Tests for the early reduction / delayed credit benefit formula."""

import math

import pytest

from claiming_planner.calculators import benefits
from claiming_planner.calculators.retirement_age import full_retirement_age


def test_claiming_at_fra_pays_pia():
    assert benefits.monthly_benefit_multiplier(1960, 67, pia=1000) == 1000
    assert benefits.monthly_benefit_multiplier(1957, 66.5, pia=1234.5) == 1234.5


def test_five_years_early_born_1960():
    """36 months at 5/9 % plus 24 months at 5/12 %: 20 % + 10 % reduction."""
    assert math.isclose(benefits.monthly_benefit_multiplier(1960, 62, pia=1000), 700.0, rel_tol=1e-12)


def test_three_years_early_is_the_kink():
    assert math.isclose(benefits.monthly_benefit_multiplier(1960, 64), 0.8, rel_tol=1e-12)
    # the second band starts right after
    one_more = benefits.monthly_benefit_multiplier(1960, 64 - 1 / 12)
    assert math.isclose(one_more, 0.8 - 0.05 / 12, rel_tol=1e-12)


def test_four_years_early_born_1954():
    assert math.isclose(benefits.monthly_benefit_multiplier(1954, 62), 0.75, rel_tol=1e-12)


def test_delayed_credit_to_70():
    assert math.isclose(benefits.monthly_benefit_multiplier(1960, 70, pia=1000), 1240.0, rel_tol=1e-12)
    assert math.isclose(benefits.monthly_benefit_multiplier(1954, 70), 1.32, rel_tol=1e-12)


def test_no_credit_after_70():
    at_70 = benefits.monthly_benefit_multiplier(1960, 70)
    assert benefits.monthly_benefit_multiplier(1960, 72) == at_70


def test_no_floor_on_the_reduction():
    """The formula keeps going below 62; values are not clamped at zero."""
    far_early = benefits.monthly_benefit_multiplier(1960, 20)
    assert far_early < 0


@pytest.mark.parametrize("birth_year", [1950, 1955, 1957, 1959, 1960, 1975])
def test_benefit_increases_every_month(birth_year):
    values = [benefits.monthly_benefit_multiplier(birth_year, 62 + m / 12) for m in range(97)]
    assert all(b > a for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("birth_year", [1954, 1956, 1958, 1960])
def test_continuous_at_fra(birth_year):
    fra = full_retirement_age(birth_year)
    eps = 1e-6
    below = benefits.monthly_benefit_multiplier(birth_year, fra - eps)
    above = benefits.monthly_benefit_multiplier(birth_year, fra + eps)
    assert below == pytest.approx(1.0, abs=1e-5)
    assert above == pytest.approx(1.0, abs=1e-5)


def test_pia_scales_linearly():
    one = benefits.monthly_benefit_multiplier(1958, 63.25)
    assert math.isclose(benefits.monthly_benefit_multiplier(1958, 63.25, pia=2500), 2500 * one, rel_tol=1e-12)
