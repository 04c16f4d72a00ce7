"""Tests for claiming-age parsing and the years/months labels."""

from datetime import date

import pytest

from claiming_planner.calculators import claiming_ages as ca
from claiming_planner.calculators.validation import ConfigurationError


def test_plain_list():
    assert ca.parse_claiming_ages("62 67 70") == [62.0, 67.0, 70.0]
    assert ca.parse_claiming_ages("  66.5\t68 ") == [66.5, 68.0]


def test_years_and_months():
    ages = ca.parse_claiming_ages("62:5 64:11")
    assert ages == pytest.approx([62 + 5 / 12, 64 + 11 / 12])


def test_range_expansion():
    assert ca.parse_claiming_ages("62 70 2") == [62.0, 64.0, 66.0, 68.0, 70.0]
    assert ca.parse_claiming_ages("62 63 0:6") == [62.0, 62.5, 63.0]


def test_range_includes_stop_despite_float_noise():
    ages = ca.parse_claiming_ages("62 63 0:1")
    assert len(ages) == 13
    assert ages[-1] == pytest.approx(63.0)


def test_three_values_that_are_not_a_range():
    assert ca.parse_claiming_ages("62 64 66") == [62.0, 64.0, 66.0]
    assert ca.parse_claiming_ages("70 67 62") == [70.0, 67.0, 62.0]


@pytest.mark.parametrize("text", ["", "   ", "abc", "62 x", "62:12", "62:-1", "1:2:3", "nan", "inf", "62:a"])
def test_bad_text_raises(text):
    with pytest.raises(ConfigurationError):
        ca.parse_claiming_ages(text)


@pytest.mark.parametrize("text", ["62 70 0", "62 70 -1"])
def test_range_needs_positive_increment(text):
    with pytest.raises(ConfigurationError):
        ca.parse_claiming_ages(text)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        ca.parse_claiming_ages("oops")


def test_to_years_months_styles():
    age = 64 + 5 / 12
    assert ca.to_years_months(age, 0) == "64 y, 5 m"
    assert ca.to_years_months(age, 1) == "64 years, 5 months"
    assert ca.to_years_months(age, 2) == "64:5"
    assert ca.to_years_months(age, 3) == "64:5"
    assert ca.to_years_months(67, 0) == "67 y"
    assert ca.to_years_months(67, 2) == "67:0"
    assert ca.to_years_months(67, 3) == "67"


def test_to_years_months_carries_rounding():
    assert ca.to_years_months(62.9999999, 2) == "63:0"


def test_to_years_months_unknown_style():
    with pytest.raises(ValueError):
        ca.to_years_months(62, 9)


def test_month_dates():
    assert ca.month_date(2022, 0) == date(2022, 1, 1)
    assert ca.month_date(2022, 13) == date(2023, 2, 1)
    assert ca.month_date(2022, -1) == date(2021, 12, 1)
    assert ca.format_month(date(2022, 3, 1)) == "March 2022"
