"""Tests for input parsing and the claiming-age range check."""

import pytest

from claiming_planner.calculators import validation as v
from claiming_planner.config import DEFAULTS


def test_defaults_are_valid():
    result = v.parse_scenario({})
    assert result.is_valid
    scenario = result.scenario
    assert scenario.birth_year == DEFAULTS["birth_year"]
    assert scenario.pia == 1000.0
    assert scenario.age_at_death == 100
    assert scenario.arrears is False
    assert scenario.birth_month_0based == 0


def test_strings_are_coerced():
    result = v.parse_scenario({
        "birth_year": "1957", "birth_month": " 6 ", "pia": "1500.50",
        "interest_rate_pct": "-2", "arrears": "Yes",
    })
    assert result.is_valid
    s = result.scenario
    assert s.birth_year == 1957 and isinstance(s.birth_year, int)
    assert s.birth_month == 6
    assert s.pia == 1500.5
    assert s.interest_rate_pct == -2.0
    assert s.arrears is True


def test_every_error_is_reported():
    result = v.parse_scenario({"birth_year": "abc", "birth_month": 13, "pia": -5, "arrears": "maybe"})
    assert not result.is_valid
    assert result.scenario is None
    fields = sorted(e.field for e in result.errors)
    assert fields == ["arrears", "birth_month", "birth_year", "pia"]


def test_out_of_range_is_rejected_not_clamped():
    result = v.parse_scenario({"borrow_rate_pct": 30, "age_at_death": 61})
    assert {e.field for e in result.errors} == {"borrow_rate_pct", "age_at_death"}


def test_bounds_are_inclusive():
    assert v.parse_scenario({"age_at_death": 62, "borrow_rate_pct": 25, "birth_month": 12}).is_valid


@pytest.mark.parametrize("value", ["1960.5", 1960.5, True, None, float("nan")])
def test_birth_year_must_be_a_whole_number(value):
    result = v.parse_scenario({"birth_year": value})
    assert [e.field for e in result.errors] == ["birth_year"]


@pytest.mark.parametrize("raw, expected", [(True, True), (0, False), ("paid", True), ("due", False), ("", False)])
def test_arrears_flags(raw, expected):
    assert v.parse_scenario({"arrears": raw}).scenario.arrears is expected


def test_validation_error_message():
    err = v.ValidationError("pia", -5, "expected a value between 0.0 and 50000.0")
    assert str(err) == "pia: expected a value between 0.0 and 50000.0 (got -5)"


def test_claiming_ages_within_62_and_70():
    assert v.validate_claiming_ages([62, 66 + 5 / 12, 70]) == []
    # float noise from years:months input is accepted
    assert v.validate_claiming_ages([64 + 11 / 12, 70.0000000001]) == []


def test_claiming_ages_out_of_range():
    errors = v.validate_claiming_ages([61 + 11 / 12, 67, 70 + 1 / 12])
    assert [e.field for e in errors] == ["claiming_ages[0]", "claiming_ages[2]"]


def test_claiming_ages_empty():
    errors = v.validate_claiming_ages([])
    assert len(errors) == 1 and errors[0].field == "claiming_ages"


def test_claiming_ages_must_be_finite():
    errors = v.validate_claiming_ages([float("nan"), 65, float("inf")])
    assert [e.field for e in errors] == ["claiming_ages[0]", "claiming_ages[2]"]
    assert all(e.message == "expected a finite number" for e in errors)
