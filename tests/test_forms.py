"""Tests for loading saved inputs into the sidebar form defaults."""

from claiming_planner.components.forms import load_form_defaults


def test_valid_file_is_normalised():
    defaults, errors = load_form_defaults({
        "birth_year": "1957", "birth_month": 6, "age_at_death": 90.0,
        "report_type": "bank_balance", "claiming_ages": "62 70", "unknown": 1,
    })
    assert errors == []
    assert defaults["birth_year"] == 1957 and isinstance(defaults["birth_year"], int)
    assert defaults["birth_month"] == 6
    assert defaults["age_at_death"] == 90 and isinstance(defaults["age_at_death"], int)
    assert defaults["report_type"] == "bank_balance"
    assert "unknown" not in defaults


def test_bad_values_are_reported_not_stored():
    defaults, errors = load_form_defaults({"birth_year": "abc", "birth_month": 13})
    assert defaults == {}
    assert sorted(e.field for e in errors) == ["birth_month", "birth_year"]


def test_bad_report_type_and_claiming_ages():
    defaults, errors = load_form_defaults({"report_type": ["x"], "claiming_ages": [62, 70]})
    assert defaults == {}
    assert sorted(e.field for e in errors) == ["claiming_ages", "report_type"]
