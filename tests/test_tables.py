"""Tests for the pandas report tables."""

import pandas as pd
import pytest

from claiming_planner.calculators.optimizer import optimum_grid
from claiming_planner.calculators.schedule import payment_table
from claiming_planner.calculators.validation import ScenarioParameters
from claiming_planner.calculators.valuation import project_balances
from claiming_planner.components import tables


def test_payment_frame():
    df = tables.payment_frame(payment_table(1960, 1, 1000))
    assert len(df) == 97
    assert df.index[0] == 1
    first = df.iloc[0]
    assert first["Claiming age"] == "62:0"
    assert first["Claiming date"] == "January 2022"
    assert first["Monthly benefit ($)"] == 700.0
    assert pd.isna(first["Increase from previous month (%)"])
    assert df.iloc[60]["Status"] == "Normal"
    assert df.iloc[60]["Ratio to FRA (%)"] == 100.0


def test_projection_frame_groups_columns_by_claiming_age():
    scenario = ScenarioParameters(birth_year=1960, age_at_death=63, cola_pct=2.0)
    df = tables.projection_frame(project_balances(scenario, [62, 62.5]))
    assert isinstance(df.columns, pd.MultiIndex)
    assert ("62:0", "Balance ($)") in df.columns
    assert ("62:6", "Benefit ($)") in df.columns
    assert ("", "COLA factor") in df.columns
    assert ("", "Best claiming age") in df.columns
    assert ("", "Payment date") not in df.columns
    assert list(df.index[:2]) == [1, 2]
    assert df[("62:0", "Balance ($)")].iloc[1] == 1400.0


def test_projection_frame_single_age_with_loan_and_arrears():
    scenario = ScenarioParameters(birth_year=1960, age_at_death=63, paydown_balance=1000.0, arrears=True)
    df = tables.projection_frame(project_balances(scenario, [62]))
    assert ("", "Best claiming age") not in df.columns
    assert ("", "COLA factor") not in df.columns
    assert df.index[0] == 0
    assert df[("", "Age")].iloc[0] == ""
    assert df[("", "Date")].iloc[1] == "January 2022"
    assert df[("", "Payment date")].iloc[1] == "February 2022"


def test_grid_frames():
    grid = optimum_grid("npv", 1960, max_age_at_death=64, interest_rates=[0, 2.5])
    ages = tables.grid_frame(grid)
    assert ages.shape == (2, 2)
    assert list(ages.columns) == ["0.0%", "2.5%"]
    assert ages.index.name == "Age at death"
    assert ages.loc[62, "0.0%"] == "62:0"
    values = tables.grid_value_frame(grid)
    assert values.loc[62, "2.5%"] == 0.0


def test_color_scale():
    scale = tables.ColorScale(young=(0, 0, 0), old=(200, 100, 50))
    assert scale.interpolate(0) == "rgb(0,0,0)"
    assert scale.interpolate(1) == "rgb(200,100,50)"
    assert scale.interpolate(5) == "rgb(200,100,50)"
    assert scale.for_month_index(48) == "rgb(100,50,25)"


def test_grid_colors_follow_best_month():
    grid = optimum_grid("npv", 1960, max_age_at_death=62, interest_rates=[0])
    scale = tables.ColorScale()
    assert tables.grid_colors(grid, scale) == [[scale.interpolate(0)]]
    styled = tables.style_grid(grid, scale)
    assert styled.data.equals(tables.grid_frame(grid))
