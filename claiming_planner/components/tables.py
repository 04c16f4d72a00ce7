"""pandas tables for the reports.

The calculators return exact values; this module is where they are rounded
and labelled for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pandas as pd

from claiming_planner.calculators.claiming_ages import format_month, month_date, to_years_months
from claiming_planner.calculators.optimizer import OptimizationGrid
from claiming_planner.calculators.schedule import MAX_MONTH_INDEX, PaymentRow
from claiming_planner.calculators.valuation import BalanceProjection
from claiming_planner.config import OLD_RGB, YOUNG_RGB


@dataclass(frozen=True)
class ColorScale:
    """Linear blend between two RGB colours, 0.0 -> ``young`` and 1.0 -> ``old``."""

    young: Tuple[int, int, int] = YOUNG_RGB
    old: Tuple[int, int, int] = OLD_RGB

    def interpolate(self, value: float) -> str:
        value = max(0.0, min(1.0, float(value)))
        channels = [round(y + value * (o - y)) for y, o in zip(self.young, self.old)]
        return "rgb({},{},{})".format(*channels)

    def for_month_index(self, month_index: int) -> str:
        return self.interpolate(month_index / MAX_MONTH_INDEX)


def payment_frame(rows: Sequence[PaymentRow]) -> pd.DataFrame:
    df = pd.DataFrame({
        "Claiming age": [to_years_months(r.claiming_age, 2) for r in rows],
        "Claiming date": [format_month(r.claiming_date) for r in rows],
        "Status": [r.status for r in rows],
        "Monthly benefit ($)": [round(r.monthly_benefit, 2) for r in rows],
        "Increase from previous month (%)": [
            None if r.increase_from_previous is None else round(100 * r.increase_from_previous, 2) for r in rows
        ],
        "Ratio to age 62 (%)": [round(100 * r.ratio_to_age_62, 1) for r in rows],
        "Ratio to FRA (%)": [round(100 * r.ratio_to_fra, 1) for r in rows],
    })
    df.index = pd.RangeIndex(1, len(df) + 1)
    return df


def projection_frame(projection: BalanceProjection) -> pd.DataFrame:
    """One row per month; a column group (interest, benefit, balance) per claiming age."""
    scenario = projection.scenario
    dates = projection.dates
    columns = {("", "Date"): [format_month(d) for d in dates]}
    if scenario.arrears:
        columns[("", "Payment date")] = [
            format_month(month_date(d.year, d.month)) for d in dates  # month after the due month
        ]
    columns[("", "Age")] = ["" if m < 0 else to_years_months(62 + m / 12, 2) for m in projection.month_indices]
    if scenario.cola_pct != 0:
        columns[("", "COLA factor")] = [round(f, 3) for f in projection.cola_factors]
    if scenario.monthly_spend != 0:
        columns[("", "Spending ($)")] = [scenario.monthly_spend] * len(dates)

    for age, rows in zip(projection.claiming_ages, projection.series):
        label = to_years_months(age, 2)
        columns[(label, "Interest ($)")] = [round(r.interest_accrued, 2) for r in rows]
        columns[(label, "Benefit ($)")] = [round(r.benefit_paid, 2) for r in rows]
        columns[(label, "Balance ($)")] = [round(r.balance, 2) for r in rows]

    if len(projection.claiming_ages) > 1:
        columns[("", "Best claiming age")] = [
            "" if a is None else to_years_months(a, 2) for a in projection.best_claiming_ages
        ]

    df = pd.DataFrame(columns)
    df.index = pd.Index([m + 1 for m in projection.month_indices], name="Month")
    return df


def grid_frame(grid: OptimizationGrid) -> pd.DataFrame:
    """Best claiming age (years:months) by age at death (rows) and interest rate (columns)."""
    data = [[to_years_months(r.best_claiming_age, 2) for r in row] for row in grid.results]
    return pd.DataFrame(
        data,
        index=pd.Index(grid.ages_at_death, name="Age at death"),
        columns=[f"{rate:.1f}%" for rate in grid.interest_rates],
    )


def grid_value_frame(grid: OptimizationGrid) -> pd.DataFrame:
    return pd.DataFrame(
        grid.value_matrix().round(2),
        index=pd.Index(grid.ages_at_death, name="Age at death"),
        columns=[f"{rate:.1f}%" for rate in grid.interest_rates],
    )


def grid_colors(grid: OptimizationGrid, scale: ColorScale) -> List[List[str]]:
    return [[scale.for_month_index(r.best_month_index) for r in row] for row in grid.results]


def style_grid(grid: OptimizationGrid, scale: ColorScale):
    """Styler with each cell shaded from the young colour (62) to the old colour (70)."""
    df = grid_frame(grid)
    colors = pd.DataFrame(grid_colors(grid, scale), index=df.index, columns=df.columns)
    return df.style.apply(lambda _: colors.map(lambda c: f"background-color: {c}"), axis=None)


__all__ = [
    "ColorScale",
    "payment_frame",
    "projection_frame",
    "grid_frame",
    "grid_value_frame",
    "grid_colors",
    "style_grid",
]
