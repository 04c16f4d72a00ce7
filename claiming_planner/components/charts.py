# components/charts.py
# Plotly figures for the claiming reports; each returns a go.Figure for st.plotly_chart.

from typing import Sequence

import plotly.graph_objects as go

from claiming_planner.calculators.claiming_ages import MONTH_NAMES, format_month, to_years_months
from claiming_planner.calculators.optimizer import OptimizationGrid
from claiming_planner.calculators.schedule import PaymentRow
from claiming_planner.calculators.valuation import BalanceProjection


def _layout(fig: go.Figure, title: str, height: int = 380, **kwargs) -> go.Figure:
    fig.update_layout(
        title=title,
        template="plotly_white",
        height=height,
        margin=dict(l=10, r=10, t=60, b=10),
        **kwargs,
    )
    return fig


# ---------- Bank balance per claiming age ----------
def balance_chart(projection: BalanceProjection,
                  title: str = "Claiming age and future value of benefits") -> go.Figure:
    """One dashed line per claiming age, balance against month."""
    scenario = projection.scenario
    labels = [f"{format_month(d)} {to_years_months(62 + m / 12, 2)}"
              for d, m in zip(projection.dates, projection.month_indices)]

    fig = go.Figure()
    for age, rows in zip(projection.claiming_ages, projection.series):
        fig.add_trace(go.Scatter(
            x=labels, y=[r.balance for r in rows], mode="lines",
            name=to_years_months(age, 3),
            line=dict(width=1.5, dash="dash"),
            hovertemplate="%{x}<br>Claiming age " + to_years_months(age, 3) + ": $%{y:,.0f}<extra></extra>",
        ))

    subtitle = (f"Birth: {MONTH_NAMES[scenario.birth_month - 1]} {scenario.birth_year}, "
                f"interest {scenario.interest_rate_pct:g}%, COLA {scenario.cola_pct:g}%, PIA ${scenario.pia:,.0f}")
    if scenario.monthly_spend:
        subtitle += f", spending ${scenario.monthly_spend:,.0f}/month"
    if scenario.borrow_rate_pct:
        subtitle += f", borrowing at {scenario.borrow_rate_pct:g}%"
    return _layout(
        fig, f"{title}<br><sup>{subtitle}</sup>",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1, title="Claiming age"),
        xaxis_title="Month",
        yaxis_title="Bank balance (nominal $)",
        yaxis_tickprefix="$",
    )


# ---------- Benefit by claiming month ----------
def benefit_chart(rows: Sequence[PaymentRow], title: str = "Monthly benefit by claiming age") -> go.Figure:
    colors = {"Early": "#f59e0b", "Normal": "#22c55e", "Late": "#3b82f6"}
    fig = go.Figure(go.Bar(
        x=[to_years_months(r.claiming_age, 2) for r in rows],
        y=[r.monthly_benefit for r in rows],
        marker_color=[colors[r.status] for r in rows],
        customdata=[r.status for r in rows],
        hovertemplate="Claiming age %{x} (%{customdata})<br>$%{y:,.2f}/month<extra></extra>",
    ))
    return _layout(fig, title, xaxis_title="Claiming age (years:months)", yaxis_title="Dollars per month")


# ---------- Optimum claiming age heatmap ----------
def best_age_heatmap(grid: OptimizationGrid,
                     title: str = "Best claiming age",
                     colorbar_title: str = "Claiming age") -> go.Figure:
    """
    Render the optimum grid as a heatmap.
    - rows: age at death, columns: interest rate
    - colour: best claiming age, hover: age (years:months) and value
    """
    ages = grid.age_matrix()
    value_label = "NPV at 62" if grid.method == "npv" else "Bank balance"
    hover = [[f"{to_years_months(r.best_claiming_age, 2)}<br>{value_label}: ${r.best_value:,.0f}" for r in row]
             for row in grid.results]
    fig = go.Figure(data=go.Heatmap(
        z=ages,
        x=[f"{rate:.1f}%" for rate in grid.interest_rates],
        y=grid.ages_at_death,
        text=hover,
        hovertemplate="Age at death %{y}, interest %{x}<br>%{text}<extra></extra>",
        hoverongaps=False,
        colorscale="RdYlGn_r",
        zmin=62,
        zmax=70,
        colorbar=dict(title=colorbar_title),
    ))
    return _layout(fig, title, height=520, xaxis_title="Interest rate", yaxis_title="Age at death")
