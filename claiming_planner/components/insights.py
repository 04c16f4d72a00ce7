from claiming_planner.calculators.claiming_ages import to_years_months
from claiming_planner.calculators.optimizer import OptimizationGrid
from claiming_planner.calculators.schedule import MAX_MONTH_INDEX
from claiming_planner.calculators.valuation import BalanceProjection


def summarize_projection(projection: BalanceProjection) -> str:
    """Return a short insight about a bank balance projection.

    Names the claiming age that ends with the highest balance and, when more
    than one age is compared, when that age first took the lead for good.
    """
    finals = projection.final_balances()
    if not finals:
        return "No claiming ages to compare."
    best = max(range(len(finals)), key=lambda i: finals[i])
    best_age = projection.claiming_ages[best]
    death_age = projection.scenario.age_at_death
    text = (
        f"Claiming at {to_years_months(best_age, 0)} ends with the highest balance, "
        f"${finals[best]:,.0f} at age {death_age:g}."
    )
    if len(finals) == 1:
        return text

    leaders = projection.best_claiming_ages
    lead_from = len(leaders)
    while lead_from > 0 and leaders[lead_from - 1] == best_age:
        lead_from -= 1
    if 0 < lead_from < len(leaders):
        row = projection.series[best][lead_from]
        text += f" It leads from {to_years_months(row.age, 0)} on."
    if finals[best] < 0:
        text += " Every strategy ends with a negative balance."
    return text


def summarize_grid(grid: OptimizationGrid) -> str:
    """Describe how often claiming early or late wins across the grid."""
    months = grid.month_matrix()
    if months.size == 0:
        return "The grid is empty."
    total = months.size
    at_70 = int((months == MAX_MONTH_INDEX).sum())
    at_62 = int((months == 0).sum())
    basis = "present value at 62" if grid.method == "npv" else "bank balance at death"
    return (
        f"Based on {basis}: claiming at 70 is best in {at_70} of {total} scenarios, "
        f"claiming at 62 in {at_62}, and an age in between in {total - at_70 - at_62}."
    )
