"""Present value, future value and the month-by-month bank balance projection.

Three views of the same benefit stream, all measured in months after the
claimant's 62nd birthday:

* ``calc_npv`` discounts a constant (no COLA) benefit back to age 62.
* ``calc_fv`` deposits every benefit, COLA adjusted, into an account and
  returns the balance at death.
* ``project_balances`` is the detailed version of ``calc_fv`` that the reports
  show: several claiming ages side by side, an optional starting loan paid
  down at a borrowing rate, monthly spending and payment in arrears.

The NPV view intentionally ignores COLA while the two balance views apply it.

Example
-------

>>> # Born 1960, claim at 67, die at 68, no interest: twelve $1 000 payments
>>> round(calc_npv(1960, 67, 68, 0.0, pia=1000), 2)
12000.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
import logging
from typing import List, Optional, Sequence

import numpy as np

from .benefits import EARLIEST_CLAIMING_AGE
from .claiming_ages import month_date
from .schedule import BenefitScheduleCache, month_index
from .validation import ScenarioParameters

logger = logging.getLogger(__name__)


def months_after_62(age: float) -> int:
    """Whole months from age 62 to ``age``; never negative."""
    return max(0, round((age - EARLIEST_CLAIMING_AGE) * 12))


def _monthly_rate(rate_pct: float) -> float:
    return (rate_pct / 12) / 100


def calc_npv(
    birth_year: int,
    age_at_retirement: float,
    age_at_death: float,
    interest_rate_pct: float,
    pia: float = 1000.0,
    cache: Optional[BenefitScheduleCache] = None,
) -> float:
    """Value at age 62 of the benefits paid from ``age_at_retirement`` until death.

    The payment for month ``m`` is discounted by ``(1 + r) ** (m + 1)`` with
    ``r`` the monthly rate.  The benefit is held constant.
    """
    cache = cache or BenefitScheduleCache()
    monthly_benefit = cache.monthly_benefit(birth_year, age_at_retirement, pia)
    start = months_after_62(age_at_retirement)
    end = months_after_62(age_at_death)
    if end <= start:
        return 0.0
    months = np.arange(start, end)
    discount = np.power(1.0 + _monthly_rate(interest_rate_pct), months + 1)
    return float(np.sum(monthly_benefit / discount))


def calc_fv(
    birth_year: int,
    age_at_retirement: float,
    age_at_death: float,
    interest_rate_pct: float,
    cola_pct: float,
    birth_month_0based: int = 0,
    pia: float = 1000.0,
    cache: Optional[BenefitScheduleCache] = None,
) -> float:
    """Account balance at death when every benefit is deposited as received.

    COLA raises the benefit once a year, in the month that is a December for
    someone born in ``birth_month_0based`` (0 = January).  Nothing accrues
    before the first benefit.
    """
    cache = cache or BenefitScheduleCache()
    monthly_benefit = cache.monthly_benefit(birth_year, age_at_retirement, pia)
    start = months_after_62(age_at_retirement)
    end = months_after_62(age_at_death)
    growth = 1.0 + _monthly_rate(interest_rate_pct)
    cola_growth = 1.0 + cola_pct / 100
    december = 11 - birth_month_0based

    balance = 0.0
    for m in range(end):
        if m > 0 and m % 12 == december:
            monthly_benefit *= cola_growth
        if m >= start:
            balance = balance * growth + monthly_benefit
    return balance


@dataclass(frozen=True)
class MonthlyProjectionRow:
    month_index: int
    calendar_date: date
    age: float
    interest_accrued: float
    benefit_paid: float
    balance: float


@dataclass
class BalanceProjection:
    """Rows for each claiming age plus the per-month comparison across them.

    ``series[i]`` belongs to ``claiming_ages[i]``; all series share the month
    axis, so ``series[i][k]`` and ``series[j][k]`` describe the same month.
    """

    scenario: ScenarioParameters
    claiming_ages: List[float]
    series: List[List[MonthlyProjectionRow]] = field(default_factory=list)
    cola_factors: List[float] = field(default_factory=list)
    best_claiming_ages: List[Optional[float]] = field(default_factory=list)

    @property
    def month_indices(self) -> List[int]:
        return [row.month_index for row in self.series[0]] if self.series else []

    @property
    def dates(self) -> List[date]:
        return [row.calendar_date for row in self.series[0]] if self.series else []

    def balances(self, claiming_age: float) -> List[float]:
        return [row.balance for row in self.series[self.claiming_ages.index(claiming_age)]]

    def final_balances(self) -> List[float]:
        return [rows[-1].balance if rows else 0.0 for rows in self.series]


def project_balances(
    scenario: ScenarioParameters,
    claiming_ages: Sequence[float],
    cache: Optional[BenefitScheduleCache] = None,
) -> BalanceProjection:
    """Simulate a bank account per claiming age, one row per month.

    Each account starts at ``-paydown_balance``.  While an account is negative
    it is charged ``borrow_rate_pct``; otherwise it earns
    ``interest_rate_pct``.  With a starting loan an opening row (month -1)
    shows the balance before any activity.  With ``arrears`` every benefit is
    received one month after it is due, and the projection runs one month
    longer so the benefit for the last month of life is still received.
    """
    cache = cache or BenefitScheduleCache()
    schedule = cache.get(scenario.birth_year)
    claiming_ages = list(claiming_ages)
    arrears = 1 if scenario.arrears else 0
    last_benefit_month = months_after_62(scenario.age_at_death)
    num_months = last_benefit_month + arrears
    first_month = -1 if scenario.paydown_balance > 0 else 0
    earn_rate = _monthly_rate(scenario.interest_rate_pct)
    borrow_rate = _monthly_rate(scenario.borrow_rate_pct)
    cola_growth = 1.0 + scenario.cola_pct / 100
    birth_year_62 = scenario.birth_year + EARLIEST_CLAIMING_AGE

    start_indices = [month_index(age) for age in claiming_ages]
    multipliers = [schedule[i].benefit_multiplier for i in start_indices]
    balances = [-scenario.paydown_balance for _ in claiming_ages]

    projection = BalanceProjection(scenario=scenario, claiming_ages=claiming_ages,
                                   series=[[] for _ in claiming_ages])
    cola_factor = 1.0
    for m in range(first_month, num_months):
        if m >= 0 and (scenario.birth_month_0based + m) % 12 == 11:
            cola_factor *= cola_growth
        when = month_date(birth_year_62, scenario.birth_month_0based + m)
        age = EARLIEST_CLAIMING_AGE + m / 12

        best_balance = 0.0
        best_age = claiming_ages[0] if m >= 0 and claiming_ages else None
        for i, claiming_age in enumerate(claiming_ages):
            interest = benefit = 0.0
            if m >= 0:
                rate = earn_rate if balances[i] >= 0 else borrow_rate
                interest = balances[i] * rate
                if start_indices[i] + arrears <= m <= last_benefit_month:
                    benefit = multipliers[i] * scenario.pia * cola_factor
                balances[i] += interest + benefit - scenario.monthly_spend
                if balances[i] > best_balance:
                    best_balance = balances[i]
                    best_age = claiming_age
            projection.series[i].append(MonthlyProjectionRow(
                month_index=m,
                calendar_date=when,
                age=age,
                interest_accrued=interest,
                benefit_paid=benefit,
                balance=balances[i],
            ))
        projection.cola_factors.append(cola_factor)
        projection.best_claiming_ages.append(best_age)

    logger.debug(
        "Projected %d months for claiming ages %s (birth %s-%02d)",
        len(projection.cola_factors), claiming_ages, scenario.birth_year, scenario.birth_month,
    )
    return projection


__all__ = [
    "months_after_62",
    "calc_npv",
    "calc_fv",
    "MonthlyProjectionRow",
    "BalanceProjection",
    "project_balances",
]
