"""Search for the claiming month that maximises present or future value.

Every one of the 97 claiming months (62y0m .. 70y0m) is valued and the
strictly largest wins, so on ties the earliest month is kept.  The grid
functions repeat the search for a range of ages at death (rows) and interest
rates (columns), which is what the optimum claiming age summary tables show.

Example
-------

>>> # No discounting and a long life: waiting until 70 pays
>>> best_claiming_month_by_npv(1960, 100, 0.0).best_claiming_age
70.0
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from ..config import GRID_AGE_STEP, GRID_INTEREST_RATES
from .benefits import EARLIEST_CLAIMING_AGE
from .schedule import SCHEDULE_LENGTH, BenefitScheduleCache
from .valuation import calc_fv, calc_npv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizationResult:
    best_month_index: int
    best_value: float

    @property
    def best_claiming_age(self) -> float:
        return EARLIEST_CLAIMING_AGE + self.best_month_index / 12


def _sweep(value_at: Callable[[float], float]) -> OptimizationResult:
    best_value = 0.0
    best_index = 0
    for index in range(SCHEDULE_LENGTH):
        value = value_at(EARLIEST_CLAIMING_AGE + index / 12)
        if value > best_value:
            best_value = value
            best_index = index
    return OptimizationResult(best_month_index=best_index, best_value=best_value)


def best_claiming_month_by_npv(
    birth_year: int,
    age_at_death: float,
    interest_rate_pct: float,
    pia: float = 1000.0,
    cache: Optional[BenefitScheduleCache] = None,
) -> OptimizationResult:
    """Claiming month with the highest present value at age 62."""
    cache = cache or BenefitScheduleCache()
    return _sweep(lambda age: calc_npv(birth_year, age, age_at_death, interest_rate_pct, pia, cache=cache))


def best_claiming_month_by_fv(
    birth_year: int,
    age_at_death: float,
    interest_rate_pct: float,
    cola_pct: float = 0.0,
    birth_month_0based: int = 0,
    pia: float = 1000.0,
    cache: Optional[BenefitScheduleCache] = None,
) -> OptimizationResult:
    """Claiming month with the highest bank balance at death."""
    cache = cache or BenefitScheduleCache()
    return _sweep(lambda age: calc_fv(
        birth_year, age, age_at_death, interest_rate_pct, cola_pct, birth_month_0based, pia, cache=cache,
    ))


@dataclass
class OptimizationGrid:
    """Best claiming months keyed by (age at death, interest rate)."""

    method: str
    ages_at_death: List[int]
    interest_rates: List[float]
    results: List[List[OptimizationResult]]

    def result(self, age_at_death: int, interest_rate_pct: float) -> OptimizationResult:
        row = self.ages_at_death.index(age_at_death)
        col = self.interest_rates.index(interest_rate_pct)
        return self.results[row][col]

    def month_matrix(self) -> np.ndarray:
        return np.array([[r.best_month_index for r in row] for row in self.results], dtype=int)

    def value_matrix(self) -> np.ndarray:
        return np.array([[r.best_value for r in row] for row in self.results], dtype=float)

    def age_matrix(self) -> np.ndarray:
        return EARLIEST_CLAIMING_AGE + self.month_matrix() / 12


def grid_ages_at_death(max_age_at_death: float, step: int = GRID_AGE_STEP) -> List[int]:
    """Ages at death for the grid rows: 62, 64, ... up to ``max_age_at_death``."""
    return list(range(EARLIEST_CLAIMING_AGE, int(max_age_at_death) + 1, step))


def optimum_grid(
    method: str,
    birth_year: int,
    max_age_at_death: float = 100,
    pia: float = 1000.0,
    cola_pct: float = 0.0,
    birth_month_0based: int = 0,
    interest_rates: Sequence[float] = GRID_INTEREST_RATES,
    cache: Optional[BenefitScheduleCache] = None,
) -> OptimizationGrid:
    """Run the optimizer for every (age at death, interest rate) pair.

    ``method`` is ``"npv"`` (COLA and birth month are ignored) or ``"fv"``.
    """
    cache = cache or BenefitScheduleCache()
    searches: Dict[str, Callable[[int, float], OptimizationResult]] = {
        "npv": lambda aad, rate: best_claiming_month_by_npv(birth_year, aad, rate, pia, cache=cache),
        "fv": lambda aad, rate: best_claiming_month_by_fv(
            birth_year, aad, rate, cola_pct, birth_month_0based, pia, cache=cache,
        ),
    }
    if method not in searches:
        raise ValueError(f"unknown optimization method '{method}', expected one of {sorted(searches)}")
    search = searches[method]

    ages = grid_ages_at_death(max_age_at_death)
    rates = list(interest_rates)
    logger.debug("Optimum %s grid: %d ages at death x %d rates", method, len(ages), len(rates))
    results = [[search(aad, rate) for rate in rates] for aad in ages]
    return OptimizationGrid(method=method, ages_at_death=ages, interest_rates=rates, results=results)


__all__ = [
    "OptimizationResult",
    "OptimizationGrid",
    "best_claiming_month_by_npv",
    "best_claiming_month_by_fv",
    "grid_ages_at_death",
    "optimum_grid",
]
