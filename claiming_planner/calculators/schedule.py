"""Per-birth-year benefit schedule for every claiming month from 62y0m to 70y0m.

A schedule holds 97 entries, one per month index (0 = age 62 and 0 months,
96 = age 70 and 0 months).  Entry ``i`` is the benefit multiplier for claiming
at age ``62 + i/12``.  Building it is cheap (97 formula evaluations) but the
optimizer looks benefits up tens of thousands of times, so callers share a
:class:`BenefitScheduleCache` that keeps the schedule of the last birth year.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import logging
import threading
from typing import List, Optional, Tuple

from .benefits import EARLIEST_CLAIMING_AGE, monthly_benefit_multiplier
from .claiming_ages import month_date
from .retirement_age import fra_month_index, retirement_status

logger = logging.getLogger(__name__)

MAX_MONTH_INDEX = 96
SCHEDULE_LENGTH = MAX_MONTH_INDEX + 1


@dataclass(frozen=True)
class BenefitScheduleEntry:
    age_year: int
    age_month: int
    benefit_multiplier: float

    @property
    def claiming_age(self) -> float:
        return self.age_year + self.age_month / 12


@dataclass(frozen=True)
class BenefitSchedule:
    birth_year: int
    entries: Tuple[BenefitScheduleEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> BenefitScheduleEntry:
        return self.entries[index]

    def multipliers(self) -> List[float]:
        return [e.benefit_multiplier for e in self.entries]


def month_index(claiming_age: float) -> int:
    """Month index for ``claiming_age``, clamped to the schedule (0..96)."""
    index = round((claiming_age - EARLIEST_CLAIMING_AGE) * 12)
    return max(0, min(MAX_MONTH_INDEX, index))


def build_schedule(birth_year: int) -> BenefitSchedule:
    entries = tuple(
        BenefitScheduleEntry(
            age_year=EARLIEST_CLAIMING_AGE + index // 12,
            age_month=index % 12,
            benefit_multiplier=monthly_benefit_multiplier(birth_year, EARLIEST_CLAIMING_AGE + index / 12, 1),
        )
        for index in range(SCHEDULE_LENGTH)
    )
    return BenefitSchedule(birth_year=birth_year, entries=entries)


class BenefitScheduleCache:
    """Single-slot schedule cache keyed by birth year.

    Asking for a different birth year replaces the slot; the schedule is
    swapped in whole so a reader never sees a half-built one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._schedule: Optional[BenefitSchedule] = None
        self.builds = 0

    @property
    def birth_year(self) -> Optional[int]:
        schedule = self._schedule
        return schedule.birth_year if schedule is not None else None

    def get(self, birth_year: int) -> BenefitSchedule:
        with self._lock:
            if self._schedule is None or self._schedule.birth_year != birth_year:
                logger.debug("Building benefit schedule for birth year %s", birth_year)
                self._schedule = build_schedule(birth_year)
                self.builds += 1
            return self._schedule

    def invalidate(self) -> None:
        with self._lock:
            self._schedule = None

    def monthly_benefit(self, birth_year: int, claiming_age: float, pia: float) -> float:
        return self.get(birth_year)[month_index(claiming_age)].benefit_multiplier * pia


def get_monthly_benefit(
    birth_year: int,
    claiming_age: float,
    pia: float,
    cache: Optional[BenefitScheduleCache] = None,
) -> float:
    """Monthly benefit via the schedule; uses a private cache when none is given."""
    return (cache or BenefitScheduleCache()).monthly_benefit(birth_year, claiming_age, pia)


@dataclass(frozen=True)
class PaymentRow:
    month_index: int
    claiming_age: float
    claiming_date: date
    status: str
    monthly_benefit: float
    increase_from_previous: Optional[float]
    ratio_to_age_62: float
    ratio_to_fra: float


def payment_table(
    birth_year: int,
    birth_month: int,
    pia: float,
    cache: Optional[BenefitScheduleCache] = None,
) -> List[PaymentRow]:
    """Benefit for each claiming month with its relation to age 62 and FRA.

    Ratios and increases are fractions (0.05 is 5 %); ``claiming_date`` is the
    first day of the claiming month for someone born in ``birth_month``.
    """
    schedule = (cache or BenefitScheduleCache()).get(birth_year)
    multipliers = schedule.multipliers()
    at_62 = multipliers[0]
    at_fra = multipliers[min(fra_month_index(birth_year), MAX_MONTH_INDEX)]

    rows = []
    for index, entry in enumerate(schedule.entries):
        previous = multipliers[index - 1] if index else None
        rows.append(PaymentRow(
            month_index=index,
            claiming_age=EARLIEST_CLAIMING_AGE + index / 12,
            claiming_date=month_date(birth_year + EARLIEST_CLAIMING_AGE, birth_month - 1 + index),
            status=retirement_status(index, birth_year),
            monthly_benefit=entry.benefit_multiplier * pia,
            increase_from_previous=None if previous is None else entry.benefit_multiplier / previous - 1,
            ratio_to_age_62=entry.benefit_multiplier / at_62,
            ratio_to_fra=entry.benefit_multiplier / at_fra,
        ))
    return rows


__all__ = [
    "MAX_MONTH_INDEX",
    "SCHEDULE_LENGTH",
    "BenefitScheduleEntry",
    "BenefitSchedule",
    "BenefitScheduleCache",
    "PaymentRow",
    "month_index",
    "build_schedule",
    "get_monthly_benefit",
    "payment_table",
]
