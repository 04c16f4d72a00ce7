"""Full retirement age (FRA) by year of birth.

The 1983 amendments raised the age at which an unreduced retirement benefit is
payable from 66 to 67, two months per birth year for those born 1955 through
1959:

* Born 1954 or earlier: FRA is 66.
* Born 1955 through 1959: 66 and 2, 4, 6, 8 or 10 months.
* Born 1960 or later: FRA is 67.

Example
-------

>>> full_retirement_age(1954)
66.0

>>> round(full_retirement_age(1957), 4)
66.5
"""

from __future__ import annotations

from typing import Dict


_FRA_BY_BIRTH_YEAR: Dict[int, float] = {
    1954: 66 + 0 / 12,
    1955: 66 + 2 / 12,
    1956: 66 + 4 / 12,
    1957: 66 + 6 / 12,
    1958: 66 + 8 / 12,
    1959: 66 + 10 / 12,
    1960: 67 + 0 / 12,
}
_FIRST_YEAR = min(_FRA_BY_BIRTH_YEAR)
_LAST_YEAR = max(_FRA_BY_BIRTH_YEAR)


def full_retirement_age(birth_year: int) -> float:
    """Return the full retirement age, in years, for ``birth_year``.

    Years outside the transition table are clamped to its ends, so any
    calendar year is accepted.
    """
    year = max(_FIRST_YEAR, min(_LAST_YEAR, int(birth_year)))
    return _FRA_BY_BIRTH_YEAR[year]


def fra_month_index(birth_year: int) -> int:
    """Months between age 62 and the full retirement age."""
    return round((full_retirement_age(birth_year) - 62) * 12)


def retirement_status(month_index: int, birth_year: int) -> str:
    """Classify a claiming month (0 = age 62y0m) as Early, Normal or Late."""
    fra_index = fra_month_index(birth_year)
    if month_index < fra_index:
        return "Early"
    if month_index == fra_index:
        return "Normal"
    return "Late"


__all__ = ["full_retirement_age", "fra_month_index", "retirement_status"]
