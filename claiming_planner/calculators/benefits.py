"""Monthly retirement benefit as a function of claiming age.

The benefit paid at full retirement age (FRA) is the Primary Insurance Amount
(PIA).  Claiming earlier reduces it and claiming later adds delayed retirement
credits:

* Up to 36 months early: 5/9 of 1 % per month (6 2/3 % per year).
* Beyond 36 months early: an additional 5/12 of 1 % per month (5 % per year).
* After FRA: 8 % per year, with no further credit after age 70.

The reduction is applied as a kink at exactly three years early and is not
floored at zero.  The delayed credit is the flat 8 % that applies to everyone
born 1943 or later.

Example
-------

>>> # Born 1960 (FRA 67), claiming at 62 is five years early
>>> round(monthly_benefit_multiplier(1960, 62, pia=1000), 2)
700.0

>>> # ... and claiming at 70 is three years late
>>> round(monthly_benefit_multiplier(1960, 70, pia=1000), 2)
1240.0
"""

from __future__ import annotations

import math

from .retirement_age import full_retirement_age

EARLIEST_CLAIMING_AGE = 62
LATEST_CLAIMING_AGE = 70

# Per-year rates (the statutory per-month rates times 12)
EARLY_RATE_FIRST_36 = 12 * 5 / 900
EARLY_RATE_BEYOND_36 = 12 * 5 / 1200
DELAYED_CREDIT_PER_YEAR = 0.08

_FRA_TOLERANCE = 1e-9


def monthly_benefit_multiplier(birth_year: int, claiming_age: float, pia: float = 1.0) -> float:
    """Return the monthly benefit for claiming at ``claiming_age``.

    Parameters
    ----------
    birth_year : int
        Calendar year of birth; determines the full retirement age.
    claiming_age : float
        Age in years (month-granular, e.g. ``64 + 5/12``) of the first benefit.
    pia : float, optional
        Primary Insurance Amount.  With the default of 1 the result is the
        fraction of PIA paid.

    Returns
    -------
    float
        Monthly benefit amount.
    """
    fra = full_retirement_age(birth_year)
    if math.isclose(claiming_age, fra, rel_tol=_FRA_TOLERANCE):
        return pia

    if claiming_age < fra:
        years_early = fra - claiming_age
        if years_early <= 3:
            devalue = 1 - years_early * EARLY_RATE_FIRST_36
        else:
            devalue = 1 - 3 * EARLY_RATE_FIRST_36 - (years_early - 3) * EARLY_RATE_BEYOND_36
        return pia * devalue

    years_late = min(claiming_age, LATEST_CLAIMING_AGE) - fra
    return pia * (1 + years_late * DELAYED_CREDIT_PER_YEAR)


__all__ = [
    "EARLIEST_CLAIMING_AGE",
    "LATEST_CLAIMING_AGE",
    "EARLY_RATE_FIRST_36",
    "EARLY_RATE_BEYOND_36",
    "DELAYED_CREDIT_PER_YEAR",
    "monthly_benefit_multiplier",
]
