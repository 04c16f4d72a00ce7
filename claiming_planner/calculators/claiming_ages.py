"""Claiming-age text parsing and age/date labels.

Claiming ages are typed as a whitespace separated list.  Each token is either
a number of years (``"67"``, ``"66.5"``) or ``years:months`` with a zero-based
month (``"64:5"`` is 64 years and 5 months).  Three values where the first
two are increasing and the third is smaller than the second are read as
``start stop increment`` and expanded:

>>> parse_claiming_ages("62 67:6 70")
[62.0, 67.5, 70.0]

>>> parse_claiming_ages("62 70 2")
[62.0, 64.0, 66.0, 68.0, 70.0]
"""

from __future__ import annotations

import math
from datetime import date
from typing import List

from .validation import ConfigurationError

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Slack for accumulated float error when expanding a range up to its stop value
_RANGE_SLACK = 1e-9


def _token_to_years(token: str) -> float:
    parts = token.split(":")
    if len(parts) > 2:
        raise ConfigurationError(f"claiming age '{token}': expected YEARS or YEARS:MONTHS")
    try:
        years = float(parts[0])
        months = int(parts[1]) if len(parts) == 2 else 0
    except ValueError:
        raise ConfigurationError(f"claiming age '{token}': not a number") from None
    if not math.isfinite(years):
        raise ConfigurationError(f"claiming age '{token}': not a number")
    if not 0 <= months <= 11:
        raise ConfigurationError(f"claiming age '{token}': months must be between 0 and 11")
    return years + months / 12


def parse_claiming_ages(text: str) -> List[float]:
    """Parse a claiming-age list into ages in years.

    Raises
    ------
    ConfigurationError
        If the text holds no ages, a token cannot be parsed, or a range has a
        non-positive increment.
    """
    tokens = (text or "").split()
    if not tokens:
        raise ConfigurationError("claiming ages: at least one age is required")
    values = [_token_to_years(t) for t in tokens]

    if len(values) == 3 and values[0] < values[1] and values[2] < values[1]:
        start, stop, increment = values
        if increment <= 0:
            raise ConfigurationError(
                f"claiming ages: range increment must be positive, got {to_years_months(increment, 3)}"
            )
        expanded = []
        step = 0
        while start + step * increment <= stop + _RANGE_SLACK:
            expanded.append(start + step * increment)
            step += 1
        return expanded
    return values


def to_years_months(age: float, style: int = 0) -> str:
    """Render ``age`` (years) as years and months.

    ``style`` 0: ``"64 y, 5 m"``; 1: ``"64 years, 5 months"``; 2: ``"64:5"``;
    3: like 2 but whole years print without ``":0"``.
    """
    years = math.floor(age)
    months = round((age - years) * 12)
    if months == 12:
        years, months = years + 1, 0
    if style == 0:
        return f"{years} y" if months == 0 else f"{years} y, {months} m"
    if style == 1:
        return f"{years} years, {months} months"
    if style == 2:
        return f"{years}:{months}"
    if style == 3:
        return f"{years}" if months == 0 else f"{years}:{months}"
    raise ValueError(f"unknown years/months style {style}")


def month_date(year: int, month_offset: int) -> date:
    """First day of the month ``month_offset`` months after January of ``year``."""
    total = year * 12 + month_offset
    return date(total // 12, total % 12 + 1, 1)


def format_month(value: date) -> str:
    return f"{MONTH_NAMES[value.month - 1]} {value.year}"


__all__ = ["MONTH_NAMES", "parse_claiming_ages", "to_years_months", "month_date", "format_month"]
