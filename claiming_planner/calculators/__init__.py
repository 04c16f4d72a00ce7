"""Core Social Security claiming-age calculators.

The ``calculators`` package contains small, focused modules:

* ``retirement_age`` – full retirement age by birth year.
* ``benefits`` – early reduction and delayed credit relative to full retirement age.
* ``schedule`` – the 97-month benefit schedule and its single-slot cache.
* ``valuation`` – present value, future value and the monthly bank balance projection.
* ``optimizer`` – best claiming month searches and the age-at-death/interest grids.
* ``claiming_ages`` – claiming-age list parsing and age/date labels.
* ``validation`` – typed parsing of raw input and the error types.
* ``reports`` – the report dispatcher used by the app.

None of these modules import Streamlit or Plotly.
"""

from . import (  # noqa: F401
    retirement_age,
    benefits,
    schedule,
    valuation,
    optimizer,
    claiming_ages,
    validation,
    reports,
)

__all__ = [
    "retirement_age",
    "benefits",
    "schedule",
    "valuation",
    "optimizer",
    "claiming_ages",
    "validation",
    "reports",
]
