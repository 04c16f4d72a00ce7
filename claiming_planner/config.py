# =============================================================================
# Defaults and input limits shared by the form, the validator and the reports
# =============================================================================
import os

# Form defaults (what a first-time visitor sees)
DEFAULTS = {
    "report_type": "payment_table",
    "birth_year": 1960,
    "birth_month": 1,
    "interest_rate_pct": 0.0,
    "cola_pct": 0.0,
    "claiming_ages": "62 67 70",
    "pia": 1000.0,
    "age_at_death": 100,
    "arrears": False,
    "paydown_balance": 0.0,
    "borrow_rate_pct": 0.0,
    "monthly_spend": 0.0,
}

# Inclusive (low, high) limits.  Values outside are rejected, never clamped.
BOUNDS = {
    "birth_year": (1900, 2050),
    "birth_month": (1, 12),
    "age_at_death": (62, 200),
    "interest_rate_pct": (-100.0, 1000.0),
    "cola_pct": (-100.0, 1000.0),
    "pia": (0.0, 50000.0),
    "paydown_balance": (0.0, 10_000_000.0),
    "borrow_rate_pct": (0.0, 25.0),
    "monthly_spend": (0.0, 10000.0),
    "claiming_age": (62.0, 70.0),
}

# Optimum claiming age grids: columns are interest rates, rows ages at death
GRID_INTEREST_RATES = list(range(-4, 9))
GRID_AGE_STEP = 2

REPORT_TYPES = {
    "payment_table": "Monthly retirement benefit versus claiming age",
    "bank_balance": "Bank balance per month",
    "optimum_fv": "Optimum claiming age summary (bank balance)",
    "optimum_npv": "Optimum claiming age summary (present value)",
}

# Fields each report actually reads; the form disables the rest
REPORT_FIELDS = {
    "payment_table": {"birth_year", "birth_month", "pia"},
    "bank_balance": {
        "birth_year", "birth_month", "interest_rate_pct", "cola_pct", "claiming_ages",
        "pia", "age_at_death", "arrears", "paydown_balance", "borrow_rate_pct", "monthly_spend",
    },
    "optimum_fv": {"birth_year", "birth_month", "cola_pct", "pia", "age_at_death"},
    "optimum_npv": {"birth_year", "pia", "age_at_death"},
}

# Colours for "young" (62) and "old" (70) claiming ages in the grids
YOUNG_RGB = (46, 204, 113)
OLD_RGB = (231, 76, 60)

LOG_LEVEL = os.environ.get("CLAIMING_PLANNER_LOG_LEVEL", "INFO").upper()
