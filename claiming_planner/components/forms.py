import streamlit as st

from claiming_planner.calculators.claiming_ages import MONTH_NAMES, to_years_months
from claiming_planner.calculators.retirement_age import full_retirement_age
from claiming_planner.calculators.validation import ValidationError, parse_scenario
from claiming_planner.config import BOUNDS, DEFAULTS, REPORT_FIELDS, REPORT_TYPES

# Stable widget keys so we can programmatically set values on load
WIDGET_KEYS = {
    "report_type": "in_report_type",
    "birth_year": "in_birth_year",
    "birth_month": "in_birth_month",
    "interest_rate_pct": "in_interest_rate_pct",
    "cola_pct": "in_cola_pct",
    "claiming_ages": "in_claiming_ages",
    "pia": "in_pia",
    "age_at_death": "in_age_at_death",
    "arrears": "in_arrears",
    "paydown_balance": "in_paydown_balance",
    "borrow_rate_pct": "in_borrow_rate_pct",
    "monthly_spend": "in_monthly_spend",
}

def _d(key, fallback=None):
    return st.session_state.get("form_defaults", {}).get(key, DEFAULTS.get(key, fallback))

def _off(report_type, field):
    return field not in REPORT_FIELDS[report_type]


def load_form_defaults(data):
    """Checked form defaults from a loaded inputs file, or the problems found.

    Only keys the form knows are kept; nothing is stored unless every value
    would render in its widget.
    """
    known = {k: v for k, v in data.items() if k in DEFAULTS}
    parsed = parse_scenario(known)
    errors = list(parsed.errors)
    report_type = known.get("report_type", DEFAULTS["report_type"])
    if not isinstance(report_type, str) or report_type not in REPORT_TYPES:
        errors.append(ValidationError("report_type", report_type, f"expected one of {sorted(REPORT_TYPES)}"))
    claiming_ages = known.get("claiming_ages", DEFAULTS["claiming_ages"])
    if not isinstance(claiming_ages, str):
        errors.append(ValidationError("claiming_ages", claiming_ages, "expected text such as '62 67 70'"))
    if errors:
        return {}, errors

    scenario = parsed.scenario
    defaults = {name: getattr(scenario, name) for name in known if hasattr(scenario, name)}
    if "age_at_death" in defaults:
        defaults["age_at_death"] = int(defaults["age_at_death"])
    defaults.update(report_type=report_type, claiming_ages=claiming_ages)
    return defaults, []

def scenario_form():
    # -------- Report --------
    st.sidebar.header("Report")
    report_options = list(REPORT_TYPES)
    report_default = _d("report_type")
    report_type = st.sidebar.selectbox(
        "Report type",
        report_options,
        index=report_options.index(report_default) if report_default in report_options else 0,
        format_func=lambda r: REPORT_TYPES.get(r, r),
        key=WIDGET_KEYS["report_type"],
    )

    # -------- Claimant --------
    st.sidebar.header("Claimant")
    birth_year = st.sidebar.number_input(
        "Birth year", min_value=BOUNDS["birth_year"][0], max_value=BOUNDS["birth_year"][1],
        value=int(_d("birth_year")), step=1, key=WIDGET_KEYS["birth_year"],
        help="Determines the full retirement age.",
    )
    st.sidebar.caption(f"Full retirement age: {to_years_months(full_retirement_age(int(birth_year)), 1)}")
    birth_month = st.sidebar.selectbox(
        "Birth month", list(range(1, 13)),
        index=int(_d("birth_month")) - 1,
        format_func=lambda m: MONTH_NAMES[m - 1],
        key=WIDGET_KEYS["birth_month"],
        disabled=_off(report_type, "birth_month"),
    )
    pia = st.sidebar.number_input(
        "PIA ($/month at FRA)", min_value=BOUNDS["pia"][0], max_value=BOUNDS["pia"][1],
        value=float(_d("pia")), step=50.0, key=WIDGET_KEYS["pia"],
        help="Primary Insurance Amount, from your SSA statement.",
    )
    age_at_death = st.sidebar.number_input(
        "Age at death", min_value=BOUNDS["age_at_death"][0], max_value=BOUNDS["age_at_death"][1],
        value=int(_d("age_at_death")), step=1, key=WIDGET_KEYS["age_at_death"],
        disabled=_off(report_type, "age_at_death"),
        help="Last row of the optimum tables, or end of the bank balance table.",
    )

    # -------- Claiming --------
    st.sidebar.header("Claiming")
    claiming_ages = st.sidebar.text_input(
        "Claiming ages", value=_d("claiming_ages"), key=WIDGET_KEYS["claiming_ages"],
        disabled=_off(report_type, "claiming_ages"),
        help="Ages between 62 and 70: '62 67 70', '64:5' for 64 years 5 months, "
             "or 'start stop increment' such as '62 70 1'.",
    )
    arrears = st.sidebar.radio(
        "Benefit timing", [False, True],
        index=1 if _d("arrears") else 0,
        format_func=lambda a: "Paid in the following month (arrears)" if a else "Paid when due",
        key=WIDGET_KEYS["arrears"],
        disabled=_off(report_type, "arrears"),
    )

    # -------- Assumptions --------
    st.sidebar.header("Assumptions")
    interest_rate_pct = st.sidebar.number_input(
        "Investment interest rate (%)",
        min_value=BOUNDS["interest_rate_pct"][0], max_value=BOUNDS["interest_rate_pct"][1],
        value=float(_d("interest_rate_pct")), step=0.5, key=WIDGET_KEYS["interest_rate_pct"],
        disabled=_off(report_type, "interest_rate_pct"),
    )
    cola_pct = st.sidebar.number_input(
        "COLA (%)", min_value=BOUNDS["cola_pct"][0], max_value=BOUNDS["cola_pct"][1],
        value=float(_d("cola_pct")), step=0.5, key=WIDGET_KEYS["cola_pct"],
        disabled=_off(report_type, "cola_pct"),
        help="Cost of living adjustment, applied to the December benefit each year.",
    )

    with st.sidebar.expander("Loan pay-down and spending", expanded=False):
        paydown_balance = st.number_input(
            "Starting loan balance ($)",
            min_value=BOUNDS["paydown_balance"][0], max_value=BOUNDS["paydown_balance"][1],
            value=float(_d("paydown_balance")), step=1000.0, key=WIDGET_KEYS["paydown_balance"],
            disabled=_off(report_type, "paydown_balance"),
        )
        borrow_rate_pct = st.number_input(
            "Borrowing rate (%)", min_value=BOUNDS["borrow_rate_pct"][0], max_value=BOUNDS["borrow_rate_pct"][1],
            value=float(_d("borrow_rate_pct")), step=0.5, key=WIDGET_KEYS["borrow_rate_pct"],
            disabled=_off(report_type, "borrow_rate_pct"),
            help="Charged while the balance is negative.",
        )
        monthly_spend = st.number_input(
            "Monthly spending ($)", min_value=BOUNDS["monthly_spend"][0], max_value=BOUNDS["monthly_spend"][1],
            value=float(_d("monthly_spend")), step=50.0, key=WIDGET_KEYS["monthly_spend"],
            disabled=_off(report_type, "monthly_spend"),
        )

    # Raw values; the calculators validate them
    return {
        "report_type": report_type,
        "birth_year": birth_year,
        "birth_month": birth_month,
        "interest_rate_pct": interest_rate_pct,
        "cola_pct": cola_pct,
        "claiming_ages": claiming_ages,
        "pia": pia,
        "age_at_death": age_at_death,
        "arrears": arrears,
        "paydown_balance": paydown_balance,
        "borrow_rate_pct": borrow_rate_pct,
        "monthly_spend": monthly_spend,
    }
