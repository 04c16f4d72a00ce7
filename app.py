# app.py
import json
import logging

import streamlit as st

from claiming_planner import config
from claiming_planner.calculators.claiming_ages import to_years_months
from claiming_planner.calculators.reports import run_report
from claiming_planner.calculators.retirement_age import full_retirement_age
from claiming_planner.components.forms import load_form_defaults, scenario_form
from claiming_planner.components.charts import balance_chart, benefit_chart, best_age_heatmap
from claiming_planner.components.insights import summarize_grid, summarize_projection
from claiming_planner.components.tables import (
    ColorScale,
    grid_frame,
    grid_value_frame,
    payment_frame,
    projection_frame,
    style_grid,
)

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("claiming_planner.app")


# ---------- Page config ----------
st.set_page_config(
    page_title="Social Security Claiming Age Estimator",
    layout="wide",
    initial_sidebar_state="auto",
)

# Hide Streamlit's default menu and footer
HIDE_STREAMLIT_STYLE = """
    <style>
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        .block-container { padding: 1.5rem 2rem; max-width: 1400px; margin: auto; }
        div.stPlotlyChart { border-radius: 12px; padding: 0.75rem; border: 1px solid #E6ECE9; }
    </style>
"""
st.markdown(HIDE_STREAMLIT_STYLE, unsafe_allow_html=True)

# ---------- Session boot ----------
st.session_state.setdefault("form_defaults", {})
st.session_state.setdefault("run_now", False)
st.session_state.setdefault("auto_run", False)
st.session_state.setdefault("export_json", None)
st.session_state.setdefault("loaded_file", None)


# ---------- Header bar ----------
def header_bar():
    st.markdown(
        """
        ### **Social Security Claiming Age Estimator**
        _Compare claiming ages by monthly benefit, bank balance over time, and the best age for a range of lifespans and interest rates._
        """
    )


header_bar()

# ====== SIDEBAR: FORM + CONTROLS ======
raw = scenario_form()
report_type = raw["report_type"]

st.sidebar.divider()
st.sidebar.header("Save / Load Inputs")
uploaded = st.sidebar.file_uploader("Upload inputs JSON", type="json")
if uploaded and st.session_state.get("loaded_file") != uploaded.name:
    st.session_state["loaded_file"] = uploaded.name
    try:
        data = json.load(uploaded)
    except (json.JSONDecodeError, UnicodeDecodeError):
        data = None
    defaults, load_errors = load_form_defaults(data) if isinstance(data, dict) else ({}, None)
    if load_errors is None:
        st.sidebar.error("Invalid JSON file.")
    elif load_errors:
        for err in load_errors:
            st.sidebar.error(str(err))
    else:
        st.session_state["form_defaults"] = defaults
        # widgets keep their own state; drop it so the loaded defaults show
        for key in list(st.session_state.keys()):
            if str(key).startswith("in_"):
                del st.session_state[key]
        logger.info("Loaded inputs from %s", uploaded.name)
        st.rerun()
if st.sidebar.button("Export JSON"):
    st.session_state["export_json"] = json.dumps(raw, indent=2)
if st.session_state.get("export_json"):
    st.sidebar.download_button(
        "⬇️ Download JSON",
        data=st.session_state["export_json"],
        file_name="claiming_inputs.json",
        mime="application/json",
    )

# --- Main page: run button ---
st.header(config.REPORT_TYPES[report_type])
left, right = st.columns(2)
with left:
    st.session_state["auto_run"] = st.checkbox(
        "Auto run", value=st.session_state["auto_run"],
        help="Recompute on every input change. The optimum grids take a few seconds.",
    )
with right:
    if st.button("Run", type="primary"):
        st.session_state["run_now"] = True

# ====== RUN REPORT ======
if not (st.session_state["run_now"] or st.session_state["auto_run"]):
    st.info("Choose a report and press Run.")
    st.stop()

st.session_state["run_now"] = False
with st.spinner("Computing..."):
    result = run_report(report_type, raw)

if not result.ok:
    for err in result.errors:
        st.error(str(err))
    st.stop()

scenario = result.scenario
st.caption(
    f"Full retirement age for birth year {scenario.birth_year}: "
    f"{to_years_months(full_retirement_age(scenario.birth_year), 1)}. "
    f"Computed in {result.elapsed:.2f}s."
)


def csv_download(df, file_name):
    st.download_button(
        "⬇️ Download CSV",
        data=df.to_csv().encode("utf-8"),
        file_name=file_name,
        mime="text/csv",
        key=f"dl_{file_name}",
    )


# ====== DISPLAY ======
if report_type == "payment_table":
    rows = result.data
    st.plotly_chart(benefit_chart(rows), use_container_width=True)
    df = payment_frame(rows)
    st.dataframe(df, use_container_width=True)
    csv_download(df, "benefit_by_claiming_age.csv")

elif report_type == "bank_balance":
    projection = result.data
    st.info(summarize_projection(projection))
    st.plotly_chart(balance_chart(projection), use_container_width=True)
    df = projection_frame(projection)
    st.dataframe(df, use_container_width=True, height=500)
    csv_download(df, "bank_balance.csv")

else:
    grid = result.data
    basis = "present value at age 62" if grid.method == "npv" else "bank balance at death"
    st.info(summarize_grid(grid))
    st.plotly_chart(
        best_age_heatmap(grid, title=f"Best claiming age by {basis}"),
        use_container_width=True,
    )
    tab_ages, tab_values = st.tabs(["Best claiming age", "Best value"])
    with tab_ages:
        st.dataframe(style_grid(grid, ColorScale()), use_container_width=True)
        csv_download(grid_frame(grid), f"optimum_claiming_age_{grid.method}.csv")
    with tab_values:
        values = grid_value_frame(grid)
        st.dataframe(values, use_container_width=True)
        csv_download(values, f"optimum_value_{grid.method}.csv")
