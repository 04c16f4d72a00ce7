"""Social Security claiming-age estimator.

``claiming_planner.calculators`` holds the benefit and valuation formulas;
``claiming_planner.components`` turns their results into Streamlit inputs,
pandas tables and Plotly charts.
"""

__version__ = "0.1.0"
