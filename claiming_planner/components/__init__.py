"""Expose component submodules for convenience."""

from .forms import scenario_form
from .charts import balance_chart, benefit_chart, best_age_heatmap
from .tables import ColorScale, payment_frame, projection_frame, grid_frame, style_grid
from .insights import summarize_projection, summarize_grid

__all__ = [
    "scenario_form",
    "balance_chart",
    "benefit_chart",
    "best_age_heatmap",
    "ColorScale",
    "payment_frame",
    "projection_frame",
    "grid_frame",
    "style_grid",
    "summarize_projection",
    "summarize_grid",
]
