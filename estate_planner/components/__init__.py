"""Reusable Streamlit components for the estate planner app."""

from .forms import estate_form, asset_editor, liability_editor, rows_to_estate
from .charts import estate_waterfall, asset_allocation_pie, tax_chart, heatmap
from .insights import generate_insights

__all__ = [
    "estate_form",
    "asset_editor",
    "liability_editor",
    "rows_to_estate",
    "estate_waterfall",
    "asset_allocation_pie",
    "tax_chart",
    "heatmap",
    "generate_insights",
]
