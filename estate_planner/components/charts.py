# components/charts.py
# Plotly chart helpers used across the app.
# All functions return a Plotly Figure that Streamlit can display with st.plotly_chart(...).

from typing import Dict, Sequence
import plotly.graph_objects as go

import plotly.io as pio
pio.templates.default = "plotly_white"

from ..models import EstateResult

_LAYOUT = dict(template="plotly_white", margin=dict(l=10, r=10, t=40, b=10))


# ---------- Gross estate -> net to heirs ----------
def estate_waterfall(result: EstateResult, title: str = "From Gross Estate to Heirs") -> go.Figure:
    """Waterfall stepping down from gross estate through debts and taxes."""
    fig = go.Figure(go.Waterfall(
        orientation="v",
        measure=["absolute", "relative", "relative", "relative", "total"],
        x=["Gross estate", "Liabilities", "Federal tax", "State tax", "Net to heirs"],
        y=[
            result.gross_estate_value,
            -result.total_liabilities,
            -result.federal_tax,
            -result.state_tax,
            0,
        ],
        hovertemplate="%{x}<br>$%{y:,.0f}<extra></extra>",
    ))
    fig.update_layout(title=title, height=380, yaxis_title="Dollars", showlegend=False, **_LAYOUT)
    return fig


# ---------- Asset mix ----------
def asset_allocation_pie(breakdown: Dict[str, float], title: str = "Assets by Type") -> go.Figure:
    labels = [k.replace("_", " ").title() for k in breakdown]
    fig = go.Figure(go.Pie(
        labels=labels,
        values=list(breakdown.values()),
        hole=0.45,
        hovertemplate="%{label}<br>$%{value:,.0f} (%{percent})<extra></extra>",
    ))
    fig.update_layout(title=title, height=380, **_LAYOUT)
    return fig


# ---------- Federal vs state ----------
def tax_chart(result: EstateResult, title: str = "Estate Taxes") -> go.Figure:
    fig = go.Figure()
    fig.add_bar(x=["Federal"], y=[result.federal_tax], name="Federal")
    fig.add_bar(x=["State"], y=[result.state_tax], name="State")
    fig.add_bar(x=["Potential savings"], y=[result.potential_tax_savings], name="Potential savings")
    fig.update_layout(
        title=title,
        height=380,
        yaxis_title="Dollars",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        **_LAYOUT,
    )
    return fig


# ---------- Generic heatmap (tax sensitivity explorer) ----------
def heatmap(z_matrix: Sequence[Sequence[float]],
            x_labels: Sequence,
            y_labels: Sequence,
            title: str = "Heatmap",
            colorbar_title: str = "Value",
            x_title: str = "Years from today",
            y_title: str = "Annual growth") -> go.Figure:
    """
    Render a numeric matrix as a heatmap.
    - z_matrix is 2D (rows align with y_labels; cols align with x_labels)
    - x_labels: column labels (e.g., years from today)
    - y_labels: row labels (e.g., growth rates)
    - x_title / y_title: axis titles
    """
    fig = go.Figure(data=go.Heatmap(
        z=z_matrix,
        x=x_labels,
        y=y_labels,
        hoverongaps=False,
        colorbar=dict(title=colorbar_title),
        zauto=True
    ))
    fig.update_layout(
        title=title,
        template="plotly_white",
        height=420,
        margin=dict(l=10, r=10, t=40, b=10),
        xaxis_title=x_title,
        yaxis_title=y_title
    )
    return fig
