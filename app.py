# app.py
import io
import json
import logging

import pandas as pd
import streamlit as st
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import (
    Image,
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from estate_planner.calculators import estate as estate_calc
from estate_planner.calculators import projection
from estate_planner.calculators.validation import validation_errors
from estate_planner.components.forms import (
    estate_form,
    asset_editor,
    liability_editor,
    rows_to_estate,
    estate_to_form_defaults,
)
from estate_planner.components.charts import (
    estate_waterfall,
    asset_allocation_pie,
    tax_chart,
    heatmap,
)
from estate_planner.components.insights import generate_insights

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("estate_planner.app")


# ---------- Page config ----------
st.set_page_config(
    page_title="Estate Value Calculator",
    page_icon="🏛️",
    layout="wide",
    initial_sidebar_state="auto",
)

# Hide Streamlit's default menu and footer
HIDE_STREAMLIT_STYLE = """
    <style>
        #MainMenu {visibility: hidden;}
        header {visibility: hidden;}
        footer {visibility: hidden;}
    </style>
"""
st.markdown(HIDE_STREAMLIT_STYLE, unsafe_allow_html=True)

st.markdown(
    """
<style>
.block-container {
    padding: 1.5rem 2rem;
    max-width: 1400px;
    margin: auto;
}
section[data-testid="stSidebar"] {
    background-color: #EEF1F6;
    padding: 1.5rem;
    border-right: 1px solid #D5DBE5;
}
div[data-testid="stMetric"] {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 1rem;
    box-shadow: 0 2px 8px rgba(0,0,0,0.05);
    border: 1px solid #E3E8EF;
}
div.stPlotlyChart {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 0.75rem;
    border: 1px solid #E3E8EF;
}
button[kind="primary"] {
    background-color: #1E3A5F;
    color: #FFFFFF;
    border-radius: 8px;
    border: none;
}
@media (max-width: 600px) {
    .block-container { padding: 1rem; }
}
</style>
""",
    unsafe_allow_html=True,
)

# ---------- Session boot ----------
st.session_state.setdefault("form_defaults", {})
st.session_state.setdefault("asset_rows", [])
st.session_state.setdefault("liability_rows", [])
st.session_state.setdefault("export_json", None)
st.session_state.setdefault("export_pdf_bytes", None)
st.session_state.setdefault("auto_run", False)
st.session_state.setdefault("run_now", False)
st.session_state.setdefault("chart_figs", {})
st.session_state.setdefault("last_run", None)


def _build_pdf(estate: dict, result: dict, charts: dict) -> bytes:
    """Create a PDF report showing inputs, results and charts."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter, leftMargin=36, rightMargin=36)
    styles = getSampleStyleSheet()
    story = [Paragraph("Estate Analysis Report", styles["Title"]), Spacer(1, 12)]

    def _table(rows):
        table = Table(rows, hAlign="LEFT")
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#EEF1F6")),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ]
            )
        )
        return table

    # ---- Inputs ----
    story.append(Paragraph("Assets", styles["Heading2"]))
    rows = [["Type", "Description", "Value"]]
    rows += [[a["kind"], a["description"], f"${a['value']:,.0f}"] for a in estate["assets"]]
    story.extend([_table(rows), Spacer(1, 12)])

    if estate["liabilities"]:
        story.append(Paragraph("Liabilities", styles["Heading2"]))
        rows = [["Type", "Description", "Amount"]]
        rows += [[l["kind"], l["description"], f"${l['amount']:,.0f}"] for l in estate["liabilities"]]
        story.extend([_table(rows), Spacer(1, 12)])

    # ---- Results ----
    story.append(Paragraph("Results", styles["Heading2"]))
    rows = [["Field", "Value"]]
    for key, value in result.items():
        if key == "recommended_strategies":
            continue
        label = key.replace("_", " ").capitalize()
        rows.append([label, f"{value * 100:.2f}%" if key == "effective_tax_rate" else f"${value:,.0f}"])
    story.extend([_table(rows), Spacer(1, 12)])

    if result["recommended_strategies"]:
        story.append(Paragraph("Recommended Strategies", styles["Heading2"]))
        for s in result["recommended_strategies"]:
            story.append(Paragraph(f"• {s}", styles["BodyText"]))

    # ---- Charts ----
    for title, fig in charts.items():
        story.extend([PageBreak(), Paragraph(title, styles["Heading2"])])
        img = fig.to_image(format="png", scale=2)
        story.append(Image(io.BytesIO(img), width=480, height=300))
        story.append(Spacer(1, 12))

    doc.build(story)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


# ---------- Header bar ----------
def header_bar():
    st.markdown(
        """
        ### **Estate Value Calculator**
        _Total your estate, estimate federal and state estate taxes, and see which planning strategies apply._
        """
    )

header_bar()


# ====== SIDEBAR: FORM ======
details, settings = estate_form()

# ====== MAIN: ASSET / LIABILITY EDITORS ======
left, right = st.columns(2)

with left:
    st.subheader("Assets")
    if st.button("➕ Add Asset", key="as_add"):
        st.session_state["asset_rows"].append({"kind": "other", "description": "", "value": 0.0})
        st.rerun()
    asset_rows, removed = asset_editor(st.session_state["asset_rows"])
    if removed:
        for idx in reversed(removed):
            asset_rows.pop(idx)
        st.session_state["asset_rows"] = asset_rows
        st.rerun()

with right:
    st.subheader("Liabilities")
    if st.button("➕ Add Liability", key="li_add"):
        st.session_state["liability_rows"].append({"kind": "other", "description": "", "amount": 0.0})
        st.rerun()
    liability_rows, removed = liability_editor(st.session_state["liability_rows"])
    if removed:
        for idx in reversed(removed):
            liability_rows.pop(idx)
        st.session_state["liability_rows"] = liability_rows
        st.rerun()

estate, parse_errors = rows_to_estate(details, asset_rows, liability_rows)

# ====== SIDEBAR: SAVE / LOAD ======
st.sidebar.divider()
st.sidebar.header("Save / Load")
st.sidebar.caption("Download your inputs as JSON, or load a file you saved earlier.")
uploaded = st.sidebar.file_uploader("Upload estate JSON", type="json")
if uploaded and st.session_state.get("loaded_file") != uploaded.name:
    try:
        data = json.load(uploaded)
        st.session_state["form_defaults"] = estate_to_form_defaults(data)
        st.session_state["asset_rows"] = [r for r in data.get("assets", []) if isinstance(r, dict)]
        st.session_state["liability_rows"] = [r for r in data.get("liabilities", []) if isinstance(r, dict)]
        st.session_state["loaded_file"] = uploaded.name
        st.sidebar.success("Estate loaded from file.")
        st.rerun()
    except (json.JSONDecodeError, AttributeError, TypeError) as exc:
        logger.warning("Rejected uploaded estate file %s: %s", uploaded.name, exc)
        st.sidebar.error("Invalid JSON file.")

if st.sidebar.button("Export JSON"):
    if estate is None:
        st.sidebar.error("Fix the highlighted inputs before exporting.")
    else:
        st.session_state["export_json"] = json.dumps(estate.model_dump(mode="json"), indent=2)
if st.session_state.get("export_json"):
    st.sidebar.download_button(
        "⬇️ Download JSON",
        data=st.session_state["export_json"],
        file_name="estate.json",
        mime="application/json",
    )

# --- Main page: run button ---
st.divider()
c_auto, c_run, c_reset = st.columns(3)
with c_auto:
    st.session_state["auto_run"] = st.checkbox("Auto run", value=st.session_state["auto_run"])
with c_run:
    if st.button("Calculate Estate Value", type="primary"):
        st.session_state["run_now"] = True
with c_reset:
    if st.button("Reset"):
        for key in ("asset_rows", "liability_rows"):
            st.session_state[key] = []
        st.session_state["form_defaults"] = {}
        st.session_state["last_run"] = None
        st.rerun()

# ====== RUN CALCULATION ======
if st.session_state["run_now"] or st.session_state["auto_run"]:
    st.session_state["run_now"] = False
    errors = parse_errors or validation_errors(estate)
    if errors:
        st.markdown("**Please fix the following errors:**")
        for err in errors:
            st.error(f"{err.field}: {err.message}" if parse_errors else err.message)
        st.stop()
    result = estate_calc.compute_estate(estate, year=settings["year"])
    st.session_state["last_run"] = (estate, result, dict(settings))

if st.session_state["last_run"] is None:
    st.info("Add your assets and press Calculate to see results.")
    st.stop()

# Everything below describes the inputs the stored result was computed from.
edited = (estate, settings)
estate, result, settings = st.session_state["last_run"]
if edited != (estate, settings):
    st.caption("Inputs changed since the last calculation. Press Calculate to refresh the results.")

chart_figs: dict = {}

# ====== DISPLAY ======
st.subheader("Estate Analysis Results")
m1, m2, m3 = st.columns(3)
m1.metric("Gross estate value", f"${result.gross_estate_value:,.0f}")
m2.metric("Total liabilities", f"${result.total_liabilities:,.0f}")
m3.metric("Net estate value", f"${result.net_estate_value:,.0f}")
m4, m5, m6 = st.columns(3)
m4.metric("Total tax liability", f"${result.total_tax_liability:,.0f}",
          help=f"Federal ${result.federal_tax:,.0f} + state ${result.state_tax:,.0f}")
m5.metric("Net to heirs", f"${result.net_to_heirs:,.0f}")
m6.metric("Potential tax savings", f"${result.potential_tax_savings:,.0f}")
st.caption(
    f"Effective tax rate {result.effective_tax_rate * 100:.2f}% using {settings['year']} tables. "
    "Federal rate is a flat 40% above the exemption; state figures are simplified estimates."
)

st.divider()
c1, c2 = st.columns(2)
with c1:
    fig_waterfall = estate_waterfall(result)
    chart_figs["From Gross Estate to Heirs"] = fig_waterfall
    st.plotly_chart(fig_waterfall, use_container_width=True)
with c2:
    fig_pie = asset_allocation_pie(estate_calc.asset_breakdown(estate.assets))
    chart_figs["Assets by Type"] = fig_pie
    st.plotly_chart(fig_pie, use_container_width=True)

c3, c4 = st.columns(2)
with c3:
    fig_tax = tax_chart(result)
    chart_figs["Estate Taxes"] = fig_tax
    st.plotly_chart(fig_tax, use_container_width=True)
with c4:
    steps = int(round(settings["growth_max"] / 0.01)) + 1
    rates = [i * 0.01 for i in range(0, steps, 2)] or [0.0]
    proj = projection.project_estate(
        estate, growth_rates=rates, years=settings["horizon"], year=settings["year"]
    )
    fig_heat = heatmap(
        proj["total_tax"],
        proj["years"],
        [f"{r * 100:.0f}%" for r in proj["growth_rates"]],
        title="Projected Estate Tax by Growth Rate",
        colorbar_title="Tax ($)",
        x_title="Years from today",
        y_title="Annual asset growth",
    )
    chart_figs["Projected Estate Tax by Growth Rate"] = fig_heat
    st.plotly_chart(fig_heat, use_container_width=True)

st.session_state["chart_figs"] = chart_figs

# --- Insights + strategies ---
st.divider()
st.subheader("Insights")
st.info(generate_insights(result))

st.markdown("### Recommended Strategies")
if result.recommended_strategies:
    for strategy in result.recommended_strategies:
        st.markdown(f"- {strategy}")
else:
    st.caption("No specific strategies triggered. Review your plan as laws and circumstances change.")

# --- Asset table ---
st.markdown("### Assets")
df = pd.DataFrame([a.model_dump() for a in estate.assets])
st.dataframe(df, use_container_width=True, height=260)
st.download_button(
    "⬇️ CSV (assets)",
    data=df.to_csv(index=False).encode("utf-8"),
    file_name="estate_assets.csv",
    mime="text/csv",
)

# --- PDF export ---
st.sidebar.divider()
st.sidebar.header("Report")
if st.sidebar.button("Export PDF"):
    st.session_state["export_pdf_bytes"] = _build_pdf(
        estate.model_dump(mode="json"), result.model_dump(mode="json"), st.session_state.get("chart_figs", {})
    )
if st.session_state.get("export_pdf_bytes"):
    st.sidebar.download_button(
        "⬇️ Download PDF",
        data=st.session_state["export_pdf_bytes"],
        file_name="estate_report.pdf",
        mime="application/pdf",
    )
