import streamlit as st

from ..calculators import taxes as tax_calc
from ..models import (
    ASSET_KINDS,
    JURISDICTIONS,
    LIABILITY_KINDS,
    MARITAL_STATUSES,
)
from ..calculators.validation import parse_estate

# Stable widget keys so we can programmatically set values on load
WIDGET_KEYS = {
    "jurisdiction": "in_jurisdiction",
    "marital_status": "in_marital_status",
    "has_children": "in_has_children",
    "has_trust": "in_has_trust",
    "year": "in_table_year",
    "growth_max": "in_growth_max",
    "horizon": "in_horizon",
}

ASSET_LABELS = {
    "real_estate": "Real Estate",
    "investment": "Investments",
    "retirement": "Retirement Accounts",
    "business": "Business Interests",
    "life_insurance": "Life Insurance",
    "personal": "Personal Property",
    "other": "Other",
}

LIABILITY_LABELS = {
    "mortgage": "Mortgages",
    "loan": "Loans",
    "credit": "Credit Cards",
    "tax": "Tax Obligations",
    "other": "Other",
}


def _d(key, fallback):
    return st.session_state.get("form_defaults", {}).get(key, fallback)


def _index(options, value, fallback=0):
    return options.index(value) if value in options else fallback


def rows_to_estate(details: dict, asset_rows: list, liability_rows: list):
    """Combine the sidebar details with the editor rows.

    Returns ``(estate, errors)`` as ``parse_estate`` does.  Rows that are not
    mappings (e.g. from a hand-edited upload) are skipped.
    """
    data = dict(details)
    data["assets"] = [r for r in asset_rows if isinstance(r, dict)]
    data["liabilities"] = [r for r in liability_rows if isinstance(r, dict)]
    return parse_estate(data)


def estate_to_form_defaults(data: dict) -> dict:
    """Flatten a saved estate dict into the keys expected by the sidebar form."""
    return {
        "jurisdiction": data.get("jurisdiction", ""),
        "marital_status": data.get("marital_status", "single"),
        "has_children": bool(data.get("has_children", False)),
        "has_trust": bool(data.get("has_trust", False)),
    }


def estate_form():
    # -------- Personal Information --------
    st.sidebar.header("Personal Information")
    states = [""] + list(JURISDICTIONS)
    jurisdiction = st.sidebar.selectbox(
        "State of residence", states,
        index=_index(states, _d("jurisdiction", "")),
        format_func=lambda s: s or "Select state",
        key=WIDGET_KEYS["jurisdiction"],
        help="Used for the (simplified) state estate tax. Most states levy none.",
    )
    statuses = list(MARITAL_STATUSES)
    marital_status = st.sidebar.selectbox(
        "Marital status", statuses,
        index=_index(statuses, _d("marital_status", "single")),
        format_func=str.title,
        key=WIDGET_KEYS["marital_status"],
        help="Married estates get a doubled federal exemption (portability).",
    )
    has_children = st.sidebar.checkbox(
        "Have children", value=_d("has_children", False), key=WIDGET_KEYS["has_children"],
    )
    has_trust = st.sidebar.checkbox(
        "Have existing trust", value=_d("has_trust", False), key=WIDGET_KEYS["has_trust"],
    )

    # -------- Assumptions --------
    st.sidebar.header("Assumptions")
    years = tax_calc.available_years()
    year = st.sidebar.selectbox(
        "Tax table year", years,
        index=_index(years, tax_calc.DEFAULT_YEAR),
        key=WIDGET_KEYS["year"],
        help="Exemptions and rates are taken from this year's tables.",
    )
    growth_max = st.sidebar.slider(
        "Max annual growth for projections (%)", min_value=0, max_value=12,
        value=int(_d("growth_max", 8)), step=1, key=WIDGET_KEYS["growth_max"],
    )
    horizon = st.sidebar.slider(
        "Projection horizon (years)", min_value=5, max_value=40,
        value=int(_d("horizon", 20)), step=5, key=WIDGET_KEYS["horizon"],
    )

    details = {
        "jurisdiction": jurisdiction,
        "marital_status": marital_status,
        "has_children": bool(has_children),
        "has_trust": bool(has_trust),
    }
    settings = {"year": int(year), "growth_max": growth_max / 100.0, "horizon": int(horizon)}
    return details, settings


def _row_editor(title: str, rows: list, kinds, labels: dict, amount_field: str, prefix: str):
    """Render an editable list of rows; returns (rows, removed indexes)."""
    remove_idx = []
    if rows:
        st.markdown(f"**Type** | **Description** | **{amount_field.title()}**")
    for i, row in enumerate(rows):
        c1, c2, c3, c4 = st.columns([1.2, 2, 1.2, 0.3], gap="small")
        kind = c1.selectbox(
            "Type", list(kinds),
            index=_index(list(kinds), row.get("kind", "other")),
            format_func=lambda k: labels.get(k, k),
            key=f"{prefix}_kind_{i}", label_visibility="collapsed",
        )
        desc = c2.text_input(
            "Description", value=row.get("description") or "",
            placeholder="Description", key=f"{prefix}_desc_{i}", label_visibility="collapsed",
        )
        amt = c3.number_input(
            amount_field.title(), value=float(row.get(amount_field) or 0.0),
            min_value=0.0, step=1000.0, format="%.2f",
            key=f"{prefix}_amt_{i}", label_visibility="collapsed",
        )
        if c4.button("✖", key=f"{prefix}_del_{i}", help=f"Remove {title.lower()}"):
            remove_idx.append(i)
        rows[i] = {**row, "kind": kind, "description": desc, amount_field: float(amt)}
    return rows, remove_idx


def asset_editor(rows: list):
    return _row_editor("Asset", rows, ASSET_KINDS, ASSET_LABELS, "value", "as")


def liability_editor(rows: list):
    return _row_editor("Liability", rows, LIABILITY_KINDS, LIABILITY_LABELS, "amount", "li")
