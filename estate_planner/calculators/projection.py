"""Estate tax sensitivity to asset growth.

``project_estate`` compounds the gross estate over a range of growth rates
and horizons and taxes each cell with the same calculators ``compute_estate``
uses.  The Streamlit page renders the result with ``charts.heatmap``.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np

from ..models import EstateInput
from . import taxes as tax_calc
from .estate import sum_assets, sum_liabilities


def project_estate(
    estate: EstateInput,
    growth_rates: Sequence[float] = (0.0, 0.02, 0.04, 0.06, 0.08),
    years: int = 20,
    year: int = tax_calc.DEFAULT_YEAR,
    tax_tables: Optional[Dict[str, Dict]] = None,
) -> Dict:
    """Grow the estate at each rate and tax it at every horizon.

    Asset values compound at ``growth_rate`` while liabilities stay flat.
    Exemptions are held at ``year``'s values for the whole horizon.

    Returns a dict with ``years`` (0..years), ``growth_rates``,
    ``net_estate`` and ``total_tax``; the last two are arrays shaped
    ``(len(growth_rates), years + 1)``.
    """
    tables = tax_tables or tax_calc.load_tax_tables()
    rates = np.asarray(growth_rates, dtype=float)
    horizon = np.arange(years + 1)

    gross = sum_assets(estate.assets)
    debts = sum_liabilities(estate.liabilities)
    growth = (1.0 + rates[:, None]) ** horizon[None, :]
    net_estate = gross * growth - debts

    total_tax = np.empty_like(net_estate)
    for idx, net in np.ndenumerate(net_estate):
        total_tax[idx] = tax_calc.federal_estate_tax(
            float(net), estate.is_married, year, tables
        ) + tax_calc.state_estate_tax(float(net), estate.jurisdiction, year, tables)

    return {
        "years": horizon.tolist(),
        "growth_rates": rates.tolist(),
        "net_estate": net_estate,
        "total_tax": total_tax,
    }


__all__ = ["project_estate"]
