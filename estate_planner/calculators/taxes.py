"""Estate tax calculation utilities.

This module implements simplified U.S. federal and state estate taxes.  The
defaults embed the 2023 federal exemption ($12.92M per person) with a 2024
table alongside it.  Federal tax is a flat 40 % on the net estate above the
exemption, and the exemption is doubled for married couples to model
portability of the deceased spouse's unused amount.  State tables list an
exemption and a single rate for each jurisdiction that levies an estate tax.
Graduated brackets, prior taxable gifts and inheritance taxes are omitted.

Example
-------

>>> # Washington estate of $15M for a married couple in 2023
>>> federal_estate_tax(15_000_000, is_married=True)
0.0
>>> round(state_estate_tax(15_000_000, "WA"), 2)
2561400.0

The tables can be customised by passing a dictionary matching the schema in
``data/estate_tax_tables.json``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_YEAR = 2023

_DEFAULT_TAX_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "estate_tax_tables.json"


def load_tax_tables(path: Optional[Path] = None) -> Dict[str, Dict]:
    """Load estate tax tables from JSON.  If ``path`` is not provided, load
    the default file shipped with the package.

    Parameters
    ----------
    path : Path, optional
        Path to a JSON file containing the tax tables.

    Returns
    -------
    dict
        The parsed tax tables keyed by year.
    """
    p = path or _DEFAULT_TAX_TABLE_PATH
    logger.debug("Loading estate tax tables from %s", p)
    with open(p, "r", encoding="utf-8") as f:
        tables = json.load(f)
    return tables


def available_years(tax_tables: Optional[Dict[str, Dict]] = None) -> list:
    tables = tax_tables or load_tax_tables()
    return sorted(int(y) for y in tables)


def federal_exemption(
    year: int = DEFAULT_YEAR,
    tax_tables: Optional[Dict[str, Dict]] = None,
) -> float:
    """Single-person federal exemption for ``year``."""
    tables = tax_tables or load_tax_tables()
    return float(tables[str(year)]["federal"]["exemption"])


def federal_estate_tax(
    net_estate_value: float,
    is_married: bool = False,
    year: int = DEFAULT_YEAR,
    tax_tables: Optional[Dict[str, Dict]] = None,
) -> float:
    """Compute federal estate tax on ``net_estate_value``.

    The whole excess over the exemption is taxed at the single federal rate.
    A married estate gets twice the per-person exemption.
    """
    tables = tax_tables or load_tax_tables()
    fed = tables[str(year)]["federal"]
    exemption = float(fed["exemption"])
    if is_married:
        exemption *= 2
    taxable = max(0.0, net_estate_value - exemption)
    return taxable * float(fed["rate"])


def state_estate_tax(
    net_estate_value: float,
    jurisdiction: str,
    year: int = DEFAULT_YEAR,
    tax_tables: Optional[Dict[str, Dict]] = None,
) -> float:
    """Compute state estate tax on ``net_estate_value``.

    Jurisdictions missing from the table owe nothing.  This also covers
    codes the table has never heard of; coverage is limited to the states
    listed in the data file.
    """
    tables = tax_tables or load_tax_tables()
    state_tables = tables[str(year)].get("state", {})
    state_info = state_tables.get(jurisdiction)
    if not state_info:
        logger.debug("No %s estate tax entry for %r; state tax is 0", year, jurisdiction)
        return 0.0

    taxable = max(0.0, net_estate_value - float(state_info.get("exemption", 0.0)))
    return taxable * float(state_info.get("rate", 0.0))


__all__ = [
    "DEFAULT_YEAR",
    "load_tax_tables",
    "available_years",
    "federal_exemption",
    "federal_estate_tax",
    "state_estate_tax",
]
