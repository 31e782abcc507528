"""Estate aggregation and the end-to-end estate computation.

``compute_estate`` validates the input, totals assets and liabilities,
applies federal and state estate tax and collects planning suggestions into
a single :class:`~estate_planner.models.EstateResult`.  Amounts are plain
floats and are never rounded here; format them for display only.

Example
-------

>>> from estate_planner.models import Asset, EstateInput
>>> estate = EstateInput(
...     assets=(Asset(kind="real_estate", description="Home", value=15_000_000),),
...     jurisdiction="WA",
...     marital_status="married",
...     has_children=True,
... )
>>> result = compute_estate(estate)
>>> result.federal_tax, round(result.state_tax, 2)
(0.0, 2561400.0)
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from ..models import ASSET_KINDS, Asset, EstateInput, EstateResult, Liability
from . import strategies, taxes as tax_calc
from .validation import EstateValidationError, validation_errors

logger = logging.getLogger(__name__)

# Share of the total estate tax the recommended strategies are assumed to save.
POTENTIAL_SAVINGS_RATE = 0.25


def sum_assets(assets: Iterable[Asset]) -> float:
    return sum((a.value for a in assets), 0.0)


def sum_liabilities(liabilities: Iterable[Liability]) -> float:
    return sum((l.amount for l in liabilities), 0.0)


def asset_breakdown(assets: Iterable[Asset]) -> Dict[str, float]:
    """Total asset value per kind, in ``ASSET_KINDS`` order, omitting empty kinds."""
    totals: Dict[str, float] = {}
    for asset in assets:
        totals[asset.kind] = totals.get(asset.kind, 0.0) + asset.value
    ordered = {k: totals.pop(k) for k in ASSET_KINDS if k in totals}
    ordered.update(totals)
    return ordered


def compute_estate(
    estate: EstateInput,
    year: int = tax_calc.DEFAULT_YEAR,
    tax_tables: Optional[Dict[str, Dict]] = None,
) -> EstateResult:
    """Run the full estate computation for ``estate``.

    Raises
    ------
    EstateValidationError
        If the input fails validation; no totals are computed in that case.
    """
    errors = validation_errors(estate)
    if errors:
        raise EstateValidationError(errors)

    tables = tax_tables or tax_calc.load_tax_tables()

    gross = sum_assets(estate.assets)
    liabilities = sum_liabilities(estate.liabilities)
    net = gross - liabilities

    federal = tax_calc.federal_estate_tax(net, estate.is_married, year, tables)
    state = tax_calc.state_estate_tax(net, estate.jurisdiction, year, tables)
    total_tax = federal + state

    recommended = strategies.recommend_strategies(estate, net, year, tables)
    savings = total_tax * POTENTIAL_SAVINGS_RATE if recommended else 0.0

    logger.debug(
        "Estate %s: gross=%.2f net=%.2f federal=%.2f state=%.2f",
        estate.jurisdiction, gross, net, federal, state,
    )
    return EstateResult(
        gross_estate_value=gross,
        total_liabilities=liabilities,
        net_estate_value=net,
        federal_tax=federal,
        state_tax=state,
        total_tax_liability=total_tax,
        net_to_heirs=net - total_tax,
        potential_tax_savings=savings,
        effective_tax_rate=total_tax / gross if gross > 0 else 0.0,
        recommended_strategies=tuple(recommended),
    )


__all__ = [
    "POTENTIAL_SAVINGS_RATE",
    "sum_assets",
    "sum_liabilities",
    "asset_breakdown",
    "compute_estate",
]
