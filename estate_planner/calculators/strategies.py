"""Rule-based estate planning suggestions.

Rules live in ``STRATEGY_RULES``, an ordered list of ``(predicate,
messages)`` pairs.  Every rule whose predicate holds appends all of its
messages, in table order, so the returned list is deterministic and may
repeat a message when two rules share one.

Rule 1 compares the net estate against the single-person federal exemption
even for married couples whose tax calculation uses the doubled amount.
"""

from __future__ import annotations

from typing import Callable, Dict, List, NamedTuple, Optional, Sequence

from ..models import EstateInput
from . import taxes as tax_calc

TRUST_THRESHOLD = 1_000_000.0
FAMILY_THRESHOLD = 500_000.0

ILIT = "Consider an Irrevocable Life Insurance Trust (ILIT) to keep insurance proceeds out of your taxable estate"
ANNUAL_GIFTING = "Use annual gift tax exclusions to move wealth to heirs during your lifetime"
LIVING_TRUST = "Establish a revocable living trust to avoid probate and keep your estate private"
MARITAL_DEDUCTION = "Use the unlimited marital deduction and elect portability of your spouse's unused exemption"
GENERATION_SKIPPING = "Consider a generation-skipping trust to pass assets to grandchildren"
FLP_LLC = "Consider a family limited partnership (FLP) or LLC to transfer assets at a valuation discount"
BUSINESS_SUCCESSION = "Create a business succession plan for your business interests"


class RuleContext(NamedTuple):
    estate: EstateInput
    net_estate_value: float
    federal_exemption: float


class StrategyRule(NamedTuple):
    predicate: Callable[[RuleContext], bool]
    messages: Sequence[str]


STRATEGY_RULES: List[StrategyRule] = [
    StrategyRule(lambda c: c.net_estate_value > c.federal_exemption, (ILIT, ANNUAL_GIFTING)),
    StrategyRule(lambda c: not c.estate.has_trust and c.net_estate_value > TRUST_THRESHOLD, (LIVING_TRUST,)),
    StrategyRule(lambda c: c.estate.is_married, (MARITAL_DEDUCTION,)),
    StrategyRule(
        lambda c: c.estate.has_children and c.net_estate_value > FAMILY_THRESHOLD,
        (GENERATION_SKIPPING, FLP_LLC),
    ),
    StrategyRule(lambda c: any(a.kind == "business" for a in c.estate.assets), (BUSINESS_SUCCESSION, FLP_LLC)),
]


def recommend_strategies(
    estate: EstateInput,
    net_estate_value: float,
    year: int = tax_calc.DEFAULT_YEAR,
    tax_tables: Optional[Dict[str, Dict]] = None,
    rules: Sequence[StrategyRule] = STRATEGY_RULES,
) -> List[str]:
    """Return the strategies triggered by ``estate`` in rule order.

    Parameters
    ----------
    estate : EstateInput
        The validated input.
    net_estate_value : float
        Net estate as computed by the aggregator.
    year : int, optional
        Table year used to look up the federal exemption.
    tax_tables : dict, optional
        Pre-loaded tables; the packaged file is read when omitted.
    rules : sequence, optional
        Rule table to evaluate, ``STRATEGY_RULES`` by default.

    Returns
    -------
    list of str
        Messages in evaluation order, duplicates preserved.
    """
    ctx = RuleContext(
        estate=estate,
        net_estate_value=net_estate_value,
        federal_exemption=tax_calc.federal_exemption(year, tax_tables),
    )
    strategies: List[str] = []
    for rule in rules:
        if rule.predicate(ctx):
            strategies.extend(rule.messages)
    return strategies


__all__ = ["STRATEGY_RULES", "StrategyRule", "RuleContext", "recommend_strategies"]
