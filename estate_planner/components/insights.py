from ..models import EstateResult


def generate_insights(result: EstateResult) -> str:
    """Return a short plain-language read of an estate result."""
    if result.net_estate_value <= 0:
        return (
            "Your liabilities meet or exceed your assets, so there is no net estate "
            "to tax or pass on. Paying down debt comes before tax planning."
        )

    if result.total_tax_liability <= 0:
        outlook = "falls below the estate tax exemptions that apply to you"
    elif result.effective_tax_rate < 0.10:
        outlook = "owes a modest amount of estate tax"
    else:
        outlook = "faces a significant estate tax bill"

    text = (
        f"Your estate {outlook}. Heirs would receive about "
        f"${result.net_to_heirs:,.0f} of a ${result.gross_estate_value:,.0f} gross estate "
        f"(effective tax rate {result.effective_tax_rate * 100:.1f}%)."
    )
    if result.potential_tax_savings > 0:
        text += f" Planning could save roughly ${result.potential_tax_savings:,.0f}."
    return text
