import pytest

from estate_planner.models import Asset, EstateInput, Liability


@pytest.fixture
def wa_estate():
    """Married Washington couple with children and a single $15M property."""
    return EstateInput(
        assets=(Asset(kind="real_estate", description="Family home", value=15_000_000.0),),
        liabilities=(),
        jurisdiction="WA",
        marital_status="married",
        has_children=True,
        has_trust=False,
    )


@pytest.fixture
def small_estate():
    return EstateInput(
        assets=(
            Asset(kind="real_estate", description="Condo", value=400_000.0),
            Asset(kind="investment", description="Brokerage", value=150_000.0),
        ),
        liabilities=(Liability(kind="mortgage", description="Condo mortgage", amount=200_000.0),),
        jurisdiction="TX",
        marital_status="single",
    )


@pytest.fixture
def large_estate():
    return EstateInput(
        assets=(
            Asset(kind="business", description="Company stock", value=12_000_000.0),
            Asset(kind="life_insurance", description="Policy", value=4_000_000.0),
            Asset(kind="retirement", description="IRA", value=2_500_000.0),
        ),
        liabilities=(Liability(kind="mortgage", description="Home loan", amount=500_000.0),),
        jurisdiction="WA",
        marital_status="single",
        has_children=True,
    )
