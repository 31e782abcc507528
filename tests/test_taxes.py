"""Unit tests for the estate tax calculators.

Values use the packaged 2023 tables: a $12.92M federal exemption taxed at a
flat 40 % above it, and per-state exemption/rate pairs.
"""

import math

import pytest

from estate_planner.calculators import taxes as tax_calc


def test_federal_tax_below_exemption():
    assert tax_calc.federal_estate_tax(5_000_000) == 0.0


def test_federal_tax_single_above_exemption():
    tax = tax_calc.federal_estate_tax(15_000_000, is_married=False)
    assert math.isclose(tax, (15_000_000 - 12_920_000) * 0.40, rel_tol=1e-9)


def test_federal_tax_married_doubles_exemption():
    tax = tax_calc.federal_estate_tax(30_000_000, is_married=True)
    assert math.isclose(tax, (30_000_000 - 25_840_000) * 0.40, rel_tol=1e-9)
    assert tax_calc.federal_estate_tax(15_000_000, is_married=True) == 0.0


@pytest.mark.parametrize("net", [1.0, 12_920_000.0, 20_000_000.0, 50_000_000.0])
def test_married_never_owes_more_than_single(net):
    assert tax_calc.federal_estate_tax(net, True) <= tax_calc.federal_estate_tax(net, False)


def test_state_tax_washington():
    """WA: exemption 2,193,000 taxed at 20 %."""
    tax = tax_calc.state_estate_tax(15_000_000, "WA")
    assert math.isclose(tax, 2_561_400.0, rel_tol=1e-9)


def test_state_tax_below_state_exemption():
    assert tax_calc.state_estate_tax(1_500_000, "MA") == 0.0


@pytest.mark.parametrize("code", ["ZZ", "TX", "FL", ""])
def test_state_without_estate_tax_returns_zero(code):
    assert tax_calc.state_estate_tax(40_000_000, code) == 0.0


@pytest.mark.parametrize("net", [-1_000_000.0, 0.0])
def test_negative_or_zero_net_estate_is_never_taxed(net):
    assert tax_calc.federal_estate_tax(net) == 0.0
    assert tax_calc.state_estate_tax(net, "OR") == 0.0


def test_year_selects_table():
    assert tax_calc.federal_exemption(2023) == 12_920_000.0
    assert tax_calc.federal_exemption(2024) == 13_610_000.0
    assert tax_calc.available_years() == [2023, 2024]


def test_custom_tables_override_packaged_file():
    tables = {
        "2030": {
            "federal": {"exemption": 1_000_000, "rate": 0.5},
            "state": {"XX": {"exemption": 100_000, "rate": 0.1}},
        }
    }
    assert tax_calc.federal_estate_tax(3_000_000, year=2030, tax_tables=tables) == 1_000_000.0
    assert math.isclose(
        tax_calc.state_estate_tax(600_000, "XX", year=2030, tax_tables=tables), 50_000.0
    )


def test_load_tax_tables_from_path(tmp_path):
    path = tmp_path / "tables.json"
    path.write_text('{"2025": {"federal": {"exemption": 10, "rate": 0.4}, "state": {}}}')
    tables = tax_calc.load_tax_tables(path)
    assert tax_calc.federal_exemption(2025, tables) == 10.0
