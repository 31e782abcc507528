"""Tests for estate input validation."""

import pytest

from estate_planner.calculators.validation import parse_estate, validate, validation_errors
from estate_planner.models import Asset, EstateInput, Liability


def _fields(estate):
    return [e.field for e in validation_errors(estate)]


def _with(estate, **changes):
    return EstateInput.model_validate({**estate.model_dump(), **changes})


def test_valid_input_passes(small_estate):
    assert validate(small_estate)
    assert validation_errors(small_estate) == []


def test_empty_assets_rejected_regardless_of_other_fields(wa_estate):
    estate = _with(wa_estate, assets=())
    assert not validate(estate)
    messages = [e.message for e in validation_errors(estate)]
    assert "At least one asset is required" in messages


def test_zero_value_asset_rejected(small_estate):
    estate = _with(small_estate, assets=[{"kind": "personal", "description": "Car", "value": 0.0}])
    assert "assets[0].value" in _fields(estate)


def test_asset_without_description_rejected(small_estate):
    estate = _with(small_estate, assets=[{"kind": "personal", "description": "   ", "value": 10_000.0}])
    assert _fields(estate) == ["assets[0].description"]


def test_missing_description_fails_instead_of_passing_or_crashing(small_estate):
    asset = Asset(kind="personal", description=None, value=10_000.0)
    assert asset.description == ""
    estate = small_estate.model_copy(update=dict(assets=(asset,)))
    assert not validate(estate)
    assert _fields(estate) == ["assets[0].description"]

    estate = _with(small_estate, liabilities=[{"kind": "loan", "description": None, "amount": 5.0}])
    assert _fields(estate) == ["liabilities[0].description"]


def test_zero_liability_allowed_negative_rejected(small_estate):
    zero = _with(small_estate, liabilities=[{"kind": "credit", "description": "Card", "amount": 0.0}])
    assert validate(zero)

    negative = _with(small_estate, liabilities=[{"kind": "credit", "description": "Card", "amount": -1.0}])
    assert _fields(negative) == ["liabilities[0].amount"]


def test_liability_without_description_rejected(small_estate):
    estate = _with(small_estate, liabilities=[{"kind": "loan", "description": "", "amount": 5_000.0}])
    assert _fields(estate) == ["liabilities[0].description"]


def test_missing_and_unknown_jurisdiction(small_estate):
    missing = _with(small_estate, jurisdiction="")
    assert [e.message for e in validation_errors(missing)] == ["State is required"]

    unknown = _with(small_estate, jurisdiction="ZZ")
    assert _fields(unknown) == ["jurisdiction"]


def test_none_jurisdiction_reads_as_missing(small_estate):
    estate = _with(small_estate, jurisdiction=None)
    assert estate.jurisdiction == ""
    assert [e.message for e in validation_errors(estate)] == ["State is required"]


def test_jurisdiction_is_normalised_once(small_estate):
    estate = _with(small_estate, jurisdiction="  wa ")
    assert estate.jurisdiction == "WA"
    assert validate(estate)


def test_non_finite_amounts_fail_even_when_built_without_checks(small_estate):
    nan_asset = Asset.model_construct(kind="personal", description="Art", value=float("nan"))
    nan_debt = Liability.model_construct(kind="loan", description="Note", amount=float("nan"))
    estate = small_estate.model_copy(update=dict(assets=(nan_asset,), liabilities=(nan_debt,)))
    assert _fields(estate) == ["assets[0].value", "liabilities[0].amount"]


def test_all_errors_reported_together():
    estate = EstateInput(
        assets=(),
        liabilities=(Liability(kind="tax", description="", amount=-10.0),),
        jurisdiction="",
    )
    assert _fields(estate) == [
        "assets",
        "liabilities[0].description",
        "liabilities[0].amount",
        "jurisdiction",
    ]


def test_validation_does_not_mutate_input(small_estate):
    before = small_estate.model_dump()
    validation_errors(small_estate)
    assert small_estate.model_dump() == before


def test_parse_estate_builds_valid_data(wa_estate):
    estate, errors = parse_estate(wa_estate.model_dump(mode="json"))
    assert errors == []
    assert estate == wa_estate


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf"), "nan", "not a number", None])
def test_parse_estate_rejects_malformed_asset_values(small_estate, bad):
    data = small_estate.model_dump()
    data["assets"][0]["value"] = bad
    estate, errors = parse_estate(data)
    assert estate is None
    assert [e.field for e in errors] == ["assets[0].value"]


def test_parse_estate_rejects_non_finite_liability_amount(small_estate):
    data = small_estate.model_dump()
    data["liabilities"][0]["amount"] = float("inf")
    estate, errors = parse_estate(data)
    assert estate is None
    assert [e.field for e in errors] == ["liabilities[0].amount"]


def test_parse_estate_reports_unknown_kinds_and_status(small_estate):
    data = small_estate.model_dump()
    data["assets"][1]["kind"] = "crypto"
    data["liabilities"][0]["kind"] = "payday"
    data["marital_status"] = "engaged"
    estate, errors = parse_estate(data)
    assert estate is None
    assert sorted(e.field for e in errors) == [
        "assets[1].kind",
        "liabilities[0].kind",
        "marital_status",
    ]
    assert all(e.message for e in errors)
