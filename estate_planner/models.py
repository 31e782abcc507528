"""Value types shared by the estate calculators and the Streamlit front end.

The calculators take an :class:`EstateInput` and hand back an
:class:`EstateResult`.  Both are frozen pydantic models.  Field types catch
structural problems (unknown kinds, non-numeric or non-finite amounts) when
a record is built; the business rules that need a message per row live in
``calculators.validation``.
"""

from __future__ import annotations

from typing import Literal, Optional, Tuple, get_args

from pydantic import BaseModel, Field, field_validator

AssetKind = Literal[
    "real_estate",
    "investment",
    "retirement",
    "business",
    "life_insurance",
    "personal",
    "other",
]
LiabilityKind = Literal["mortgage", "loan", "credit", "tax", "other"]
MaritalStatus = Literal["single", "married", "widowed", "divorced"]

ASSET_KINDS = get_args(AssetKind)
LIABILITY_KINDS = get_args(LiabilityKind)
MARITAL_STATUSES = get_args(MaritalStatus)

# 50 states plus DC.  Only a handful levy an estate tax; the rest are valid
# residences with no state estate tax.
JURISDICTIONS = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "DC", "FL", "GA", "HI",
    "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN",
    "MS", "MO", "MT", "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH",
    "OK", "OR", "PA", "RI", "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA",
    "WV", "WI", "WY",
)


class Asset(BaseModel):
    kind: AssetKind
    description: str = ""
    # Positivity is a validation rule, not a type constraint, so a $0 row
    # can still be built and reported.
    value: float = Field(..., allow_inf_nan=False)
    cost_basis: Optional[float] = Field(default=None, allow_inf_nan=False)
    notes: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("description", mode="before")
    @classmethod
    def blank_description(cls, v):
        return "" if v is None else v


class Liability(BaseModel):
    kind: LiabilityKind
    description: str = ""
    amount: float = Field(..., allow_inf_nan=False)
    interest_rate: Optional[float] = Field(default=None, allow_inf_nan=False)
    notes: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("description", mode="before")
    @classmethod
    def blank_description(cls, v):
        return "" if v is None else v


class EstateInput(BaseModel):
    """Everything the engine needs for one estate computation."""

    assets: Tuple[Asset, ...] = ()
    liabilities: Tuple[Liability, ...] = ()
    jurisdiction: str = ""
    marital_status: MaritalStatus = "single"
    has_children: bool = False
    has_trust: bool = False

    model_config = {"frozen": True}

    @field_validator("jurisdiction", mode="before")
    @classmethod
    def normalize_jurisdiction(cls, v):
        """Region codes are compared upper-case with surrounding blanks removed."""
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_married(self) -> bool:
        return self.marital_status == "married"


class EstateResult(BaseModel):
    gross_estate_value: float
    total_liabilities: float
    net_estate_value: float
    federal_tax: float
    state_tax: float
    total_tax_liability: float
    net_to_heirs: float
    potential_tax_savings: float
    effective_tax_rate: float
    recommended_strategies: Tuple[str, ...] = ()

    model_config = {"frozen": True}


__all__ = [
    "ASSET_KINDS",
    "LIABILITY_KINDS",
    "MARITAL_STATUSES",
    "JURISDICTIONS",
    "Asset",
    "Liability",
    "EstateInput",
    "EstateResult",
]
