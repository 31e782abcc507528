"""Estate value and estate tax planner.

``estate_planner.calculators`` holds the pure computation engine and
``estate_planner.components`` the Streamlit/Plotly pieces used by ``app.py``.
"""

from .calculators.estate import compute_estate
from .calculators.validation import (
    EstateValidationError,
    parse_estate,
    validate,
    validation_errors,
)
from .models import Asset, EstateInput, EstateResult, Liability

__all__ = [
    "Asset",
    "Liability",
    "EstateInput",
    "EstateResult",
    "EstateValidationError",
    "compute_estate",
    "parse_estate",
    "validate",
    "validation_errors",
]
