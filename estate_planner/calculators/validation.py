"""Input checks run before any estate computation.

Checking happens in two layers.  ``parse_estate`` turns raw mapping data
(form rows, an uploaded JSON file) into an :class:`EstateInput`; the pydantic
field types reject unknown kinds, non-numeric amounts and NaN/infinity
there.  ``validation_errors`` then applies the business rules to a built
estate and returns one :class:`ValidationError` per problem so the UI can
list them all at once; ``validate`` is the boolean shortcut.

Note the asymmetry between assets and liabilities: an asset worth $0 is
treated as a data-entry mistake, whereas a $0 liability is a valid
placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import ValidationError as ModelError

from ..models import JURISDICTIONS, EstateInput


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


class EstateValidationError(ValueError):
    """Raised by ``compute_estate`` when the input fails validation."""

    def __init__(self, errors: List[ValidationError]):
        self.errors = list(errors)
        super().__init__("; ".join(e.message for e in self.errors))


def _field_path(loc) -> str:
    # ("assets", 0, "value") -> "assets[0].value"
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def parse_estate(data: Mapping[str, Any]) -> Tuple[Optional[EstateInput], List[ValidationError]]:
    """Build an estate from plain data, collecting type errors instead of raising.

    Returns ``(estate, [])`` on success and ``(None, errors)`` otherwise.
    """
    try:
        return EstateInput.model_validate(data), []
    except ModelError as exc:
        errors = [ValidationError(_field_path(err["loc"]), err["msg"]) for err in exc.errors()]
        return None, errors


def validation_errors(estate: EstateInput) -> List[ValidationError]:
    errors: List[ValidationError] = []

    if not estate.assets:
        errors.append(ValidationError("assets", "At least one asset is required"))
    for i, asset in enumerate(estate.assets):
        label = f"assets[{i}]"
        if not asset.description.strip():
            errors.append(ValidationError(f"{label}.description", f"Asset {i + 1}: description is required"))
        if not asset.value > 0:
            errors.append(ValidationError(f"{label}.value", f"Asset {i + 1}: value must be greater than zero"))

    for i, liability in enumerate(estate.liabilities):
        label = f"liabilities[{i}]"
        if not liability.description.strip():
            errors.append(ValidationError(f"{label}.description", f"Liability {i + 1}: description is required"))
        if not liability.amount >= 0:
            errors.append(ValidationError(f"{label}.amount", f"Liability {i + 1}: amount cannot be negative"))

    if not estate.jurisdiction:
        errors.append(ValidationError("jurisdiction", "State is required"))
    elif estate.jurisdiction not in JURISDICTIONS:
        errors.append(ValidationError("jurisdiction", f"Unrecognized state '{estate.jurisdiction}'"))

    return errors


def validate(estate: EstateInput) -> bool:
    return not validation_errors(estate)


__all__ = ["ValidationError", "EstateValidationError", "parse_estate", "validation_errors", "validate"]
