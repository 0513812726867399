# src/rentadjust/services/validation.py

from collections.abc import Mapping
from typing import Any

from rentadjust.domain.adjustment import RawInputs

# RawInputs attribute -> accepted payload keys (form name first)
FIELD_ALIASES = {
    "previous_rent": ("lastYearRent", "previous_rent"),
    "previous_deposit": ("lastYearMortgage", "previous_deposit"),
    "next_deposit": ("nextYearMortgage", "next_deposit"),
    "effective_rate": ("effectiveRate", "effective_rate"),
    "next_rent": ("nextYearRent", "next_rent"),
    "increase_percent": ("rentIncreasePercent", "increase_percent"),
}


def _to_raw_str(val: Any, field_name: str) -> str:
    """
    Coerce a payload value into the string the form field would hold:
      - None        -> ""   (blank field)
      - "1,200,000" -> "1,200,000" (left for the normalizer)
      - 20 / 20.5   -> "20" / "20.5"
    """
    if val is None:
        return ""
    if isinstance(val, bool):
        raise ValueError(f"Invalid type for {field_name}: {type(val)}")
    if isinstance(val, str):
        return val
    if isinstance(val, int):
        return str(val)
    if isinstance(val, float):
        # NaN comes out of pandas for empty CSV cells
        if val != val:
            return ""
        return repr(val)
    raise ValueError(f"Invalid type for {field_name}: {type(val)}")


def validate_and_prepare_inputs(raw: Mapping[str, Any]) -> RawInputs:
    """
    Build a RawInputs snapshot from a loosely typed payload.

    Responsibilities:
      - Accept both the form names (lastYearRent, ...) and snake_case names.
      - Treat missing keys and None as blank fields.
      - Reject structurally wrong values (lists, dicts, bools).

    Numeric content is NOT judged here; a blank or garbage rate is a
    calculation failure, not a validation error.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(f"Payload must be a mapping, got {type(raw)}")

    fields: dict[str, str] = {}
    for attr, keys in FIELD_ALIASES.items():
        supplied = {k: _to_raw_str(raw[k], k) for k in keys if k in raw}
        values = set(supplied.values())
        if len(values) > 1:
            raise ValueError(f"Conflicting values for {attr}: {sorted(supplied)}")
        fields[attr] = values.pop() if values else ""

    return RawInputs(**fields)
