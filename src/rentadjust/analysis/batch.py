# src/rentadjust/analysis/batch.py

from __future__ import annotations

from typing import Any

import pandas as pd

from rentadjust.services.rent_calculator import result_to_dict, run_calculation
from rentadjust.services.validation import FIELD_ALIASES, validate_and_prepare_inputs

RESULT_COLUMNS = [
    "ok",
    "mode",
    "reason",
    "previous_deposit_equivalent",
    "previous_total_rent",
    "next_deposit_equivalent",
    "next_total_rent",
    "increase_percent",
    "next_rent",
    "negative_rent",
    "deposit_delta",
    "error",
]

_INPUT_KEYS = {k for keys in FIELD_ALIASES.values() for k in keys}


def read_scenarios_csv(path: Any) -> pd.DataFrame:
    """
    Load scenarios as text so numerals like "1,200,000" or "۱۲۰۰" survive
    untouched and blank cells stay blank (not NaN).
    """
    return pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")


def evaluate_row(row: dict[str, Any]) -> dict[str, Any]:
    payload = {k: v for k, v in row.items() if k in _INPUT_KEYS}
    try:
        inputs = validate_and_prepare_inputs(payload)
    except ValueError as e:
        return {"ok": False, "error": str(e)}
    return result_to_dict(run_calculation(inputs))


def evaluate_scenarios_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    Evaluate one calculation per row.

    Expected columns (either naming scheme, any subset):
      - lastYearRent / previous_rent
      - lastYearMortgage / previous_deposit
      - nextYearMortgage / next_deposit
      - effectiveRate / effective_rate
      - nextYearRent / next_rent
      - rentIncreasePercent / increase_percent

    Rows are independent; a malformed row gets an `error` value instead of
    failing the whole batch. The result frame keeps df's index.
    """
    records = [evaluate_row(row) for row in df.to_dict(orient="records")]
    out = pd.DataFrame(records, index=df.index, columns=RESULT_COLUMNS)
    out["ok"] = out["ok"].astype(bool)
    return out


def summarize_batch(results: pd.DataFrame) -> dict[str, Any]:
    """Counts per outcome, for logging at the end of a batch."""
    reasons = results.loc[~results["ok"], "reason"].dropna().value_counts()
    return {
        "rows": int(len(results)),
        "ok": int(results["ok"].sum()),
        "failed": int((~results["ok"]).sum()),
        "errors": int(results["error"].notna().sum()),
        "reasons": {str(k): int(v) for k, v in reasons.items()},
    }
