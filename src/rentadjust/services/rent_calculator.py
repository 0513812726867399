from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Mapping

from rentadjust.adapters.logging_utils import get_logger, log_context
from rentadjust.domain.adjustment import CalculationResult, RawInputs
from rentadjust.domain.reconciliation import calculate
from rentadjust.services.messages import Digits, describe_result, display_values
from rentadjust.services.validation import validate_and_prepare_inputs

logger = get_logger(__name__)


def result_to_dict(result: CalculationResult) -> dict[str, Any]:
    """Plain dict of the result, dropping fields that do not apply to it."""
    return {k: v for k, v in asdict(result).items() if v is not None}


def run_calculation(inputs: RawInputs) -> CalculationResult:
    """Engine call plus logging; the result is returned untouched."""
    result = calculate(inputs)

    if result.ok:
        log_context(
            logger,
            logging.DEBUG,
            "rent adjustment computed",
            mode=result.mode,
            previous_total_rent=result.previous_total_rent,
            next_total_rent=result.next_total_rent,
        )
    else:
        log_context(logger, logging.INFO, "rent adjustment rejected", reason=result.reason)
        log_context(logger, logging.DEBUG, "rejected inputs", **asdict(inputs))
    return result


def analyze_rent(raw_payload: Mapping[str, Any], *, digits: Digits | None = None) -> dict[str, Any]:
    """
    One-shot calculation for a form snapshot.

    Flow:
      1) validate payload -> RawInputs (raises ValueError on malformed payloads)
      2) run the reconciliation engine
      3) attach display strings and messages

    Returns:
      {
        "ok": bool,
        "inputs": {...raw strings...},
        "result": {...raw numbers / failure reason...},
        "display": {...formatted numbers...},
        "messages": [{"code", "severity", "message", "context"}, ...],
      }
    """
    inputs = validate_and_prepare_inputs(raw_payload)
    result = run_calculation(inputs)

    return {
        "ok": result.ok,
        "inputs": asdict(inputs),
        "result": result_to_dict(result),
        "display": display_values(result, digits),
        "messages": describe_result(result, digits),
    }
