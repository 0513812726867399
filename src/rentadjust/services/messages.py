# src/rentadjust/services/messages.py
from __future__ import annotations

import math
from typing import Any, Dict, List, Literal

from rentadjust.adapters.config import config
from rentadjust.domain.adjustment import CalculationResult, Failure

Digits = Literal["fa", "ascii"]

_FA_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")
_FA_THOUSANDS = "٬"
_FA_DECIMAL = "٫"

_MODE_FIELDS_HINT = "«اجاره سال آینده» یا «افزایش اجاره»"


def round_half_away(x: float) -> int:
    """Nearest integer unit; .5 goes away from zero."""
    if not math.isfinite(x):
        return 0
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def format_number(x: float, digits: Digits | None = None) -> str:
    """
    Round to whole units and group thousands:
      - ascii: 1,166,667
      - fa:    ۱٬۱۶۶٬۶۶۷
    """
    digits = digits or config.DISPLAY_DIGITS
    s = f"{round_half_away(x):,}"
    if digits == "fa":
        s = s.replace(",", _FA_THOUSANDS).translate(_FA_DIGITS)
    return s


def format_percent(p: float, digits: Digits | None = None, decimals: int | None = None) -> str:
    digits = digits or config.DISPLAY_DIGITS
    decimals = config.PERCENT_DECIMALS if decimals is None else decimals
    s = f"{p:.{decimals}f}"
    if digits == "fa":
        s = s.replace(".", _FA_DECIMAL).translate(_FA_DIGITS)
    return f"{s}%"


def _money(x: float, digits: Digits | None) -> str:
    return f"{format_number(x, digits)} {config.CURRENCY_LABEL}"


def _msg(code: str, severity: str, message: str, **context: Any) -> Dict[str, Any]:
    return {"code": code, "severity": severity, "message": message, "context": context}


def _failure_messages(result: Failure, digits: Digits | None) -> List[Dict[str, Any]]:
    if result.reason == "invalid_base_inputs":
        return [
            _msg(
                "INVALID_BASE_INPUTS",
                "error",
                "لطفاً نرخ مؤثر سالانه را به‌صورت عددی بزرگ‌تر از صفر وارد کنید.",
            )
        ]
    if result.reason == "ambiguous_mode":
        return [
            _msg(
                "AMBIGUOUS_MODE",
                "error",
                f"لطفاً **فقط** یکی از فیلدهای {_MODE_FIELDS_HINT} را وارد کنید.",
            )
        ]
    if result.reason == "incomplete_mode":
        return [
            _msg(
                "INCOMPLETE_MODE",
                "error",
                f"لطفاً یکی از فیلدهای {_MODE_FIELDS_HINT} را وارد کنید.",
            )
        ]
    if result.reason == "zero_base_rent":
        return [
            _msg(
                "ZERO_BASE_RENT",
                "error",
                "خطا: اجاره کل سال گذشته نمی‌تواند صفر باشد.",
            )
        ]

    # negative_required_rent: report the amount and the likely causes
    negative_rent = result.negative_rent or 0.0
    deposit_delta = result.deposit_delta or 0.0
    out = [
        _msg(
            "NEGATIVE_REQUIRED_RENT",
            "error",
            "خطا در محاسبه: اجاره سال آینده منفی می‌شود "
            f"({_money(negative_rent, digits)}).",
            negative_rent=negative_rent,
            deposit_delta=deposit_delta,
        )
    ]
    if deposit_delta > 0:
        out.append(
            _msg(
                "DEPOSIT_INCREASE_TOO_LARGE",
                "warning",
                f"افزایش رهن ({_money(deposit_delta, digits)}) بیش از حد زیاد است.",
                deposit_delta=deposit_delta,
            )
        )
    out.append(
        _msg(
            "PERCENT_TOO_LOW",
            "warning",
            "درصد افزایش اجاره برای پوشش معادل رهن سال آینده کافی نیست.",
        )
    )
    return out


def describe_result(result: CalculationResult, digits: Digits | None = None) -> List[Dict[str, Any]]:
    """
    Human-readable lines for a calculation result.

    Each line is {"code", "severity", "message", "context"}; severity is
    "info" for success lines, "error"/"warning" otherwise.
    """
    if isinstance(result, Failure):
        return _failure_messages(result, digits)

    lines = [
        _msg(
            "PREVIOUS_TOTAL_RENT",
            "info",
            f"اجاره کل سال گذشته (شامل معادل رهن): {_money(result.previous_total_rent, digits)}",
        ),
        _msg(
            "NEXT_TOTAL_RENT",
            "info",
            f"اجاره کل سال آینده (شامل معادل رهن): {_money(result.next_total_rent, digits)}",
        ),
    ]
    if result.mode == "by_next_rent" and result.increase_percent is not None:
        lines.append(
            _msg(
                "INCREASE_PERCENT",
                "info",
                f"درصد افزایش اجاره کل: {format_percent(result.increase_percent, digits)}",
            )
        )
    elif result.next_rent is not None:
        lines.append(
            _msg(
                "REQUIRED_NEXT_RENT",
                "info",
                f"اجاره سال آینده مورد نیاز: {_money(result.next_rent, digits)}",
            )
        )
    return lines


def display_values(result: CalculationResult, digits: Digits | None = None) -> Dict[str, str]:
    """Formatted strings for every numeric field the result carries."""
    if isinstance(result, Failure):
        out = {}
        if result.negative_rent is not None:
            out["negative_rent"] = format_number(result.negative_rent, digits)
        if result.deposit_delta is not None:
            out["deposit_delta"] = format_number(result.deposit_delta, digits)
        return out

    out = {
        "previous_deposit_equivalent": format_number(result.previous_deposit_equivalent, digits),
        "previous_total_rent": format_number(result.previous_total_rent, digits),
        "next_deposit_equivalent": format_number(result.next_deposit_equivalent, digits),
        "next_total_rent": format_number(result.next_total_rent, digits),
    }
    if result.increase_percent is not None:
        out["increase_percent"] = format_percent(result.increase_percent, digits)
    if result.next_rent is not None:
        out["next_rent"] = format_number(result.next_rent, digits)
    return out
