import math

from rentadjust.domain.adjustment import (
    CalculationMode,
    CalculationResult,
    Failure,
    NormalizedInputs,
    RawInputs,
    Success,
)
from rentadjust.domain.numerals import is_present, normalize

MONTHS_PER_YEAR = 12


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def deposit_equivalent(deposit: float, rate: float) -> float:
    """Monthly rent imputed to a held deposit at annual rate `rate` (decimal)."""
    return deposit * (rate / MONTHS_PER_YEAR)


def normalize_inputs(inputs: RawInputs) -> NormalizedInputs:
    rate = normalize(inputs.effective_rate) / 100
    return NormalizedInputs(
        previous_rent=normalize(inputs.previous_rent),
        previous_deposit=normalize(inputs.previous_deposit),
        next_deposit=normalize(inputs.next_deposit),
        rate=rate if rate > 0 else None,
        next_rent=normalize(inputs.next_rent),
        increase_percent=normalize(inputs.increase_percent),
    )


def select_mode(inputs: RawInputs) -> CalculationMode:
    # Presence only; the parsed value plays no part here.
    has_next_rent = is_present(inputs.next_rent)
    has_percent = is_present(inputs.increase_percent)

    if has_next_rent and has_percent:
        return "ambiguous"
    if has_next_rent:
        return "by_next_rent"
    if has_percent:
        return "by_increase_percent"
    return "incomplete"


def calculate(inputs: RawInputs) -> CalculationResult:
    norm = normalize_inputs(inputs)

    # 1. Base inputs
    if norm.rate is None:
        return Failure(reason="invalid_base_inputs")

    # 2. Deposit -> monthly rent equivalents
    prev_dep_eq = deposit_equivalent(norm.previous_deposit, norm.rate)
    next_dep_eq = deposit_equivalent(norm.next_deposit, norm.rate)

    # 3. Previous total rent (0 cash rent = pure-deposit contract)
    prev_total = norm.previous_rent + prev_dep_eq
    if not _all_finite(prev_dep_eq, next_dep_eq, prev_total):
        # magnitudes past float range
        return Failure(reason="invalid_base_inputs")

    # 4. Mode
    mode = select_mode(inputs)
    if mode == "ambiguous":
        return Failure(reason="ambiguous_mode")
    if mode == "incomplete":
        return Failure(reason="incomplete_mode")

    # 5a. Next rent given -> percent increase
    if mode == "by_next_rent":
        next_total = norm.next_rent + next_dep_eq
        if prev_total <= 0:
            return Failure(reason="zero_base_rent")
        increase_percent = (next_total - prev_total) / prev_total * 100
        if not _all_finite(next_total, increase_percent):
            return Failure(reason="invalid_base_inputs")
        return Success(
            mode=mode,
            previous_deposit_equivalent=prev_dep_eq,
            previous_total_rent=prev_total,
            next_deposit_equivalent=next_dep_eq,
            next_total_rent=next_total,
            increase_percent=increase_percent,
        )

    # 5b. Percent given -> required next cash rent
    next_total = prev_total * (1 + norm.increase_percent / 100)
    next_rent = next_total - next_dep_eq
    if not _all_finite(next_total, next_rent):
        return Failure(reason="invalid_base_inputs")
    if next_rent < 0:
        return Failure(
            reason="negative_required_rent",
            negative_rent=next_rent,
            deposit_delta=norm.next_deposit - norm.previous_deposit,
        )
    return Success(
        mode=mode,
        previous_deposit_equivalent=prev_dep_eq,
        previous_total_rent=prev_total,
        next_deposit_equivalent=next_dep_eq,
        next_total_rent=next_total,
        next_rent=next_rent,
    )
