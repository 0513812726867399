from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union

CalculationMode = Literal["by_next_rent", "by_increase_percent", "ambiguous", "incomplete"]

FailureReason = Literal[
    "invalid_base_inputs",
    "ambiguous_mode",
    "incomplete_mode",
    "zero_base_rent",
    "negative_required_rent",
]


@dataclass(frozen=True)
class RawInputs:
    """
    One snapshot of the form fields, exactly as typed.

    An empty string means the field was left blank.
    """
    previous_rent: str = ""       # lastYearRent
    previous_deposit: str = ""    # lastYearMortgage
    next_deposit: str = ""        # nextYearMortgage
    effective_rate: str = ""      # effectiveRate, percent form ("37" = 37%)
    next_rent: str = ""           # nextYearRent
    increase_percent: str = ""    # rentIncreasePercent


@dataclass(frozen=True)
class NormalizedInputs:
    previous_rent: float
    previous_deposit: float
    next_deposit: float
    rate: Optional[float]         # annual, decimal (0.20); None when not > 0
    next_rent: float
    increase_percent: float


@dataclass(frozen=True)
class Success:
    mode: CalculationMode
    previous_deposit_equivalent: float  # monthly
    previous_total_rent: float          # monthly cash rent + deposit equivalent
    next_deposit_equivalent: float
    next_total_rent: float
    increase_percent: Optional[float] = None  # set in by_next_rent
    next_rent: Optional[float] = None         # set in by_increase_percent

    ok: Literal[True] = True


@dataclass(frozen=True)
class Failure:
    reason: FailureReason
    negative_rent: Optional[float] = None   # negative_required_rent only
    deposit_delta: Optional[float] = None   # next_deposit - previous_deposit

    ok: Literal[False] = False


CalculationResult = Union[Success, Failure]
