# tests/conftest.py
import pytest

from rentadjust.domain.adjustment import RawInputs


@pytest.fixture
def scenario_a_inputs() -> RawInputs:
    """rate 20%, 1M rent + 10M deposit -> next 1.2M rent + 12M deposit."""
    return RawInputs(
        previous_rent="1,000,000",
        previous_deposit="10,000,000",
        next_deposit="12,000,000",
        effective_rate="20",
        next_rent="1,200,000",
    )


@pytest.fixture
def scenario_a_payload() -> dict:
    # Same snapshot, keyed by the form field names
    return {
        "lastYearRent": "1,000,000",
        "lastYearMortgage": "10,000,000",
        "nextYearMortgage": "12,000,000",
        "effectiveRate": "20",
        "nextYearRent": "1,200,000",
        "rentIncreasePercent": "",
    }
