import pytest
from pydantic import ValidationError

from rentadjust.adapters.config import AppConfig


def test_defaults():
    cfg = AppConfig()
    assert cfg.DISPLAY_DIGITS == "fa"
    assert cfg.PERCENT_DECIMALS == 2


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RENTADJUST_DISPLAY_DIGITS", "ASCII")
    monkeypatch.setenv("RENTADJUST_LOG_LEVEL", "debug")
    monkeypatch.setenv("RENTADJUST_CURRENCY_LABEL", "IRR")

    cfg = AppConfig()
    assert cfg.DISPLAY_DIGITS == "ascii"
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.CURRENCY_LABEL == "IRR"


@pytest.mark.parametrize(
    "key,value",
    [("RENTADJUST_DISPLAY_DIGITS", "roman"), ("RENTADJUST_PERCENT_DECIMALS", "-1")],
)
def test_invalid_values_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        AppConfig()
