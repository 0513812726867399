# src/rentadjust/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Display
    # -----------------------------
    DISPLAY_DIGITS: str = Field(default="fa")  # "fa" (Persian digits) | "ascii"
    CURRENCY_LABEL: str = Field(default="تومان")
    PERCENT_DECIMALS: int = Field(default=2)

    model_config = SettingsConfigDict(
        env_prefix="RENTADJUST_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("DISPLAY_DIGITS", mode="before")
    @classmethod
    def _known_digits(cls, v: Any) -> Any:
        s = str(v).strip().lower()
        if s not in ("fa", "ascii"):
            raise ValueError("DISPLAY_DIGITS must be 'fa' or 'ascii'")
        return s

    @field_validator("PERCENT_DECIMALS", mode="before")
    @classmethod
    def _decimals_non_negative(cls, v: Any) -> Any:
        n = int(v)
        if n < 0:
            raise ValueError("PERCENT_DECIMALS must be >= 0")
        return n


config = AppConfig()
