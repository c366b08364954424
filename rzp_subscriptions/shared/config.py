from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json(name: str) -> dict:
    value = _env(name)
    if not value:
        return {}
    return json.loads(value)


@dataclass(frozen=True)
class Settings:
    razorpay_key_id: str
    razorpay_key_secret: str
    razorpay_api_base: str
    razorpay_timeout_seconds: float
    postgres_dsn: str
    settlement_currency: str
    currency_rates: dict


def get_settings() -> Settings:
    return Settings(
        razorpay_key_id=_env("RAZORPAY_KEY_ID", ""),
        razorpay_key_secret=_env("RAZORPAY_KEY_SECRET", ""),
        razorpay_api_base=_env("RAZORPAY_API_BASE", "https://api.razorpay.com/v1"),
        razorpay_timeout_seconds=float(_env("RAZORPAY_TIMEOUT_SECONDS", "10")),
        postgres_dsn=_env("POSTGRES_DSN", ""),
        settlement_currency=_env("SETTLEMENT_CURRENCY", "INR"),
        currency_rates=_json("CURRENCY_RATES"),
    )
