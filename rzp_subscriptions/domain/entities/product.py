from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SubscriptionProduct:
    id: str
    name: str
    length: int
    sign_up_fee: Decimal
    start_day: int | None


@dataclass(frozen=True)
class SignUpAdjustment:
    sign_up_fee: Decimal
    total_count: int
    start_at: int | None
