from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ReconcilePlanInput:
    product_id: str
    product_name: str
    recurring_fee: Decimal
    billing_period: str
    billing_interval: int
    currency: str


@dataclass(frozen=True)
class CreateSubscriptionInput:
    order_id: str


@dataclass(frozen=True)
class CreateSubscriptionOutput:
    subscription_id: str
    plan_id: str
    plan_created: bool


@dataclass(frozen=True)
class CancelSubscriptionInput:
    subscription_id: str


@dataclass(frozen=True)
class CancelSubscriptionOutput:
    subscription_id: str
    status: str


@dataclass(frozen=True)
class DisplayAmountOutput:
    order_id: str
    amount: Decimal
    currency: str


@dataclass(frozen=True)
class GatewaySubscription:
    id: str
    status: str
