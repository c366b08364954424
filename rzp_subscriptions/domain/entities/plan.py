from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


GatewayPeriod = Literal["daily", "weekly", "monthly", "yearly"]


@dataclass(frozen=True)
class PlanItem:
    name: str
    amount: int
    currency: str


@dataclass(frozen=True)
class BillingPlanArgs:
    period: GatewayPeriod
    interval: int
    item: PlanItem

    def to_payload(self) -> dict:
        return {
            "period": self.period,
            "interval": self.interval,
            "item": {
                "name": self.item.name,
                "amount": self.item.amount,
                "currency": self.item.currency,
            },
        }


@dataclass(frozen=True)
class StoredPlan:
    key: str
    plan_id: str


@dataclass(frozen=True)
class GatewayPlan:
    id: str
    amount: int


@dataclass(frozen=True)
class PlanFound:
    plan: GatewayPlan


@dataclass(frozen=True)
class PlanNotFound:
    plan_id: str


@dataclass(frozen=True)
class PlanFetchFailed:
    plan_id: str
    message: str


PlanFetchResult = PlanFound | PlanNotFound | PlanFetchFailed


@dataclass(frozen=True)
class PlanReconciliation:
    plan_id: str
    created: bool
    key: str
