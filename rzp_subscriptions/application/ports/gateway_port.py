from __future__ import annotations

from typing import Protocol

from rzp_subscriptions.application.dto.billing import GatewaySubscription
from rzp_subscriptions.domain.entities.order import CustomerInfo
from rzp_subscriptions.domain.entities.plan import BillingPlanArgs, GatewayPlan, PlanFetchResult


class GatewayPort(Protocol):
    def create_plan(self, *, args: BillingPlanArgs) -> GatewayPlan:
        ...

    def fetch_plan(self, *, plan_id: str) -> PlanFetchResult:
        ...

    def create_customer(self, *, customer: CustomerInfo, fail_existing: bool = False) -> str:
        ...

    def create_subscription(self, *, payload: dict) -> str:
        ...

    def fetch_subscription(self, *, subscription_id: str) -> GatewaySubscription:
        ...

    def cancel_subscription(self, *, subscription_id: str) -> GatewaySubscription:
        ...
