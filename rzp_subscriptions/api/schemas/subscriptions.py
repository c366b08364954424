from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class CreateSubscriptionRequest(BaseModel):
    order_id: str = Field(..., min_length=1, description="Store order holding a single subscription product.")


class CreateSubscriptionResponse(BaseModel):
    subscription_id: str
    plan_id: str
    plan_created: bool


class CancelSubscriptionResponse(BaseModel):
    subscription_id: str
    status: str


class DisplayAmountResponse(BaseModel):
    order_id: str
    amount: Decimal
    currency: str
