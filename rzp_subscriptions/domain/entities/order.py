from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal


StorePeriod = Literal["day", "week", "month", "year"]


@dataclass(frozen=True)
class CustomerInfo:
    name: str
    email: str
    contact: str | None


@dataclass(frozen=True)
class OrderLineItem:
    product_id: str
    name: str
    quantity: int


@dataclass(frozen=True)
class Order:
    id: str
    currency: str
    customer: CustomerInfo
    items: list[OrderLineItem]


@dataclass(frozen=True)
class OrderSubscription:
    order_id: str
    billing_period: str
    billing_interval: int
    total: Decimal
