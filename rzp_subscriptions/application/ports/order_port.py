from __future__ import annotations

from typing import Protocol

from rzp_subscriptions.domain.entities.order import Order, OrderSubscription


class OrderPort(Protocol):
    def get_order(self, *, order_id: str) -> Order | None:
        ...

    def get_order_subscription(self, *, order_id: str) -> OrderSubscription | None:
        ...
