from __future__ import annotations

from typing import Protocol

from rzp_subscriptions.domain.entities.product import SubscriptionProduct


class ProductPort(Protocol):
    def get_product(self, *, product_id: str) -> SubscriptionProduct | None:
        ...
