from __future__ import annotations

from datetime import datetime, timezone

from rzp_subscriptions.domain.entities.order import Order, OrderLineItem
from rzp_subscriptions.domain.exceptions import UnsupportedCartCompositionError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def get_single_line_item(order: Order) -> OrderLineItem:
    # Counts units, not lines: the order subscription total already covers every unit.
    unit_count = sum(item.quantity for item in order.items)
    if len(order.items) != 1 or unit_count != 1:
        raise UnsupportedCartCompositionError(
            "Subscriptions require exactly one product in the cart "
            f"(order {order.id} has {unit_count})."
        )
    return order.items[0]
