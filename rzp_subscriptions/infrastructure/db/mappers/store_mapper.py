from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping

from rzp_subscriptions.domain.entities.order import CustomerInfo, Order, OrderLineItem, OrderSubscription
from rzp_subscriptions.domain.entities.plan import StoredPlan
from rzp_subscriptions.domain.entities.product import SubscriptionProduct


def _as_str(value: Any) -> str:
    return str(value)


def _as_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def _as_int_or_none(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def map_row_to_line_item(row: Mapping[str, Any]) -> OrderLineItem:
    return OrderLineItem(
        product_id=_as_str(row["product_id"]),
        name=row["name"],
        quantity=int(row["quantity"]),
    )


def map_rows_to_order(order_row: Mapping[str, Any], item_rows: list[Mapping[str, Any]]) -> Order:
    return Order(
        id=_as_str(order_row["id"]),
        currency=order_row["currency"],
        customer=CustomerInfo(
            name=order_row["customer_name"],
            email=order_row["customer_email"],
            contact=order_row.get("customer_contact"),
        ),
        items=[map_row_to_line_item(row) for row in item_rows],
    )


def map_row_to_order_subscription(row: Mapping[str, Any]) -> OrderSubscription:
    return OrderSubscription(
        order_id=_as_str(row["order_id"]),
        billing_period=row["billing_period"],
        billing_interval=int(row["billing_interval"]),
        total=_as_decimal(row["total"]),
    )


def map_row_to_product(row: Mapping[str, Any]) -> SubscriptionProduct:
    return SubscriptionProduct(
        id=_as_str(row["id"]),
        name=row["name"],
        length=int(row["length"] or 0),
        sign_up_fee=_as_decimal(row.get("sign_up_fee")),
        start_day=_as_int_or_none(row.get("start_day")),
    )


def map_row_to_stored_plan(row: Mapping[str, Any]) -> StoredPlan:
    return StoredPlan(key=row["plan_key"], plan_id=_as_str(row["plan_id"]))
