from __future__ import annotations

from rzp_subscriptions.application.dto.billing import DisplayAmountOutput
from rzp_subscriptions.application.ports.order_port import OrderPort
from rzp_subscriptions.application.ports.product_port import ProductPort
from rzp_subscriptions.domain.exceptions import OrderNotFoundError

from .billing_common import get_single_line_item


class GetDisplayAmountUseCase:
    """Amount charged at checkout: first recurring charge plus the sign-up fee."""

    def __init__(self, *, order_port: OrderPort, product_port: ProductPort):
        self._order_port = order_port
        self._product_port = product_port

    def execute(self, *, order_id: str) -> DisplayAmountOutput:
        order = self._order_port.get_order(order_id=order_id)
        if order is None:
            raise OrderNotFoundError(f"Order {order_id} not found.")

        line_item = get_single_line_item(order)
        product = self._product_port.get_product(product_id=line_item.product_id)
        if product is None:
            raise OrderNotFoundError(f"Product {line_item.product_id} not found.")

        order_subscription = self._order_port.get_order_subscription(order_id=order.id)
        if order_subscription is None:
            raise OrderNotFoundError(f"Order {order.id} has no subscription record.")

        return DisplayAmountOutput(
            order_id=order.id,
            amount=order_subscription.total + product.sign_up_fee,
            currency=order.currency,
        )
