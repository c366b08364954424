from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
import logging

from rzp_subscriptions.application.dto.billing import (
    CreateSubscriptionInput,
    CreateSubscriptionOutput,
    ReconcilePlanInput,
)
from rzp_subscriptions.application.ports.currency_converter_port import CurrencyConverterPort
from rzp_subscriptions.application.ports.gateway_port import GatewayPort
from rzp_subscriptions.application.ports.order_port import OrderPort
from rzp_subscriptions.application.ports.product_port import ProductPort
from rzp_subscriptions.domain.entities.order import Order, OrderLineItem
from rzp_subscriptions.domain.entities.plan import PlanItem
from rzp_subscriptions.domain.exceptions import (
    CustomerCreationFailedError,
    GatewayError,
    OrderNotFoundError,
    SubscriptionCreationFailedError,
)
from rzp_subscriptions.domain.services.billing_plan import normalize_currency, to_minor_units
from rzp_subscriptions.domain.services.start_date import apply_custom_start_date

from .billing_common import get_single_line_item, utcnow
from .reconcile_plan import ReconcilePlanUseCase


logger = logging.getLogger(__name__)


class CreateSubscriptionUseCase:
    def __init__(
        self,
        *,
        order_port: OrderPort,
        product_port: ProductPort,
        gateway_port: GatewayPort,
        reconcile_plan_use_case: ReconcilePlanUseCase,
        currency_converter_port: CurrencyConverterPort,
        settlement_currency: str,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._order_port = order_port
        self._product_port = product_port
        self._gateway_port = gateway_port
        self._reconcile_plan_use_case = reconcile_plan_use_case
        self._currency_converter_port = currency_converter_port
        self._settlement_currency = normalize_currency(settlement_currency)
        self._clock = clock

    def execute(self, command: CreateSubscriptionInput) -> CreateSubscriptionOutput:
        order = self._order_port.get_order(order_id=command.order_id)
        if order is None:
            raise OrderNotFoundError(f"Order {command.order_id} not found.")

        line_item = get_single_line_item(order)

        product = self._product_port.get_product(product_id=line_item.product_id)
        if product is None:
            raise OrderNotFoundError(f"Product {line_item.product_id} not found.")

        order_subscription = self._order_port.get_order_subscription(order_id=order.id)
        if order_subscription is None:
            raise OrderNotFoundError(f"Order {order.id} has no subscription record.")

        adjustment = apply_custom_start_date(
            start_day=product.start_day,
            sign_up_fee=product.sign_up_fee,
            total_count=product.length,
            recurring_total=order_subscription.total,
            billing_period=order_subscription.billing_period,
            billing_interval=order_subscription.billing_interval,
            now=self._clock(),
        )

        plan = self._reconcile_plan_use_case.execute(
            ReconcilePlanInput(
                product_id=product.id,
                product_name=line_item.name,
                recurring_fee=order_subscription.total,
                billing_period=order_subscription.billing_period,
                billing_interval=order_subscription.billing_interval,
                currency=order.currency,
            )
        )

        customer_id = self._create_customer(order)

        payload: dict = {
            "customer_id": customer_id,
            "plan_id": plan.plan_id,
            "quantity": line_item.quantity,
            "total_count": adjustment.total_count,
            "customer_notify": 0,
            "notes": {
                "woocommerce_order_id": order.id,
                "woocommerce_product_id": product.id,
            },
        }
        if adjustment.start_at is not None:
            payload["start_at"] = adjustment.start_at
        if adjustment.sign_up_fee:
            addon = self._build_addon_item(
                order=order,
                line_item=line_item,
                amount=to_minor_units(adjustment.sign_up_fee),
            )
            payload["addons"] = [
                {"item": {"amount": addon.amount, "currency": addon.currency, "name": addon.name}}
            ]

        try:
            subscription_id = self._gateway_port.create_subscription(payload=payload)
        except GatewayError as exc:
            raise SubscriptionCreationFailedError(str(exc)) from exc

        logger.info(
            "create_subscription: created subscription_id=%s order_id=%s plan_id=%s plan_created=%s",
            subscription_id,
            order.id,
            plan.plan_id,
            plan.created,
        )
        return CreateSubscriptionOutput(
            subscription_id=subscription_id,
            plan_id=plan.plan_id,
            plan_created=plan.created,
        )

    def _create_customer(self, order: Order) -> str:
        try:
            return self._gateway_port.create_customer(customer=order.customer, fail_existing=False)
        except GatewayError as exc:
            raise CustomerCreationFailedError(str(exc)) from exc

    def _build_addon_item(self, *, order: Order, line_item: OrderLineItem, amount: int) -> PlanItem:
        item = PlanItem(name=line_item.name, amount=amount, currency=normalize_currency(order.currency))
        if item.currency != self._settlement_currency:
            item = self._currency_converter_port.convert(item=item)
        return item
