from __future__ import annotations

from dataclasses import replace
import logging

from rzp_subscriptions.application.dto.billing import ReconcilePlanInput
from rzp_subscriptions.application.ports.currency_converter_port import CurrencyConverterPort
from rzp_subscriptions.application.ports.gateway_port import GatewayPort
from rzp_subscriptions.application.ports.plan_metadata_port import PlanMetadataPort
from rzp_subscriptions.domain.entities.plan import (
    BillingPlanArgs,
    PlanFetchFailed,
    PlanFound,
    PlanNotFound,
    PlanReconciliation,
    StoredPlan,
)
from rzp_subscriptions.domain.exceptions import GatewayError, PlanCreationFailedError
from rzp_subscriptions.domain.services.billing_plan import build_plan_args, derive_plan_key, normalize_currency


logger = logging.getLogger(__name__)


class ReconcilePlanUseCase:
    """Finds the gateway plan for a product's price and cadence, creating it when needed.

    A stored plan is reused only when its key matches the freshly derived key
    and the gateway still reports the same amount for it. Any other outcome
    creates a new plan and replaces the product's stored mapping.
    """

    def __init__(
        self,
        *,
        gateway_port: GatewayPort,
        plan_metadata_port: PlanMetadataPort,
        currency_converter_port: CurrencyConverterPort,
        settlement_currency: str,
    ):
        self._gateway_port = gateway_port
        self._plan_metadata_port = plan_metadata_port
        self._currency_converter_port = currency_converter_port
        self._settlement_currency = normalize_currency(settlement_currency)

    def build_args(self, command: ReconcilePlanInput) -> BillingPlanArgs:
        args = build_plan_args(
            recurring_fee=command.recurring_fee,
            period=command.billing_period,
            interval=command.billing_interval,
            name=command.product_name,
            currency=command.currency,
        )
        if args.item.currency != self._settlement_currency:
            args = replace(args, item=self._currency_converter_port.convert(item=args.item))
        return args

    def execute(self, command: ReconcilePlanInput) -> PlanReconciliation:
        args = self.build_args(command)
        key = derive_plan_key(args)

        stored = self._plan_metadata_port.get(product_id=command.product_id)
        if stored is not None and stored.key == key:
            result = self._gateway_port.fetch_plan(plan_id=stored.plan_id)
            if isinstance(result, PlanFound):
                if result.plan.amount == args.item.amount:
                    logger.info(
                        "reconcile_plan: reused plan_id=%s product_id=%s key=%s",
                        result.plan.id,
                        command.product_id,
                        key,
                    )
                    return PlanReconciliation(plan_id=result.plan.id, created=False, key=key)
                logger.warning(
                    "reconcile_plan: amount_drift plan_id=%s expected=%s actual=%s",
                    result.plan.id,
                    args.item.amount,
                    result.plan.amount,
                )
            elif isinstance(result, PlanNotFound):
                logger.warning("reconcile_plan: plan_not_found plan_id=%s", result.plan_id)
            elif isinstance(result, PlanFetchFailed):
                logger.warning(
                    "reconcile_plan: plan_fetch_failed plan_id=%s error=%s",
                    result.plan_id,
                    result.message,
                )

        plan_id = self._create_plan(args)
        self._plan_metadata_port.delete(product_id=command.product_id)
        self._plan_metadata_port.put(
            product_id=command.product_id,
            stored_plan=StoredPlan(key=key, plan_id=plan_id),
        )
        logger.info(
            "reconcile_plan: created plan_id=%s product_id=%s key=%s",
            plan_id,
            command.product_id,
            key,
        )
        return PlanReconciliation(plan_id=plan_id, created=True, key=key)

    def _create_plan(self, args: BillingPlanArgs) -> str:
        try:
            plan = self._gateway_port.create_plan(args=args)
        except GatewayError as exc:
            raise PlanCreationFailedError(str(exc)) from exc
        return plan.id
