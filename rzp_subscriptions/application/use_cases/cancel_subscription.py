from __future__ import annotations

import logging

from rzp_subscriptions.application.dto.billing import CancelSubscriptionInput, CancelSubscriptionOutput
from rzp_subscriptions.application.ports.gateway_port import GatewayPort
from rzp_subscriptions.domain.exceptions import GatewayError, SubscriptionCancellationFailedError


logger = logging.getLogger(__name__)


class CancelSubscriptionUseCase:
    def __init__(self, *, gateway_port: GatewayPort):
        self._gateway_port = gateway_port

    def execute(self, command: CancelSubscriptionInput) -> CancelSubscriptionOutput:
        try:
            subscription = self._gateway_port.fetch_subscription(subscription_id=command.subscription_id)
            cancelled = self._gateway_port.cancel_subscription(subscription_id=subscription.id)
        except GatewayError as exc:
            raise SubscriptionCancellationFailedError(str(exc)) from exc

        logger.info(
            "cancel_subscription: cancelled subscription_id=%s status=%s",
            cancelled.id,
            cancelled.status,
        )
        return CancelSubscriptionOutput(subscription_id=cancelled.id, status=cancelled.status)
