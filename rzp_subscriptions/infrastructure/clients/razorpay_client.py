from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from rzp_subscriptions.application.dto.billing import GatewaySubscription
from rzp_subscriptions.application.ports.gateway_port import GatewayPort
from rzp_subscriptions.domain.entities.order import CustomerInfo
from rzp_subscriptions.domain.entities.plan import (
    BillingPlanArgs,
    GatewayPlan,
    PlanFetchFailed,
    PlanFetchResult,
    PlanFound,
    PlanNotFound,
)
from rzp_subscriptions.domain.exceptions import GatewayError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RazorpayClientSettings:
    api_base: str
    key_id: str
    key_secret: str
    timeout_seconds: float


class RazorpayClient(GatewayPort):
    def __init__(self, settings: RazorpayClientSettings, *, transport: httpx.BaseTransport | None = None):
        self._settings = settings
        self._transport = transport

    def create_plan(self, *, args: BillingPlanArgs) -> GatewayPlan:
        payload = self._request("POST", "/plans", json=args.to_payload())
        return _to_gateway_plan(payload)

    def fetch_plan(self, *, plan_id: str) -> PlanFetchResult:
        try:
            payload = self._request("GET", f"/plans/{plan_id}")
        except GatewayError as exc:
            if exc.status_code == 404:
                return PlanNotFound(plan_id=plan_id)
            return PlanFetchFailed(plan_id=plan_id, message=str(exc))

        try:
            return PlanFound(plan=_to_gateway_plan(payload))
        except GatewayError as exc:
            return PlanFetchFailed(plan_id=plan_id, message=str(exc))

    def create_customer(self, *, customer: CustomerInfo, fail_existing: bool = False) -> str:
        body = {
            "name": customer.name,
            "email": customer.email,
            # "0" returns the existing customer instead of an error.
            "fail_existing": "1" if fail_existing else "0",
        }
        if customer.contact:
            body["contact"] = customer.contact

        payload = self._request("POST", "/customers", json=body)
        return _require_id(payload, resource="customer")

    def create_subscription(self, *, payload: dict) -> str:
        response = self._request("POST", "/subscriptions", json=payload)
        return _require_id(response, resource="subscription")

    def fetch_subscription(self, *, subscription_id: str) -> GatewaySubscription:
        payload = self._request("GET", f"/subscriptions/{subscription_id}")
        return _to_gateway_subscription(payload)

    def cancel_subscription(self, *, subscription_id: str) -> GatewaySubscription:
        payload = self._request("POST", f"/subscriptions/{subscription_id}/cancel", json={})
        return _to_gateway_subscription(payload)

    def _request(self, method: str, path: str, *, json: dict | None = None) -> dict:
        try:
            with httpx.Client(
                base_url=self._settings.api_base.rstrip("/"),
                auth=(self._settings.key_id, self._settings.key_secret),
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.warning("razorpay_client: request_failed method=%s path=%s error=%s", method, path, exc)
            raise GatewayError(f"Razorpay request failed: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                "razorpay_client: error_response method=%s path=%s status=%s error=%s",
                method,
                path,
                response.status_code,
                message,
            )
            raise GatewayError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise GatewayError("Razorpay response is not valid JSON.", status_code=response.status_code) from exc
        if not isinstance(payload, dict):
            raise GatewayError("Razorpay response is not a JSON object.", status_code=response.status_code)
        return payload


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return f"Razorpay returned HTTP {response.status_code}."

    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("description"):
        return str(error["description"])
    return f"Razorpay returned HTTP {response.status_code}."


def _require_id(payload: dict, *, resource: str) -> str:
    resource_id = payload.get("id")
    if not resource_id:
        raise GatewayError(f"Razorpay {resource} id is missing.")
    return str(resource_id)


def _to_gateway_plan(payload: dict) -> GatewayPlan:
    item = payload.get("item") or {}
    amount = item.get("amount")
    if amount is None:
        raise GatewayError("Razorpay plan response is missing item.amount.")
    return GatewayPlan(id=_require_id(payload, resource="plan"), amount=int(amount))


def _to_gateway_subscription(payload: dict) -> GatewaySubscription:
    return GatewaySubscription(
        id=_require_id(payload, resource="subscription"),
        status=str(payload.get("status", "")),
    )
