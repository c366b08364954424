from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from rzp_subscriptions.api.deps import (
    get_cancel_subscription_use_case,
    get_create_subscription_use_case,
    get_display_amount_use_case,
)
from rzp_subscriptions.api.schemas.subscriptions import (
    CancelSubscriptionResponse,
    CreateSubscriptionRequest,
    CreateSubscriptionResponse,
    DisplayAmountResponse,
)
from rzp_subscriptions.application.dto.billing import CancelSubscriptionInput, CreateSubscriptionInput
from rzp_subscriptions.application.use_cases.cancel_subscription import CancelSubscriptionUseCase
from rzp_subscriptions.application.use_cases.create_subscription import CreateSubscriptionUseCase
from rzp_subscriptions.application.use_cases.get_display_amount import GetDisplayAmountUseCase
from rzp_subscriptions.domain.exceptions import DomainError, OrderNotFoundError


router = APIRouter()


@router.post("/v1/subscriptions", response_model=CreateSubscriptionResponse)
def create_subscription(
    req: CreateSubscriptionRequest,
    use_case: CreateSubscriptionUseCase = Depends(get_create_subscription_use_case),
):
    try:
        output = use_case.execute(CreateSubscriptionInput(order_id=req.order_id))
    except OrderNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except DomainError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return CreateSubscriptionResponse(
        subscription_id=output.subscription_id,
        plan_id=output.plan_id,
        plan_created=output.plan_created,
    )


@router.post("/v1/subscriptions/{subscription_id}/cancel", response_model=CancelSubscriptionResponse)
def cancel_subscription(
    subscription_id: str,
    use_case: CancelSubscriptionUseCase = Depends(get_cancel_subscription_use_case),
):
    try:
        output = use_case.execute(CancelSubscriptionInput(subscription_id=subscription_id))
    except DomainError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return CancelSubscriptionResponse(subscription_id=output.subscription_id, status=output.status)


@router.get("/v1/orders/{order_id}/display-amount", response_model=DisplayAmountResponse)
def get_display_amount(
    order_id: str,
    use_case: GetDisplayAmountUseCase = Depends(get_display_amount_use_case),
):
    try:
        output = use_case.execute(order_id=order_id)
    except OrderNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except DomainError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return DisplayAmountResponse(order_id=output.order_id, amount=output.amount, currency=output.currency)
