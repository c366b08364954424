from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from rzp_subscriptions.application.use_cases.cancel_subscription import CancelSubscriptionUseCase
from rzp_subscriptions.application.use_cases.create_subscription import CreateSubscriptionUseCase
from rzp_subscriptions.application.use_cases.get_display_amount import GetDisplayAmountUseCase
from rzp_subscriptions.application.use_cases.reconcile_plan import ReconcilePlanUseCase
from rzp_subscriptions.infrastructure.clients.currency_converter import RateTableCurrencyConverter
from rzp_subscriptions.infrastructure.clients.razorpay_client import RazorpayClient, RazorpayClientSettings
from rzp_subscriptions.infrastructure.db.engine import get_engine
from rzp_subscriptions.infrastructure.db.repositories.plan_metadata_repository import (
    SqlPlanMetadataRepository,
)
from rzp_subscriptions.infrastructure.db.repositories.store_repository import SqlStoreRepository
from rzp_subscriptions.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


@lru_cache(maxsize=1)
def _get_razorpay_client() -> RazorpayClient:
    settings = get_settings()
    if not settings.razorpay_key_id or not settings.razorpay_key_secret:
        raise HTTPException(status_code=500, detail="RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET are required.")
    return RazorpayClient(
        RazorpayClientSettings(
            api_base=settings.razorpay_api_base,
            key_id=settings.razorpay_key_id,
            key_secret=settings.razorpay_key_secret,
            timeout_seconds=settings.razorpay_timeout_seconds,
        )
    )


@lru_cache(maxsize=1)
def _get_currency_converter() -> RateTableCurrencyConverter:
    settings = get_settings()
    return RateTableCurrencyConverter(
        settlement_currency=settings.settlement_currency,
        rates=settings.currency_rates,
    )


def _get_store_repository() -> SqlStoreRepository:
    return SqlStoreRepository(_get_db_engine())


def get_reconcile_plan_use_case() -> ReconcilePlanUseCase:
    return ReconcilePlanUseCase(
        gateway_port=_get_razorpay_client(),
        plan_metadata_port=SqlPlanMetadataRepository(_get_db_engine()),
        currency_converter_port=_get_currency_converter(),
        settlement_currency=get_settings().settlement_currency,
    )


def get_create_subscription_use_case() -> CreateSubscriptionUseCase:
    store_repository = _get_store_repository()
    return CreateSubscriptionUseCase(
        order_port=store_repository,
        product_port=store_repository,
        gateway_port=_get_razorpay_client(),
        reconcile_plan_use_case=get_reconcile_plan_use_case(),
        currency_converter_port=_get_currency_converter(),
        settlement_currency=get_settings().settlement_currency,
    )


def get_cancel_subscription_use_case() -> CancelSubscriptionUseCase:
    return CancelSubscriptionUseCase(gateway_port=_get_razorpay_client())


def get_display_amount_use_case() -> GetDisplayAmountUseCase:
    store_repository = _get_store_repository()
    return GetDisplayAmountUseCase(order_port=store_repository, product_port=store_repository)
