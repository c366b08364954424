from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
import hashlib

from rzp_subscriptions.domain.entities.plan import BillingPlanArgs, PlanItem
from rzp_subscriptions.domain.exceptions import UnsupportedBillingPeriodError


PLAN_KEY_PREFIX = "razorpay_wc_plan_id"
PLAN_KEY_DELIMITER = "|"

# Gateway has no yearly cadence; yearly billing is sent as 12-monthly.
MONTHS_PER_YEAR = 12

GATEWAY_PERIODS = {
    "day": "daily",
    "week": "weekly",
    "month": "monthly",
    "year": "yearly",
}


def to_minor_units(amount: Decimal | int | str) -> int:
    value = Decimal(str(amount)) * 100
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def normalize_currency(currency: str) -> str:
    return str(currency).strip().upper()


def normalize_billing_cycle(period: str, interval: int) -> tuple[str, int]:
    """Map a store billing period/interval onto the gateway's cadence.

    Returns the gateway period name and the interval to send with it.
    """
    if isinstance(interval, bool) or int(interval) != interval or interval <= 0:
        raise UnsupportedBillingPeriodError(f"Billing interval must be a positive integer, got {interval!r}.")

    store_period = str(period).strip().lower()
    interval = int(interval)
    if store_period == "year":
        store_period = "month"
        interval *= MONTHS_PER_YEAR

    gateway_period = GATEWAY_PERIODS.get(store_period)
    if gateway_period is None:
        raise UnsupportedBillingPeriodError(f"Unsupported billing period: {period!r}.")
    return gateway_period, interval


def build_plan_args(
    *,
    recurring_fee: Decimal,
    period: str,
    interval: int,
    name: str,
    currency: str,
) -> BillingPlanArgs:
    gateway_period, gateway_interval = normalize_billing_cycle(period, interval)
    return BillingPlanArgs(
        period=gateway_period,
        interval=gateway_interval,
        item=PlanItem(
            name=name,
            amount=to_minor_units(recurring_fee),
            currency=normalize_currency(currency),
        ),
    )


def derive_plan_key(args: BillingPlanArgs) -> str:
    hash_input = PLAN_KEY_DELIMITER.join(
        [str(args.item.amount), args.period, str(args.interval)]
    )
    return PLAN_KEY_PREFIX + hashlib.sha1(hash_input.encode("utf-8")).hexdigest()
