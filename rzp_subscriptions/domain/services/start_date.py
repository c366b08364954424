from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from decimal import Decimal

from rzp_subscriptions.domain.entities.product import SignUpAdjustment
from rzp_subscriptions.domain.exceptions import InvalidStartDateError, UnsupportedBillingPeriodError


MIN_START_DAY = 1
MAX_START_DAY = 28


def validate_start_day(start_day: int) -> int:
    try:
        day = int(start_day)
    except (TypeError, ValueError) as exc:
        raise InvalidStartDateError("Invalid start day saved as subscription product metadata.") from exc

    if day <= MIN_START_DAY or day >= MAX_START_DAY:
        raise InvalidStartDateError("Invalid start day saved as subscription product metadata.")
    return day


def _add_months(value: datetime, months: int, *, day: int) -> datetime:
    """Move `value` forward by calendar months, then pin the day of month.

    A day past the end of the target month rolls into the following month
    before pinning, so Jan 31 + 1 month lands in March.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    if value.day > calendar.monthrange(year, month)[1]:
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return value.replace(year=year, month=month, day=day)


def compute_start_at(
    *,
    start_day: int,
    billing_period: str,
    billing_interval: int,
    now: datetime,
) -> int:
    """Unix timestamp of the first recurring charge for a custom start day.

    The date is one billing interval ahead of `now`, pinned to `start_day`.
    Time of day is carried over from `now`.
    """
    day = validate_start_day(start_day)
    period = str(billing_period).strip().lower()
    interval = int(billing_interval)

    if period == "day":
        anchor = (now + timedelta(days=interval)).replace(day=day)
    elif period == "week":
        anchor = (now + timedelta(weeks=interval)).replace(day=day)
    elif period == "month":
        anchor = _add_months(now, interval, day=day)
    elif period == "year":
        anchor = _add_months(now, interval * 12, day=day)
    else:
        raise UnsupportedBillingPeriodError(f"Unsupported billing period: {billing_period!r}.")

    return int(anchor.timestamp())


def apply_custom_start_date(
    *,
    start_day: int | None,
    sign_up_fee: Decimal,
    total_count: int,
    recurring_total: Decimal,
    billing_period: str,
    billing_interval: int,
    now: datetime,
) -> SignUpAdjustment:
    # Without a custom start day the first recurring charge is billed normally.
    if start_day is None:
        return SignUpAdjustment(sign_up_fee=sign_up_fee, total_count=total_count, start_at=None)

    start_at = compute_start_at(
        start_day=start_day,
        billing_period=billing_period,
        billing_interval=billing_interval,
        now=now,
    )
    return SignUpAdjustment(
        sign_up_fee=sign_up_fee + recurring_total,
        total_count=total_count - 1,
        start_at=start_at,
    )
