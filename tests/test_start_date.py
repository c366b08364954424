from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from rzp_subscriptions.domain.exceptions import InvalidStartDateError, UnsupportedBillingPeriodError
from rzp_subscriptions.domain.services.start_date import (
    apply_custom_start_date,
    compute_start_at,
    validate_start_day,
)


NOW = datetime(2026, 1, 31, 10, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize("start_day", [1, 28, 0, 29, -3, "abc", None])
def test_validate_start_day_rejects_out_of_range(start_day):
    with pytest.raises(InvalidStartDateError):
        validate_start_day(start_day)


@pytest.mark.parametrize("start_day", [2, 15, 27, "27"])
def test_validate_start_day_accepts_inner_range(start_day):
    assert validate_start_day(start_day) == int(start_day)


def test_monthly_start_date_moves_one_month_ahead_and_pins_day():
    now = datetime(2026, 10, 19, 10, 30, tzinfo=timezone.utc)
    start_at = compute_start_at(start_day=15, billing_period="month", billing_interval=1, now=now)

    assert start_at == int(datetime(2026, 11, 15, 10, 30, tzinfo=timezone.utc).timestamp())


def test_month_end_overflows_into_following_month_before_pinning_day():
    start_at = compute_start_at(start_day=15, billing_period="month", billing_interval=1, now=NOW)

    assert start_at == int(datetime(2026, 3, 15, 10, 30, tzinfo=timezone.utc).timestamp())


def test_leap_day_plus_one_year_overflows_into_march():
    now = datetime(2028, 2, 29, 9, 0, tzinfo=timezone.utc)
    start_at = compute_start_at(start_day=10, billing_period="year", billing_interval=1, now=now)

    assert start_at == int(datetime(2029, 3, 10, 9, 0, tzinfo=timezone.utc).timestamp())


def test_multi_month_interval_crosses_year_boundary():
    now = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)
    start_at = compute_start_at(start_day=5, billing_period="month", billing_interval=3, now=now)

    assert start_at == int(datetime(2027, 1, 5, 8, 0, tzinfo=timezone.utc).timestamp())


def test_yearly_start_date():
    now = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)
    start_at = compute_start_at(start_day=5, billing_period="year", billing_interval=1, now=now)

    assert start_at == int(datetime(2027, 10, 5, 8, 0, tzinfo=timezone.utc).timestamp())


def test_weekly_start_date():
    now = datetime(2026, 1, 28, 0, 0, tzinfo=timezone.utc)
    start_at = compute_start_at(start_day=10, billing_period="week", billing_interval=1, now=now)

    assert start_at == int(datetime(2026, 2, 10, 0, 0, tzinfo=timezone.utc).timestamp())


def test_unknown_period_is_rejected():
    with pytest.raises(UnsupportedBillingPeriodError):
        compute_start_at(start_day=10, billing_period="decade", billing_interval=1, now=NOW)


def test_apply_custom_start_date_folds_first_charge_into_sign_up_fee():
    adjustment = apply_custom_start_date(
        start_day=15,
        sign_up_fee=Decimal("100.00"),
        total_count=12,
        recurring_total=Decimal("499.00"),
        billing_period="month",
        billing_interval=1,
        now=NOW,
    )

    assert adjustment.sign_up_fee == Decimal("599.00")
    assert adjustment.total_count == 11
    assert adjustment.start_at == int(datetime(2026, 3, 15, 10, 30, tzinfo=timezone.utc).timestamp())


def test_apply_custom_start_date_without_start_day_is_noop():
    adjustment = apply_custom_start_date(
        start_day=None,
        sign_up_fee=Decimal("0"),
        total_count=12,
        recurring_total=Decimal("499.00"),
        billing_period="month",
        billing_interval=1,
        now=NOW,
    )

    assert adjustment.sign_up_fee == Decimal("0")
    assert adjustment.total_count == 12
    assert adjustment.start_at is None
