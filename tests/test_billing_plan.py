from __future__ import annotations

from decimal import Decimal
import hashlib
import unittest

from rzp_subscriptions.domain.exceptions import UnsupportedBillingPeriodError
from rzp_subscriptions.domain.services.billing_plan import (
    PLAN_KEY_PREFIX,
    build_plan_args,
    derive_plan_key,
    normalize_billing_cycle,
    to_minor_units,
)


def _args(fee: str = "499.00", period: str = "month", interval: int = 1):
    return build_plan_args(
        recurring_fee=Decimal(fee),
        period=period,
        interval=interval,
        name="Monthly box",
        currency="INR",
    )


class BillingPlanDomainTests(unittest.TestCase):
    def test_monthly_plan_args_and_key(self):
        args = _args()

        self.assertEqual(args.period, "monthly")
        self.assertEqual(args.interval, 1)
        self.assertEqual(args.item.amount, 49900)
        self.assertEqual(args.item.currency, "INR")
        self.assertEqual(
            derive_plan_key(args),
            PLAN_KEY_PREFIX + hashlib.sha1(b"49900|monthly|1").hexdigest(),
        )

    def test_key_is_stable_across_calls(self):
        self.assertEqual(derive_plan_key(_args()), derive_plan_key(_args()))

    def test_key_ignores_item_name(self):
        renamed = build_plan_args(
            recurring_fee=Decimal("499.00"),
            period="month",
            interval=1,
            name="Renamed box",
            currency="INR",
        )
        self.assertEqual(derive_plan_key(renamed), derive_plan_key(_args()))

    def test_key_changes_with_price_or_cadence(self):
        keys = {
            derive_plan_key(_args(fee=fee, period=period, interval=interval))
            for fee in ("1.00", "9.99", "10.00", "499.00", "499.01")
            for period in ("day", "week", "month", "year")
            for interval in (1, 2, 3, 6)
        }
        # year/N only collides with month/12N, which this grid does not contain.
        self.assertEqual(len(keys), 5 * 4 * 4)

    def test_yearly_normalizes_to_monthly_times_twelve(self):
        self.assertEqual(normalize_billing_cycle("year", 1), ("monthly", 12))
        self.assertEqual(normalize_billing_cycle("year", 3), ("monthly", 36))

    def test_yearly_and_equivalent_monthly_share_a_key(self):
        self.assertEqual(
            derive_plan_key(_args(period="year", interval=1)),
            derive_plan_key(_args(period="month", interval=12)),
        )

    def test_other_periods_map_one_to_one(self):
        self.assertEqual(normalize_billing_cycle("day", 7), ("daily", 7))
        self.assertEqual(normalize_billing_cycle("week", 2), ("weekly", 2))
        self.assertEqual(normalize_billing_cycle("month", 3), ("monthly", 3))

    def test_unknown_period_is_rejected(self):
        with self.assertRaises(UnsupportedBillingPeriodError):
            normalize_billing_cycle("fortnight", 1)

    def test_non_positive_interval_is_rejected(self):
        with self.assertRaises(UnsupportedBillingPeriodError):
            normalize_billing_cycle("month", 0)

    def test_minor_units_round_half_up(self):
        self.assertEqual(to_minor_units(Decimal("10.005")), 1001)
        self.assertEqual(to_minor_units(Decimal("10.004")), 1000)
        self.assertEqual(to_minor_units("0.1"), 10)
        self.assertEqual(to_minor_units(5), 500)

    def test_currency_code_is_upper_cased_and_does_not_change_key(self):
        lower = build_plan_args(
            recurring_fee=Decimal("499.00"),
            period="month",
            interval=1,
            name="Monthly box",
            currency=" inr",
        )

        self.assertEqual(lower.item.currency, "INR")
        self.assertEqual(derive_plan_key(lower), derive_plan_key(_args()))


if __name__ == "__main__":
    unittest.main()
