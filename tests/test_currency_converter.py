from __future__ import annotations

import pytest

from rzp_subscriptions.domain.entities.plan import PlanItem
from rzp_subscriptions.domain.exceptions import CurrencyConversionError
from rzp_subscriptions.infrastructure.clients.currency_converter import RateTableCurrencyConverter


def test_converts_minor_units_into_settlement_currency():
    converter = RateTableCurrencyConverter(settlement_currency="INR", rates={"USD": "83.255"})

    item = converter.convert(item=PlanItem(name="Coffee box", amount=1000, currency="usd"))

    assert item == PlanItem(name="Coffee box", amount=83255, currency="INR")


def test_rounds_half_up():
    converter = RateTableCurrencyConverter(settlement_currency="INR", rates={"EUR": "0.5"})

    assert converter.convert(item=PlanItem(name="x", amount=3, currency="EUR")).amount == 2


def test_same_currency_is_returned_unchanged():
    converter = RateTableCurrencyConverter(settlement_currency="INR", rates={})
    item = PlanItem(name="x", amount=100, currency="INR")

    assert converter.convert(item=item) is item


def test_missing_rate_raises():
    converter = RateTableCurrencyConverter(settlement_currency="INR", rates={"USD": "83"})

    with pytest.raises(CurrencyConversionError, match="GBP"):
        converter.convert(item=PlanItem(name="x", amount=100, currency="GBP"))
