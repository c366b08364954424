from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rzp_subscriptions.application.ports.currency_converter_port import CurrencyConverterPort
from rzp_subscriptions.domain.entities.plan import PlanItem
from rzp_subscriptions.domain.exceptions import CurrencyConversionError
from rzp_subscriptions.domain.services.billing_plan import normalize_currency


class RateTableCurrencyConverter(CurrencyConverterPort):
    """Converts minor-unit amounts into the settlement currency.

    `rates` maps a currency code to the settlement-currency value of one unit,
    e.g. {"USD": "83.25"} when settling in INR.
    """

    def __init__(self, *, settlement_currency: str, rates: dict):
        self.settlement_currency = settlement_currency
        self.rates = rates

    def convert(self, *, item: PlanItem) -> PlanItem:
        source = normalize_currency(item.currency)
        target = normalize_currency(self.settlement_currency)
        if source == target:
            return item

        rate = self.rates.get(source) if isinstance(self.rates, dict) else None
        if rate is None:
            raise CurrencyConversionError(f"No exchange rate configured for {source} -> {target}.")

        amount = (Decimal(item.amount) * Decimal(str(rate))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return PlanItem(name=item.name, amount=int(amount), currency=target)
