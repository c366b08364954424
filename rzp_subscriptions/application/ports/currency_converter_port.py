from __future__ import annotations

from typing import Protocol

from rzp_subscriptions.domain.entities.plan import PlanItem


class CurrencyConverterPort(Protocol):
    def convert(self, *, item: PlanItem) -> PlanItem:
        ...
