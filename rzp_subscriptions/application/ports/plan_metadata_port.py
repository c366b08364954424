from __future__ import annotations

from typing import Protocol

from rzp_subscriptions.domain.entities.plan import StoredPlan


class PlanMetadataPort(Protocol):
    def get(self, *, product_id: str) -> StoredPlan | None:
        ...

    def put(self, *, product_id: str, stored_plan: StoredPlan) -> None:
        ...

    def delete(self, *, product_id: str) -> None:
        ...
