from __future__ import annotations

from sqlalchemy import text

from rzp_subscriptions.application.ports.plan_metadata_port import PlanMetadataPort
from rzp_subscriptions.domain.entities.plan import StoredPlan
from rzp_subscriptions.infrastructure.db.mappers.store_mapper import map_row_to_stored_plan


class SqlPlanMetadataRepository(PlanMetadataPort):
    def __init__(self, engine):
        self._engine = engine

    def get(self, *, product_id: str):
        sql = """
            SELECT plan_key, plan_id
            FROM product_plan_metadata
            WHERE product_id = :product_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"product_id": product_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_stored_plan(row)

    def put(self, *, product_id: str, stored_plan: StoredPlan) -> None:
        sql = """
            INSERT INTO product_plan_metadata (product_id, plan_key, plan_id, updated_at)
            VALUES (:product_id, :plan_key, :plan_id, CURRENT_TIMESTAMP)
            ON CONFLICT (product_id) DO UPDATE
            SET plan_key = EXCLUDED.plan_key,
                plan_id = EXCLUDED.plan_id,
                updated_at = CURRENT_TIMESTAMP
        """
        with self._engine.begin() as conn:
            conn.execute(
                text(sql),
                {
                    "product_id": product_id,
                    "plan_key": stored_plan.key,
                    "plan_id": stored_plan.plan_id,
                },
            )

    def delete(self, *, product_id: str) -> None:
        sql = """
            DELETE FROM product_plan_metadata
            WHERE product_id = :product_id
        """
        with self._engine.begin() as conn:
            conn.execute(text(sql), {"product_id": product_id})
