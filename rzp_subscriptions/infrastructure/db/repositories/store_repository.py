from __future__ import annotations

from sqlalchemy import text

from rzp_subscriptions.application.ports.order_port import OrderPort
from rzp_subscriptions.application.ports.product_port import ProductPort
from rzp_subscriptions.infrastructure.db.mappers.store_mapper import (
    map_row_to_order_subscription,
    map_row_to_product,
    map_rows_to_order,
)


class SqlStoreRepository(OrderPort, ProductPort):
    def __init__(self, engine):
        self._engine = engine

    def get_order(self, *, order_id: str):
        order_sql = """
            SELECT id, currency, customer_name, customer_email, customer_contact
            FROM store_orders
            WHERE id = :order_id
            LIMIT 1
        """
        items_sql = """
            SELECT product_id, name, quantity
            FROM store_order_items
            WHERE order_id = :order_id
            ORDER BY id
        """
        with self._engine.connect() as conn:
            order_row = conn.execute(text(order_sql), {"order_id": order_id}).mappings().first()
            if order_row is None:
                return None
            item_rows = conn.execute(text(items_sql), {"order_id": order_id}).mappings().all()
        return map_rows_to_order(order_row, list(item_rows))

    def get_order_subscription(self, *, order_id: str):
        # An order can be linked to several store subscriptions; the latest one wins.
        sql = """
            SELECT order_id, billing_period, billing_interval, total
            FROM store_order_subscriptions
            WHERE order_id = :order_id
            ORDER BY id DESC
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"order_id": order_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_order_subscription(row)

    def get_product(self, *, product_id: str):
        sql = """
            SELECT id, name, length, sign_up_fee, start_day
            FROM store_products
            WHERE id = :product_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"product_id": product_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_product(row)
