from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy import create_engine, text

from rzp_subscriptions.domain.entities.plan import StoredPlan
from rzp_subscriptions.infrastructure.db.engine import Base
from rzp_subscriptions.infrastructure.db.models import store  # noqa: F401
from rzp_subscriptions.infrastructure.db.repositories.plan_metadata_repository import (
    SqlPlanMetadataRepository,
)
from rzp_subscriptions.infrastructure.db.repositories.store_repository import SqlStoreRepository


@pytest.fixture()
def engine():
    engine = create_engine("sqlite://", future=True)
    Base.metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO store_products (id, name, length, sign_up_fee, start_day) "
                "VALUES ('prod-1', 'Coffee box', 12, 150.5, 15), ('prod-2', 'Tea box', 0, 0, NULL)"
            )
        )
        conn.execute(
            text(
                "INSERT INTO store_orders (id, currency, customer_name, customer_email, customer_contact) "
                "VALUES ('order-1', 'INR', 'Alice', 'alice@example.com', NULL)"
            )
        )
        conn.execute(
            text(
                "INSERT INTO store_order_items (order_id, product_id, name, quantity) "
                "VALUES ('order-1', 'prod-1', 'Coffee box', 2)"
            )
        )
        conn.execute(
            text(
                "INSERT INTO store_order_subscriptions (order_id, billing_period, billing_interval, total) "
                "VALUES ('order-1', 'month', 1, 399), ('order-1', 'year', 1, 499)"
            )
        )
    yield engine
    engine.dispose()


def test_get_order_maps_customer_and_items(engine):
    order = SqlStoreRepository(engine).get_order(order_id="order-1")

    assert order is not None
    assert order.currency == "INR"
    assert order.customer.email == "alice@example.com"
    assert order.customer.contact is None
    assert [(item.product_id, item.quantity) for item in order.items] == [("prod-1", 2)]


def test_get_order_returns_none_when_missing(engine):
    assert SqlStoreRepository(engine).get_order(order_id="nope") is None


def test_get_order_subscription_uses_latest_record(engine):
    subscription = SqlStoreRepository(engine).get_order_subscription(order_id="order-1")

    assert subscription is not None
    assert subscription.billing_period == "year"
    assert subscription.billing_interval == 1
    assert subscription.total == Decimal("499")


def test_get_product_maps_sign_up_fee_and_start_day(engine):
    repo = SqlStoreRepository(engine)

    product = repo.get_product(product_id="prod-1")
    plain = repo.get_product(product_id="prod-2")

    assert product is not None
    assert product.sign_up_fee == Decimal("150.5")
    assert product.start_day == 15
    assert plain is not None
    assert plain.start_day is None
    assert plain.sign_up_fee == Decimal("0")


def test_plan_metadata_put_get_delete(engine):
    repo = SqlPlanMetadataRepository(engine)

    assert repo.get(product_id="prod-1") is None

    repo.put(product_id="prod-1", stored_plan=StoredPlan(key="razorpay_wc_plan_idabc", plan_id="plan_1"))
    assert repo.get(product_id="prod-1") == StoredPlan(key="razorpay_wc_plan_idabc", plan_id="plan_1")

    repo.put(product_id="prod-1", stored_plan=StoredPlan(key="razorpay_wc_plan_iddef", plan_id="plan_2"))
    assert repo.get(product_id="prod-1") == StoredPlan(key="razorpay_wc_plan_iddef", plan_id="plan_2")

    repo.delete(product_id="prod-1")
    assert repo.get(product_id="prod-1") is None
