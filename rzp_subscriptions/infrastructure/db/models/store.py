from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from rzp_subscriptions.infrastructure.db.engine import Base


class StoreProductModel(Base):
    __tablename__ = "store_products"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    length: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    sign_up_fee: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, server_default="0")
    start_day: Mapped[int | None] = mapped_column(Integer, nullable=True)


class StoreOrderModel(Base):
    __tablename__ = "store_orders"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    currency: Mapped[str] = mapped_column(Text, nullable=False)
    customer_name: Mapped[str] = mapped_column(Text, nullable=False)
    customer_email: Mapped[str] = mapped_column(Text, nullable=False)
    customer_contact: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())


class StoreOrderItemModel(Base):
    __tablename__ = "store_order_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[str] = mapped_column(Text, ForeignKey("store_orders.id"), nullable=False)
    product_id: Mapped[str] = mapped_column(Text, ForeignKey("store_products.id"), nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, server_default="1")


class StoreOrderSubscriptionModel(Base):
    __tablename__ = "store_order_subscriptions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[str] = mapped_column(Text, ForeignKey("store_orders.id"), nullable=False)
    billing_period: Mapped[str] = mapped_column(Text, nullable=False)
    billing_interval: Mapped[int] = mapped_column(Integer, nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)


class ProductPlanMetadataModel(Base):
    __tablename__ = "product_plan_metadata"

    product_id: Mapped[str] = mapped_column(Text, ForeignKey("store_products.id"), primary_key=True)
    plan_key: Mapped[str] = mapped_column(Text, nullable=False)
    plan_id: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
