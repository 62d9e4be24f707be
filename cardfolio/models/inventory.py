"""
CardFolio — Inventory and category models

inventory.unit_cost is written once at insert and never recomputed.
inventory.category_id is not a foreign key: deleting a category leaves
its items pointing at the old id.
"""
from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, DateTime, Text, CheckConstraint, func
from sqlalchemy.orm import Mapped, mapped_column
from cardfolio.db.database import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)


class InventoryItem(Base):
    __tablename__ = "inventory"
    __table_args__ = (CheckConstraint("units >= 0", name="ck_inventory_units_non_negative"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    sku: Mapped[str | None] = mapped_column(String(64), index=True, nullable=True)
    category_id: Mapped[str | None] = mapped_column(String(32), index=True, nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    units: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    units_per_box: Mapped[int | None] = mapped_column(Integer, nullable=True)
    boxes_per_case: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Receiving details: written at insert only
    supplier: Mapped[str | None] = mapped_column(String(255), nullable=True)
    carrier: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tracking: Mapped[str | None] = mapped_column(String(255), nullable=True)
    inbound_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    unit_type_rcv: Mapped[str | None] = mapped_column(String(64), nullable=True)
    invoice_cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    unit_cost: Mapped[Decimal] = mapped_column(Numeric(12, 4), nullable=False, default=0)

    last_mod: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
