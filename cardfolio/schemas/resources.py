"""
CardFolio — Resource request bodies

Fields are optional on purpose: missing values are passed to the store as NULL
and the store's constraints decide whether that is acceptable.
"""
from decimal import Decimal
from pydantic import Field

from cardfolio.schemas.base import CamelModel


class InventoryItemIn(CamelModel):
    id: str | None = None
    sku: str | None = None
    cat_id: str | None = None
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    units: int | None = None
    units_per_box: int | None = None
    boxes_per_case: int | None = None
    supplier: str | None = None
    carrier: str | None = None
    tracking: str | None = None
    inbound_type: str | None = None
    unit_type_rcv: str | None = None
    invoice_cost: Decimal | None = None


class StockUpdate(CamelModel):
    id: str | None = None
    units: int | None = None


class CategoryIn(CamelModel):
    name: str | None = Field(None, examples=["Booster Boxes"])


class UserIn(CamelModel):
    email: str | None = None
    password: str | None = None
    role: str | None = Field(None, examples=["admin", "staff"])


class HistoryIn(CamelModel):
    user_email: str | None = None
    user_role: str | None = None
    action: str | None = None
    details: str | None = None


class ConfigUpdate(CamelModel):
    system_name: str | None = None
    low_stock_threshold: int | None = None
    logo_url: str | None = None
    theme_color: str | None = None
