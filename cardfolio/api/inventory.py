"""
CardFolio — Inventory API routes

POST /api/inventory both creates (no id) and updates (id present).
Receiving fields and unit_cost are only written on create.
"""
import logging
from fastapi import APIRouter, Depends

from cardfolio.core.security import generate_id, utcnow
from cardfolio.db.database import Database, get_db
from cardfolio.schemas.base import SuccessResponse
from cardfolio.schemas.resources import InventoryItemIn, StockUpdate
from cardfolio.services.inventory import compute_unit_cost

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("")
async def list_inventory(db: Database = Depends(get_db)):
    return await db.fetch_all("SELECT * FROM inventory ORDER BY sku ASC")


@router.post("", response_model=SuccessResponse, response_model_exclude_none=True)
async def save_inventory_item(item: InventoryItemIn, db: Database = Depends(get_db)):
    if item.id:
        await db.execute(
            "UPDATE inventory SET sku = :sku, category_id = :category_id, name = :name, "
            "description = :description, price = :price, units = :units, "
            "units_per_box = :units_per_box, boxes_per_case = :boxes_per_case, last_mod = :now "
            "WHERE id = :id",
            {
                "id": item.id,
                "sku": item.sku,
                "category_id": item.cat_id,
                "name": item.name,
                "description": item.description,
                "price": item.price,
                "units": item.units,
                "units_per_box": item.units_per_box,
                "boxes_per_case": item.boxes_per_case,
                "now": utcnow(),
            },
        )
        return SuccessResponse()

    item_id = generate_id()
    await db.execute(
        "INSERT INTO inventory (id, sku, category_id, name, description, price, units, "
        "units_per_box, boxes_per_case, supplier, carrier, tracking, inbound_type, "
        "unit_type_rcv, invoice_cost, unit_cost, last_mod) "
        "VALUES (:id, :sku, :category_id, :name, :description, :price, :units, "
        ":units_per_box, :boxes_per_case, :supplier, :carrier, :tracking, :inbound_type, "
        ":unit_type_rcv, :invoice_cost, :unit_cost, :now)",
        {
            "id": item_id,
            "sku": item.sku,
            "category_id": item.cat_id,
            "name": item.name,
            "description": item.description,
            "price": item.price,
            "units": item.units,
            "units_per_box": item.units_per_box,
            "boxes_per_case": item.boxes_per_case,
            "supplier": item.supplier,
            "carrier": item.carrier,
            "tracking": item.tracking,
            "inbound_type": item.inbound_type,
            "unit_type_rcv": item.unit_type_rcv,
            "invoice_cost": item.invoice_cost,
            "unit_cost": compute_unit_cost(item.invoice_cost, item.units),
            "now": utcnow(),
        },
    )
    logger.info("Received inventory item %s (sku=%s)", item_id, item.sku)
    return SuccessResponse(id=item_id)


@router.put("/stock", response_model=SuccessResponse, response_model_exclude_none=True)
async def update_stock(payload: StockUpdate, db: Database = Depends(get_db)):
    await db.execute(
        "UPDATE inventory SET units = :units, last_mod = :now WHERE id = :id",
        {"units": payload.units, "now": utcnow(), "id": payload.id},
    )
    return SuccessResponse()


@router.delete("/{item_id}", response_model=SuccessResponse, response_model_exclude_none=True)
async def delete_inventory_item(item_id: str, db: Database = Depends(get_db)):
    await db.execute("DELETE FROM inventory WHERE id = :id", {"id": item_id})
    return SuccessResponse()
