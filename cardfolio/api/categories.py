"""
CardFolio — Category API routes
"""
from fastapi import APIRouter, Depends

from cardfolio.core.security import generate_id
from cardfolio.db.database import Database, get_db
from cardfolio.schemas.base import SuccessResponse
from cardfolio.schemas.resources import CategoryIn

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("")
async def list_categories(db: Database = Depends(get_db)):
    return await db.fetch_all("SELECT * FROM categories")


@router.post("", response_model=SuccessResponse, response_model_exclude_none=True)
async def create_category(payload: CategoryIn, db: Database = Depends(get_db)):
    category_id = generate_id()
    await db.execute(
        "INSERT INTO categories (id, name) VALUES (:id, :name)",
        {"id": category_id, "name": payload.name},
    )
    return SuccessResponse(id=category_id)


@router.delete("/{category_id}", response_model=SuccessResponse, response_model_exclude_none=True)
async def delete_category(category_id: str, db: Database = Depends(get_db)):
    # Items referencing this category are left untouched.
    await db.execute("DELETE FROM categories WHERE id = :id", {"id": category_id})
    return SuccessResponse()
