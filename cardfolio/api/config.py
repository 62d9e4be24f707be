"""
CardFolio — System configuration routes (singleton row id = 1)
"""
from fastapi import APIRouter, Depends

from cardfolio.db.database import Database, get_db
from cardfolio.db.seed import CONFIG_ROW_ID
from cardfolio.schemas.base import SuccessResponse
from cardfolio.schemas.resources import ConfigUpdate

router = APIRouter(prefix="/api/config", tags=["config"])


@router.get("")
async def get_config(db: Database = Depends(get_db)):
    return await db.fetch_one("SELECT * FROM config WHERE id = :id", {"id": CONFIG_ROW_ID})


@router.post("", response_model=SuccessResponse, response_model_exclude_none=True)
async def update_config(payload: ConfigUpdate, db: Database = Depends(get_db)):
    await db.execute(
        "UPDATE config SET system_name = :system_name, low_stock_threshold = :low_stock_threshold, "
        "logo_url = :logo_url, theme_color = :theme_color WHERE id = :id",
        {
            "system_name": payload.system_name,
            "low_stock_threshold": payload.low_stock_threshold,
            "logo_url": payload.logo_url,
            "theme_color": payload.theme_color,
            "id": CONFIG_ROW_ID,
        },
    )
    return SuccessResponse()
