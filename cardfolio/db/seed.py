"""
CardFolio — Startup seeding of the config singleton
"""
import logging

from cardfolio.core.config import Settings
from cardfolio.db.database import Database

logger = logging.getLogger(__name__)

CONFIG_ROW_ID = 1


async def ensure_config_row(db: Database, settings: Settings) -> None:
    existing = await db.fetch_one("SELECT id FROM config WHERE id = :id", {"id": CONFIG_ROW_ID})
    if existing is not None:
        return
    await db.execute(
        "INSERT INTO config (id, system_name, low_stock_threshold, logo_url, theme_color) "
        "VALUES (:id, :system_name, :low_stock_threshold, :logo_url, :theme_color)",
        {
            "id": CONFIG_ROW_ID,
            "system_name": settings.DEFAULT_SYSTEM_NAME,
            "low_stock_threshold": settings.DEFAULT_LOW_STOCK_THRESHOLD,
            "logo_url": settings.DEFAULT_LOGO_URL,
            "theme_color": settings.DEFAULT_THEME_COLOR,
        },
    )
    logger.info("Seeded config row id=%d", CONFIG_ROW_ID)
