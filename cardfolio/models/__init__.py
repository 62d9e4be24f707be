from cardfolio.models.user import User
from cardfolio.models.inventory import Category, InventoryItem
from cardfolio.models.history import HistoryEntry
from cardfolio.models.config import SystemConfig

__all__ = ["User", "Category", "InventoryItem", "HistoryEntry", "SystemConfig"]
