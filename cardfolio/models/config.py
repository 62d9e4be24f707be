"""
CardFolio — System configuration model

A singleton: exactly one row, id = 1, seeded at startup.
"""
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from cardfolio.db.database import Base


class SystemConfig(Base):
    __tablename__ = "config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    system_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    low_stock_threshold: Mapped[int | None] = mapped_column(Integer, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    theme_color: Mapped[str | None] = mapped_column(String(32), nullable=True)
