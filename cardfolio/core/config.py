"""
CardFolio — Configuration
All settings are read from environment variables (or .env file).
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Service ──────────────────────────────────────────────
    SERVICE_NAME: str = "cardfolio"
    SERVICE_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # ── Database ──────────────────────────────────────────────
    DB_DRIVER: str = "postgresql+asyncpg"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "card_inventory"
    DATABASE_URL: str | None = None

    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: float = 30.0
    CREATE_SCHEMA: bool = True

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        credentials = self.DB_USER
        if self.DB_PASSWORD:
            credentials = f"{self.DB_USER}:{self.DB_PASSWORD}"
        return f"{self.DB_DRIVER}://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # ── Authentication ────────────────────────────────────────
    OTP_TTL_MINUTES: int = 5
    ID_LENGTH: int = 9

    # ── Errors ────────────────────────────────────────────────
    EXPOSE_STORAGE_ERRORS: bool = True

    # ── Config row seed ───────────────────────────────────────
    DEFAULT_SYSTEM_NAME: str = "CardFolio"
    DEFAULT_LOW_STOCK_THRESHOLD: int = 5
    DEFAULT_LOGO_URL: str = ""
    DEFAULT_THEME_COLOR: str = "#2563eb"

    # ── Observability ─────────────────────────────────────────
    METRICS_ENABLED: bool = True
    HEALTH_CHECK_TIMEOUT: float = 5.0


@lru_cache()
def get_settings() -> Settings:
    return Settings()
