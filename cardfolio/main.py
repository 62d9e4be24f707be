"""
CardFolio — FastAPI application entrypoint
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from cardfolio import models  # noqa: F401  (registers tables on Base.metadata)
from cardfolio.core.config import get_settings
from cardfolio.core.errors import setup_exception_handlers
from cardfolio.core.notifier import LoggingNotifier
from cardfolio.db.database import Database
from cardfolio.db.seed import ensure_config_row
from cardfolio.api import auth, inventory, categories, users, history, config, health

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one pooled gateway for the whole process
    db = Database(
        settings.database_url,
        pool_size=settings.DB_POOL_SIZE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
    )
    app.state.db = db
    if settings.CREATE_SCHEMA:
        await db.create_schema()
        logger.info("Database schema ready")
    await ensure_config_row(db, settings)
    yield
    # Shutdown
    await db.dispose()


app = FastAPI(
    title="CardFolio Inventory API",
    description="Trading-card inventory tracker with email + one-time-code login.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
)

app.state.notifier = LoggingNotifier()

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Errors ────────────────────────────────────────────────────────────────────
setup_exception_handlers(app)

# ── Prometheus Metrics ────────────────────────────────────────────────────────
if settings.METRICS_ENABLED:
    Instrumentator().instrument(app).expose(app, endpoint="/metrics")

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(auth.router)
app.include_router(inventory.router)
app.include_router(categories.router)
app.include_router(users.router)
app.include_router(history.router)
app.include_router(config.router)
app.include_router(health.router)


@app.get("/")
async def root():
    return {"service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}


def run():
    uvicorn.run("cardfolio.main:app", host=settings.HOST, port=settings.PORT)
