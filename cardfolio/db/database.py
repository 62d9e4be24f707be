"""
CardFolio — Persistence gateway

A thin async client over a pooled SQLAlchemy engine. Statements are plain
SQL text with named bind parameters; values are always bound by the driver.
Every database or driver error leaves this module as StorageFailure.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from decimal import Decimal
from typing import Any, AsyncIterator, Mapping

from fastapi import Request
from sqlalchemy import DateTime, Numeric, TextClause, bindparam, text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from cardfolio.core.errors import StorageFailure

logger = logging.getLogger(__name__)

Params = Mapping[str, Any] | None


class Base(DeclarativeBase):
    pass


def _storage_message(exc: Exception) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def _statement(sql: str, params: dict[str, Any]) -> TextClause:
    """Build the text clause, typing datetime and decimal binds so every driver accepts them."""
    typed = []
    for name, value in params.items():
        if isinstance(value, datetime):
            typed.append(bindparam(name, type_=DateTime(timezone=True)))
        elif isinstance(value, Decimal):
            typed.append(bindparam(name, type_=Numeric(asdecimal=True)))
    stmt = text(sql)
    return stmt.bindparams(*typed) if typed else stmt


class Database:
    """
    One instance per process. Holds a bounded connection pool; callers wait
    up to pool_timeout seconds for a free connection when it is exhausted.
    """

    def __init__(self, url: str, pool_size: int = 10, pool_timeout: float = 30.0):
        options: dict[str, Any] = {"pool_pre_ping": True}
        if not url.startswith("sqlite"):
            options.update(pool_size=pool_size, max_overflow=0, pool_timeout=pool_timeout)
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **options)

    @asynccontextmanager
    async def _connection(self, commit: bool) -> AsyncIterator[AsyncConnection]:
        try:
            ctx = self.engine.begin() if commit else self.engine.connect()
            async with ctx as conn:
                yield conn
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Storage failure")
            raise StorageFailure(_storage_message(exc)) from exc

    async def fetch_all(self, sql: str, params: Params = None) -> list[dict[str, Any]]:
        async with self._connection(commit=False) as conn:
            bound = dict(params or {})
            result = await conn.execute(_statement(sql, bound), bound)
            return [dict(row) for row in result.mappings().all()]

    async def fetch_one(self, sql: str, params: Params = None) -> dict[str, Any] | None:
        rows = await self.fetch_all(sql, params)
        return rows[0] if rows else None

    async def execute(self, sql: str, params: Params = None) -> int:
        """Run a write statement in its own transaction; returns affected rows."""
        async with self._connection(commit=True) as conn:
            bound = dict(params or {})
            result = await conn.execute(_statement(sql, bound), bound)
            return result.rowcount

    async def ping(self) -> None:
        async with self._connection(commit=False) as conn:
            await conn.execute(text("SELECT 1"))

    async def create_schema(self) -> None:
        async with self._connection(commit=True) as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_db(request: Request) -> Database:
    return request.app.state.db
