"""
Persistence gateway: pool configuration and error conversion
"""
import pytest

from cardfolio.core.errors import StorageFailure
from cardfolio.db.database import Database


@pytest.mark.asyncio
async def test_server_database_uses_bounded_queueing_pool():
    database = Database("postgresql+asyncpg://u@h/db", pool_size=10, pool_timeout=30)
    try:
        pool = database.engine.pool
        assert pool.size() == 10
        assert pool._max_overflow == 0
        assert pool.timeout() == 30
    finally:
        await database.dispose()


@pytest.mark.asyncio
async def test_pool_size_follows_arguments():
    database = Database("postgresql+asyncpg://u@h/db", pool_size=3, pool_timeout=2.5)
    try:
        assert database.engine.pool.size() == 3
        assert database.engine.pool.timeout() == 2.5
    finally:
        await database.dispose()


@pytest.mark.asyncio
async def test_statement_errors_become_storage_failures(db):
    with pytest.raises(StorageFailure) as info:
        await db.fetch_all("SELECT * FROM no_such_table")
    assert "no_such_table" in info.value.message


@pytest.mark.asyncio
async def test_execute_reports_affected_rows(db):
    assert await db.execute("DELETE FROM categories WHERE id = :id", {"id": "missing"}) == 0
    await db.execute("INSERT INTO categories (id, name) VALUES (:id, :name)", {"id": "c1", "name": "Singles"})
    assert await db.execute("DELETE FROM categories WHERE id = :id", {"id": "c1"}) == 1
