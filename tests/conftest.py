"""
CardFolio test fixtures

Each test gets its own SQLite database file, wired into the real
application through app.state. httpx talks to the app in-process.
"""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
import httpx

from cardfolio.core.config import get_settings
from cardfolio.core.errors import ErrorSanitizer
from cardfolio.core.notifier import Notifier
from cardfolio.db.database import Database
from cardfolio.db.seed import ensure_config_row
from cardfolio.main import app


class RecordingNotifier(Notifier):
    def __init__(self):
        self.sent: list[tuple[str, str, datetime]] = []

    async def send_otp(self, email: str, code: str, expires_at: datetime) -> None:
        self.sent.append((email, code, expires_at))


@pytest_asyncio.fixture
async def db(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'cardfolio.db'}")
    await database.create_schema()
    await ensure_config_row(database, get_settings())
    yield database
    await database.dispose()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def client(db, notifier):
    previous_notifier = app.state.notifier
    previous_sanitizer = app.state.error_sanitizer
    app.state.db = db
    app.state.notifier = notifier
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.state.notifier = previous_notifier
    app.state.error_sanitizer = previous_sanitizer


@pytest_asyncio.fixture
async def owner(client):
    """A stored user with a known password."""
    r = await client.post(
        "/api/users",
        json={"email": "owner@cardfolio.test", "password": "Charizard#1999", "role": "admin"},
    )
    assert r.status_code == 200, r.text
    return {"id": r.json()["id"], "email": "owner@cardfolio.test", "password": "Charizard#1999"}


# Prefix of hashes written by the current default scheme
HASH_PREFIX = "$bcrypt-sha256$"


def as_naive_utc(value) -> datetime:
    """SQLite hands timestamps back as text; other engines as datetime."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None)


@pytest.fixture
def sanitize_errors(client):
    app.state.error_sanitizer = ErrorSanitizer(expose=False)
