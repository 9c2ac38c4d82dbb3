"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Env defaults are set before any pretalab_api import reads Settings
    - Every test gets a fresh in-memory SQLite database (StaticPool: one shared connection)
"""

import os

# Ensure tests don't accidentally use real credentials or databases
os.environ.setdefault("GEMINI_API_KEY", "gemini-test-fake-key")
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from pretalab_api.db.base import Base  # noqa: E402
from pretalab_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from pretalab_api.infrastructure.document_store import (  # noqa: E402
    TASKS, TRANSACTIONS, SqlDocumentStore,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def task_store(db_manager):
    return SqlDocumentStore(db_manager, TASKS)


@pytest.fixture
def transaction_store(db_manager):
    return SqlDocumentStore(db_manager, TRANSACTIONS)
