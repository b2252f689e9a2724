"""Integration test configuration.

Integration tests talk to the PostgreSQL instance at ``DATABASE__URL`` with
migrations applied (``python scripts/run_migrations.py``). They are skipped
when the database can't be reached.
"""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from threadify.config import Settings
from tests.di import build_test_container
from tests.harness import create_env_fixture

# Real PostgreSQL, everything else mocked
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def require_database():
    engine = create_async_engine(Settings().database_url)
    try:
        async with engine.connect():
            pass
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL not reachable: {e}")
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def integration_container(require_database):
    """App container for tests that run several independent requests.

    Each ``async with integration_container() as request_container`` block
    is its own session and commits when the block exits.
    """
    container = build_test_container(unmock={"persistence"})
    yield container
    await container.close()


@pytest_asyncio.fixture(autouse=True)
async def clean_database(require_database, integration_env):
    """Empty every table before each test."""
    session = await integration_env.get(AsyncSession)

    await session.execute(
        text(
            "TRUNCATE TABLE thread_likes, thread_comments, threads, "
            "profile_photos, users CASCADE"
        )
    )
    await session.commit()

    yield
