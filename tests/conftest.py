"""
Shared fixtures: every test gets its own in-memory SQLite database
"""
import asyncio
import os

# Settings are read at import time by apps.okai.db and main
os.environ["OKAI_DATABASE_URL"] = "sqlite+aiosqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from apps.okai.db import create_okai_engine, create_session_factory


@pytest.fixture
def run_in_db():
    """
    Run ``scenario(db)`` on a fresh database and return its result.

    The scenario is an async callable taking an AsyncSession.
    """
    def run(scenario):
        async def main():
            engine = create_okai_engine("sqlite+aiosqlite://")
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            session_factory = create_session_factory(engine)
            try:
                async with session_factory() as db:
                    return await scenario(db)
            finally:
                await engine.dispose()

        return asyncio.run(main())

    return run


@pytest.fixture
def api_client():
    """TestClient whose startup creates the tables and whose shutdown drops the database"""
    from main import app

    with TestClient(app) as client:
        yield client
