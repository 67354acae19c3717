from sqlmodel import SQLModel
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import logging

from apps.okai.config import get_okai_settings

# Import models so SQLAlchemy can discover them
from apps.okai.models import (
    ChatSession, ChatMessage, GeneratedVideo,
    DocumentAnalysis, GeneratedImage, Quiz, WebSearch
)

logger = logging.getLogger(__name__)

settings = get_okai_settings()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_okai_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine with per-dialect connection handling"""
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        engine = create_async_engine(database_url, echo=echo, **engine_kwargs)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=300,
        connect_args={
            "server_settings": {
                "application_name": "okaigpt"
            },
            "ssl": False
        }
    )


def create_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine = create_okai_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Create async session factory
AsyncSessionLocal = create_session_factory(engine)

async def init_okai_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info(f"OKAIgpt tables ready on {engine.url.get_backend_name()}")

async def close_okai_db():
    await engine.dispose()
    logger.info("OKAIgpt database connections closed")

async def get_okai_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
