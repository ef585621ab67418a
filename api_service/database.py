from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from api_service.config import Settings


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    url = settings.DATABASE_URL
    # Hosted Postgres often hands out postgres://; normalize to the asyncpg driver
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return create_async_engine(url, echo=settings.DATABASE_ECHO)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False)


async def scoped_session_dependency(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.async_session() as session:
        yield session


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        from api_service.models import Base

        await conn.run_sync(Base.metadata.create_all)
