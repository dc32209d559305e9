from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncGenerator

from loguru import logger
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from fintrack.services.base import Service
from fintrack.services.database import models  # noqa: F401  registers the tables on SQLModel.metadata

if TYPE_CHECKING:
    from fintrack.services.settings.service import SettingsService


class DatabaseService(Service):
    name = "database_service"

    def __init__(self, settings_service: SettingsService):
        self.settings_service = settings_service
        self.database_url = settings_service.settings.database_url
        self.engine = self._create_engine()
        self.async_session_maker = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

    def _create_engine(self) -> AsyncEngine:
        url = make_url(self.database_url)
        if url.get_backend_name() == "sqlite":
            kwargs: dict = {"connect_args": {"check_same_thread": False}}
            if url.database in (None, "", ":memory:"):
                # one shared connection, otherwise every checkout sees an empty database
                kwargs["poolclass"] = StaticPool
            return create_async_engine(url, **kwargs)
        return create_async_engine(url, **self.settings_service.settings.db_connection_settings)

    async def create_db_and_tables(self) -> None:
        logger.debug("Creating database tables")
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    @asynccontextmanager
    async def with_session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.async_session_maker() as session:
            yield session

    async def teardown(self) -> None:
        logger.debug("Disposing database engine")
        await self.engine.dispose()
