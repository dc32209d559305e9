from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from fintrack.services.database.store import SQLModelFinanceStore
from fintrack.services.manager import service_manager
from fintrack.services.schema import ServiceType

if TYPE_CHECKING:
    from fintrack.services.base import Service
    from fintrack.services.database.service import DatabaseService
    from fintrack.services.factory import ServiceFactory
    from fintrack.services.settings.service import SettingsService


def get_service(service_type: ServiceType, default: ServiceFactory | None = None) -> Service:
    return service_manager.get(service_type, default)


def get_settings_service() -> SettingsService:
    from fintrack.services.settings.factory import SettingsServiceFactory

    return get_service(ServiceType.SETTINGS_SERVICE, SettingsServiceFactory())  # type: ignore[return-value]


def get_db_service() -> DatabaseService:
    from fintrack.services.database.factory import DatabaseServiceFactory

    return get_service(ServiceType.DATABASE_SERVICE, DatabaseServiceFactory())  # type: ignore[return-value]


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with get_db_service().with_session() as session:
        yield session


async def get_store(session: AsyncSession = Depends(get_session)) -> SQLModelFinanceStore:
    return SQLModelFinanceStore(session)
