from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from fintrack.services.base import Service
    from fintrack.services.factory import ServiceFactory
    from fintrack.services.schema import ServiceType


class NoFactoryRegisteredError(Exception):
    pass


class ServiceManager:
    """Creates services on first use and owns them until teardown."""

    def __init__(self) -> None:
        self.services: dict[str, Service] = {}
        self.factories: dict[str, ServiceFactory] = {}

    def get(self, service_name: ServiceType, default: ServiceFactory | None = None) -> Service:
        if service_name not in self.services:
            self._create_service(service_name, default)
        return self.services[service_name]

    def _create_service(self, service_name: ServiceType, default: ServiceFactory | None = None) -> None:
        factory = self.factories.get(service_name) or default
        if factory is None:
            raise NoFactoryRegisteredError(f"No factory registered for {service_name}")
        self.factories.setdefault(service_name, factory)

        dependencies = [self.get(dependency) for dependency in factory.dependencies]
        logger.debug(f"Create service {service_name}")
        service = factory.create(*dependencies)
        service.set_ready()
        self.services[service_name] = service

    async def teardown(self) -> None:
        for service in list(self.services.values()):
            logger.debug(f"Teardown service {service.name}")
            try:
                await service.teardown()
            except Exception as exc:  # noqa: BLE001
                logger.exception(exc)
        self.services = {}


service_manager = ServiceManager()
