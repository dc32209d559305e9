from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fintrack.services.base import Service
    from fintrack.services.schema import ServiceType


class ServiceFactory:
    """Builds one service type; `dependencies` are resolved by the manager in order."""

    dependencies: list[ServiceType] = []

    def __init__(self, service_class: type[Service]):
        self.service_class = service_class

    def create(self, *args, **kwargs) -> Service:
        raise NotImplementedError
