from fintrack.services.factory import ServiceFactory
from fintrack.services.settings.service import SettingsService


class SettingsServiceFactory(ServiceFactory):
    def __init__(self) -> None:
        super().__init__(SettingsService)

    def create(self) -> SettingsService:
        return SettingsService.initialize()
