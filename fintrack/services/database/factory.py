from fintrack.services.database.service import DatabaseService
from fintrack.services.factory import ServiceFactory
from fintrack.services.schema import ServiceType
from fintrack.services.settings.service import SettingsService


class DatabaseServiceFactory(ServiceFactory):
    dependencies = [ServiceType.SETTINGS_SERVICE]

    def __init__(self) -> None:
        super().__init__(DatabaseService)

    def create(self, settings_service: SettingsService) -> DatabaseService:
        return DatabaseService(settings_service)
