from fintrack.services.auth.service import AuthService
from fintrack.services.factory import ServiceFactory
from fintrack.services.schema import ServiceType
from fintrack.services.settings.service import SettingsService


class AuthServiceFactory(ServiceFactory):
    dependencies = [ServiceType.SETTINGS_SERVICE]

    def __init__(self) -> None:
        super().__init__(AuthService)

    def create(self, settings_service: SettingsService) -> AuthService:
        return AuthService(settings_service)
