from __future__ import annotations

from fintrack.services.base import Service
from fintrack.services.settings.base import Settings


class SettingsService(Service):
    name = "settings_service"

    def __init__(self, settings: Settings):
        self.settings = settings

    @classmethod
    def initialize(cls) -> SettingsService:
        return cls(Settings())
