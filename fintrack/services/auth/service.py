from __future__ import annotations

from datetime import timedelta

from fintrack.services.auth.utils import create_access_token
from fintrack.services.base import Service
from fintrack.services.settings.service import SettingsService


class AuthService(Service):
    name = "auth_service"

    def __init__(self, settings_service: SettingsService):
        self.settings_service = settings_service

    def issue_access_token(self, user_id: str) -> str:
        minutes = self.settings_service.settings.access_expire_min
        # "type" keeps refresh tokens out of the bearer check
        return create_access_token({"sub": user_id, "type": "access"}, timedelta(minutes=minutes))

    def issue_tokens(self, user_id: str) -> dict:
        days = self.settings_service.settings.refresh_expire_days
        refresh = create_access_token({"sub": user_id, "type": "refresh"}, timedelta(days=days))
        return {"access": self.issue_access_token(user_id), "refresh": refresh}
