from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ServiceType(str, Enum):
    """Names under which the service manager caches each service."""

    SETTINGS_SERVICE = "settings_service"
    DATABASE_SERVICE = "database_service"
    AUTH_SERVICE = "auth_service"


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
