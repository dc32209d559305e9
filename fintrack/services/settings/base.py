from pathlib import Path
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    environment: Annotated[str, Field(strict=True, alias="ENVIRONMENT")]
    database_url: Annotated[str, Field(strict=True, alias="DATABASE_URL")]
    jwt_secret: Annotated[str, Field(strict=True, alias="JWT_SECRET")]
    access_expire_min: Annotated[int, Field(strict=False, alias="ACCESS_EXPIRE_MIN")] = 60
    refresh_expire_days: Annotated[int, Field(strict=False, alias="REFRESH_EXPIRE_DAYS")] = 7
    log_level: Annotated[str, Field(alias="LOG_LEVEL")] = "INFO"
    log_file: Annotated[Optional[Path], Field(alias="LOG_FILE")] = None
    host: Annotated[str, Field(alias="HOST")] = "0.0.0.0"
    port: Annotated[int, Field(strict=False, alias="PORT")] = 8000
    cors_origins: Annotated[list[str], NoDecode, Field(alias="CORS_ORIGINS")] = ["*"]
    db_connection_settings: dict = {
        "pool_size": 20,
        "max_overflow": 30,
        "pool_timeout": 30,  # seconds to wait for a pooled connection
        "pool_pre_ping": True,
        "pool_recycle": 1800,
        "echo": False,
    }
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        # CORS_ORIGINS=http://a.example,http://b.example
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value
