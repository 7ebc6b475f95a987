from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from safety_devkit.timezone import DEFAULT_TIMEZONE


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    SERVICE_NAME: str = "service"
    APP_TIMEZONE: str = DEFAULT_TIMEZONE
    RATE_LIMIT_PER_MINUTE: int = 100
    RATE_LIMIT_WINDOW_SECONDS: int = 60
    LOG_LEVEL: str = "INFO"


def load_settings(service_name: str) -> ServiceSettings:
    return ServiceSettings(SERVICE_NAME=service_name)
