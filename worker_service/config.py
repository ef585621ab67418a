from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "postgresql://user:password@db:5432/mydatabase"
    DATABASE_ECHO: bool = False
    CELERY_BROKER_URL: str = "amqp://guest@rabbitmq//"

    # Outbound mail
    MAIL_HOST: str = "smtp.gmail.com"
    MAIL_PORT: int = 587
    MAIL_USERNAME: str = ""
    MAIL_PASSWORD: str = ""
    MAIL_FROM: str = "noreply@example.com"
    MAIL_USE_TLS: bool = True


@lru_cache
def get_settings() -> WorkerSettings:
    return WorkerSettings()
