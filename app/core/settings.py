from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(str, Enum):
    DEV = "dev"
    HML = "hml"
    PROD = "prod"


class Settings(BaseSettings):
    APP_ENV: Env = Env.DEV
    DEBUG: bool = False

    DATABASE_URL: str = "sqlite:///./school.db"

    # Creates missing tables on startup (handy for a throwaway SQLite file).
    # Real deployments run `alembic upgrade head` instead.
    AUTO_CREATE_TABLES: bool = False

    ALLOWED_HOSTS: str = "localhost,127.0.0.1"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# global instance
settings = Settings()
