from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod
    LOG_LEVEL: str = Field(default="INFO")

    # DB
    DATABASE_URL: str = Field(default="postgresql+psycopg://app:app@db:5432/app")

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:3000,http://localhost")

    # CSV uploads
    MAX_UPLOAD_BYTES: int = Field(default=2 * 1024 * 1024)
    BULK_MAX_WORKERS: int = Field(default=8)

    # Diagnostics
    DIAGNOSTICS_MAX_ENTRIES: int = Field(default=200)

    # Seed (dev)
    SEED_DEMO: bool = Field(default=True)


settings = Settings()
