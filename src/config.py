"""Configuration settings for the todo API."""

from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: Optional[str] = None  # required at startup
    database_echo: bool = False

    # API
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list = ["*"]

    # Logging
    log_level: str = "INFO"
    log_file: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
