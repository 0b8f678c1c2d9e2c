"""Application configuration.

Defines `Settings` read from environment variables and the `.env` file.
"""
# app/core/config.py
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

_APP_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Form Hub"
    DEBUG: bool = False
    DATABASE_URL: str = "sqlite:///./app.db"

    LOG_PATH: str = "logging"
    LOG_FILE: str = "results.log"

    JINJA2_TEMPLATES: str = str(_APP_DIR / "templates")


settings = Settings()
