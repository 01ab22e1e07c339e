"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./budget_tracker.db"

    # Service
    service_name: str = "budget-tracker"
    log_level: str = "INFO"

    # Wall clock used to derive the reference instant for "current" periods
    timezone: str = "Europe/Berlin"

    # Budget engine
    default_category: str = "Other"
    default_history_months: int = 6
    max_history_months: int = 36


settings = Settings()
