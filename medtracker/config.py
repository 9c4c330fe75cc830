"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string (SQLite by default)
        app_name: Title shown in the OpenAPI docs
        cors_origins: Origins allowed to call the API from a browser
        log_level: Root logging level for the API and the alert client

        # Client settings
        api_url: Base URL of the record store API used by the alert client
        request_timeout_seconds: Timeout applied to every client request

        # Alerting settings
        alert_tick_seconds: Period between two reminder evaluations
        alert_warning_window_seconds: Width of the early warning window before a reminder is due
        alert_due_window_seconds: How long after its due time a reminder can still fire
    """
    # Database settings
    database_url: str = "sqlite:///./medtracker.db"

    # API settings
    app_name: str = "Medical Tracking API"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # Client settings
    api_url: str = "http://localhost:8000/api"
    request_timeout_seconds: float = 10.0

    # Alerting settings
    alert_tick_seconds: float = 60.0
    alert_warning_window_seconds: float = 300.0
    alert_due_window_seconds: float = 60.0

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

# Create settings instance
settings = Settings()
