"""Configuration management for the voting web service."""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # Service configuration
    SERVICE_NAME: str = "voting-web"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8787

    # Prometheus exporter, disabled unless a port is given
    METRICS_PORT: Optional[int] = None

    # CORS settings
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]

    @property
    def log_level(self) -> str:
        """Effective root log level."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()


settings = Settings()
