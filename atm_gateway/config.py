"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Machine
    currency: str = "PLN"

    # Database
    database_url: str = "sqlite:///./atm.db"

    # External Services
    bank_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "atm-gateway"
    log_level: str = "INFO"
    history_limit: int = 20

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
