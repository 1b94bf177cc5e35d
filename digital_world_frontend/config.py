"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Backend actor
    backend_host: str = "http://localhost:4943"
    canister_id: str = "bkyz2-fmaaa-aaaaa-qaaaq-cai"

    # Service
    service_name: str = "digital-world-frontend"
    log_level: str = "INFO"

    # HTTP Client (None = wait for the backend indefinitely)
    actor_timeout_seconds: float | None = None


settings = Settings()
