"""
Infrastructure Layer: Configuration Adapter
"""
from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from opensea_api.domain import Chain


class Settings(BaseSettings):
    """
    Client settings loaded from .env file and environment variables.
    """

    # API
    api_key: Optional[SecretStr] = Field(None, alias="OPENSEA_API_KEY")
    base_url: str = Field("https://api.opensea.io", alias="OPENSEA_API_BASE_URL")
    chain: Chain = Field(Chain.MAINNET, alias="OPENSEA_CHAIN")

    # Transport
    request_timeout: float = Field(10.0, alias="REQUEST_TIMEOUT")
    max_retries: int = Field(3, alias="MAX_RETRIES")
    retry_backoff: float = Field(0.5, alias="RETRY_BACKOFF")

    # System
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(True, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


# Singleton instance
settings = Settings()
