"""
Configuration management for Civica.

Each upstream service gets its own env-prefixed settings section. Missing
API keys are not an error: the matching adapter serves its curated
fallback data and the assistant endpoints answer 503.

Responsibility: Centralized configuration and environment management
"""

from enum import Enum
from typing import Annotated, Optional, List
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment"""
    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class GovTrackConfig(BaseSettings):
    """GovTrack federal bill API"""

    base_url: str = Field(default="https://www.govtrack.us/api/v2")
    timeout_seconds: float = Field(default=10.0)
    max_retries: int = Field(default=3)

    model_config = SettingsConfigDict(
        env_prefix="GOVTRACK_",
        case_sensitive=False,
        extra="ignore"
    )


class NewsConfig(BaseSettings):
    """NewsAPI configuration"""

    api_key: Optional[str] = Field(default=None)
    base_url: str = Field(default="https://newsapi.org/v2")
    timeout_seconds: float = Field(default=10.0)
    max_retries: int = Field(default=3)

    model_config = SettingsConfigDict(
        env_prefix="NEWS_",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)


class OpenAIConfig(BaseSettings):
    """OpenAI chat completions configuration"""

    api_key: Optional[str] = Field(default=None)
    model: str = Field(default="gpt-4o")
    base_url: str = Field(default="https://api.openai.com/v1")
    timeout_seconds: float = Field(default=30.0)

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)


class StoreConfig(BaseSettings):
    """In-memory store configuration"""

    seed_data: bool = Field(default=True, description="Load sample legislators, events and polls")

    model_config = SettingsConfigDict(
        env_prefix="STORE_",
        case_sensitive=False,
        extra="ignore"
    )


class AppConfig(BaseSettings):
    """Application configuration"""

    # Environment
    environment: Environment = Field(default=Environment.LOCAL)
    debug: bool = Field(default=True)

    # Application metadata
    app_name: str = Field(default="Civica")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")

    # CORS settings
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3000", "http://localhost:5000"],
        description="Allowed CORS origins (JSON list or comma-separated in env)"
    )

    # Location defaults for local news, legislators and events
    default_location: str = Field(default="San Antonio, Texas")
    default_state: str = Field(default="TX")
    default_district: str = Field(default="23")

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from JSON string or comma-separated list"""
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            v = v.strip()
            # Remove outer quotes if present
            if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
                v = v[1:-1]
            if v.startswith("["):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def default_district_code(self) -> str:
        """District in ``TX-23`` form."""
        return f"{self.default_state}-{self.default_district}"


class Settings(BaseSettings):
    """
    Global settings container.

    Loads configuration from:
    1. Environment variables
    2. .env file
    3. Default values

    Example:
        # Offline development: every adapter serves fallback data
        settings = Settings(store=StoreConfig(seed_data=True))

        # With live sources
        settings = Settings(
            news=NewsConfig(api_key="..."),
            openai=OpenAIConfig(api_key="sk-...")
        )
    """

    app: AppConfig = Field(default_factory=AppConfig)
    govtrack: GovTrackConfig = Field(default_factory=GovTrackConfig)
    news: NewsConfig = Field(default_factory=NewsConfig)
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @classmethod
    def for_production(cls) -> "Settings":
        """
        Create settings for production.

        API keys come from NEWS_API_KEY and OPENAI_API_KEY.
        """
        return cls(
            app=AppConfig(
                environment=Environment.PRODUCTION,
                debug=False,
                log_level="INFO"
            )
        )


# Global settings instance
settings = Settings()
