"""
Application settings and configuration using Pydantic BaseSettings.
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


class Settings(BaseSettings):
    """Application settings with environment-based configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
    )

    # Environment
    app_env: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="APP_ENV",
        description="Application environment"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        validation_alias="HOST",
        description="Server host"
    )
    port: int = Field(
        default=8090,
        validation_alias="PORT",
        description="Server port"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level"
    )

    # Resources
    resource_dir: Optional[str] = Field(
        default=None,
        validation_alias="LEXPIPE_RESOURCE_DIR",
        description="Directory with tokenizer/ and morphology/ resources; bundled resources when unset"
    )
    resource_cache_ttl: Optional[int] = Field(
        default=None,
        validation_alias="RESOURCE_CACHE_TTL",
        description="Resource cache TTL in seconds; no expiry when unset"
    )

    # Tokenizer flags
    tokenizer_social_tags: bool = Field(
        default=False,
        validation_alias="TOKENIZER_SOCIAL_TAGS",
        description="Protect @mentions and #hashtags"
    )
    tokenizer_user_id_mode: bool = Field(
        default=False,
        validation_alias="TOKENIZER_USER_ID_MODE",
        description="Keep periods between alphanumerics inside a token"
    )

    @field_validator("app_env", mode="before")
    @classmethod
    def parse_app_env(cls, v):
        """Parse app environment, handle common variations."""
        if isinstance(v, str):
            v = v.lower()
            if v in ["dev", "development", "local"]:
                return Environment.DEVELOPMENT
            elif v in ["prod", "production"]:
                return Environment.PRODUCTION
            elif v in ["test", "testing"]:
                return Environment.TEST
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def is_development(self) -> bool:
        return self.app_env == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.app_env == Environment.PRODUCTION

    @property
    def is_test(self) -> bool:
        return self.app_env == Environment.TEST

    def tokenizer_config(self) -> Dict[str, Any]:
        """Tokenizer config dict in the shape EnglishTokenizer expects."""
        return {
            "tokenization": {
                "protect_social_tags": self.tokenizer_social_tags,
                "user_id_mode": self.tokenizer_user_id_mode,
            }
        }


# Global settings instance - will be created by factory
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def configure_settings(**overrides) -> Settings:
    """Configure settings with overrides (useful for testing)."""
    global settings
    settings = Settings(**overrides)
    return settings
