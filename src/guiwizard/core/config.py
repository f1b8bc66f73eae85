"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GUIWIZARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Project
    default_project_name: str = Field(
        default="MyGUIProject", description="Name given to freshly created projects"
    )

    # Input limits
    max_document_bytes: int = Field(
        default=1024 * 1024, gt=0, description="Max size of a project file or source text"
    )

    # HTTP adapter
    api_host: str = Field(default="127.0.0.1", description="HTTP bind address")
    api_port: int = Field(default=8765, gt=0, lt=65536, description="HTTP port")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
