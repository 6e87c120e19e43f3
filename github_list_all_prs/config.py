"""
Application configuration management
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub API Configuration
    github_token: Optional[str] = Field(None, validation_alias="GITHUB_TOKEN")
    github_api_base_url: str = Field("https://api.github.com", validation_alias="GITHUB_API_BASE_URL")
    github_per_page: int = Field(100, ge=1, le=100, validation_alias="GITHUB_PER_PAGE")
    request_timeout: float = Field(30.0, gt=0, validation_alias="GITHUB_REQUEST_TIMEOUT")

    # Application Configuration
    app_name: str = "github-list-all-prs"
    app_version: str = __version__
    max_workers: int = Field(8, ge=1, validation_alias="MAX_WORKERS")

    # Logging Configuration
    log_level: str = Field("WARNING", validation_alias="LOG_LEVEL")
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def get_github_headers(token: Optional[str] = None) -> dict:
    """Get GitHub API headers, with authentication when a token is known"""
    settings = get_settings()
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": f"{settings.app_name}/{settings.app_version}",
    }
    token = token or settings.github_token
    if token:
        headers["Authorization"] = f"token {token}"
    return headers
