"""Configuration management for the GitHub tool server"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .services.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Credentials
    github_token: str | None = None

    # GitHub API
    github_api_url: str = "https://api.github.com"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def has_github_token(self) -> bool:
        """Check if a GitHub token is configured"""
        return bool(self.github_token)

    def require_github_token(self) -> str:
        """Return the GitHub token or raise if it is not configured"""
        if not self.github_token:
            raise ConfigurationError("GITHUB_TOKEN environment variable is not set.")
        return self.github_token


def get_settings() -> Settings:
    """Load settings from the environment and .env file."""
    return Settings()
