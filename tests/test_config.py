"""Tests for configuration loading"""

import pytest

from github_tool_server.config import Settings, get_settings
from github_tool_server.services.errors import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test away from any real .env file and credentials"""
    monkeypatch.chdir(tmp_path)
    for var in ("GITHUB_TOKEN", "PORT", "HOST", "GITHUB_API_URL", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = get_settings()

    assert settings.github_token is None
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.github_api_url == "https://api.github.com"
    assert not settings.has_github_token


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_env")
    monkeypatch.setenv("PORT", "8080")

    settings = get_settings()

    assert settings.require_github_token() == "ghp_env"
    assert settings.port == 8080


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("GITHUB_TOKEN=ghp_file\nLOG_LEVEL=DEBUG\n")

    settings = get_settings()

    assert settings.github_token == "ghp_file"
    assert settings.log_level == "DEBUG"


def test_require_token_missing():
    with pytest.raises(ConfigurationError) as exc_info:
        Settings().require_github_token()

    assert exc_info.value.error_code == "CONFIG_ERROR"


def test_empty_token_counts_as_missing(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "")

    assert not get_settings().has_github_token
