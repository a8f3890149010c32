"""Unit tests for the settings module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from git_code.config import DEFAULT_API_URL, Settings
from git_code.domain.errors import ConfigurationError


pytestmark = pytest.mark.unit


class TestSettings:
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = Settings.from_env()
        assert settings.organization == ""
        assert settings.api_url == DEFAULT_API_URL
        assert settings.token_file == Path("~/.gittoken").expanduser()
        assert settings.http_timeout == 30

    @patch.dict(os.environ, {
        "GIT_CODE_ORGANIZATION": "acme",
        "GITHUB_API_URL": "https://github.example.com/api/v3/",
        "GIT_CODE_TOKEN_FILE": "/tmp/token",
        "GIT_CODE_HTTP_TIMEOUT": "12.5",
    }, clear=True)
    def test_environment_values(self):
        settings = Settings.from_env()
        assert settings.organization == "acme"
        assert settings.api_url == "https://github.example.com/api/v3"
        assert settings.token_file == Path("/tmp/token")
        assert settings.http_timeout == 12.5

    @patch.dict(os.environ, {"GIT_CODE_ORGANIZATION": "acme"}, clear=True)
    def test_explicit_organization_wins(self):
        assert Settings.from_env(organization="other").organization == "other"

    @patch.dict(os.environ, {"GIT_CODE_HTTP_TIMEOUT": "soon"}, clear=True)
    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError, match="GIT_CODE_HTTP_TIMEOUT"):
            Settings.from_env()

    def test_require_organization(self):
        assert Settings(organization="acme").require_organization() == "acme"
        with pytest.raises(ConfigurationError):
            Settings().require_organization()
