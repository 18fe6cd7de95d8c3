"""
Unit tests for Configuration module.
"""

import pytest
from pydantic import ValidationError

from app.core.config import EnvironmentEnum, LogFormatEnum, Settings, get_config_summary


class TestSettings:
    """Test cases for Settings configuration."""

    def test_defaults(self):
        test_settings = Settings(_env_file=None, environment="development", redis_url="")

        assert test_settings.app_name == "Workspace API"
        assert test_settings.algorithm == "HS256"
        assert test_settings.session_cookie_name == "workspace-session"
        assert test_settings.storage_namespace == "workspace"
        assert test_settings.log_format == LogFormatEnum.simple
        assert test_settings.has_redis is False

    def test_environment_shortcuts(self):
        assert Settings(environment="dev").environment == EnvironmentEnum.development
        assert Settings(environment="prod").is_production is True
        assert Settings(environment="DEVELOPMENT").is_development is True

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="moon")

    def test_negative_cache_ttl_rejected(self):
        with pytest.raises(ValidationError):
            Settings(collections_cache_ttl=-1)

    def test_allowed_origins_list(self):
        test_settings = Settings(allowed_origins="http://a.test, http://b.test")

        assert test_settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_config_summary_hides_secrets(self):
        summary = get_config_summary()

        assert "secret_key" not in summary
        assert summary["temporary_storage"] in ("redis", "memory")
