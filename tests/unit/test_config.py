"""
Unit tests for users_api/config.py (Settings validation).

Tests:
  - Default values are applied correctly
  - Environment overrides
  - Validators for Mongo address/port, repository kind, prefix, body limit
  - get_allowed_origins_list parsing

Note:
  - Uses monkeypatch to set environment variables
  - Tests should NOT require actual database connections
"""

import pytest
from pydantic import ValidationError

from users_api.config import Settings, get_settings


pytestmark = pytest.mark.unit  # Apply to all tests in this module


class TestSettings:
    """Test Settings class validation."""

    def test_defaults(self, monkeypatch):
        """Settings applies defaults when no env vars are set."""
        for name in (
            "MONGO_ADDR",
            "MONGO_PORT",
            "MONGO_DB_NAME",
            "USERS_REPOSITORY",
            "API_PREFIX",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.mongo_addr == "localhost"
        assert settings.mongo_port == 27017
        assert settings.mongo_db_name == "dev"
        assert settings.mongo_users_collection == "users"
        assert settings.users_repository == "mongo"
        assert settings.api_prefix == "/api"
        assert settings.max_body_bytes == 1024 * 1024

    def test_env_overrides(self, monkeypatch):
        """Settings reads MONGO_* from the environment."""
        monkeypatch.setenv("MONGO_ADDR", "mongo.internal")
        monkeypatch.setenv("MONGO_PORT", "27018")
        monkeypatch.setenv("MONGO_DB_NAME", "prod")

        settings = Settings()

        assert settings.mongo_addr == "mongo.internal"
        assert settings.mongo_port == 27018
        assert settings.mongo_db_name == "prod"

    def test_blank_mongo_addr_rejected(self, monkeypatch):
        monkeypatch.setenv("MONGO_ADDR", "   ")
        with pytest.raises(ValidationError):
            Settings()

    @pytest.mark.parametrize("port", ["0", "70000"])
    def test_mongo_port_out_of_range_rejected(self, monkeypatch, port):
        monkeypatch.setenv("MONGO_PORT", port)
        with pytest.raises(ValidationError):
            Settings()

    def test_users_repository_is_normalized(self, monkeypatch):
        monkeypatch.setenv("USERS_REPOSITORY", "MEMORY")
        assert Settings().users_repository == "memory"

    def test_unknown_users_repository_rejected(self, monkeypatch):
        monkeypatch.setenv("USERS_REPOSITORY", "postgres")
        with pytest.raises(ValidationError):
            Settings()

    @pytest.mark.parametrize(
        "raw, expected",
        [("/api/", "/api"), ("api", "/api"), ("/v1/users", "/v1/users"), ("", "")],
    )
    def test_api_prefix_normalized(self, monkeypatch, raw, expected):
        monkeypatch.setenv("API_PREFIX", raw)
        assert Settings().api_prefix == expected

    def test_max_body_bytes_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("MAX_BODY_BYTES", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_allowed_origins_list(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,,")
        assert Settings().get_allowed_origins_list() == [
            "http://a.test",
            "http://b.test",
        ]

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "Production")
        assert Settings().is_production() is True


def test_get_settings_is_cached(clear_caches):
    assert get_settings() is get_settings()
