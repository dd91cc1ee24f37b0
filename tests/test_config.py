"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from rental_api.config import DEFAULT_JWT_SECRET, Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the variables conftest sets so defaults are visible."""
    for name in ("DATABASE_URL", "JWT_SECRET"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_fallback_values(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.port == 5000
        assert settings.jwt_secret == DEFAULT_JWT_SECRET
        assert settings.uses_default_secret is True
        assert settings.access_token_expire_minutes == 60
        assert settings.upload_dir == "uploads"
        assert settings.database_url.startswith("postgresql://")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("JWT_SECRET", "from-env")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.jwt_secret == "from-env"
        assert settings.uses_default_secret is False

    def test_allowed_origins_list(self):
        settings = Settings(_env_file=None, allowed_origins="http://a.test, http://b.test")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]


class TestValidators:
    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="qa")

    def test_is_production(self):
        assert Settings(_env_file=None, environment="Production").is_production is True
