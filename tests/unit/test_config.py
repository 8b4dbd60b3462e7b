"""Unit tests for configuration and settings."""
from hotel.config import Settings, get_settings, reset_settings_cache


class TestSettings:
    """Test configuration management."""

    def test_get_settings_returns_same_instance(self):
        """Test that get_settings returns cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_reset_settings_cache(self):
        """Test that cache can be reset."""
        settings1 = get_settings()
        reset_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_token_lifetime_is_seven_days(self):
        settings = Settings(_env_file=None)

        assert settings.jwt_algorithm == "HS256"
        assert settings.access_token_expire_minutes == 7 * 24 * 60

    def test_environment_overrides(self, monkeypatch):
        """Environment variables take precedence over defaults."""
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
        monkeypatch.setenv("SEED_ROOMS", "false")
        monkeypatch.setenv("CORS_ORIGINS", '["https://hotel.example"]')

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///./other.db"
        assert settings.seed_rooms is False
        assert settings.cors_origins == ["https://hotel.example"]

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.database_url.startswith("sqlite")
        assert settings.run_db_migrations is True
        assert settings.seed_rooms is True
        assert isinstance(settings.rate_limiting_enabled, bool)
