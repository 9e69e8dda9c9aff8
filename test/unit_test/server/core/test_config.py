"""Unit tests for the settings model."""

import pytest

from minicommerce_api.server.core.config import CORSConfig, MonitoringConfig, Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Remove the settings variables that the process environment may define."""
    for name in (
        "MINICOMMERCE_SERVER_HOST",
        "MINICOMMERCE_SERVER_PORT",
        "MINICOMMERCE_LOG_LEVEL",
        "MINICOMMERCE_ENABLE_FILE_LOGGING",
        "DATABASE_URL",
        "DATABASE_ECHO",
        "LOGFIRE_ENABLED",
        "LOGFIRE_TOKEN",
        "LOGFIRE_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test the settings model and its grouped views."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch):
        """Test the defaults without any environment or .env file."""
        settings = Settings(_env_file=None)

        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 8080
        assert settings.log_level == "INFO"
        assert settings.enable_file_logging is False
        assert settings.database_url == "sqlite+aiosqlite:///./minicommerce.db"

    def test_reads_environment(self, clean_env: pytest.MonkeyPatch):
        """Test values come from the environment and feed the database group."""
        clean_env.setenv("MINICOMMERCE_SERVER_PORT", "9090")
        clean_env.setenv("DATABASE_URL", "sqlite:///./other.db")
        clean_env.setenv("DATABASE_ECHO", "true")

        settings = Settings(_env_file=None)

        assert settings.server_port == 9090
        assert settings.database.url == "sqlite:///./other.db"
        assert settings.database.echo is True

    def test_populate_by_field_name(self, clean_env: pytest.MonkeyPatch):
        """Test settings accept field names as well as aliases."""
        settings = Settings(_env_file=None, server_port=1234, log_format="json")

        assert settings.server_port == 1234
        assert settings.logging.format == "json"

    def test_grouped_logging(self, clean_env: pytest.MonkeyPatch):
        """Test the logging group mirrors the logging variables."""
        clean_env.setenv("MINICOMMERCE_LOG_LEVEL", "DEBUG")
        clean_env.setenv("MINICOMMERCE_ENABLE_FILE_LOGGING", "1")

        logging_config = Settings(_env_file=None).logging

        assert logging_config.level == "DEBUG"
        assert logging_config.enable_file is True

    def test_cors_defaults(self, clean_env: pytest.MonkeyPatch):
        """Test CORS allows every origin by default."""
        cors = Settings(_env_file=None).cors

        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["*"]

    def test_grouped_monitoring(self, clean_env: pytest.MonkeyPatch):
        """Test the monitoring group reads the Logfire variables."""
        assert Settings(_env_file=None).monitoring.enabled is False

        clean_env.setenv("LOGFIRE_ENABLED", "true")
        clean_env.setenv("LOGFIRE_TOKEN", "secret")
        clean_env.setenv("LOGFIRE_ENVIRONMENT", "production")

        monitoring = Settings(_env_file=None).monitoring

        assert isinstance(monitoring, MonitoringConfig)
        assert monitoring.enabled is True
        assert monitoring.token == "secret"
        assert monitoring.environment == "production"
        assert monitoring.trace_fastapi is True


def test_get_settings_reload(clean_env: pytest.MonkeyPatch):
    """Test reload builds a new instance and plain calls return the cached one."""
    clean_env.setenv("MINICOMMERCE_SERVER_PORT", "7070")
    try:
        assert get_settings(reload=True).server_port == 7070
        assert get_settings() is get_settings()
    finally:
        clean_env.delenv("MINICOMMERCE_SERVER_PORT")
        get_settings(reload=True)
