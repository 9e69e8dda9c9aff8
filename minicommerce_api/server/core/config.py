"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Database configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./minicommerce.db",
        alias="DATABASE_URL",
        description="Async database connection URL",
    )
    echo: bool = Field(default=False, alias="DATABASE_ECHO", description="Echo emitted SQL statements")

    model_config = {"populate_by_name": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="MINICOMMERCE_LOG_LEVEL", description="Console log level")
    format: str = Field(
        default="detailed", alias="MINICOMMERCE_LOG_FORMAT", description="Log format (simple, detailed, json)"
    )
    file_dir: str = Field(default="logs", alias="MINICOMMERCE_LOG_FILE_DIR", description="Directory for log files")
    enable_file: bool = Field(
        default=False, alias="MINICOMMERCE_ENABLE_FILE_LOGGING", description="Write logs to a file as well"
    )

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


class MonitoringConfig(BaseModel):
    """Logfire monitoring configuration."""

    enabled: bool = Field(default=False, alias="LOGFIRE_ENABLED", description="Send traces and logs to Logfire")
    token: str = Field(default="", alias="LOGFIRE_TOKEN", description="Logfire write token")
    environment: str = Field(default="development", alias="LOGFIRE_ENVIRONMENT", description="Deployment environment")
    service_name: str = Field(default="minicommerce-api", alias="LOGFIRE_SERVICE_NAME", description="Service name")
    service_version: str = Field(default="0.0.1", alias="LOGFIRE_SERVICE_VERSION", description="Service version")
    trace_sqlalchemy: bool = Field(
        default=True, alias="LOGFIRE_TRACE_SQLALCHEMY", description="Instrument SQLAlchemy queries"
    )
    trace_fastapi: bool = Field(default=True, alias="LOGFIRE_TRACE_FASTAPI", description="Instrument FastAPI endpoints")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="MINICOMMERCE_SERVER_HOST",
    )
    server_port: int = Field(
        default=8080,
        description="Server port number",
        alias="MINICOMMERCE_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="MINICOMMERCE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="MINICOMMERCE_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory the file handler writes to",
        alias="MINICOMMERCE_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Whether to also log to a file",
        alias="MINICOMMERCE_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./minicommerce.db",
        description="Async connection URL for the application database",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Log every SQL statement emitted by the engine",
        alias="DATABASE_ECHO",
    )

    # =====================================================================
    # Monitoring Configuration
    # =====================================================================
    logfire_enabled: bool = Field(
        default=False,
        description="Send traces and logs to Logfire",
        alias="LOGFIRE_ENABLED",
    )
    logfire_token: str = Field(
        default="",
        description="Logfire write token",
        alias="LOGFIRE_TOKEN",
    )
    logfire_environment: str = Field(
        default="development",
        description="Deployment environment reported to Logfire",
        alias="LOGFIRE_ENVIRONMENT",
    )
    logfire_service_name: str = Field(
        default="minicommerce-api",
        description="Service name reported to Logfire",
        alias="LOGFIRE_SERVICE_NAME",
    )
    logfire_service_version: str = Field(
        default="0.0.1",
        description="Service version reported to Logfire",
        alias="LOGFIRE_SERVICE_VERSION",
    )
    logfire_trace_sqlalchemy: bool = Field(
        default=True,
        description="Instrument SQLAlchemy queries",
        alias="LOGFIRE_TRACE_SQLALCHEMY",
    )
    logfire_trace_fastapi: bool = Field(
        default=True,
        description="Instrument FastAPI endpoints",
        alias="LOGFIRE_TRACE_FASTAPI",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def monitoring(self) -> MonitoringConfig:
        """Get Logfire monitoring configuration from environment variables."""
        return MonitoringConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()


def get_settings(reload: bool = False) -> Settings:
    """Return the process-wide settings, optionally re-reading the environment.

    Args:
        reload: Build a fresh ``Settings`` instance instead of returning the cached one.

    Returns:
        The active ``Settings`` instance.
    """
    global settings
    if reload:
        settings = Settings()
    return settings


__all__ = [
    "CORSConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "MonitoringConfig",
    "Settings",
    "get_settings",
    "settings",
]
