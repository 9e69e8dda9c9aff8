"""
Monitoring and Tracing Configuration Module.

This module provides optional integration with Pydantic Logfire for tracing
the API, including:
- FastAPI endpoint tracing
- SQLAlchemy query tracing
- Per-request performance records

Logfire is only used when ``LOGFIRE_ENABLED`` is set and a token is present.
Both are read from the application settings, so they may come from the
process environment or from the ``.env`` file. The ``logfire`` package is
imported lazily and is an optional dependency.
"""

import logging
from typing import TYPE_CHECKING, Optional

from fastapi import FastAPI

if TYPE_CHECKING:
    from minicommerce_api.server.core.config import MonitoringConfig

logger = logging.getLogger(__name__)


def _get_monitoring_config() -> "MonitoringConfig":
    """Get the Logfire configuration from the settings model.

    The settings import is deferred to avoid circular imports during module
    initialization.
    """
    from minicommerce_api.server.core.config import get_settings

    return get_settings().monitoring


def initialize_logfire(app: Optional[FastAPI] = None) -> bool:
    """
    Initialize Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance for endpoint instrumentation (optional).

    Returns:
        True when Logfire was configured, False when it is disabled or unavailable.
    """
    config = _get_monitoring_config()

    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        import logfire

        logfire.configure(
            token=config.token,
            service_name=config.service_name,
            service_version=config.service_version,
            environment=config.environment,
        )

        if config.trace_sqlalchemy:
            try:
                logfire.instrument_sqlalchemy()
                logger.info("Logfire: SQLAlchemy instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument SQLAlchemy: {e}")

        if config.trace_fastapi and app is not None:
            try:
                logfire.instrument_fastapi(app=app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")

        logger.info(
            f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}"
        )
        return True

    except ImportError:
        logger.warning(
            "Logfire is enabled but 'logfire' package is not installed. "
            "Install it with: pip install minicommerce-api[monitoring]"
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
    return False


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Record an API request with performance metrics.

    The record always goes to the standard logger; it is also sent to Logfire
    when monitoring is enabled.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    logger.info(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
    if not _get_monitoring_config().enabled:
        return
    try:
        import logfire

        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")
