"""Logging and observability configuration using Pydantic Logfire.

All modules use Python's standard logging library (logging.getLogger(__name__))
with structured fields passed through ``extra``; Logfire captures and enriches them.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Message", extra={"key": "value"})
"""

import logging

import logfire
from fastapi import FastAPI

from task_api.core.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Pydantic Logfire with token from settings.

    Nothing is sent to Logfire unless a token is configured.
    """
    logfire.configure(
        token=settings.logfire_token,
        service_name="task-api",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire="if-token-present",
    )
    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def instrument_fastapi(app: FastAPI) -> None:
    """Add Logfire instrumentation to FastAPI application."""
    logfire.instrument_fastapi(app)
    logger = logging.getLogger(__name__)
    logger.info("FastAPI instrumentation configured")


def span(name: str) -> logfire.LogfireSpan:
    """Create a custom span for service layer functions.

    Usage:
        with span("task_service.get_task"):
            ...
    """
    return logfire.span(name)
