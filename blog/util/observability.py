"""Logfire setup for the blog backend.

Code elsewhere logs and traces through ``logfire`` directly::

    logfire.info("Blog created", post_id=str(post.id))

    with logfire.span("post_service.update_post", post_id=str(post.id)):
        ...

This module only configures the SDK and attaches the FastAPI and
SQLAlchemy integrations.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.config import Settings

SERVICE_NAME = "blog-backend"


def should_send_to_logfire(settings: Settings) -> bool:
    """An explicit setting wins, otherwise send whenever a token is set."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def _console_options(settings: Settings) -> logfire.ConsoleOptions | bool:
    if settings.environment == "test":
        return False
    return logfire.ConsoleOptions(
        colors="auto",
        span_style="show-parents",
        include_timestamps=True,
        verbose=settings.debug,
    )


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings)
    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": _console_options(settings),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict[str, Any]) -> dict[str, Any]:
    # Headers are left out on purpose: they carry bearer tokens and cookies
    mapped = dict(attributes)
    method = getattr(request, "method", None)
    if method:
        mapped["method"] = method
    mapped["path"] = request.url.path
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement sent through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
