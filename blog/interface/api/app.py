"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import Settings
from blog.interface.api.routes import auth, blogs, health
from blog.interface.error import register_error_handlers
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


def create_app(
    container: Optional[AsyncContainer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container; the production container when omitted
        settings: Settings for CORS and error reporting; loaded from the
            environment when omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Blog API",
        description="Backend API for a multi-author blog with comments and likes",
        version="1.0.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance, settings)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(blogs.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
