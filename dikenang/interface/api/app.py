"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dikenang.config import Settings
from dikenang.interface.api.errors import register_error_handlers
from dikenang.interface.api.routes import health, reach, subscriptions, users, votes
from dikenang.util.di.container import create_container, setup_di
from dikenang.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container to use; the production container is built
            when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="dikenang API",
        description="Voting and live vote subscriptions for dikenang posts",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup CORS middleware
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(reach.router)
    app_instance.include_router(users.router)
    app_instance.include_router(subscriptions.router)

    return app_instance
