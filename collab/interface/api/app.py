"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from collab.config import Settings, ensure_deployable
from collab.interface.api.routes import (
    activity,
    health,
    invites,
    links,
    local_shares,
    members,
    redeem,
    share,
)
from collab.interface.error import register_exception_handlers
from collab.util.di.container import create_container, setup_di
from collab.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to serve from. Defaults to the production
            container; tests pass one with mocked components.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.
    """
    settings = Settings()
    ensure_deployable(settings)

    app_instance = FastAPI(
        title="Objective Sharing API",
        description="Share links, invites and guest access for objectives",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(links.router)
    app_instance.include_router(share.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(redeem.router)
    app_instance.include_router(activity.router)
    app_instance.include_router(members.router)
    app_instance.include_router(local_shares.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
