"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wingman.config import Settings
from wingman.interface.api.middleware import DomainErrorMiddleware
from wingman.interface.api.routes import (
    auth,
    health,
    invitations,
    match,
    users,
)
from wingman.util.di.container import create_container, setup_di
from wingman.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Disposes the database engine
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a mocked container.

    Args:
        container: DI container to use; the production container if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Wingman API",
        description="Backend API for Wingman - find a partner and team up",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    # Added after dishka so domain errors unwind the request container first
    app_instance.add_middleware(DomainErrorMiddleware)

    # Safari is stricter with CORS - need explicit configuration
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

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(match.router)
    app_instance.include_router(invitations.router)

    return app_instance
