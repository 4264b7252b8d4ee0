"""User service FastAPI application.

Wires RequestScopeMiddleware so block-logged handlers can see the request
they are serving.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from reqlog import RequestScopeMiddleware
from reqlog.config import get_settings
from reqlog.observability import get_logger, setup_logging

from .api import health, users

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    logger.info("Starting user service", version=settings.app_version)

    yield

    logger.info("Shutting down user service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="User Service",
        description="Example service with request-scoped handler logging",
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # Binds the ambient request for block-logged handlers
    app.add_middleware(RequestScopeMiddleware)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix="/api/v1", tags=["Users"])

    return app


def run() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(service_name="user-service")
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


app = create_app()


if __name__ == "__main__":
    run()
