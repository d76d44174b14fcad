"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from judgefinder.config import Settings, configure_logging, get_settings
from judgefinder.core import container
from judgefinder.infrastructure.advertising.routers import pricing_router
from judgefinder.infrastructure.common.errors import register_exception_handlers
from judgefinder.infrastructure.common.routers import health_router
from judgefinder.infrastructure.judges.routers import judges_router

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Settings to use instead of the cached environment settings

    Returns:
        Configured FastAPI app with routers and exception handlers
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.JUDGE_SEED_FILE is not None:
            container.judge_repository().load_seed(settings.JUDGE_SEED_FILE)
        logger.info(
            "application_started",
            project=settings.PROJECT_NAME,
            version=settings.VERSION,
            environment=settings.ENVIRONMENT,
        )
        yield
        logger.info("application_stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(health_router, prefix=settings.API_V1_PREFIX)
    app.include_router(judges_router, prefix=settings.API_V1_PREFIX)
    app.include_router(pricing_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get(f"{settings.API_V1_PREFIX}/")
    async def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    settings = get_settings()
    logger.info("starting_server", host=settings.HOST, port=settings.PORT)
    uvicorn.run(
        "judgefinder.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level="debug" if settings.ENVIRONMENT == "development" else "info",
    )


if __name__ == "__main__":
    main()
