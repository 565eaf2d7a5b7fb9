"""FastAPI application entry point.

Main application configuration, middleware, and startup lifecycle.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storyapi.api.handlers import StoryRequestHandler
from storyapi.core.config import get_settings
from storyapi.models.database import close_db, init_db
from storyapi.services.story_store import StoryStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Initialize database connection pool
    - Build the story store and request handler

    Shutdown:
    - Close database connections
    """
    settings = get_settings()

    logger.info("Initializing database connection...")
    engine_kwargs = {}
    if not settings.is_sqlite:
        engine_kwargs = {
            "pool_size": settings.database_pool_size,
            "max_overflow": settings.database_max_overflow,
        }
    session_factory = init_db(settings.async_database_url, **engine_kwargs)
    logger.info("Database initialized")

    app.state.story_handler = StoryRequestHandler(StoryStore(session_factory))

    yield

    logger.info("Shutting down...")
    await close_db()
    logger.info("Database connections closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    is_production = settings.environment == "production"

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="CRUD API for stories behind bearer authentication",
        version=settings.app_version,
        docs_url="/api/docs" if not is_production else None,
        redoc_url="/api/redoc" if not is_production else None,
        openapi_url="/api/openapi.json" if not is_production else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ] if not is_production else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import and register routers
    from storyapi.api.routers import health, stories

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(stories.router, prefix="/api/stories", tags=["stories"])

    # Register exception handlers
    from storyapi.api.exceptions import register_exception_handlers
    register_exception_handlers(app)

    from storyapi.api.config.openapi import custom_openapi
    app.openapi = lambda: custom_openapi(app)

    return app


# Application instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storyapi.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        workers=settings.workers if settings.environment == "production" else 1,
    )
