# Standard library imports
from contextlib import asynccontextmanager

# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

# Local application imports
from bookclub.api.internal.main import router as internal_router
from bookclub.api.internal.utils.exceptions import register_exception_handlers
from bookclub.core.db import async_engine
from bookclub.core.monitoring import get_logger, setup_sentry
from bookclub.models import Base
from bookclub.settings import settings

# Set up the main application logger
logger = get_logger("bookclub")


# ---- FASTAPI APP CREATION ----
def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Startup
    logger.info(f"Starting up {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")

    if settings.AUTO_CREATE_TABLES:
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    yield

    # Shutdown
    await async_engine.dispose()
    logger.info("Shutting down FastAPI application")


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    if setup_sentry():
        logger.info(f"Sentry initialized in {settings.ENVIRONMENT} environment")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Monthly book club: nominations, voting and the selected-book catalog",
        openapi_url=f"{settings.API_V1_STR}/openapi.json" if settings.ENVIRONMENT != "production" else None,
        docs_url=f"{settings.API_V1_STR}/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url=f"{settings.API_V1_STR}/redoc" if settings.ENVIRONMENT != "production" else None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": "1.0.0"}

    app.include_router(internal_router, prefix=settings.API_V1_STR)

    return app


# Create the app instance
app = create_app()
