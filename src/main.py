"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.routes.profile import router as profile_router
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler
from domain.repositories.profile_repository import IProfileStore
from infrastructure.database.client import create_mongo_client
from infrastructure.database.mongo_profile_store import MongoProfileStore

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Check database connectivity on startup and release it on shutdown.

    An unreachable database does not stop startup: the app runs in offline
    mode, serving static content while database routes answer 503.
    """
    store: IProfileStore = app.state.profile_store

    if await store.connect():
        logger.info(
            "database_connected",
            host=settings.mongo_host,
            port=settings.mongo_port,
            database=settings.mongo_database,
        )
    else:
        logger.warning(
            "database_unavailable",
            host=settings.mongo_host,
            port=settings.mongo_port,
            mode="offline",
        )

    yield

    await store.close()
    logger.info("database_connection_closed")


def create_mongo_store() -> MongoProfileStore:
    """Build the MongoDB-backed store from settings."""
    return MongoProfileStore(
        create_mongo_client(settings),
        database=settings.mongo_database,
        collection=settings.mongo_collection,
    )


def create_app(store: IProfileStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Pass ``store`` to substitute the profile store (tests use an in-memory one).
    """
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Profile Editor\n\n"
            "Stores a single user profile (name, email, interests).\n\n"
            "### Offline mode\n"
            "If MongoDB is unreachable at startup the service still starts; "
            "profile endpoints answer `503` until it is restarted.\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 30 requests/minute\n"
            "- POST endpoints: 10 requests/minute"
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "profile",
                "description": "Profile read and update operations",
            },
        ],
    )

    app.state.profile_store = store if store is not None else create_mongo_store()

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(profile_router)

    # Frontend; mounted last so API routes take precedence
    if settings.static_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )
    else:
        logger.warning("static_dir_missing", path=str(settings.static_dir))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
