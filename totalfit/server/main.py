"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS
and request logging), registers the exception handlers and includes all API
routers.

Route layout:
- ``/health``, ``/version``: liveness and build info
- ``/api/fatsecret``, ``/api/clarifai``: third-party API proxies
- ``/api/auth/*``: Google OAuth2 sign-in
- ``/api/users/*``: user records
- ``/api/...``: health metrics and the injury-analysis surface
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from totalfit.core.database import init_db
from totalfit.core.logging_config import get_logger, setup_logging
from totalfit.core.monitoring import initialize_logfire

from .api.v1 import activities, athletes, auth, health, health_metrics, injuries, proxy, recovery, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup; a database that cannot be reached is
    logged and the server still starts so the proxy routes stay available.
    """
    try:
        logger.info(f"Starting up {constant.PROJECT_NAME} Server ({settings.environment})...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    TotalFit Server API

    Backend for the TotalFit fitness app: signed proxies to the FatSecret and
    Clarifai APIs, Google sign-in, wellness scoring and the injury-analysis
    workload tracking for coaches and their athletes.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(proxy.router, prefix=constant.API_PREFIX)
app.include_router(auth.router, prefix=f"{constant.API_PREFIX}/auth")
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/users")
app.include_router(health_metrics.router, prefix=constant.API_PREFIX)
app.include_router(athletes.router, prefix=constant.API_PREFIX)
app.include_router(activities.router, prefix=constant.API_PREFIX)
app.include_router(injuries.router, prefix=constant.API_PREFIX)
app.include_router(recovery.router, prefix=constant.API_PREFIX)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "totalfit.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
