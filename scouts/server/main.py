"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request metrics), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scouts.core.database.session import engine
from scouts.core.logging_config import get_logger, setup_logging

from .api.v1 import events, groups, health, registrations, scouts
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import MetricsMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    The schema is owned by the Alembic migrations, so startup only logs the
    configuration; shutdown releases the database connection pool.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} Server {constant.VERSION}...")
    logger.info(f"Database: {engine.url.render_as_string(hide_password=True)}")

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} Server...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Scouts Server API

    This API manages the groups, members (scouts), events and event
    registrations of a scout organisation.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
if settings.metrics_enabled:
    app.add_middleware(MetricsMiddleware)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(groups.router, prefix=f"{constant.API_V1_STR}/groups", tags=["groups"])
app.include_router(scouts.router, prefix=f"{constant.API_V1_STR}/scouts", tags=["scouts"])
app.include_router(events.router, prefix=f"{constant.API_V1_STR}/events", tags=["events"])
app.include_router(
    registrations.router, prefix=f"{constant.API_V1_STR}/registrations", tags=["registrations"]
)


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)


if __name__ == "__main__":
    run()
