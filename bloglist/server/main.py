"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware
(CORS, request logging) and exception handlers, and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bloglist.core.database import init_db
from bloglist.core.logging_config import get_logger, setup_logging

from .api.v1 import blogs, health, login, users
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

    Creates the database tables on startup.
    """
    logger.info("Starting up Blog List Server...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Blog List Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Blog List API

    Create, list, update and delete blogs, register users, and log in to obtain
    the access token required for changing blogs.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
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
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(blogs.router, prefix=f"{constant.API_PREFIX}/blogs")
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/users")
app.include_router(login.router, prefix=f"{constant.API_PREFIX}/login")


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "bloglist.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )
