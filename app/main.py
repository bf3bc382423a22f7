# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the web starter.
# It configures the FastAPI application with shared clients, routers,
# static assets and exception handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app
# =============================================================================

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from app.config import settings
from app.exceptions import (
    WebStarterException,
    unhandled_exception_handler,
    validation_exception_handler,
    webstarter_exception_handler,
)
from app.routers import health, home, users
from core.models.user import USERS_COLLECTION
from lib.mongo_client import connect_mongo, ensure_user_indexes
from lib.redis_client import connect_redis

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_templates(templates_dir: str) -> Jinja2Templates:
    """
    Build the Jinja2 environment for the templates directory.

    Raises:
        RuntimeError: If the directory doesn't exist
    """
    path = Path(templates_dir).resolve()
    if not path.is_dir():
        raise RuntimeError(f"Templates directory not found: {path}")

    logger.debug(f"Loading templates from: {path}")
    return Jinja2Templates(directory=str(path))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: build templates, connect Redis and MongoDB. Any failure here
      propagates and aborts startup.
    - Shutdown: close both clients.
    """
    logger.info(f"Starting {settings.APP_TITLE} in {settings.ENVIRONMENT} mode")
    logger.debug(f"Server bind: address {settings.BIND_ADDR} port {settings.BIND_PORT}")

    app.state.templates = build_templates(settings.TEMPLATES_DIR)
    app.state.redis = await connect_redis(settings.REDIS_URL, settings.REDIS_CONNECT_TIMEOUT)
    try:
        app.state.mongo = await connect_mongo(settings.MONGODB_URI, settings.MONGODB_CONNECT_TIMEOUT_MS)
    except Exception:
        await app.state.redis.aclose()
        raise

    if settings.MONGODB_CREATE_INDEXES:
        try:
            await ensure_user_indexes(app.state.mongo[settings.MONGODB_DATABASE][USERS_COLLECTION])
        except Exception:
            await app.state.mongo.close()
            await app.state.redis.aclose()
            raise

    yield

    logger.info(f"Shutting down {settings.APP_TITLE}")
    await app.state.mongo.close()
    await app.state.redis.aclose()


# Create FastAPI application
app = FastAPI(
    title=settings.APP_TITLE,
    description="""
## Python Web Starter

Server-rendered home page plus a small JSON CRUD API.

- `GET /` - home page showing when it was first visited (cached in Redis)
- `GET /assets/*` - static files
- `/users` - user CRUD backed by MongoDB

Errors are returned as `{"message": "..."}`.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Users",
            "description": "Create, read, update and delete users",
        },
        {
            "name": "Health",
            "description": "Liveness and readiness checks",
        },
    ],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(WebStarterException)
async def handle_webstarter_exception(request: Request, exc: WebStarterException):
    """Handle custom web starter exceptions."""
    return await webstarter_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed path parameters and bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unhandled_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

# Home page
app.include_router(home.router)

# User REST resource
app.include_router(
    users.router,
    prefix="/users",
    tags=["Users"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)

# Static assets. The directory is checked on first request, not at import.
logger.debug(f"Serving static files from: {Path(settings.ASSETS_DIR).resolve()}")
app.mount(
    "/assets",
    StaticFiles(directory=settings.ASSETS_DIR, check_dir=False),
    name="assets",
)


def run() -> None:
    """Run the application with uvicorn on BIND_ADDR:BIND_PORT."""
    uvicorn.run(
        "app.main:app",
        host=settings.BIND_ADDR,
        port=settings.BIND_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
