"""
Main ASGI server.

Serves the JSON API behind the DoubleVisuals site: embed resolution, the
portfolio catalog, consent and theme preference.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

from doublevisuals import __version__
from doublevisuals.config import get_config
from doublevisuals.handlers.embeds import router as embeds_router
from doublevisuals.handlers.health import health_check
from doublevisuals.handlers.preferences import router as preferences_router
from doublevisuals.middleware.visitor import VisitorMiddleware
from doublevisuals.models.errors import ErrorCode, SiteError
from doublevisuals.storage.key_value import (
    JsonFileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
)
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)


def build_key_value_store() -> KeyValueStore:
    config = get_config()
    if config.storage_path:
        logger.info("Using JSON file key-value store", path=config.storage_path)
        return JsonFileKeyValueStore(config.storage_path)
    logger.info("Using in-memory key-value store", max_items=config.memory_store_max_items)
    return MemoryKeyValueStore(max_items=config.memory_store_max_items)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan (startup and shutdown)."""
    logger.info("Starting DoubleVisuals API", version=__version__)
    config = get_config()
    logger.info(
        "Configuration loaded",
        environment=config.environment,
        log_level=config.log_level,
    )
    if not hasattr(app.state, "key_value_store"):
        app.state.key_value_store = build_key_value_store()
    yield
    logger.info("Shutting down DoubleVisuals API")


app = FastAPI(
    title="DoubleVisuals Site API",
    description="Embed resolution, portfolio catalog, consent and theme preference.",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(embeds_router)
app.include_router(preferences_router)


_STATUS_BY_CODE = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
}


@app.exception_handler(SiteError)
async def site_error_handler(request: Request, exc: SiteError) -> JSONResponse:
    status_code = _STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.warning(
        "Request failed with SiteError",
        path=request.url.path,
        error_code=exc.code.value,
        error_message=exc.message,
        details=exc.details,
    )
    return JSONResponse(
        {"error_code": exc.code.value, "error": exc.message, "details": exc.details},
        status_code=status_code,
    )


config = get_config()
app.add_middleware(VisitorMiddleware, exclude_paths=["/health"])

if config.allowed_origins:
    logger.info("CORS middleware enabled", allowed_origins=config.allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )


@app.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint."""
    return await health_check()
