"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import tinylink
from tinylink.errors import (
    CodeConflict,
    CodeGenerationExhausted,
    InvalidCode,
    InvalidTarget,
    LinkRegistryError,
    NotFound,
    StoreUnavailable,
)

from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware

ERROR_STATUS = {
    InvalidTarget: status.HTTP_400_BAD_REQUEST,
    InvalidCode: status.HTTP_400_BAD_REQUEST,
    CodeConflict: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
    CodeGenerationExhausted: status.HTTP_503_SERVICE_UNAVAILABLE,
    StoreUnavailable: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

logger = logging.getLogger("tinylink.web")


async def registry_error_handler(request: Request, exc: LinkRegistryError) -> JSONResponse:
    """Map registry errors to status codes. Store failures never leak detail."""
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR and not isinstance(exc, CodeGenerationExhausted):
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
        message = "server error"
    else:
        message = exc.message or "request failed"

    return JSONResponse(status_code=status_code, content={"error": message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors like any other validation failure."""
    errors = exc.errors()
    detail = errors[0].get("msg", "invalid request") if errors else "invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": detail},
    )


def create_app(
    store_instance,
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Link store instance
        service_instance: Link registry instance
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="TinyLink",
        description="URL shortening service with click tracking",
        version=tinylink.__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials="*" not in config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(LinkRegistryError, registry_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(api_router, prefix="/api", tags=["API"])
    # Registered last: /{code} would otherwise shadow every other single-segment path
    app.include_router(web_router, tags=["Web"])

    return app
