"""Main application module for the face template comparison service."""
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from facecompare.api import router as api_router
from facecompare.api.responses import ALLOWED_METHODS, error_reply
from facecompare.core.config import settings
from facecompare.core.container import container
from facecompare.core.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

INVALID_BODY = "Request body missing or invalid"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[Any, None]:
    """Handle application startup and shutdown events.

    Args:
        app: FastAPI application instance

    Returns:
        AsyncGenerator[Any, None]: Async context manager for app lifecycle
    """
    logger.info(
        "Starting up face template comparison service",
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
        bucket=settings.TEMPLATE_BUCKET,
    )

    if not container.initialized:
        await container.initialize()
    logger.info("Initialized application services")

    yield

    logger.info("Shutting down face template comparison service")
    await container.cleanup()
    logger.info("Cleaned up application resources")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url="/docs" if settings.ENVIRONMENT == "development" else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=ALLOWED_METHODS.split(","),
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable bodies as 400 with a fixed message instead of 422."""
    logger.warning("Rejected malformed request body", path=request.url.path, errors=len(exc.errors()))
    return error_reply(INVALID_BODY)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint.

    Returns:
        dict: Health status
    """
    logger.info("Health check requested")
    return {"status": "healthy"}
