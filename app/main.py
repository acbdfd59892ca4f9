"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from sqlmodel import Session

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.exceptions import PersistenceError, SwimLogError, ValidationError
from app.core.logging import configure_logging
from app.db.repositories.swimming_practice import SwimmingPracticeRepository
from app.db.session import get_db
from app.schemas.swimming_practice import field_errors_from_pydantic

configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Log swimming practices and review your history.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _validation_response(exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": str(exc),
            "type": "ValidationError",
            "errors": [e.to_dict() for e in exc.errors],
        },
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report body parsing failures in the same shape as ValidationError."""
    error = ValidationError(field_errors_from_pydantic(exc.errors()))
    logger.warning("Rejected {} {}: {}", request.method, request.url.path, error)
    return _validation_response(error)


@app.exception_handler(SwimLogError)
async def swimlog_exception_handler(request: Request, exc: SwimLogError):
    """Handle application exceptions."""
    if isinstance(exc, ValidationError):
        logger.warning("Rejected {} {}: {}", request.method, request.url.path, exc)
        return _validation_response(exc)

    if isinstance(exc, PersistenceError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.error("Application exception on {} {}: {}: {}", request.method, request.url.path,
                 type(exc).__name__, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "type": type(exc).__name__},
    )


# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Swim Practice Log API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint for monitoring, including a database probe."""
    try:
        practices = SwimmingPracticeRepository(db).count()
    except PersistenceError as e:
        logger.warning("Health check database probe failed: {}", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "service": "swimlog-api", "version": settings.VERSION,
                     "database": "unavailable"},
        )
    return {
        "status": "healthy",
        "service": "swimlog-api",
        "version": settings.VERSION,
        "database": "ok",
        "practices": practices,
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "project url": settings.PROJECT_URL
    }
