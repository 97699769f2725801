"""
FastAPI application for the bank statement extraction service.

Provides endpoints for:
- Extracting categorized expenses from a PDF bank statement
- Health checks
"""

import logging

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import get_settings
from .models import HealthResponse
from .routers import statements
from .services.exceptions import MethodNotAllowedError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(
        "Starting Statement Extraction Service (default model: %s)...",
        settings.default_model,
    )
    yield
    logger.info("Shutting down Statement Extraction Service...")


# Create FastAPI application
app = FastAPI(
    title="Bank Statement Extraction API",
    description="Extracts categorized business expenses from PDF bank statements using Claude",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)


# =============================================================================
# Health Endpoints
# =============================================================================


@app.get("/", response_model=HealthResponse)
async def root() -> HealthResponse:
    """Root endpoint - health check."""
    return HealthResponse(status="healthy")


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(statements.router)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(StarletteHTTPException)
async def statement_method_error_handler(request: Request, exc: StarletteHTTPException):
    """Answer verbs the statement route does not list with its own 405 body."""
    if (
        exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        and request.url.path in statements.STATEMENT_PATHS
    ):
        return statements.json_response(exc.status_code, MethodNotAllowedError().to_content())
    return await http_exception_handler(request, exc)
