"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from medbill.api.v1.endpoints.health import API_VERSION
from medbill.api.v1.router import api_router
from medbill.core.config import settings

# Configure loguru
logger.remove()  # Remove default handler

# Console handler with colored output
logger.add(
    sys.stderr,
    level=settings.log_level,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    ),
    colorize=True,
)

if settings.log_to_file:
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(exist_ok=True)

    # File handler for persistent logs
    logger.add(
        log_dir / "medbill_{time:YYYY-MM-DD}.log",
        rotation="00:00",  # New file at midnight
        retention="30 days",
        compression="zip",
        level=settings.log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
    )

    # Separate error log file
    logger.add(
        log_dir / "errors_{time:YYYY-MM-DD}.log",
        rotation="00:00",
        retention="90 days",
        compression="zip",
        level="ERROR",
        format=(
            "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | "
            "{message}\n{exception}"
        ),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events.

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    thresholds = settings.classification
    logger.info("=" * 80)
    logger.info("🚀 Starting Medical Bill Classifier API")
    logger.info("=" * 80)
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"API Host: {settings.api_host}:{settings.api_port}")
    logger.info(
        f"Thresholds: bill>={thresholds.medical_bill_min_score} | "
        f"eob>={thresholds.eob_min_score} | "
        f"required>={thresholds.required_categories_min}/4 | "
        f"disqualify_at={thresholds.disqualification_negative_count}"
    )
    logger.info(f"Debug info in responses: {settings.include_debug_info}")
    logger.info("=" * 80)

    yield

    logger.info("=" * 80)
    logger.info("🛑 Shutting down Medical Bill Classifier API")
    logger.info("=" * 80)


app = FastAPI(
    title="Medical Bill Classifier API",
    description="""
    Decides whether an uploaded document is a medical bill, an insurance
    Explanation of Benefits (EOB), or an invalid/non-medical document
    before any bill analysis runs.

    ## Classification Matrix

    1. Disqualification: two or more out-of-domain terms (construction,
       publishing, real estate, utility bills...) mark the document INVALID
    2. Required elements: at least 3 of patient, provider, medical service
       and financial information must be present
    3. Competitive scoring: weighted bill indicators vs EOB indicators
    4. Final determination: an explicit "this is not a bill" notice or a
       strong EOB phrase wins, then the higher score, then the bill default
    """,
    version=API_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    """Render HTTP errors in the API's failure envelope.

    Args:
        request: The request that failed
        exc: The HTTP exception

    Returns:
        JSON error response
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    """Render malformed request bodies as bad requests."""
    logger.warning(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Handle uncaught exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception that was raised

    Returns:
        JSON error response
    """
    logger.error(f"❌ Unhandled exception on {request.method} {request.url.path}: {exc}")
    logger.exception("Full traceback:")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.log_level == "DEBUG" else None,
        },
    )


@app.get("/")
async def root():
    """Root endpoint with API information.

    Returns:
        API metadata
    """
    return {
        "name": "Medical Bill Classifier API",
        "version": API_VERSION,
        "status": "running",
        "docs": "/docs",
        "api_prefix": "/api/v1",
    }
