"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ocrs_parser.api.routes import health, parse
from ocrs_parser.application.services.factories import build_pipeline
from ocrs_parser.core.config import get_settings
from ocrs_parser.core.error_handlers import (
    handle_app_error,
    handle_http_error,
    handle_unknown_error,
    handle_validation_error,
)
from ocrs_parser.core.exceptions import BaseError
from ocrs_parser.core.logging import RequestIdMiddleware, configure_logging
from ocrs_parser.observability.metrics import router as metrics_router

settings = get_settings()

configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the pipeline once; requests share it read-only."""
    logger.info("pipeline_initializing")
    app.state.pipeline = build_pipeline(settings)
    logger.info("pipeline_ready", extra={"max_attempts": app.state.pipeline.max_attempts})

    yield

    app.state.pipeline = None
    logger.info("pipeline_released")


app = FastAPI(
    title="OCRS Recipe Parser API",
    version="1.0.0",
    description="Converts free-form cheesemaking recipes into OCRS/1.0 records",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# 1. Register Middleware
app.add_middleware(RequestIdMiddleware)

# 2. Register Exception Handlers
app.add_exception_handler(RequestValidationError, handle_validation_error)
app.add_exception_handler(StarletteHTTPException, handle_http_error)
app.add_exception_handler(BaseError, handle_app_error)
app.add_exception_handler(Exception, handle_unknown_error)

# Routes
app.include_router(health.router)
app.include_router(parse.router)
app.include_router(metrics_router)
