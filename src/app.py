"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from src.api.response import build_error, error_response
from src.api.routers import api_router
from src.config.personas import PERSONAS
from src.config.settings import Settings, get_settings
from src.infrastructure.llm.factory import is_anthropic_model
from src.infrastructure.logging.logger import setup_logging
from src.services.verdict.errors import VerdictError

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Validate required configuration at startup."""
    if not settings.anthropic_api_key:
        logger.warning("No AI API key configured (anthropic_api_key)")

    for field_name in ("analysis_model", "verdict_model"):
        model = getattr(settings, field_name)
        if not is_anthropic_model(model):
            logger.warning("%s=%s does not look like a Claude model", field_name, model)

    if settings.static_dir and not Path(settings.static_dir).is_dir():
        logger.warning("static_dir %s does not exist — front-end will not be served", settings.static_dir)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting %s (personas: %s)", settings.app_name, ", ".join(PERSONAS))
    _validate_startup_config(settings)
    yield
    logger.info("Shutting down %s", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Persona-driven analyze/verdict backend",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(VerdictError)
async def verdict_error_handler(request: Request, exc: VerdictError) -> JSONResponse:
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first["loc"] if part != "body")
        message = f"Invalid request: {location or 'body'}: {first['msg']}"
    else:
        message = "Invalid request"
    logger.info("Rejected request: %s", message)
    return JSONResponse(status_code=400, content=build_error(message))


app.include_router(api_router, prefix="/api")

if settings.static_dir and Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
