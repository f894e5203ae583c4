# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

from db.database import engine
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import settings
from .routes import health, inputs, public
from .schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def log_engine_defaults() -> None:
    """Log the engine fallbacks in effect. Call at startup."""
    logger.info(
        "Affordability engine defaults: max_debt_ratio=%s rent_inclusion=%s "
        "desired_yield=%s (fixed=%s) debounce=%sms",
        settings.MAX_DEBT_RATIO_DEFAULT,
        settings.RENT_INCLUSION_DEFAULT,
        settings.DESIRED_YIELD_DEFAULT,
        settings.FIXED_DESIRED_YIELD,
        settings.RECOMPUTE_DEBOUNCE_MS,
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    log_engine_defaults()
    yield
    await engine.dispose()


app = FastAPI(
    title="Affordability Engine API",
    description="Loan, debt-ratio, rental-yield and negotiation metrics for a property purchase",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type"],
)

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def _build_error(
    status_code: int, detail: str, request_id: str, errors: dict[str, str] | None = None
) -> ErrorResponse:
    return ErrorResponse(
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id,
        errors=errors or {},
    )


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    """First message per request field; ``loc`` is (source, field, ...)."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        field = str(loc[1]) if len(loc) > 1 else str(loc[0]) if loc else "request"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    body = _build_error(exc.status_code, str(exc.detail), request_id)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies (unknown keys, wrong JSON types) -> 422."""
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    errors = _field_errors(exc)
    body = _build_error(422, f"Malformed request: {', '.join(errors)}", request_id, errors)
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    body = _build_error(500, "An unexpected error occurred.", request_id)
    return JSONResponse(status_code=500, content=body.model_dump())


app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(public.router, prefix="/api/public", tags=["public"])
app.include_router(inputs.router, prefix="/api/inputs", tags=["inputs"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the Affordability Engine API"}
