"""FastAPI application entry point."""

import logging
import sys
from collections import defaultdict
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import auth, custom_lists, favorites, search_history
from src.config import get_settings
from src.exceptions import PokedexError, RateLimitExceededError, ValidationError
from src.messages import ErrorMessages, SuccessMessages
from src.middleware import RequestLoggingMiddleware
from src.schemas.common import ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)

settings = get_settings()


def setup_logging() -> None:
    """Configure the root logger once, before anything else logs."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Pokédex API starting in {settings.environment} environment")
    yield
    logger.info("Pokédex API shutting down")


app = FastAPI(
    title="Pokédex API",
    description="Accounts, favorites, search history and custom lists for the Pokédex app",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


def _error_response(
    status_code: int,
    message: str,
    errors: dict[str, list[str]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content = ErrorResponse(message=message, errors=errors or None)
    return JSONResponse(
        status_code=status_code,
        content=content.model_dump(exclude_none=True),
        headers=headers,
    )


def _validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group validation messages by field name."""
    errors: dict[str, list[str]] = defaultdict(list)
    for error in exc.errors():
        location = [str(part) for part in error["loc"] if part not in ("body", "path", "query")]
        field = ".".join(location) or "body"
        # Messages raised by our own validators are used as-is
        cause = error.get("ctx", {}).get("error")
        errors[field].append(str(cause) if isinstance(cause, Exception) else error["msg"])
    return dict(errors)


@app.exception_handler(PokedexError)
async def handle_app_error(request: Request, exc: PokedexError):
    """Map application errors to the status code they carry."""
    if exc.status_code >= 500:
        logger.error(f"Error [{exc.status_code}] on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(
            f"Handled error [{exc.status_code}] on {request.method} {request.url.path}: {exc.message}"
        )

    headers = {}
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers["WWW-Authenticate"] = "Bearer"
    if isinstance(exc, RateLimitExceededError):
        headers["Retry-After"] = str(exc.retry_after)

    errors = exc.errors if isinstance(exc, ValidationError) else None
    return _error_response(exc.status_code, exc.message, errors=errors, headers=headers)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Invalid body, path or query parameters."""
    errors = _validation_errors(exc)
    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
    return _error_response(status.HTTP_400_BAD_REQUEST, ErrorMessages.INVALID_INPUT, errors=errors)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Routing errors (unknown path, wrong method) in the standard envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = ErrorMessages.RESOURCE_NOT_FOUND
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = ErrorMessages.METHOD_NOT_ALLOWED
    else:
        message = str(exc.detail)
    return _error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all: details go to the log, never to the client."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.INTERNAL_SERVER_ERROR
    )


# Register routers
app.include_router(auth.router)
app.include_router(favorites.router)
app.include_router(custom_lists.router)
app.include_router(search_history.router)


@app.get("/api", response_model=MessageResponse)
async def root():
    """Liveness message."""
    return MessageResponse(message=SuccessMessages.API_RUNNING)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.port)  # noqa: S104
