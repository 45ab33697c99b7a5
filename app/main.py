"""FastAPI application entrypoint. Only wiring, middleware and error rendering."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router as api_router
from app.core.config import settings
from app.core.database import is_timeout_error
from app.core.errors import STATUS_BY_KIND, ErrorKind, ServiceError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Logic Spark API",
    version="0.1.0",
    docs_url="/docs" if settings.APP_ENV == "dev" else None,
    redoc_url="/redoc" if settings.APP_ENV == "dev" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


def error_response(
    kind: ErrorKind,
    message: str,
    status_code: int | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render the stable {success: false, message, error} body."""
    return JSONResponse(
        status_code=status_code or STATUS_BY_KIND[kind],
        content={"success": False, "message": message, "error": kind.value},
        headers=headers,
    )


@app.exception_handler(ServiceError)
async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
    headers = None
    if exc.kind in (ErrorKind.MISSING_TOKEN, ErrorKind.INVALID_TOKEN):
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(exc.kind, exc.message, exc.status_code, headers)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    missing = [
        str(err["loc"][-1])
        for err in exc.errors()
        if err.get("type") == "missing" and err.get("loc")
    ]
    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
    else:
        message = "Invalid request body"
    return error_response(ErrorKind.INVALID_INPUT, message)


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return error_response(ErrorKind.NOT_FOUND, "Route not found")
    if exc.status_code == 405:
        kind = ErrorKind.METHOD_NOT_ALLOWED
    elif exc.status_code < 500:
        kind = ErrorKind.INVALID_INPUT
    else:
        kind = ErrorKind.INTERNAL
    return error_response(kind, str(exc.detail), exc.status_code, getattr(exc, "headers", None))


@app.exception_handler(SQLAlchemyError)
async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    if is_timeout_error(exc):
        logger.warning("Database timeout on %s %s: %s", request.method, request.url.path, exc)
        return error_response(ErrorKind.TIMEOUT, "Request timed out. Please try again.")
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return error_response(ErrorKind.INTERNAL, "Internal server error")


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(ErrorKind.INTERNAL, "Internal server error")


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Logic Spark API"}
