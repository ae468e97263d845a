"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.schemas.common import ErrorResponse
from app.services.errors import InternalError, ServiceError, TransientError, ValidationError

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Innkeep API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    v1_router,
    prefix=settings.API_V1_PREFIX,
    responses={status: {"model": ErrorResponse} for status in (400, 401, 403, 404, 409)},
)


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten Pydantic errors to field/message pairs; every violation is reported."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append(
            {
                "field": ".".join(loc) or "body",
                "message": err.get("msg", "Invalid value"),
                "type": err.get("type", "value_error"),
            }
        )
    return errors


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = ValidationError("Invalid input", details=_field_errors(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(OperationalError)
async def datastore_unavailable_handler(
    request: Request, exc: OperationalError
) -> JSONResponse:
    logger.error("Datastore unavailable: %s %s: %s", request.method, request.url.path, exc.orig)
    error = TransientError("Service temporarily unavailable, please retry")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error: %s %s", request.method, request.url.path)
    error = InternalError("Internal server error")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Innkeep API"}
