"""Storefront FastAPI application.

Every failure is converted to a status code at this boundary:

- input validation      -> 400 (with per-field ``errors``)
- missing caller        -> 401
- wrong role            -> 403
- missing / not owned   -> 404
- duplicate             -> 409
- anything else         -> 500, logged with traceback

Usage:
    uvicorn storefront.infrastructure.api.app:create_app --factory
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from storefront.infrastructure.api.routes import (
    address_router,
    auth_router,
    order_router,
    product_router,
)
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_config import configure_logging

logger = structlog.get_logger(__name__)

_STATUS_BY_ERROR: dict[type[DomainException], int] = {
    ValidationError: 400,
    AuthenticationError: 401,
    PermissionDeniedError: 403,
    EntityNotFoundError: 404,
    ConflictError: 409,
}


def _request_validation_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for error in exc.errors():
        # Drop the "body"/"query" prefix FastAPI adds to every location.
        loc = [str(part) for part in error["loc"][1:]] or [str(error["loc"][0])]
        errors.append({"field": ".".join(loc), "message": error["msg"]})
    return errors


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid data", "errors": _request_validation_errors(exc)},
    )


async def handle_domain_exception(request: Request, exc: DomainException) -> JSONResponse:
    status_code = 400
    for error_type, code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            status_code = code
            break

    content: dict = {"message": str(exc)}
    if isinstance(exc, ValidationError) and exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=status_code, content=content)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error", method=request.method, path=request.url.path
    )
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(container: Container | None = None) -> FastAPI:
    configure_logging(Settings.from_env().log_level)
    app = FastAPI(
        title="Storefront API",
        description="Orders, checkout and tracking for the storefront",
    )
    app.state.container = container or build_container()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(DomainException, handle_domain_exception)
    app.add_exception_handler(Exception, handle_unexpected)

    app.include_router(auth_router)
    app.include_router(address_router)
    app.include_router(product_router)
    app.include_router(order_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app
