"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from carbon_market.api.account import router as account_router
from carbon_market.api.admin import router as admin_router
from carbon_market.api.calculator import router as calculator_router
from carbon_market.api.catalog import router as catalog_router
from carbon_market.app_logging import configure_logging
from carbon_market.containers import AppContainer
from carbon_market.domain.errors import NotFoundError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting carbon market API",
            extra={"environment": app.state.container.settings.environment},
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _message(status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _message(exc.status_code, str(exc.detail))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return _message(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ValidationError)
    async def handle_rule_violation(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return _message(status.HTTP_400_BAD_REQUEST, str(exc))

    app.include_router(calculator_router)
    app.include_router(catalog_router)
    app.include_router(account_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _validation_message(exc: RequestValidationError) -> str:
    """Describe the first invalid field of a request."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    location = error.get("loc", ())
    field = location[1] if len(location) > 1 else None
    if field is None:
        return "Invalid request body"
    if error.get("type") == "missing":
        return f"Missing required field: {field}"
    return f"Invalid value for field: {field}"
