from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.entrypoints.responses import UNEXPECTED_ERROR_MESSAGE, failure
from storefront.entrypoints.routes import router
from storefront.entrypoints.settings import Config
from storefront.shared.errors import ConfigurationError


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error(f"Configuration error on {request.url.path}: {exc}")
    return failure(500, ConfigurationError.MESSAGE)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # 404 for unknown paths, 405 for a wrong method on a known one
    return failure(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
    return failure(400, f"Invalid request parameters: {fields}")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return failure(500, UNEXPECTED_ERROR_MESSAGE)


def create_app(
    config: Config | None = None, http_client: httpx.AsyncClient | None = None
) -> FastAPI:
    """Build the storefront API.

    ``config`` and ``http_client`` are optional; when omitted the settings are
    read from the environment on first request and the lifespan opens one
    shared ``httpx.AsyncClient``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = http_client is None
        app.state.http_client = http_client or httpx.AsyncClient()
        logger.info("Storefront API starting up")
        yield
        if owned:
            await app.state.http_client.aclose()
        logger.info("Storefront API shut down")

    app = FastAPI(title="Shopify Storefront API", version="1.0.0", lifespan=lifespan)
    app.state.config = config
    app.state.http_client = http_client

    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    # catch-all, registered last
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(router)
    return app
