from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from quicknotes.app import App
from quicknotes.config import Config
from quicknotes.errors import ApiError
from quicknotes.web.error_handlers import (
    api_error_handler,
    general_exception_handler,
    http_exception_handler,
    request_validation_error_handler,
)
from quicknotes.web.openapi import API_TITLE, API_VERSION, set_custom_openapi
from quicknotes.web.routers import health_router, notes_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(title=API_TITLE, version=API_VERSION, lifespan=lifespan)

    # Available before lifespan runs, so handlers work without it (e.g. in tests)
    app.state.app = app_instance
    app.state.config = config

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health_router)
    app.include_router(notes_router)

    # Register error handlers
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
