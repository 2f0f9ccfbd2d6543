"""
Main entrypoint for the Match Feed API.

This module assembles the FastAPI application: logging, the
cross‑origin policy, error rendering, the REST routers under ``/api``,
the realtime feed at ``/ws`` and the generated documentation under
``/api-docs``.  ``create_app`` builds a configured instance; the
module‑level ``app`` is what uvicorn serves::

    uvicorn match_feed_api.app.main:app --port 3002
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import realtime_router, router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import install_cors
from .core.realtime import ConnectionManager
from .core.store import DataStore

DOCS_URL = "/api-docs"


def _register_exception_handlers(app: FastAPI) -> None:
    """Render errors as ``{"error": ...}`` bodies."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if any(err.get("type") == "json_invalid" for err in errors):
            return JSONResponse(
                status_code=400,
                content={"error": "Malformed JSON body", "details": jsonable_encoder(errors)},
            )
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request body", "details": jsonable_encoder(errors)},
        )


def create_app(settings: Optional[Settings] = None, store: Optional[DataStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment‑derived
        ``core.config.settings``.
    store : Optional[DataStore]
        Data store owned by the new app.  A freshly seeded store is
        created when omitted.

    Returns
    -------
    FastAPI
        A configured application instance with its own store and
        realtime connection registry on ``app.state``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        docs_url=DOCS_URL,
        openapi_url=f"{DOCS_URL}/openapi.json",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else DataStore.with_seed_data()
    app.state.connections = ConnectionManager()

    install_cors(app, settings.cors_origin)
    _register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(realtime_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
