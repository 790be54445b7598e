"""
FastAPI application factory for number-finder.

The public symbol is ``create_app``; uvicorn calls it with
``factory=True``, and tests call it with a stub finder.

Architecture:
    - The lookup engine is passed in explicitly or, when omitted, built
      once in the lifespan context manager from ``DATA_PATH``. Either way
      it lives on ``app.state.finder``; there is no module-level instance.
    - Route modules access it through ``dependencies.get_finder``.
    - No business logic lives here; this is pure wiring.
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from number_finder import __version__
from number_finder.api.schemas import HealthResponse
from number_finder.config import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_ORIGIN_REGEX,
    REQUEST_ID_HEADER,
    Settings,
    get_settings,
)
from number_finder.core import get_logger
from number_finder.search import NumberLookup, build_engine

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Lifespan: build the engine unless one was injected
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Make sure ``app.state.finder`` is ready before serving.

    A ``LoadError`` raised while building the engine propagates out of
    startup, so uvicorn exits instead of serving without data.
    """
    logger.info("Number Finder API starting up (v%s)", __version__)

    if app.state.finder is None:
        settings: Settings = app.state.settings or get_settings()
        app.state.finder = build_engine(settings.data.path)

    logger.info("Finder ready. API ready.")
    yield
    logger.info("Number Finder API shutting down.")


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag each request with an ID and log method, path, status and duration."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    start = time.perf_counter()

    response = await call_next(request)

    elapsed_ms = (time.perf_counter() - start) * 1000
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "Request %s %s -> %d in %.1f ms (id=%s)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
        request_id,
    )
    return response


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(
    finder: Optional[NumberLookup] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        finder: Pre-built lookup engine. If None, one is loaded from
                ``settings.data.path`` during startup.
        settings: Settings to use. If None, ``get_settings()`` is read
                  at startup, and only when the engine has to be built.

    Returns:
        ASGI application with CORS, request logging, the lookup route
        and a health-check endpoint.
    """
    application = FastAPI(
        title="Number Finder API",
        description=(
            "Exact and approximate lookups over a fixed, sorted list of "
            "integers loaded at startup."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    application.state.finder = finder
    application.state.settings = settings

    # -- Middleware ---------------------------------------------------------
    application.add_middleware(
        CORSMiddleware,
        allow_origin_regex=CORS_ORIGIN_REGEX,
        allow_methods=list(CORS_ALLOW_METHODS),
        allow_headers=list(CORS_ALLOW_HEADERS),
    )
    application.middleware("http")(log_requests)

    # -- Routers ------------------------------------------------------------
    from number_finder.api.routes.lookup import router as lookup_router

    application.include_router(lookup_router, prefix="/api/number", tags=["lookup"])

    # -- Health check -------------------------------------------------------
    @application.get(
        "/api/health",
        response_model=HealthResponse,
        tags=["meta"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        """Return API liveness status."""
        return HealthResponse(status="ok", version=__version__)

    return application
