"""FastAPI application wiring for hexpath."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hexpath.api import routes
from hexpath.api.runtime import ApiState, build_state
from hexpath.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    *,
    state_factory: Callable[[], ApiState] = build_state,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the query service.

    ``state_factory`` runs once per application lifespan; ``settings`` only
    configures the middleware and defaults to :func:`get_settings`.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state = state_factory()
        app.state.api_state = state
        logger.info("serving maps from %s", state.settings.data_dir)
        try:
            yield
        finally:
            await state.shutdown()

    allowed_origins = (settings or get_settings()).cors_origins
    app = FastAPI(title="hexpath API", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    app.include_router(routes.router)
    return app


app = create_app()
