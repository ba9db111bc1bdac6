"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from saidverify import __version__
from saidverify.api.routes import health, verify
from saidverify.core.config import AppSettings
from saidverify.core.exceptions import PreferencesError
from saidverify.core.logging_config import setup_logging
from saidverify.models.verification import UserPreferences
from saidverify.persistence import create_persistence

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        resolved = settings or AppSettings()
        setup_logging(resolved.log_level)
        preferences_store, result_log = create_persistence(resolved)
        app.state.settings = resolved
        try:
            app.state.preferences = preferences_store.load()
        except PreferencesError as exc:
            logger.warning("Using default preferences: %s", exc)
            app.state.preferences = UserPreferences(result_format=resolved.result_format)
        app.state.result_log = result_log
        yield

    app = FastAPI(
        title="South African ID Verifier",
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(verify.router)
    return app
