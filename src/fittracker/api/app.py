"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from fittracker.api.nutrition import router as nutrition_router
from fittracker.app_logging import configure_logging
from fittracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    app = FastAPI(title="FitTracker Nutrition")
    app.state.container = container

    app.include_router(nutrition_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logging.getLogger(__name__).info(
        "App created: environment=%s timezone=%s",
        container.settings.environment,
        container.settings.timezone,
    )
    return app
