"""
Feedback Tracker Console Application

This module bootstraps the FastAPI application that serves the feedback
console views.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from feedback_tracker.container import Container, create_container
from feedback_tracker.infrastructure import Settings
from feedback_tracker.presentation import router, set_container


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """
    Application factory function.

    Creates the container, wires it into the presentation layer and makes
    sure every mounted view is torn down when the application stops.
    """
    container = container or create_container(settings)
    set_container(container)

    logging.basicConfig(
        level=container.settings.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await container.aclose()

    app = FastAPI(
        title="Feedback Tracker Console",
        description="Manager and employee views over the performance-feedback API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(router)

    return app


# Create the app instance for uvicorn
app = create_app()
