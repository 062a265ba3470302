"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from trail_kitchen.api.foods import router as foods_router
from trail_kitchen.api.insights import router as insights_router
from trail_kitchen.api.trips import router as trips_router
from trail_kitchen.app_logging import configure_logging
from trail_kitchen.containers import AppContainer
from trail_kitchen.domain.errors import ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        errors = app.state.container.sync()
        for error in errors:
            logger.warning("Initial sync incomplete: %s", error)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(trips_router)
    app.include_router(foods_router)
    app.include_router(insights_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
