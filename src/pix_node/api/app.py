"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

from pix_node.api.auth import router as auth_router
from pix_node.api.dependencies import FormValidationError
from pix_node.api.portfolio import router as portfolio_router
from pix_node.api.profiles import router as profiles_router
from pix_node.app_logging import configure_logging
from pix_node.containers import AppContainer
from pix_node.domain.navigation import navigation_entries


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting Pix Node",
            extra={"environment": app.state.container.settings.environment},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Pix Node", lifespan=lifespan)
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(profiles_router)
    app.include_router(portfolio_router)

    @app.exception_handler(FormValidationError)
    async def form_validation_error(
        request: Request, exc: FormValidationError
    ) -> JSONResponse:
        errors = {to_camel(name): message for name, message in exc.errors.items()}
        return JSONResponse(status_code=422, content={"errors": errors})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/navigation")
    async def navigation() -> dict[str, list[dict[str, str]]]:
        """Return the routes the client can navigate to."""
        return {"routes": navigation_entries()}

    return app
