"""FastAPI application for the daily-sage JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..config import configure_logging, get_settings
from ..exceptions import DailySageError
from ..services.controller import AppController, create_controller
from .deps import get_controller
from .routers import auth, dashboard, onboarding

logger = logging.getLogger(__name__)


async def daily_sage_error_handler(request: Request, exc: DailySageError) -> JSONResponse:
    """Handle all DailySageError exceptions."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Domain validation failures (bad mood, unknown profile field, ...)."""
    return JSONResponse(
        status_code=400,
        content={"error": {"code": "VALIDATION_ERROR", "message": str(exc)}},
    )


def create_app(controller: AppController | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    One controller serves the whole process: the API assumes a single
    interactive user per running server.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        if app.state.controller is None:
            configure_logging()
            app.state.controller = create_controller(get_settings())
        await app.state.controller.start()
        logger.info("Controller started in view %s", app.state.controller.view.value)
        yield
        app.state.controller.stop()

    app = FastAPI(
        title="daily-sage",
        description="AI-assisted daily health routines, tips and journal",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.controller = controller

    app.add_exception_handler(DailySageError, daily_sage_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)

    app.include_router(auth.router)
    app.include_router(onboarding.router)
    app.include_router(dashboard.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    @app.get("/state")
    async def state(request: Request):
        """Current view, identity and profile."""
        return get_controller(request).to_dict()

    return app
