"""
Main entrypoint for the Invoice Dashboard API.

This module assembles the FastAPI application, sets up logging,
installs the authorization middleware and includes the dashboard
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn invoice_dashboard_api.app.main:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse

from .api.router import router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .core.navigation import RedirectRequired
from .middleware import AuthorizationMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Apply migrations at startup.  This will create the database file
    # if it does not exist and ensure all tables are up to date.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that request handling
    # can safely log messages.
    setup_logging()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(AuthorizationMiddleware)
    app.include_router(router)

    @app.exception_handler(RedirectRequired)
    async def redirect_handler(request: Request, exc: RedirectRequired) -> RedirectResponse:
        return RedirectResponse(exc.url, status_code=status.HTTP_303_SEE_OTHER)

    return app


# Create the application instance at import time so that ASGI servers
# can import it directly.
app = create_app()
