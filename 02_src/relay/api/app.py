"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..app import Application
from .routes import health


def create_fastapi_app(application: Application) -> FastAPI:
    """Create the liveness API whose lifespan runs the bot."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        # Startup
        await application.start()
        yield
        # Shutdown
        await application.stop()

    fastapi_app = FastAPI(
        title="Support Relay Bot",
        description="Liveness endpoint for the support relay bot",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.include_router(health.create_health_router(application))

    return fastapi_app
