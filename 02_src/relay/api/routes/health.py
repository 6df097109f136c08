"""Liveness API routes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from ...app import Application


class HealthResponse(BaseModel):
    """Response model for health."""

    status: str
    pending: int
    conversations: int


def create_health_router(app: Application) -> APIRouter:
    """Create health router."""
    router = APIRouter(tags=["health"])

    @router.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Static OK for uptime monitors."""
        return "Bot is running!"

    @router.get("/health", response_model=HealthResponse)
    async def health() -> dict:
        """Queue depth and number of tracked conversations."""
        return {
            "status": "ok",
            "pending": app.queue.pending,
            "conversations": len(app.directory),
        }

    return router
