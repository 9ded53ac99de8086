from fastapi import FastAPI

from .admin_messages import router as admin_messages_router
from .notifications import router as notifications_router
from .organizer_messages import router as organizer_messages_router
from .support import router as support_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(admin_messages_router)
    app.include_router(notifications_router)
    app.include_router(organizer_messages_router)
    app.include_router(support_router)
