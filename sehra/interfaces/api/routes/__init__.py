from fastapi import FastAPI

from .auth import router as auth_router
from .bookings import router as bookings_router
from .budget import router as budget_router
from .guests import router as guests_router
from .messages import router as messages_router
from .realtime import router as realtime_router
from .supervision import router as supervision_router
from .tasks import router as tasks_router
from .users import router as users_router
from .vendors import router as vendors_router

API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)
    app.include_router(tasks_router, prefix=API_PREFIX)
    app.include_router(guests_router, prefix=API_PREFIX)
    app.include_router(budget_router, prefix=API_PREFIX)
    app.include_router(vendors_router, prefix=API_PREFIX)
    app.include_router(bookings_router, prefix=API_PREFIX)
    app.include_router(messages_router, prefix=API_PREFIX)
    app.include_router(supervision_router, prefix=API_PREFIX)
    app.include_router(realtime_router)
