from fastapi import FastAPI

from .auth import router as auth_router
from .limits import router as limits_router
from .notifications import router as notifications_router
from .spots import router as spots_router
from .trips import router as trips_router
from .wishlist import router as wishlist_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(notifications_router)
    app.include_router(wishlist_router)
    app.include_router(spots_router)
    app.include_router(trips_router)
    app.include_router(limits_router)
