"""
Router package for the workout log API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- workouts: Draft creation/validation and workout save, list, detail, delete
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "workouts_router",
]
