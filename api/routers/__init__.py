"""
Router package for the Outcome Mapper API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- courses: Course outcome set filters and mappable outcomes
- areas: Area <-> outcome mappings
"""

from api.routers.health import router as health_router
from api.routers.courses import router as courses_router
from api.routers.areas import router as areas_router

__all__ = [
    "health_router",
    "courses_router",
    "areas_router",
]
