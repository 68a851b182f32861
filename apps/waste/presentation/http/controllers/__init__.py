"""HTTP Controllers."""

from waste.presentation.http.controllers.centers import router as centers_router
from waste.presentation.http.controllers.classify import router as classify_router
from waste.presentation.http.controllers.health import router as health_router

__all__ = ["centers_router", "classify_router", "health_router"]
