"""
Controllers Package - The 'C' in MVC

Controllers handle HTTP requests and coordinate between:
- Models (the read-only fruit store)
- Views (template rendering)

Each controller is a FastAPI APIRouter that defines endpoints
for a specific resource or feature area.
"""

from fruitstand.controllers.fruits import router as fruits_router, get_store
from fruitstand.controllers.health import router as health_router

__all__ = ["fruits_router", "health_router", "get_store"]
