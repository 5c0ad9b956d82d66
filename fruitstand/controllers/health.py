from fastapi import APIRouter, Depends, Request

from fruitstand.controllers.fruits import get_store
from fruitstand.models import FruitStore

router = APIRouter(tags=["health"])


@router.get("/")
def root(request: Request):
    """
    Basic health check endpoint.

    Returns a simple status indicating the service is running.
    """
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/health")
def health_check(store: FruitStore = Depends(get_store)):
    """Detailed health check, including how many fruits are loaded."""
    return {
        "status": "healthy",
        "fruits": len(store),
    }
