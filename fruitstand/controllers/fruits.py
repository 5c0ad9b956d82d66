"""
Fruits Controller

Handles the read-only fruit pages:
- Listing every fruit
- Showing a single fruit by its position in the store

Design Decisions:
- The store is injected with Depends(get_store) instead of imported as a
  global, so tests can build an app around any store they like
- Store lookup errors are translated to HTTPException here; the model
  layer knows nothing about HTTP
- Handlers only gather data; the views package picks the template
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Request
from fastapi.responses import HTMLResponse

from fruitstand.models import FruitStore, FruitNotFoundError
from fruitstand.views import render_fruit_list, render_fruit_detail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fruits", tags=["fruits"])

# Canonical non-negative decimal: "0", "1", "12"; never "01", "+1", "1.0"
INDEX_PATTERN = r"^(0|[1-9][0-9]*)$"


def get_store(request: Request) -> FruitStore:
    """Return the store the application factory attached to app.state."""
    return request.app.state.fruit_store


@router.get("", response_class=HTMLResponse)
def list_fruits(request: Request, store: FruitStore = Depends(get_store)):
    """
    List all fruits.

    Renders every fruit's name and color in store order, each linking
    to its detail page.
    """
    fruits = store.get_all()
    logger.debug(f"Listing {len(fruits)} fruits")
    return render_fruit_list(request, fruits)


@router.get("/{index}", response_class=HTMLResponse)
def show_fruit(
    request: Request,
    index: str = Path(
        ..., pattern=INDEX_PATTERN, max_length=18, description="Position in the store"
    ),
    store: FruitStore = Depends(get_store),
):
    """
    Show a single fruit.

    The path value is the fruit's position in the store, written as a
    plain decimal with no sign, padding or leading zeros. Anything else
    is rejected by request validation before this handler runs.
    """
    position = int(index)
    try:
        fruit = store.get_by_index(position)
    except FruitNotFoundError as e:
        logger.debug(str(e))
        raise HTTPException(status_code=404, detail="Fruit not found")

    logger.debug(f"Showing fruit {position}: {fruit.name}")
    return render_fruit_detail(request, fruit)
