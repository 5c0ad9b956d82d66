"""
Models Package - The 'M' in MVC

This package contains the fruit record type and the read-only store
that owns the records for the lifetime of the process.
"""

from fruitstand.models.entities import Fruit
from fruitstand.models.seed import DEFAULT_FRUITS
from fruitstand.models.store import (
    FruitStore,
    FruitStoreError,
    FruitNotFoundError,
    InvalidFruitIndexError,
)

__all__ = [
    # Entities
    "Fruit",
    # Store
    "FruitStore",
    "DEFAULT_FRUITS",
    # Errors
    "FruitStoreError",
    "FruitNotFoundError",
    "InvalidFruitIndexError",
]
