"""
Fruit Store - the 'M' in MVC

Holds the authoritative, ordered list of fruits for the lifetime of the
process. The list is built once and exposed read-only; there are no
create, update or delete operations.

Records are addressed by position, so insertion order matters and is
preserved exactly.
"""

import logging
from typing import Iterable, Iterator, Mapping, Union

from fruitstand.models.entities import Fruit

logger = logging.getLogger(__name__)


class FruitStoreError(Exception):
    """Base class for store lookup failures."""


class FruitNotFoundError(FruitStoreError, LookupError):
    """No fruit exists at the requested position."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"No fruit at index {index} (store holds {size})")


class InvalidFruitIndexError(FruitStoreError, ValueError):
    """The requested position is not an integer."""

    def __init__(self, index: object):
        self.index = index
        super().__init__(f"Fruit index must be an integer, got {index!r}")


class FruitStore:
    """Read-only, ordered collection of Fruit records."""

    def __init__(self, fruits: Iterable[Union[Fruit, Mapping]]):
        self._fruits: tuple[Fruit, ...] = tuple(
            f if isinstance(f, Fruit) else Fruit.model_validate(f)
            for f in fruits
        )
        logger.debug(f"Fruit store loaded with {len(self._fruits)} records")

    def get_all(self) -> tuple[Fruit, ...]:
        """Return every fruit in store order."""
        return self._fruits

    def get_by_index(self, index: int) -> Fruit:
        """
        Return the fruit at position ``index``.

        Negative positions are rejected rather than counted from the end.

        Raises:
            InvalidFruitIndexError: index is not an int (bools included)
            FruitNotFoundError: index is negative or past the end
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidFruitIndexError(index)
        if index < 0 or index >= len(self._fruits):
            raise FruitNotFoundError(index, len(self._fruits))
        return self._fruits[index]

    def __len__(self) -> int:
        return len(self._fruits)

    def __iter__(self) -> Iterator[Fruit]:
        return iter(self._fruits)
