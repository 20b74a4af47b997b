"""Favorites store interface."""

from abc import ABC, abstractmethod
from typing import List

from ..models import Movie


class IFavoritesStore(ABC):
    """Interface for favorites persistence."""

    @abstractmethod
    async def load(self) -> List[Movie]:
        """Load the favorites list.

        Returns:
            Stored favorites, or an empty list if nothing usable is stored.
        """
        pass

    @abstractmethod
    async def save(self, favorites: List[Movie]) -> None:
        """Replace the stored favorites list.

        Args:
            favorites: Complete favorites list to store.

        Raises:
            PersistenceError: If the list cannot be written.
        """
        pass
