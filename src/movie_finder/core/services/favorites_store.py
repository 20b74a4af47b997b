"""JSON file favorites store."""

import json
from pathlib import Path
from typing import Any, List

import aiofiles
import aiofiles.os

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import PersistenceError
from ..interfaces import IFavoritesStore
from ..models import FavoriteRecord, Movie

REQUIRED_KEYS = ("title", "imdbID", "year", "poster")


class JsonFavoritesStore(IFavoritesStore, LoggerMixin):
    """Favorites kept as a pretty-printed JSON array in a single file.

    There is no locking: two overlapping read-modify-write cycles can lose
    one of the writes.
    """

    def __init__(self, config: Config) -> None:
        """Initialize favorites store.

        Args:
            config: Application configuration.
        """
        self._path = Path(config.favorites.path)

    @property
    def path(self) -> Path:
        """Location of the favorites file."""
        return self._path

    async def load(self) -> List[Movie]:
        """Load favorites from disk.

        A missing, unreadable or malformed file yields an empty list. The
        broken file is left in place and is overwritten by the next save.
        Records that carry all four keys are kept, with loosely typed values
        coerced.

        Returns:
            Stored favorites.
        """
        try:
            async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
                content = await f.read()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Error loading favorites from {self._path}: {e}")
            return []

        if not content.strip():
            return []

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as e:
            self.logger.warning(f"Ignoring corrupt favorites file {self._path}: {e}")
            return []

        if not self._is_valid_favorites(parsed):
            self.logger.warning(f"Ignoring malformed favorites file {self._path}")
            return []

        return [FavoriteRecord.model_validate(item).to_movie() for item in parsed]

    async def save(self, favorites: List[Movie]) -> None:
        """Overwrite the favorites file.

        Args:
            favorites: Complete favorites list.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        content = json.dumps([movie.to_record() for movie in favorites], indent=2)

        try:
            await aiofiles.os.makedirs(self._path.parent, exist_ok=True)
            async with aiofiles.open(self._path, "w", encoding="utf-8") as f:
                await f.write(content)
        except OSError as e:
            self.logger.error(f"Error saving favorites to {self._path}: {e}")
            raise PersistenceError("Failed to save favorites") from e

        self.logger.debug(f"Saved {len(favorites)} favorites to {self._path}")

    @staticmethod
    def _is_valid_movie(record: Any) -> bool:
        return isinstance(record, dict) and all(key in record for key in REQUIRED_KEYS)

    @classmethod
    def _is_valid_favorites(cls, parsed: Any) -> bool:
        return isinstance(parsed, list) and all(cls._is_valid_movie(item) for item in parsed)
