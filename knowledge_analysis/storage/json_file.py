"""
JSON file repository.

Stores one collection as a JSON array in a single file, validating
items with pydantic on load.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import StorageError
from .base import Repository


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class JsonFileRepository(Repository[M]):
    """
    File-backed repository for pydantic models.

    A missing file loads as an empty collection. Parent directories are
    created on save.
    """

    def __init__(self, path: str | Path, model: Type[M]) -> None:
        self._path = Path(path)
        self._adapter = TypeAdapter(List[model])

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[M]:
        if not self._path.exists():
            return []
        try:
            return self._adapter.validate_json(self._path.read_bytes())
        except (OSError, ValidationError) as e:
            raise StorageError(f"Cannot load {self._path}: {e}") from e

    def save(self, items: Sequence[M]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(self._adapter.dump_json(list(items), indent=2))
        except OSError as e:
            raise StorageError(f"Cannot save {self._path}: {e}") from e
        logger.info(f"Saved {len(items)} item(s) to {self._path}")
